from setuptools import find_namespace_packages, setup

# Physical structure matches import path; huecraft.cli is a namespace package
packages = find_namespace_packages(where="../..", include=["huecraft.cli", "huecraft.cli.*"])

setup(
    packages=packages,
    package_dir={"": "../.."},
)
