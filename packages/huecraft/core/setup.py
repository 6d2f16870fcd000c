from setuptools import find_namespace_packages, setup

# Physical structure matches import path; huecraft.core is a namespace package
packages = find_namespace_packages(where="../..", include=["huecraft.core", "huecraft.core.*"])

setup(
    packages=packages,
    package_dir={"": "../.."},
)
