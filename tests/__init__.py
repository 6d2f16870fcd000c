"""Test suite for huecraft.

Test Structure:
- unit/: Unit tests per core area (color, curves, mood, gradient,
  companions, formats, config, utils) and the CLI
- conftest.py: Shared fixtures (seeded generators, sample colors)
"""
