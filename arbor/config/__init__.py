"""Configuration package for the tree generator.

Constants are grouped by concern and re-exported through arbor/constants.py.
"""
