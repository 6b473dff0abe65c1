"""
Core rendering services: markup tree, permalink normalization, render cache.
"""
