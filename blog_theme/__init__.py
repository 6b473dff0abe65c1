"""
blog_theme - Server-side rendered widgets for a static-site blog theme.
"""

__version__ = "0.1.0"
