"""NextWatch: movie & TV discovery backend with swipe-style recommendations."""

__version__ = "1.0.0"
