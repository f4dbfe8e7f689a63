"""Parallax shoot-em-up"""

__version__ = "0.1.0"
