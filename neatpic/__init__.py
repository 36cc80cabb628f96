"""NeatPic - minimal raylib image viewer."""

__version__ = "0.1.0"
