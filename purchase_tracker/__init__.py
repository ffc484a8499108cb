"""Purchase Tracker - return window and warranty deadline tracking."""

__version__ = "0.1.0"
