"""Event ticket records with field validation and text rendering."""

__version__ = "0.1.0"
