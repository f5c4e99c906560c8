"""tagindex - tag file generator for Markdown documentation trees."""

__version__ = "0.1.0"
