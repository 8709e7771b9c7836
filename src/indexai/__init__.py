"""Sort the top-level items of a folder into category subfolders."""

__version__ = "0.1.0"
