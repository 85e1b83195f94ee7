"""Address book with validated contacts, search, sorting, CSV storage and a command line."""

__version__ = "0.1.0"