"""DocMan client — typed async facade over the DocMan REST API."""

__version__ = "1.0.0"
