"""REST web services: representation, resource, and search handler resolution."""

__version__ = "1.0.0"
