"""jt: render JSON, YAML and XML documents as tables."""

__all__ = ["__version__"]

__version__ = "0.1.0"
