"""Credit card application decisioning service."""

__version__ = "1.0.0"
