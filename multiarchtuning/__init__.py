"""Configuration types, plugins, status conditions, validation and version conversion for architecture-aware pod placement."""

__version__ = "1.1.1"