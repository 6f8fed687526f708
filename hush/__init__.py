"""hush - suppression rules for static-analysis findings."""

__version__ = "0.1.0"
