"""Mixed Units — normalize mixed-representation money amounts."""

__version__ = "0.1.0"
