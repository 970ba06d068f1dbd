"""dnrgen: static declarativeNetRequest rule generator."""

__version__ = "0.3.0"

__all__ = ["__version__"]
