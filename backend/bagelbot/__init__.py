"""BagelBot order-intake backend."""

__version__ = "0.1.0"
