"""256-bit two's-complement integer arithmetic on plain Python integers."""

__version__ = "0.1.0"

__all__ = ["bitops", "bits", "muldiv", "wrapping"]