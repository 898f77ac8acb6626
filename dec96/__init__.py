"""96-bit scaled decimal numbers: arithmetic, comparison, rounding, conversion and text form."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "bits", "comparison", "converters", "demo", "rounding", "text"]