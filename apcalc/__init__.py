"""Arbitrary-precision integer calculator working on sequences of decimal digits."""

__version__ = "1.0.0"
__all__ = ["arithmetic", "cli", "digits", "validation"]