"""Random divine sentences and searches through an endless, seeded letter stream."""

__version__ = "1.0.0"

__all__ = ["__version__"]