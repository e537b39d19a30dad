"""Owens Valley Paiute sentence builder and translator core."""

__version__ = "0.1.0"
