"""PageConsult shared layer: strategic design intelligence for landing pages."""

__version__ = "0.1.0"
