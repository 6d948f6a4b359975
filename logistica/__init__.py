"""Console system for managing trucks, drivers, clients and trips, with file stores and validity checks."""

__version__ = "0.1.0"