"""Console library manager for books and periodicals kept in a tab-separated file."""

__version__ = "1.0.0"