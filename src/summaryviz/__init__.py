"""summaryviz -- HTML reports from Wind Tunnel scenario run summaries."""

__version__ = "0.1.0"
