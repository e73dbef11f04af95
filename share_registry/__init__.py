"""Share registry back-office service: client profiles, shareholders, DMAT accounts and transfers."""

__version__ = "0.1.0"
