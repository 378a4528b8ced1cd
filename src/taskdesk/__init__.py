"""taskdesk: console client for a REST task service."""

__version__ = "0.1.0"
