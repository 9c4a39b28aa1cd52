"""OWASP Risk Rating calculator: scoring engine and URL configuration protocol."""

__version__ = "0.1.0"
