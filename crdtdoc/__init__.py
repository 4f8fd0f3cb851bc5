"""Replicated JSON document building blocks ordered by logical-clock tickets."""

__version__ = "0.2.1"