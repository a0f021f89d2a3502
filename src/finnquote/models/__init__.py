"""Finnhub data models."""

from finnquote.models.quote import Quote

__all__ = ["Quote"]
