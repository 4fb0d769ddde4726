"""Carnavalito: Cádiz carnival poetry analysis."""

__version__ = "0.1.0"
