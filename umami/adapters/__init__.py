"""Adapters for Umami client protocols."""
