"""Packaging and release services."""
