"""Crop batch tracking core for farm management."""
