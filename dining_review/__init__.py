"""Dining review API — allergy-specific restaurant reviews with moderation."""

__version__ = "1.0.0"
