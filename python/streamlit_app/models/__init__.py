"""Data models for the Mediview Patient Directory."""

from .patient import Patient

__all__ = ['Patient']
