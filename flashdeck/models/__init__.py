"""Data models."""

from .card import FlashCard

__all__ = ['FlashCard']
