"""Core module for the gathergo application."""

from .types import FirestoreDocument

__all__ = ["FirestoreDocument"]
