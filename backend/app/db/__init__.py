"""Database declarative base."""

from __future__ import annotations

from .base import Base

__all__ = ["Base"]
