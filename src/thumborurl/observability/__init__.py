"""Observability: structured logging for thumborurl."""

from __future__ import annotations

from .logger import StructuredFormatter, get_logger

__all__ = [
    "StructuredFormatter",
    "get_logger",
]
