"""Ports (interfaces) the ingestion core depends on."""

from .services import LoggerPort

__all__ = ["LoggerPort"]
