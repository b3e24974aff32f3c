"""Interfaces for pluggable digestkit services."""

from .logger import ILogger

__all__ = ["ILogger"]
