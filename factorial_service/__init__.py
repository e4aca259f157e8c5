"""Factorial computation service with a Redis-backed cache-aside path."""

from .constants import APP_VERSION

__version__ = APP_VERSION
