"""
Translate Client - cached access to a remote translation service.

This package provides:
- Two-tier caching (process memory + persistent store) with TTL expiry
- Backoff that stops refetching from a failing service
- A lookup API with "section.key" fallbacks and {placeholder} replacement
"""

__version__ = "0.1.0"

# Make key components available at package level
from translate_client.core import (
    Platform,
    ServiceSuppressed,
    RemoteFetchFailed,
    TranslateError,
    TranslationRecord,
)
from translate_client.coordinators import FetchOrchestrator, Translator
from translate_client.services import SettingsManager, TranslateConfig

__all__ = [
    "Platform",
    "TranslationRecord",
    "TranslateError",
    "RemoteFetchFailed",
    "ServiceSuppressed",
    "FetchOrchestrator",
    "Translator",
    "SettingsManager",
    "TranslateConfig",
]
