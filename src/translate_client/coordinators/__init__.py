"""Coordinators - Orchestration layer connecting callers with caches and the remote service."""

from .fetch_orchestrator import FetchOrchestrator
from .translator import LookupResult, Translator, replace_placeholders

__all__ = [
    "FetchOrchestrator",
    "Translator",
    "LookupResult",
    "replace_placeholders",
]
