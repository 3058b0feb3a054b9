"""Coordinators - Orchestration layer connecting the panel with the services."""

from .translation_coordinator import TranslationCoordinator

__all__ = [
    "TranslationCoordinator",
]
