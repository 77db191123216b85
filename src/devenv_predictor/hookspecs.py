"""Pluggy hook namespace and predictor hook specifications."""

from __future__ import annotations

import threading

import pluggy

from devenv_predictor.syntax import CommandLineContext
from devenv_predictor.types import LocationChange, SuggestionPackage

HOOK_NAMESPACE = "devenv_predictor"
hookspec = pluggy.HookspecMarker(HOOK_NAMESPACE)
hookimpl = pluggy.HookimplMarker(HOOK_NAMESPACE)


class PredictorHookSpecs:
    """Hook contract between the host and its predictors."""

    @hookspec
    def get_suggestion(self, context: CommandLineContext, cancel_event: threading.Event) -> SuggestionPackage | None:
        """Return full-line suggestions for one request, or None for no opinion."""

    @hookspec
    def on_location_changed(self, change: LocationChange) -> None:
        """Observe the host's current location becoming available or busy."""

    @hookspec
    def on_error(self, stage: str, error: Exception) -> None:
        """Observe predictor failures from any stage."""
