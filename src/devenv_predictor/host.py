"""Predictor host: registration, location delivery and request fan-out."""

from __future__ import annotations

import threading
import uuid

import pluggy
from loguru import logger

from devenv_predictor.errors import PredictorAlreadyRegisteredError, PredictorNotRegisteredError
from devenv_predictor.hook_runtime import HookRuntime
from devenv_predictor.hookspecs import HOOK_NAMESPACE, PredictorHookSpecs
from devenv_predictor.syntax import build_context
from devenv_predictor.types import Availability, LocationChange, PredictionResult, PredictorProtocol


class PredictorHost:
    """In-process stand-in for a shell's command prediction subsystem."""

    def __init__(self) -> None:
        self._plugin_manager = pluggy.PluginManager(HOOK_NAMESPACE)
        self._plugin_manager.add_hookspecs(PredictorHookSpecs)
        self._hook_runtime = HookRuntime(self._plugin_manager)
        self._predictors: dict[uuid.UUID, PredictorProtocol] = {}
        self._location: LocationChange | None = None

    @property
    def predictors(self) -> list[PredictorProtocol]:
        return list(self._predictors.values())

    @property
    def location(self) -> LocationChange | None:
        return self._location

    def register(self, predictor: PredictorProtocol) -> None:
        """Register one predictor and replay the last known location to it."""

        if predictor.id in self._predictors:
            raise PredictorAlreadyRegisteredError(predictor.id)
        plugin_name = str(predictor.id)
        self._plugin_manager.register(predictor, name=plugin_name)
        self._predictors[predictor.id] = predictor
        logger.debug("predictor.registered id={} name={}", predictor.id, predictor.name)

        if self._location is not None:
            self._hook_runtime.call_many("on_location_changed", plugin_name=plugin_name, change=self._location)

    def unregister(self, predictor_id: uuid.UUID) -> None:
        predictor = self._predictors.pop(predictor_id, None)
        if predictor is None:
            raise PredictorNotRegisteredError(predictor_id)
        self._plugin_manager.unregister(name=str(predictor_id))
        logger.debug("predictor.unregistered id={} name={}", predictor_id, predictor.name)

    def publish_location(self, path: str, availability: Availability = "available") -> None:
        """Push a location change to every registered predictor."""

        change = LocationChange(path=path, availability=availability)
        if availability == "available":
            self._location = change
        logger.debug("location.changed path={} availability={}", path, availability)
        self._hook_runtime.call_many("on_location_changed", change=change)

    def request_suggestions(
        self,
        text: str,
        cursor: int | None = None,
        cancel_event: threading.Event | None = None,
    ) -> list[PredictionResult]:
        """Ask every predictor for suggestions; predictors with no opinion are left out."""

        if cancel_event is None:
            cancel_event = threading.Event()
        context = build_context(text, cursor)
        results: list[PredictionResult] = []
        for call in self._hook_runtime.call_many("get_suggestion", context=context, cancel_event=cancel_event):
            if call.value is None:
                continue
            predictor = self._predictors[uuid.UUID(call.plugin_name)]
            results.append(PredictionResult(predictor_id=predictor.id, name=predictor.name, suggestions=tuple(call.value)))

        if cancel_event.is_set():
            return []
        logger.debug("prediction.done text={!r} predictors={}", text, len(results))
        return results

    def hook_report(self) -> dict[str, list[str]]:
        """Return hook implementation summary for diagnostics."""

        return self._hook_runtime.hook_report()
