"""The `devenv` predictor: solution and project file suggestions."""

from __future__ import annotations

import threading
import uuid
from typing import TYPE_CHECKING

from devenv_predictor.classifier import classify
from devenv_predictor.hookspecs import hookimpl
from devenv_predictor.location import WorkingDirectory
from devenv_predictor.suggestions import suggest
from devenv_predictor.syntax import CommandLineContext
from devenv_predictor.types import LocationChange, SuggestionPackage

if TYPE_CHECKING:
    from devenv_predictor.host import PredictorHost

PREDICTOR_IDENTIFIER = "e32e6bbe-ef86-438a-8142-d236ee32c2d5"


class DevenvPredictor:
    """Suggests `.sln` and `.csproj` files after a `devenv` command."""

    name = "Devenv"
    description = "Suggests solution files and C# project files to open"

    def __init__(
        self,
        identifier: str | uuid.UUID = PREDICTOR_IDENTIFIER,
        working_directory: WorkingDirectory | None = None,
    ) -> None:
        self.id = identifier if isinstance(identifier, uuid.UUID) else uuid.UUID(identifier)
        self.working_directory = working_directory or WorkingDirectory()
        self._host: PredictorHost | None = None

    @property
    def started(self) -> bool:
        return self._host is not None

    def start(self, host: PredictorHost) -> None:
        """Register with `host` and start receiving location changes."""

        host.register(self)
        self._host = host

    def stop(self) -> None:
        if self._host is None:
            return
        host, self._host = self._host, None
        host.unregister(self.id)

    @hookimpl
    def on_location_changed(self, change: LocationChange) -> None:
        if change.availability != "available":
            return
        self.working_directory.set(change.path)

    @hookimpl
    def get_suggestion(self, context: CommandLineContext, cancel_event: threading.Event) -> SuggestionPackage | None:
        cwd = self.working_directory.snapshot()
        if cwd is None:
            return None
        return suggest(classify(context), cwd, context.input_text, cancel_event)


def on_import(host: PredictorHost) -> DevenvPredictor:
    """Create the predictor under its fixed identifier and start it on `host`."""

    predictor = DevenvPredictor(PREDICTOR_IDENTIFIER)
    predictor.start(host)
    return predictor


def on_remove(host: PredictorHost) -> None:
    """Unregister the predictor started by `on_import`."""

    host.unregister(uuid.UUID(PREDICTOR_IDENTIFIER))
