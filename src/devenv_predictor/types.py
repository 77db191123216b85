"""Data shared between the host and its predictors."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Literal, Protocol, TypeAlias

Availability: TypeAlias = Literal["available", "busy", "unavailable"]
SuggestionPackage: TypeAlias = tuple[str, ...]


class PredictorProtocol(Protocol):
    """Static metadata every registered predictor exposes."""

    @property
    def id(self) -> uuid.UUID: ...

    @property
    def name(self) -> str: ...

    @property
    def description(self) -> str: ...


@dataclass(frozen=True)
class LocationChange:
    """The host shell's current location changed availability."""

    path: str
    availability: Availability = "available"


@dataclass(frozen=True)
class PredictionResult:
    """Suggestions one predictor returned for one request."""

    predictor_id: uuid.UUID
    name: str
    suggestions: SuggestionPackage = field(default_factory=tuple)
