"""Application-level exception types for devenv-predictor."""

from __future__ import annotations

import uuid


class DevenvPredictorError(Exception):
    """Base exception for devenv-predictor."""


class HostError(DevenvPredictorError):
    """Base exception for predictor host registration errors."""


class PredictorAlreadyRegisteredError(HostError):
    """Raised when a predictor id is registered twice."""

    def __init__(self, predictor_id: uuid.UUID) -> None:
        super().__init__(f"predictor already registered: {predictor_id}")
        self.predictor_id = predictor_id


class PredictorNotRegisteredError(HostError):
    """Raised when unregistering an unknown predictor id."""

    def __init__(self, predictor_id: uuid.UUID) -> None:
        super().__init__(f"predictor not registered: {predictor_id}")
        self.predictor_id = predictor_id
