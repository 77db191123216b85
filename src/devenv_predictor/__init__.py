"""devenv-predictor - solution and project file suggestions for `devenv` command lines."""

from .classifier import NoArgumentYet, NotMatched, PartialArgument, classify
from .host import PredictorHost
from .predictor import DevenvPredictor
from .suggestions import suggest
from .syntax import build_context

__version__ = "0.1.0"

__all__ = [
    "DevenvPredictor",
    "NoArgumentYet",
    "NotMatched",
    "PartialArgument",
    "PredictorHost",
    "build_context",
    "classify",
    "suggest",
]
