"""Speech-to-text providers and the service that drives them."""

from .service import AsrService
from .types import AsrFailure, AsrOptions, AsrOutcome, AsrResult, FailureKind

__all__ = ["AsrService", "AsrFailure", "AsrOptions", "AsrOutcome", "AsrResult", "FailureKind"]
