from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class DeltreeError(Exception):
    pass


class InputFailure(DeltreeError):
    """Reading the confirmation answer failed at the I/O layer."""


class ResolutionFailure(DeltreeError):
    """The supplied path could not be resolved to an existing location."""

    def __init__(self, raw: str, detail: str):
        super().__init__(f"cannot resolve '{raw}': {detail}")
        self.raw = raw
        self.detail = detail


class ConfirmationDecision(Enum):
    AFFIRMED = "affirmed"
    DECLINED = "declined"


@dataclass(frozen=True)
class ConfirmationRequest:
    target_path: Path
    force: bool = False


@dataclass(frozen=True)
class DeletionOutcome:
    succeeded: bool
    elapsed_seconds: float
    error_detail: str | None = None
