from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SubmissionStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class SubmissionState:
    status: SubmissionStatus = SubmissionStatus.IDLE
    booking_id: str | None = None  # only when succeeded
    message: str | None = None  # only when failed

    @classmethod
    def idle(cls) -> SubmissionState:
        return cls()

    @classmethod
    def submitting(cls) -> SubmissionState:
        return cls(status=SubmissionStatus.SUBMITTING)

    @classmethod
    def succeeded(cls, booking_id: str) -> SubmissionState:
        return cls(status=SubmissionStatus.SUCCEEDED, booking_id=booking_id)

    @classmethod
    def failed(cls, message: str) -> SubmissionState:
        return cls(status=SubmissionStatus.FAILED, message=message)

    @property
    def is_submitting(self) -> bool:
        return self.status is SubmissionStatus.SUBMITTING

    @property
    def accepts_submit(self) -> bool:
        return self.status in (SubmissionStatus.IDLE, SubmissionStatus.FAILED)
