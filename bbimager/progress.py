"""Progress-bar state shown while an image is downloaded, flashed and verified."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class StatusKind(Enum):
    """Stage of a download-and-flash job."""

    PREPARING = "preparing"
    DOWNLOADING_PROGRESS = "downloading_progress"
    FLASHING_PROGRESS = "flashing_progress"
    VERIFYING = "verifying"
    VERIFYING_PROGRESS = "verifying_progress"
    CUSTOMIZING = "customizing"


@dataclass(frozen=True)
class DownloadFlashingStatus:
    """A status report from a flashing job; ``progress`` is in [0, 1] where it applies."""

    kind: StatusKind
    progress: float = 0.0


class ProgressBarStatus(Enum):
    """How the progress bar is drawn."""

    NORMAL = "normal"
    SUCCESS = "success"
    FAIL = "fail"
    LOADING = "loading"


def _percent(progress: float) -> int:
    """Round a fraction to a whole percentage, halves away from zero, never negative."""
    value = progress * 100.0
    if value != value or value <= 0.0:
        return 0
    return int(math.floor(value + 0.5))


_CANCEL_MESSAGES = {
    StatusKind.PREPARING: "Preparation cancelled by user",
    StatusKind.DOWNLOADING_PROGRESS: "Downloading cancelled by user",
    StatusKind.FLASHING_PROGRESS: "Flashing cancelled by user",
    StatusKind.VERIFYING: "Verification cancelled by user",
    StatusKind.VERIFYING_PROGRESS: "Verification cancelled by user",
    StatusKind.CUSTOMIZING: "Customization cancelled by user",
}


@dataclass(frozen=True)
class ProgressBarState:
    """Label, fill fraction and style of the progress bar, plus the stage it reports."""

    label: str = ""
    fraction: float = 0.0
    state: ProgressBarStatus = ProgressBarStatus.NORMAL
    inner_state: DownloadFlashingStatus | None = None

    @staticmethod
    def progress(
        prefix: str, progress: float, inner_state: DownloadFlashingStatus
    ) -> ProgressBarState:
        """A normal bar labelled with ``prefix`` and a percentage; progress is 0 to 1."""
        return ProgressBarState(
            f"{prefix}... {_percent(progress)}%",
            progress,
            ProgressBarStatus.NORMAL,
            inner_state,
        )

    @staticmethod
    def loading(label: str, inner_state: DownloadFlashingStatus) -> ProgressBarState:
        """An indeterminate bar for a stage with no measurable progress."""
        return ProgressBarState(label, 0.5, ProgressBarStatus.LOADING, inner_state)

    @staticmethod
    def fail(label: str) -> ProgressBarState:
        """A full bar styled as a failure."""
        return ProgressBarState(label, 1.0, ProgressBarStatus.FAIL, None)

    @staticmethod
    def from_status(status: DownloadFlashingStatus) -> ProgressBarState:
        """Build the bar state that reports ``status``."""
        kind = status.kind
        if kind is StatusKind.PREPARING:
            return PREPARING
        if kind is StatusKind.DOWNLOADING_PROGRESS:
            return ProgressBarState.progress(
                "Downloading Image",
                status.progress,
                DownloadFlashingStatus(StatusKind.DOWNLOADING_PROGRESS, 0.0),
            )
        if kind is StatusKind.FLASHING_PROGRESS:
            return ProgressBarState.progress(
                "Flashing",
                status.progress,
                DownloadFlashingStatus(StatusKind.FLASHING_PROGRESS, 0.0),
            )
        if kind is StatusKind.VERIFYING:
            return VERIFYING
        if kind is StatusKind.VERIFYING_PROGRESS:
            return ProgressBarState.progress(
                "Verifying", status.progress, DownloadFlashingStatus(StatusKind.VERIFYING)
            )
        return CUSTOMIZING

    def content(self) -> str:
        """The text shown above the bar."""
        return self.label

    def cancel(self) -> ProgressBarState | None:
        """The failure state shown when the running stage is cancelled, if any."""
        if self.inner_state is None:
            return None
        return ProgressBarState.fail(_CANCEL_MESSAGES[self.inner_state.kind])


FLASHING_SUCCESS = ProgressBarState(
    "Flashing Successful", 1.0, ProgressBarStatus.SUCCESS, None
)
PREPARING = ProgressBarState.loading(
    "Preparing...", DownloadFlashingStatus(StatusKind.PREPARING)
)
VERIFYING = ProgressBarState.loading(
    "Verifying...", DownloadFlashingStatus(StatusKind.VERIFYING)
)
CUSTOMIZING = ProgressBarState.loading(
    "Customizing...", DownloadFlashingStatus(StatusKind.CUSTOMIZING)
)