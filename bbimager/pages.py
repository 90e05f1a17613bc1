"""Navigation screens of the imager and the state each one carries."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Union

from bbimager.progress import ProgressBarState


class ScreenKind(Enum):
    """Which page is shown."""

    HOME = "home"
    BOARD_SELECTION = "board_selection"
    IMAGE_SELECTION = "image_selection"
    DESTINATION_SELECTION = "destination_selection"
    EXTRA_CONFIGURATION = "extra_configuration"
    FLASHING = "flashing"
    FLASHING_CONFIRMATION = "flashing_confirmation"


@dataclass(frozen=True)
class SearchState:
    """Text typed into a page's search bar."""

    search_string: str = ""

    def search_str(self) -> str:
        """The current search text."""
        return self.search_string


@dataclass(frozen=True)
class ImageSelectionState:
    """Position in the nested image list, the flasher in use and the search text."""

    flasher: Any
    idx: tuple[int, ...] = ()
    search_string: str = ""

    def search_str(self) -> str:
        """The current search text."""
        return self.search_string

    def with_search_string(self, search_str: str) -> ImageSelectionState:
        """Return a copy with a new search text."""
        return replace(self, search_string=search_str)

    def with_added_id(self, id: int) -> ImageSelectionState:
        """Return a copy one level deeper, into sub-list ``id``."""
        return replace(self, idx=(*self.idx, id))

    def with_flasher(self, flasher: Any) -> ImageSelectionState:
        """Return a copy using a different flasher."""
        return replace(self, flasher=flasher)


@dataclass(frozen=True)
class FlashingState:
    """Progress of a running flash and the board's documentation link."""

    progress: ProgressBarState
    documentation: str = ""

    def update(self, progress: ProgressBarState) -> FlashingState:
        """Return a copy showing ``progress``."""
        return replace(self, progress=progress)


PageState = Union[SearchState, ImageSelectionState, FlashingState, None]

_STATE_TYPES: dict[ScreenKind, type | None] = {
    ScreenKind.HOME: None,
    ScreenKind.BOARD_SELECTION: SearchState,
    ScreenKind.IMAGE_SELECTION: ImageSelectionState,
    ScreenKind.DESTINATION_SELECTION: SearchState,
    ScreenKind.EXTRA_CONFIGURATION: None,
    ScreenKind.FLASHING: FlashingState,
    ScreenKind.FLASHING_CONFIRMATION: None,
}


@dataclass(frozen=True)
class Screen:
    """A page on the navigation stack, with the state its kind requires."""

    kind: ScreenKind = ScreenKind.HOME
    state: PageState = field(default=None)

    def __post_init__(self) -> None:
        expected = _STATE_TYPES[self.kind]
        if expected is None:
            if self.state is not None:
                raise TypeError(f"{self.kind.name} screen carries no state")
        elif self.state is None and expected is SearchState:
            object.__setattr__(self, "state", SearchState())
        elif not isinstance(self.state, expected):
            raise TypeError(
                f"{self.kind.name} screen needs {expected.__name__}, "
                f"got {type(self.state).__name__}"
            )

    def is_destination_selection(self) -> bool:
        """Whether this is the destination selection page."""
        return self.kind is ScreenKind.DESTINATION_SELECTION