import pytest

from bbimager.pages import (
    FlashingState,
    ImageSelectionState,
    Screen,
    ScreenKind,
    SearchState,
)
from bbimager.progress import FLASHING_SUCCESS, PREPARING


def test_default_screen_is_home():
    screen = Screen()
    assert screen.kind is ScreenKind.HOME
    assert screen.state is None
    assert screen.is_destination_selection() is False


def test_destination_selection_detected():
    screen = Screen(ScreenKind.DESTINATION_SELECTION, SearchState("sd"))
    assert screen.is_destination_selection() is True


@pytest.mark.parametrize(
    "kind",
    [
        ScreenKind.HOME,
        ScreenKind.BOARD_SELECTION,
        ScreenKind.EXTRA_CONFIGURATION,
        ScreenKind.FLASHING_CONFIRMATION,
    ],
)
def test_other_screens_are_not_destination_selection(kind):
    assert Screen(kind).is_destination_selection() is False


def test_search_screens_default_to_empty_search():
    screen = Screen(ScreenKind.BOARD_SELECTION)
    assert screen.state == SearchState()
    assert screen.state.search_str() == ""


def test_screen_rejects_mismatched_state():
    with pytest.raises(TypeError):
        Screen(ScreenKind.HOME, SearchState("x"))
    with pytest.raises(TypeError):
        Screen(ScreenKind.FLASHING, SearchState("x"))
    with pytest.raises(TypeError):
        Screen(ScreenKind.IMAGE_SELECTION)


def test_search_state_keeps_text():
    assert SearchState("beagle").search_str() == "beagle"


def test_image_selection_builders_are_non_destructive():
    base = ImageSelectionState("sd_card")
    deeper = base.with_added_id(2).with_added_id(5)
    assert base.idx == ()
    assert deeper.idx == (2, 5)
    assert deeper.flasher == "sd_card"


def test_image_selection_search_and_flasher():
    state = ImageSelectionState("sd_card").with_search_string("debian")
    changed = state.with_flasher("bcf")
    assert state.search_str() == "debian"
    assert changed.flasher == "bcf"
    assert changed.search_str() == "debian"
    assert state.flasher == "sd_card"


def test_image_selection_equality():
    a = ImageSelectionState("sd_card").with_added_id(1)
    b = ImageSelectionState("sd_card").with_added_id(1)
    assert a == b
    assert Screen(ScreenKind.IMAGE_SELECTION, a) == Screen(ScreenKind.IMAGE_SELECTION, b)


def test_flashing_state_update():
    state = FlashingState(PREPARING, "docs")
    updated = state.update(FLASHING_SUCCESS)
    assert updated.progress == FLASHING_SUCCESS
    assert updated.documentation == "docs"
    assert state.progress == PREPARING