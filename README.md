# bbimager

The non-graphical core of a BeagleBoard imaging utility: progress reporting
for download and flashing jobs, screen navigation state, saved user
customisation for SD card, BeagleConnect Freedom and PocketBeagle 2 MSPM0
flashing, and the animation maths behind the loading indicators.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## Modules

- `bbimager.constants`: application name, window size, font names, brand
  colour, and the keymap layouts (`KEYMAP_LAYOUTS`) and time zones
  (`TIMEZONES`) offered to the user.
- `bbimager.units`: `format_size(size)` turns a byte count into text such as
  `"512 B"` or `"1.50 KB"`, using binary units up to TB. Negative sizes raise
  `ValueError`.
- `bbimager.easing`: `Easing` curves built from line and Bézier segments with
  `EasingBuilder` (`Easing.builder()`); every point is clamped into the unit
  square and the path is closed at (1, 1). `Easing.y_at_x(x)` samples the
  curve at a fraction of its length. Ready-made curves: `STANDARD`,
  `STANDARD_DECELERATE`, `STANDARD_ACCELERATE`, `EMPHASIZED`,
  `EMPHASIZED_DECELERATE`, `EMPHASIZED_ACCELERATE`.
- `bbimager.linear`: `Linear` and `LinearState`, which work out where the
  sliding bar of an indeterminate progress indicator sits
  (`Linear.bar_bounds`). The bar ratio is clamped to 0.1–0.8 by
  `with_bar_width_ratio`.
- `bbimager.circular`: `Circular`, `Animation`, `AnimationPhase` and
  `Appearance`, the expanding and contracting arc of the circular spinner.
  `Animation.timed_transition` advances the animation; `Circular.arc_angles`
  gives the arc's start and end angles in radians.
- `bbimager.progress`: `DownloadFlashingStatus`, `StatusKind`,
  `ProgressBarStatus` and `ProgressBarState`, which turn flashing events into
  labelled progress and cancellation messages. The fixed states
  `PREPARING`, `VERIFYING`, `CUSTOMIZING` and `FLASHING_SUCCESS` are module
  constants.
- `bbimager.pages`: `Screen`, `ScreenKind`, `SearchState`,
  `ImageSelectionState` and `FlashingState` for page navigation. A `Screen`
  checks that it carries the state its kind needs and raises `TypeError`
  otherwise.
- `bbimager.persistence`: `GuiConfiguration` and the customisation records
  (`SdCustomization`, `SdCustomizationUser`, `SdCustomizationWifi`,
  `BcfCustomization`, `Pb2Mspm0Customization`), saved as JSON under the
  user's configuration directory (`default_config_path()`). Malformed data
  raises `ValueError`.

Durations throughout are in seconds.

## Example

```python
from bbimager.progress import DownloadFlashingStatus, ProgressBarState, StatusKind
from bbimager.units import format_size

status = DownloadFlashingStatus(StatusKind.FLASHING_PROGRESS, 0.42)
state = ProgressBarState.from_status(status)
print(state.content())          # Flashing... 42%
print(state.cancel().content()) # Flashing cancelled by user
print(format_size(1536))        # 1.50 KB
```

Saving and loading customisation:

```python
from pathlib import Path
from bbimager.persistence import GuiConfiguration, BcfCustomization

config = GuiConfiguration(bcf_customization=BcfCustomization(verify=False))
config.save(Path("config.json"))
print(GuiConfiguration.load(Path("config.json")).bcf_customization.verify)  # False
```

## What this package does not do

There is no graphical interface and no command to run. The package does not
download images, list or write to SD cards or other devices, or flash any
board; it holds the state, formatting and persistence that such an
application works with.