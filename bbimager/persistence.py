"""Saved GUI settings: flashing customizations kept between runs as JSON."""

from __future__ import annotations

import getpass
import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir

from bbimager.constants import PACKAGE_QUALIFIER


def default_config_path() -> Path:
    """Path of the settings file in the user's local configuration directory."""
    _, org, app = PACKAGE_QUALIFIER
    return Path(user_config_dir(appname=app, appauthor=org, roaming=False)) / "config.json"


def _require_mapping(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be a JSON object")
    return data


def _require(data: dict[str, Any], key: str, kind: type, what: str) -> Any:
    if key not in data:
        raise ValueError(f"{what}: missing field {key!r}")
    value = data[key]
    if not isinstance(value, kind):
        raise ValueError(f"{what}: field {key!r} has the wrong type")
    return value


def _optional(data: dict[str, Any], key: str, kind: type, what: str) -> Any:
    value = data.get(key)
    if value is not None and not isinstance(value, kind):
        raise ValueError(f"{what}: field {key!r} has the wrong type")
    return value


@dataclass(frozen=True)
class SdCustomizationUser:
    """Login account to create on the flashed system."""

    username: str
    password: str

    @staticmethod
    def default() -> SdCustomizationUser:
        """The current user's name with an empty password."""
        try:
            name = getpass.getuser()
        except (OSError, KeyError):
            name = ""
        return SdCustomizationUser(name, "")

    def to_dict(self) -> dict[str, str]:
        return {"username": self.username, "password": self.password}

    @staticmethod
    def from_dict(data: Any) -> SdCustomizationUser:
        data = _require_mapping(data, "user")
        return SdCustomizationUser(
            _require(data, "username", str, "user"),
            _require(data, "password", str, "user"),
        )


@dataclass(frozen=True)
class SdCustomizationWifi:
    """Wireless network to join on first boot."""

    ssid: str = ""
    password: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"ssid": self.ssid, "password": self.password}

    @staticmethod
    def from_dict(data: Any) -> SdCustomizationWifi:
        data = _require_mapping(data, "wifi")
        return SdCustomizationWifi(
            _require(data, "ssid", str, "wifi"),
            _require(data, "password", str, "wifi"),
        )


_SD_STRING_FIELDS = ("hostname", "timezone", "keymap", "ssh")


@dataclass(frozen=True)
class SdCustomization:
    """System settings written into a Linux SD card image; ``None`` leaves one unset."""

    hostname: str | None = None
    timezone: str | None = None
    keymap: str | None = None
    user: SdCustomizationUser | None = None
    wifi: SdCustomizationWifi | None = None
    ssh: str | None = None
    usb_enable_dhcp: bool | None = None

    @staticmethod
    def default() -> SdCustomization:
        """Nothing set, except USB DHCP enabled on Windows and macOS."""
        dhcp = True if sys.platform in ("win32", "darwin") else None
        return SdCustomization(usb_enable_dhcp=dhcp)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping that leaves out unset fields."""
        out: dict[str, Any] = {}
        for name in ("hostname", "timezone", "keymap"):
            value = getattr(self, name)
            if value is not None:
                out[name] = value
        if self.user is not None:
            out["user"] = self.user.to_dict()
        if self.wifi is not None:
            out["wifi"] = self.wifi.to_dict()
        if self.ssh is not None:
            out["ssh"] = self.ssh
        if self.usb_enable_dhcp is not None:
            out["usb_enable_dhcp"] = self.usb_enable_dhcp
        return out

    @staticmethod
    def from_dict(data: Any) -> SdCustomization:
        """Read a mapping written by :meth:`to_dict`; absent fields are unset."""
        data = _require_mapping(data, "sd_customization")
        strings = {
            name: _optional(data, name, str, "sd_customization") for name in _SD_STRING_FIELDS
        }
        user = data.get("user")
        wifi = data.get("wifi")
        return SdCustomization(
            user=None if user is None else SdCustomizationUser.from_dict(user),
            wifi=None if wifi is None else SdCustomizationWifi.from_dict(wifi),
            usb_enable_dhcp=_optional(data, "usb_enable_dhcp", bool, "sd_customization"),
            **strings,
        )


@dataclass(frozen=True)
class BcfCustomization:
    """BeagleConnect Freedom flashing options."""

    verify: bool = True

    def to_dict(self) -> dict[str, bool]:
        return {"verify": self.verify}

    @staticmethod
    def from_dict(data: Any) -> BcfCustomization:
        data = _require_mapping(data, "bcf_customization")
        return BcfCustomization(_require(data, "verify", bool, "bcf_customization"))


@dataclass(frozen=True)
class Pb2Mspm0Customization:
    """PocketBeagle 2 MSPM0 flashing options."""

    persist_eeprom: bool = True

    def to_dict(self) -> dict[str, bool]:
        return {"persist_eeprom": self.persist_eeprom}

    @staticmethod
    def from_dict(data: Any) -> Pb2Mspm0Customization:
        data = _require_mapping(data, "pb2_mspm0_customization")
        return Pb2Mspm0Customization(
            _require(data, "persist_eeprom", bool, "pb2_mspm0_customization")
        )


@dataclass
class GuiConfiguration:
    """Customizations the user chose to save."""

    sd_customization: SdCustomization | None = None
    bcf_customization: BcfCustomization | None = None
    pb2_mspm0_customization: Pb2Mspm0Customization | None = None

    def to_json(self) -> str:
        """Pretty-printed JSON that leaves out unsaved sections."""
        out: dict[str, Any] = {}
        if self.sd_customization is not None:
            out["sd_customization"] = self.sd_customization.to_dict()
        if self.bcf_customization is not None:
            out["bcf_customization"] = self.bcf_customization.to_dict()
        if self.pb2_mspm0_customization is not None:
            out["pb2_mspm0_customization"] = self.pb2_mspm0_customization.to_dict()
        return json.dumps(out, indent=2)

    @staticmethod
    def from_json(text: str | bytes) -> GuiConfiguration:
        """Parse settings; raises ValueError on malformed data."""
        data = _require_mapping(json.loads(text), "configuration")
        sd = data.get("sd_customization")
        bcf = data.get("bcf_customization")
        pb2 = data.get("pb2_mspm0_customization")
        return GuiConfiguration(
            sd_customization=None if sd is None else SdCustomization.from_dict(sd),
            bcf_customization=None if bcf is None else BcfCustomization.from_dict(bcf),
            pb2_mspm0_customization=None if pb2 is None else Pb2Mspm0Customization.from_dict(pb2),
        )

    @staticmethod
    def load(path: str | Path | None = None) -> GuiConfiguration:
        """Read settings from ``path`` (the default location if omitted)."""
        target = Path(path) if path is not None else default_config_path()
        return GuiConfiguration.from_json(target.read_bytes())

    def save(self, path: str | Path | None = None) -> None:
        """Write settings to ``path``, creating its directory and replacing the file."""
        target = Path(path) if path is not None else default_config_path()
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.to_json(), encoding="utf-8")