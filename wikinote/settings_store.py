# wikinote/settings_store.py
from __future__ import annotations

import dataclasses
import json
import logging
from pathlib import Path
from typing import Any, Protocol

from wikinote import config
from wikinote.datatypes import Settings, parse_bool
from wikinote.exceptions import SettingsError

logger = logging.getLogger(__name__)


class SettingsStore(Protocol):
    def load(self) -> dict[str, Any]: ...

    def save(self, settings: Settings) -> None: ...


class JsonSettingsStore:
    """
    Settings persisted as a single JSON object on disk.
    """

    def __init__(self, path: Path | str = config.DEFAULT_SETTINGS_PATH) -> None:
        self.path = Path(path)

    def load(self) -> dict[str, Any]:
        """
        Return the stored (possibly partial) mapping, or {} if nothing is stored.
        """
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise SettingsError(f"Cannot read settings from {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {self.path} must hold a JSON object")
        return data

    def save(self, settings: Settings) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps(settings.to_mapping(), indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as exc:
            raise SettingsError(f"Cannot write settings to {self.path}: {exc}") from exc
        logger.debug("Saved settings to %s", self.path)


def load_settings(store: SettingsStore) -> Settings:
    """Load once at startup, merging the stored mapping over the defaults."""
    return Settings.from_mapping(store.load())


def coerce_setting(name: str, raw: str) -> Any:
    """
    Convert a CLI string to the type of the named Settings field.
    """
    if name not in Settings.field_names():
        raise SettingsError(
            f"Unknown setting {name!r}. Valid: {', '.join(Settings.field_names())}"
        )
    if isinstance(getattr(Settings(), name), bool):
        value = parse_bool(raw)
        if value is None:
            raise SettingsError(f"Setting {name!r} expects a boolean, got {raw!r}")
        return value
    # Allow "\n" escapes in templates typed on a shell
    return raw.replace("\\n", "\n")


def update_settings(store: SettingsStore, settings: Settings, **changes: Any) -> Settings:
    """
    Return a new Settings with `changes` applied, and persist it.
    """
    unknown = set(changes) - set(Settings.field_names())
    if unknown:
        raise SettingsError(f"Unknown setting(s): {', '.join(sorted(unknown))}")

    updated = dataclasses.replace(settings, **changes)
    if updated != settings:
        store.save(updated)
    return updated
