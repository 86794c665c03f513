"""Settings dataclass and persistence helpers."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping

__all__ = [
    "Settings",
    "SettingsStore",
    "DEFAULT_TRUE_TOKENS",
    "DEFAULT_FALSE_TOKENS",
]

LOGGER = logging.getLogger(__name__)
_SETTINGS_DIR = Path.home() / ".bindkit"
_DEFAULT_SETTINGS_PATH = _SETTINGS_DIR / "settings.json"
_SETTINGS_VERSION = 1
_ENV_OVERRIDES: Mapping[str, str] = {
    "BINDKIT_ABSENT_STRING": "absent_string",
    "BINDKIT_LOG_LEVEL": "log_level",
}
_BOOL_ENV_OVERRIDES: Mapping[str, str] = {
    "BINDKIT_DEBUG_LOGGING": "debug_logging",
    "BINDKIT_CASE_INSENSITIVE_ENUMS": "case_insensitive_enums",
}
_TRUE_VALUES = {"1", "true", "yes", "on", "debug"}
DEFAULT_TRUE_TOKENS: tuple[str, ...] = ("true", "1", "yes", "on")
DEFAULT_FALSE_TOKENS: tuple[str, ...] = ("false", "0", "no", "off")


@dataclass(slots=True)
class Settings:
    """Options controlling how literals in UI descriptions are coerced."""

    true_tokens: list[str] = field(default_factory=lambda: list(DEFAULT_TRUE_TOKENS))
    false_tokens: list[str] = field(default_factory=lambda: list(DEFAULT_FALSE_TOKENS))
    absent_string: str = ""
    case_insensitive_enums: bool = True
    type_aliases: dict[str, str] = field(default_factory=dict)
    debug_logging: bool = False
    log_level: str = "INFO"


class SettingsStore:
    """Persistence adapter for :class:`Settings`."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or _DEFAULT_SETTINGS_PATH

    @property
    def path(self) -> Path:
        """Return the resolved path backing this store."""

        return self._path

    def load(self, *, overrides: Mapping[str, Any] | None = None) -> Settings:
        """Load settings from disk, applying runtime and environment overrides."""

        payload = self._read_payload()
        settings = Settings()
        if payload:
            data = _filter_fields(payload)
            try:
                settings = Settings(**data)
            except TypeError as exc:
                LOGGER.warning("Settings payload contained unexpected data: %s", exc)
                settings = Settings()
            LOGGER.debug("Settings loaded from %s (%d fields)", self._path, len(data))

        if overrides:
            settings = self._apply_overrides(settings, overrides, source="runtime")

        return self._apply_env_overrides(settings)

    def save(self, settings: Settings) -> Path:
        """Persist settings to disk with atomic file writes."""

        payload: Dict[str, Any] = asdict(settings)
        payload["version"] = _SETTINGS_VERSION
        body = json.dumps(payload, indent=2, sort_keys=True)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(".tmp")
        tmp_path.write_text(body, encoding="utf-8")
        tmp_path.replace(self._path)
        LOGGER.debug("Settings saved to %s", self._path)
        return self._path

    def _read_payload(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            text = self._path.read_text(encoding="utf-8")
            payload = json.loads(text)
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as exc:
            LOGGER.warning("Settings file %s is not valid JSON: %s", self._path, exc)
            return {}
        if not isinstance(payload, dict):
            LOGGER.warning("Settings file %s must contain a JSON object", self._path)
            return {}
        return payload

    def _apply_overrides(
        self,
        settings: Settings,
        overrides: Mapping[str, Any],
        *,
        source: str,
    ) -> Settings:
        allowed = {item.name for item in fields(Settings)}
        filtered: Dict[str, Any] = {}
        for key, value in overrides.items():
            if key not in allowed or value is None:
                continue
            filtered[key] = value
        aliases_override = filtered.get("type_aliases")
        if isinstance(aliases_override, Mapping):
            merged = dict(settings.type_aliases)
            merged.update(aliases_override)
            filtered["type_aliases"] = merged
        if filtered:
            LOGGER.debug("Applying %s settings overrides: %s", source, sorted(filtered))
            settings = replace(settings, **filtered)
        return settings

    def _apply_env_overrides(self, settings: Settings) -> Settings:
        overrides: Dict[str, Any] = {}
        for env_name, field_name in _ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is not None:
                overrides[field_name] = value
        for env_name, field_name in _BOOL_ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is not None:
                overrides[field_name] = value.strip().lower() in _TRUE_VALUES
        if overrides:
            settings = self._apply_overrides(settings, overrides, source="environment")
        return settings


def _filter_fields(payload: Mapping[str, Any]) -> Dict[str, Any]:
    allowed = {item.name for item in fields(Settings)}
    return {key: value for key, value in payload.items() if key in allowed}
