from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

OUTPUT_FORMATS: tuple[str, ...] = ("text", "yaml")
SCORE_MODES: tuple[str, ...] = ("jamos", "keystrokes")
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class CliSettings:
    format: str = "text"
    compat: bool = False
    score_mode: str = "keystrokes"
    log_level: str = "WARNING"


class SettingsStore:
    """YAML-backed settings store for the command-line front-end.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide typed, validated CLI defaults

    Notes:
      - Unknown keys are preserved on save.
      - Invalid values fall back to the `CliSettings` defaults.
    """

    def __init__(self, settings_path: str | os.PathLike[str] | None = None) -> None:
        if settings_path is None:
            # <project_root>/settings.yaml, next to main.py
            project_root = Path(__file__).resolve().parents[2]
            self._path = project_root / "settings.yaml"
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        p = self._path
        if not p.exists():
            return {}
        try:
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.warning("Failed to read settings %s: %s", p, e)
            return {}
        return data if isinstance(data, dict) else {}

    def save(self, data: dict[str, Any]) -> None:
        try:
            p = self._path
            p.parent.mkdir(parents=True, exist_ok=True)
            tmp = p.with_suffix(p.suffix + ".tmp")
            with tmp.open("w", encoding="utf-8") as f:
                yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
            os.replace(str(tmp), str(p))
        except OSError as e:
            # Best-effort persistence; callers should not crash on save failures.
            logger.warning("Failed to save settings %s: %s", self._path, e)

    def get_cli_settings(self) -> CliSettings:
        s = self.load()
        defaults = CliSettings()

        def _choice(key: str, choices: tuple[str, ...], default: str) -> str:
            v = s.get(key, default)
            if isinstance(v, str) and v.strip().lower() in choices:
                return v.strip().lower()
            if key in s:
                logger.debug("Ignoring invalid %s=%r in settings", key, v)
            return default

        log_level = s.get("log_level", defaults.log_level)
        if not isinstance(log_level, str) or log_level.upper() not in LOG_LEVELS:
            log_level = defaults.log_level

        compat = s.get("compat", defaults.compat)

        return CliSettings(
            format=_choice("format", OUTPUT_FORMATS, defaults.format),
            compat=compat if isinstance(compat, bool) else defaults.compat,
            score_mode=_choice("score_mode", SCORE_MODES, defaults.score_mode),
            log_level=log_level.upper(),
        )

    def set_value(self, key: str, value: Any) -> None:
        s = self.load()
        s[key] = value
        self.save(s)
