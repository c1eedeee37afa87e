"""Persistent cuescan settings stored as a commented TOML file."""

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from cuescan.config.paths import default_config_path
from cuescan.platform.logging import logger

SIDECAR_ENCODINGS_DEFAULT: tuple[str, ...] = ("utf-8-sig",)


def _toml_value(value: Any) -> str:
    """Render a scalar or list as a TOML literal."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(_toml_value(item) for item in value) + "]"
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


@dataclass
class Config:
    """Application configuration."""

    log_file: Path | None = None
    scan_sidecar: bool = True
    sidecar_encodings: list[str] = field(default_factory=lambda: list(SIDECAR_ENCODINGS_DEFAULT))
    detect_encoding: bool = True

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        if isinstance(self.log_file, str):
            self.log_file = Path(self.log_file) if self.log_file.strip() else None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Config":
        """Build a config from parsed TOML, dropping unknown or mistyped keys."""
        defaults = cls()
        accepted: dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            expected = type(getattr(defaults, f.name))
            if f.name == "log_file":
                if isinstance(value, str):
                    accepted[f.name] = value
                continue
            if not isinstance(value, expected):
                logger.warning(
                    "Ignoring configuration key %s: expected %s, got %r",
                    f.name,
                    expected.__name__,
                    value,
                )
                continue
            accepted[f.name] = value

        known = {f.name for f in fields(cls)}
        for key in sorted(set(data) - known):
            logger.warning("Ignoring unknown configuration key: %s", key)
        return cls(**accepted)

    def to_toml(self) -> str:
        """Render this configuration with inline guidance comments."""
        lines = [
            "# cuescan Configuration File",
            "",
            "# Log file path (optional)",
            "# Defaults to <project root>/logs/cuescan.log",
            '# Example: log_file = "/var/log/cuescan/cuescan.log"',
        ]
        if self.log_file is not None:
            lines.append(f"log_file = {_toml_value(self.log_file)}")
        lines += [
            "",
            "# Sidecar cuesheets",
            "# Look for <name>.cue, then <name>.<ext>.cue, next to the media file",
            f"scan_sidecar = {_toml_value(self.scan_sidecar)}",
            "# Encodings tried in order when decoding a sidecar cuesheet",
            f"sidecar_encodings = {_toml_value(self.sidecar_encodings)}",
            "# Ask chardet when none of the encodings above decode the file",
            f"detect_encoding = {_toml_value(self.detect_encoding)}",
            "",
        ]
        return "\n".join(lines)

    def save(self, path: Path | None = None) -> Path:
        """Write the configuration file, creating its directory when needed."""
        target = path or default_config_path()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_text(self.to_toml(), encoding="utf-8")
        except OSError as e:
            logger.error("Failed to save configuration to %s: %s", target, e)
            raise
        logger.debug("Configuration saved to %s", target)
        return target

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Return the process-wide configuration, reading or creating it once.

        Raises:
            tomllib.TOMLDecodeError: If the existing file is not valid TOML.
        """
        if cls._instance is not None:
            return cls._instance

        source = path or default_config_path()
        if source.exists():
            try:
                with open(source, "rb") as f:
                    data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration from %s: %s", source, e)
                raise
            instance = cls.from_mapping(data)
            logger.debug("Configuration loaded from %s", source)
        else:
            instance = cls()
            _ = instance.save(source)
            logger.info("Created default configuration at %s", source)

        cls._instance = instance
        cls._loaded_from = source
        return instance


# Global configuration instance
config = Config.load()
