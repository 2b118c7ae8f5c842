"""Configuration management for tasklocation."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, ClassVar

from tasklocation.config.paths import default_config_path
from tasklocation.platform.logging import logger


@dataclass
class Config:
    """Application configuration."""

    # Log file path; falls back to the portable default when unset
    log_file: Path | None = field(default=None, metadata={"path": True})

    # Reject location tokens that decode to an empty host
    strict_hosts: bool = False

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths flagged with ``metadata={"path": True}``."""
        from dataclasses import fields

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self) -> None:
        """Save configuration to the portable config path."""
        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = default_config_path()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_text(self._render_toml(config_dict), encoding="utf-8")
            logger.info("Configuration saved to %s", target)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = ["# tasklocation configuration file", ""]

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/tasklocation.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Reject location tokens whose host is empty, e.g. 'hdfs_cache_'")
        lines.append(f"strict_hosts = {self._format_toml_value(config['strict_hosts'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration, creating a default file on first use.

        Returns:
            Config: Cached configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()
        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {"log_file", "strict_hosts"}
                for key in sorted(set(config_dict) - known):
                    logger.warning("Ignoring unknown configuration key '%s'", key)
                    del config_dict[key]

                _ = config_dict.setdefault("strict_hosts", False)
                logger.debug("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)
            else:
                instance = cls()
                instance.save()
                logger.info("Created default configuration at %s", config_file)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        cls._instance = instance
        cls._loaded_from = config_file
        return instance


__all__ = ["Config"]
