"""Configuration for tag cloud runs."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

# Keys accepted in a config file and by --set overrides
CONFIG_KEYS = ("input", "output", "count", "encoding", "escape_html", "strict_count")


def parse_key_value_args(args: list[str]) -> dict[str, str]:
    """Split key=value arguments into a dict of raw strings.

    Values are left as typed; CloudConfig.override converts them per key, so
    a path such as "1.50" is not mistaken for a number.

    Args:
        args: List of "key=value" strings.

    Returns:
        Dict of key to unparsed value.
    """
    result: dict[str, str] = {}
    for arg in args:
        if "=" not in arg:
            raise ValueError(f"Invalid format: {arg}. Expected key=value")
        key, value = arg.split("=", 1)
        result[key] = value
    return result


@dataclass
class CloudConfig:
    """Settings for generating one tag cloud page."""

    input: str | None = None
    output: str | None = None
    count: int | None = None
    encoding: str = "utf-8"
    escape_html: bool = True
    strict_count: bool = False
    base_dir: Path = field(default_factory=Path.cwd)

    @classmethod
    def from_dict(cls, data: dict[str, Any], base_dir: Path | None = None) -> "CloudConfig":
        """Create CloudConfig from a YAML dict."""
        config = cls(base_dir=base_dir or Path.cwd())
        config.override(data)
        return config

    @classmethod
    def from_yaml(cls, path: Path) -> "CloudConfig":
        """Load configuration from a YAML file.

        Relative input and output paths are resolved relative to the
        directory containing the YAML file.
        """
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")

        return cls.from_dict(data, base_dir=path.parent.resolve())

    def override(self, values: dict[str, Any]) -> None:
        """Override settings, e.g. from --set arguments.

        Raises:
            ValueError: If a key is unknown or a value has the wrong type.
        """
        for key, value in values.items():
            if key not in CONFIG_KEYS:
                raise ValueError(f"Unknown config key: {key}")
            setattr(self, key, self._coerce(key, value))

    @staticmethod
    def _coerce(key: str, value: Any) -> Any:
        """Convert a YAML value or a raw --set string to the type of ``key``."""
        if value is None:
            return None
        if key in ("input", "output", "encoding"):
            return str(value)
        if key == "count":
            if isinstance(value, str):
                try:
                    return int(value.strip())
                except ValueError:
                    raise ValueError(f"'count' must be an integer, got {value!r}") from None
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"'count' must be an integer, got {value!r}")
            return value
        # Boolean flags
        if isinstance(value, str) and value.strip().lower() in ("true", "false"):
            return value.strip().lower() == "true"
        if not isinstance(value, bool):
            raise ValueError(f"'{key}' must be true or false, got {value!r}")
        return value

    def resolve_path(self, value: str) -> Path:
        """Resolve a path relative to the config's base directory.

        Args:
            value: Path string.

        Returns:
            Absolute Path object.
        """
        path = Path(value).expanduser()
        if not path.is_absolute():
            path = self.base_dir / path
        return path

