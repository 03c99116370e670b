"""Configuration loading and management for docweave.

Configuration sources are merged in priority order:
    1. Defaults (defined in ModelConfig)
    2. Global config (~/.docweave.toml)
    3. Project config (./docweave.toml)
    4. Explicit config file
    5. Environment variables (DOCWEAVE_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(lowercase_normalized_ids=True)
    >>> config.lowercase_normalized_ids
    True
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError
from .normalize import HASH_SUFFIX_LENGTH

Verbosity = Literal["quiet", "normal", "verbose"]

_VERBOSITY_LEVELS = ("quiet", "normal", "verbose")

_FIELD_TYPES = {
    "encoding": str,
    "normalized_id_replacement": str,
    "normalized_id_max_length": int,
    "lowercase_normalized_ids": bool,
    "skip_unresolved": bool,
    "verbosity": str,
}


@dataclass(frozen=True)
class ModelConfig:
    """Settings for reading doc files and building the model.

    Attributes:
        encoding: Text encoding of XML documentation files
        normalized_id_replacement: Substitute for unsafe characters in normalized ids
        normalized_id_max_length: Longest normalized id before hashing kicks in
        lowercase_normalized_ids: Lowercase normalized ids
        skip_unresolved: Skip members whose id starts with ``!:`` instead of failing
        verbosity: Logging verbosity level
    """

    encoding: str = "utf-8"
    normalized_id_replacement: str = "_"
    normalized_id_max_length: int = 128
    lowercase_normalized_ids: bool = False
    skip_unresolved: bool = True
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for field_name, expected in _FIELD_TYPES.items():
            value = getattr(self, field_name)
            # bool is an int subclass; keep the two apart
            if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
                raise ValueError(
                    f"{field_name} must be of type {expected.__name__}, "
                    f"got {type(value).__name__}"
                )

        # room for at least one character plus "-<hash>"
        if self.normalized_id_max_length < HASH_SUFFIX_LENGTH + 2:
            raise ValueError(
                f"normalized_id_max_length must be at least {HASH_SUFFIX_LENGTH + 2}"
            )
        if len(self.normalized_id_replacement) > 1:
            raise ValueError("normalized_id_replacement must be a single character or empty")
        if self.verbosity not in _VERBOSITY_LEVELS:
            raise ValueError(f"verbosity must be one of {', '.join(_VERBOSITY_LEVELS)}")
        if not self.encoding:
            raise ValueError("encoding must not be empty")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"encoding {self.encoding!r} is not a known codec")


def load_config(config_file: Optional[Path] = None, **overrides) -> ModelConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated ModelConfig instance

    Raises:
        ConfigurationError: If a config file is missing or invalid
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".docweave.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "docweave.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    unknown = sorted(set(merged) - set(ModelConfig.__dataclass_fields__))
    if unknown:
        raise ConfigurationError(
            f"Unknown configuration keys: {', '.join(unknown)}",
            details={"keys": ", ".join(unknown)},
        )

    try:
        return ModelConfig(**merged)
    except (ValueError, TypeError) as e:
        key = str(e).split(" ", 1)[0]
        raise InvalidConfigError(key, merged.get(key), str(e)) from e


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from DOCWEAVE_* environment variables.

    Supported environment variables:
        DOCWEAVE_ENCODING: str
        DOCWEAVE_NORMALIZED_ID_REPLACEMENT: str
        DOCWEAVE_NORMALIZED_ID_MAX_LENGTH: int
        DOCWEAVE_LOWERCASE_NORMALIZED_IDS: bool (true/false/1/0)
        DOCWEAVE_SKIP_UNRESOLVED: bool
        DOCWEAVE_VERBOSITY: quiet/normal/verbose
    """
    type_hints = get_type_hints(ModelConfig)

    result: dict[str, Any] = {}

    for field_name in ModelConfig.__dataclass_fields__:
        env_key = f"DOCWEAVE_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e)) from e

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type."""
    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    # str and Literal (Verbosity)
    return value


def _load_toml_file(path: Path) -> dict:
    """Load a TOML file and return the parsed dict.

    Raises:
        ConfigurationError: If TOML support is missing or the file is invalid
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            # Fallback to tomli for Python 3.9-3.10
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}") from e
