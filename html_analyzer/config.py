"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

from .constants import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT


@dataclass
class AnalyzerConfig:
    """Configuration for fetching and analyzing documents.

    Attributes:
        timeout: Network timeout in seconds for connecting and reading.
        follow_redirects: Whether HTTP redirects are followed.
        user_agent: Value sent in the ``User-Agent`` header.

    Examples:
        AnalyzerConfig(timeout=5.0, follow_redirects=False)
    """

    timeout: float = DEFAULT_TIMEOUT
    follow_redirects: bool = True
    user_agent: str = DEFAULT_USER_AGENT


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`timeout` must be a positive number")
    """


# Each candidate file is read for exactly one table.
CONFIG_SOURCES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("pyproject.toml", ("tool", "html-analyzer")),
    (".html-analyzer.toml", ("html-analyzer",)),
)


def load_config(search_path: Path) -> AnalyzerConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root. In each
    directory the ``[tool.html-analyzer]`` table of `pyproject.toml` is tried
    first, then the ``[html-analyzer]`` table of `.html-analyzer.toml`. TOML
    files that cannot be read or decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        AnalyzerConfig: Loaded configuration, or defaults when none is found.

    Raises:
        ConfigError: If a table is present but is not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path.cwd())
    """
    resolved = search_path.resolve()

    for directory in (resolved, *resolved.parents):
        for filename, table_path in CONFIG_SOURCES:
            raw_config = _read_table(directory / filename, table_path)
            if raw_config is not None:
                return _config_from_table(raw_config, directory / filename, table_path)

    return AnalyzerConfig()


def _read_table(config_file: Path, table_path: tuple[str, ...]) -> object | None:
    if not config_file.is_file():
        return None

    try:
        with open(config_file, "rb") as stream:
            table: object = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for key in table_path:
        if not isinstance(table, dict) or key not in table:
            return None
        table = table[key]
    return table


def _config_from_table(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> AnalyzerConfig:
    error_message = f"Invalid `[{'.'.join(table_path)}]` settings in {config_file}"
    if not isinstance(raw_config, dict):
        raise ConfigError(error_message)

    try:
        return AnalyzerConfig(**raw_config)
    except TypeError as error:
        raise ConfigError(error_message) from error


def validate_config(config: AnalyzerConfig) -> None:
    """Validate an `AnalyzerConfig` instance.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If the timeout is not a positive number, `follow_redirects`
            is not a boolean, or the user agent is empty.
    """
    if isinstance(config.timeout, bool) or not isinstance(config.timeout, (int, float)):
        raise ConfigError("`timeout` must be a number")
    if config.timeout <= 0:
        raise ConfigError("`timeout` must be a positive number")
    if not isinstance(config.follow_redirects, bool):
        raise ConfigError("`follow_redirects` must be a boolean")
    if not isinstance(config.user_agent, str) or not config.user_agent.strip():
        raise ConfigError("`user_agent` must not be empty")


def apply_overrides(config: AnalyzerConfig, **overrides: object) -> AnalyzerConfig:
    """Apply override values to an `AnalyzerConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by field name; None values are ignored.

    Returns:
        AnalyzerConfig: New configuration, or `config` itself when nothing changes.

    Raises:
        TypeError: If an override name is not defined on `AnalyzerConfig`.
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> AnalyzerConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        AnalyzerConfig: Validated configuration.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), timeout=3.0)
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config
