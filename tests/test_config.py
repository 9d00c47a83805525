from __future__ import annotations

import textwrap
import pytest
from pathlib import Path

from html_analyzer.config import (
    AnalyzerConfig,
    ConfigError,
    apply_overrides,
    build_config,
    load_config,
    validate_config,
)


def _write_pyproject(base: Path, body: str) -> Path:
    path = base / "pyproject.toml"
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def _write_dotfile(base: Path, body: str) -> Path:
    path = base / ".html-analyzer.toml"
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def test_defaults():
    config = AnalyzerConfig()

    assert config.timeout == 10.0
    assert config.follow_redirects is True
    assert config.user_agent == "html-analyzer"


def test_loads_config_from_pyproject(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.html-analyzer]
        timeout = 2.5
        follow_redirects = false
        user_agent = "custom/1.0"
        """,
    )

    assert load_config(tmp_path) == AnalyzerConfig(
        timeout=2.5, follow_redirects=False, user_agent="custom/1.0"
    )


def test_loads_config_from_dotfile(tmp_path: Path):
    _write_dotfile(
        tmp_path,
        """
        [html-analyzer]
        timeout = 4
        """,
    )

    assert load_config(tmp_path).timeout == 4


def test_dotfile_reads_only_its_own_table(tmp_path: Path):
    _write_dotfile(
        tmp_path,
        """
        [tool.html-analyzer]
        user_agent = "dotfile"
        """,
    )

    assert load_config(tmp_path) == AnalyzerConfig()


def test_pyproject_takes_precedence_over_dotfile(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.html-analyzer]
        user_agent = "pyproject"
        """,
    )
    _write_dotfile(
        tmp_path,
        """
        [html-analyzer]
        user_agent = "dotfile"
        """,
    )

    assert load_config(tmp_path).user_agent == "pyproject"


def test_pyproject_without_table_falls_through_to_dotfile(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [project]
        name = "demo"
        """,
    )
    _write_dotfile(
        tmp_path,
        """
        [html-analyzer]
        timeout = 3
        """,
    )

    assert load_config(tmp_path).timeout == 3


def test_searches_parent_directories(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.html-analyzer]
        timeout = 6
        """,
    )
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert load_config(nested).timeout == 6


def test_invalid_toml_is_skipped(tmp_path: Path):
    (tmp_path / "pyproject.toml").write_text("[tool.html-analyzer\n", encoding="utf-8")
    nested = tmp_path / "child"
    nested.mkdir()

    assert load_config(nested) == load_config(tmp_path)


def test_unknown_keys_raise(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.html-analyzer]
        retries = 3
        """,
    )

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_non_table_value_raises(tmp_path: Path):
    _write_dotfile(
        tmp_path,
        """
        html-analyzer = "fast"
        """,
    )

    with pytest.raises(ConfigError):
        load_config(tmp_path)


@pytest.mark.parametrize(
    "config",
    [
        AnalyzerConfig(timeout=0),
        AnalyzerConfig(timeout=-1.0),
        AnalyzerConfig(timeout="10"),
        AnalyzerConfig(timeout=True),
        AnalyzerConfig(follow_redirects="yes"),
        AnalyzerConfig(user_agent=""),
        AnalyzerConfig(user_agent="   "),
    ],
)
def test_validate_config_rejects_invalid_values(config: AnalyzerConfig):
    with pytest.raises(ConfigError):
        validate_config(config)


def test_apply_overrides_ignores_none():
    config = AnalyzerConfig()

    assert apply_overrides(config, timeout=None, user_agent=None) is config
    assert apply_overrides(config, timeout=1.0).timeout == 1.0


def test_build_config_applies_overrides(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.html-analyzer]
        timeout = 2
        user_agent = "file"
        """,
    )

    config = build_config(tmp_path, timeout=9.0, follow_redirects=None)

    assert config.timeout == 9.0
    assert config.user_agent == "file"


def test_build_config_validates(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.html-analyzer]
        timeout = 0
        """,
    )

    with pytest.raises(ConfigError):
        build_config(tmp_path)
