"""Tests for compscan.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from compscan.config import ConfigError, ScanConfig, load_config
from compscan.constants import DEFAULT_BATCH_SIZE


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, ScanConfig)
    assert config.root == tmp_path.resolve()
    assert config.batch_size == DEFAULT_BATCH_SIZE
    assert config.verbose is False


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".compscan.yml"
    config_file.write_text("batch_size: 8\nverbose: true\n", encoding="utf-8")

    config = load_config(config_file)

    assert config.root == tmp_path.resolve()
    assert config.batch_size == 8
    assert config.verbose is True


def test_load_config_accepts_string_values(tmp_path: Path) -> None:
    (tmp_path / ".compscan.yml").write_text('batch_size: "12"\nverbose: "no"\n', encoding="utf-8")

    config = load_config(tmp_path)

    assert config.batch_size == 12
    assert config.verbose is False


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / ".compscan.yml").write_text("\n", encoding="utf-8")
    assert load_config(tmp_path).batch_size == DEFAULT_BATCH_SIZE


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "batch_size: 0\n",
        "batch_size: true\n",
        "batch_size: lots\n",
        "verbose: sometimes\n",
        "batch_size: [1\n",
    ],
)
def test_load_config_rejects_invalid_content(tmp_path: Path, content: str) -> None:
    (tmp_path / ".compscan.yml").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)
