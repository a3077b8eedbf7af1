"""Tests for YAML configuration loading."""

import pytest

from channel_export.core.config import AppConfig, ConfigLoader, ConfigValidationError


def write_config(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_missing_file_gives_defaults(tmp_path):
    config = ConfigLoader(tmp_path / "absent.yaml").load()

    assert config.output_dir == "."
    assert config.max_pages is None
    assert config.log_dir == "logs"


def test_empty_file_gives_defaults(tmp_path):
    config = ConfigLoader(write_config(tmp_path, "")).load()

    assert config.max_pages is None


def test_valid_file(tmp_path):
    path = write_config(tmp_path, "output_dir: ./exports\nmax_pages: 4\nlog_dir: /tmp/logs\n")

    config = ConfigLoader(path).load()

    assert config.output_dir == "./exports"
    assert config.max_pages == 4
    assert config.log_dir == "/tmp/logs"


@pytest.mark.parametrize("text", [
    "- just\n- a list\n",
    "max_pages: 0\n",
    "max_pages: -3\n",
    "max_pages: many\n",
    "max_pages: true\n",
    "output_dir: 42\n",
    "output_dir: '   '\n",
    "log_dir: [a, b]\n",
    "output_dir: [unclosed\n",
])
def test_invalid_config_rejected(tmp_path, text):
    with pytest.raises(ConfigValidationError):
        ConfigLoader(write_config(tmp_path, text)).load()


def test_overrides_replace_only_given_values():
    config = AppConfig(output_dir="out", max_pages=3, log_dir="logs")

    updated = config.with_overrides(max_pages=10)

    assert updated.max_pages == 10
    assert updated.output_dir == "out"
    assert config.max_pages == 3
