"""Tests for configuration loading.

**Feature: trade-journal**
"""

import logging
from pathlib import Path

from tradejournal.config import JournalConfig, load_config


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path: Path):
        config = load_config(tmp_path / "config.toml")

        assert config == JournalConfig()
        assert config.delimiter == ";"
        assert config.weekday_names == "en"

    def test_reads_sections(self, tmp_path: Path):
        path = tmp_path / "config.toml"
        path.write_text(
            '[import]\ndelimiter = ","\nencoding = "latin-1"\n\n'
            '[display]\ncurrency_symbol = "€"\nweekday_names = "fr"\n',
            encoding="utf-8",
        )

        config = load_config(path)

        assert config.delimiter == ","
        assert config.encoding == "latin-1"
        assert config.currency_symbol == "€"
        assert config.weekday_names == "fr"

    def test_partial_file(self, tmp_path: Path):
        path = tmp_path / "config.toml"
        path.write_text('[display]\nweekday_names = "fr"\n')

        config = load_config(path)

        assert config.weekday_names == "fr"
        assert config.delimiter == ";"

    def test_malformed_toml_falls_back(self, tmp_path: Path, caplog):
        path = tmp_path / "config.toml"
        path.write_text("[import\ndelimiter = ")

        with caplog.at_level(logging.WARNING, logger="tradejournal.config"):
            config = load_config(path)

        assert config == JournalConfig()
        assert "Ignoring unreadable config" in caplog.text

    def test_invalid_values_fall_back(self, tmp_path: Path):
        path = tmp_path / "config.toml"
        path.write_text('[display]\nweekday_names = "de"\n')

        assert load_config(path) == JournalConfig()
