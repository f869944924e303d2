from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from financial_jargon.config.defaults import DEFAULTS
from financial_jargon.config.loader import load_config


def test_defaults_load(monkeypatch) -> None:
    monkeypatch.delenv("JARGON_LOGS_ROOT", raising=False)
    monkeypatch.delenv("JARGON_LOCALE", raising=False)
    cfg = load_config()
    assert cfg.logs_root == Path(DEFAULTS.logs_root)
    assert cfg.locale is None


def test_env_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("JARGON_LOGS_ROOT", str(tmp_path / "env-logs"))
    monkeypatch.setenv("JARGON_LOCALE", "de_DE.UTF-8")
    cfg = load_config()
    assert cfg.logs_root == tmp_path / "env-logs"
    assert cfg.locale == "de_DE.UTF-8"


def test_yaml_overrides(tmp_path: Path, monkeypatch) -> None:
    # set env to something, then ensure YAML beats it
    monkeypatch.setenv("JARGON_LOCALE", "fr_FR.UTF-8")
    yml = tmp_path / "settings.yaml"
    yml.write_text(
        textwrap.dedent(
            """
            logs_root: yaml-logs
            locale: C
            """
        ).strip(),
        encoding="utf-8",
    )
    cfg = load_config(yml)
    assert cfg.logs_root == Path("yaml-logs")
    assert cfg.locale == "C"


def test_yaml_empty_locale_means_english(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("JARGON_LOCALE", "fr_FR.UTF-8")
    yml = tmp_path / "settings.yaml"
    yml.write_text("locale: ''\n", encoding="utf-8")
    assert load_config(yml).locale is None


def test_yaml_must_be_mapping(tmp_path: Path) -> None:
    yml = tmp_path / "settings.yaml"
    yml.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(yml)
