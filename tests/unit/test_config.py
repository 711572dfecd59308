"""Unit tests for layout configuration loading."""

from pathlib import Path

import pytest
from omegaconf.errors import ConfigKeyError

from vitae.contexts.layout import LayoutConfig, load_layout_config
from vitae.contexts.layout.config import A4_HEIGHT, A4_WIDTH, LAYOUT_CONFIG_ENV

SHIPPED_CONFIG = Path(__file__).resolve().parents[2] / "configs" / "layout.yaml"


@pytest.mark.unit
def test_defaults():
    config = LayoutConfig()
    assert (config.page_width, config.page_height) == (A4_WIDTH, A4_HEIGHT)
    assert config.margin == 57
    assert config.line_height_factor == 1.15
    assert config.sizes.name == 24
    assert config.sizes.body == 11
    assert config.spacing.section_gap == 15
    assert config.bullet_marker == "• "
    assert config.content_width == pytest.approx(A4_WIDTH - 114)
    assert config.line_height(10) == pytest.approx(11.5)


@pytest.mark.unit
def test_no_path_and_no_env_returns_defaults(monkeypatch):
    monkeypatch.delenv(LAYOUT_CONFIG_ENV, raising=False)
    assert load_layout_config() == LayoutConfig()


@pytest.mark.unit
def test_partial_override(tmp_path):
    path = tmp_path / "layout.yaml"
    path.write_text("margin: 40\nsizes:\n  body: 10\n")
    config = load_layout_config(path)
    assert config.margin == 40
    assert config.sizes.body == 10
    assert config.sizes.name == 24
    assert isinstance(config, LayoutConfig)


@pytest.mark.unit
def test_env_variable_selects_file(tmp_path, monkeypatch):
    path = tmp_path / "layout.yaml"
    path.write_text("font_family: Times\n")
    monkeypatch.setenv(LAYOUT_CONFIG_ENV, str(path))
    assert load_layout_config().font_family == "Times"


@pytest.mark.unit
def test_unknown_key_rejected(tmp_path):
    path = tmp_path / "layout.yaml"
    path.write_text("margn: 40\n")
    with pytest.raises(ConfigKeyError):
        load_layout_config(path)


@pytest.mark.unit
def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_layout_config(tmp_path / "missing.yaml")


@pytest.mark.unit
def test_shipped_config_matches_defaults():
    assert load_layout_config(SHIPPED_CONFIG) == LayoutConfig()
