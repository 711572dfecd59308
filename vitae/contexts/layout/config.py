"""
Layout configuration.

LayoutConfig holds page geometry, type sizes and spacing. The defaults reproduce
the print layout: ISO A4, a uniform 57pt margin, Helvetica, and a 1.15 line-height
factor.

A YAML file can override any subset of keys. It is merged over the structured
defaults with OmegaConf, so misspelled keys or wrongly typed values are rejected
instead of silently ignored.

Examples:
    >>> config = load_layout_config()                      # defaults or $VITAE_LAYOUT_CONFIG
    >>> config = load_layout_config("configs/layout.yaml")
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Union

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()

LAYOUT_CONFIG_ENV = "VITAE_LAYOUT_CONFIG"

# ISO A4 in points
A4_WIDTH = 595.28
A4_HEIGHT = 841.89


@dataclass
class FontSizes:
    name: float = 24
    contact: float = 10
    section: float = 14
    entry: float = 12
    body: float = 11
    skills: float = 10


@dataclass
class Spacing:
    # Under a section rule, and under the header rule
    section_gap: float = 15
    # After a section's last entry
    section_end_gap: float = 10
    # After each entry inside a section
    entry_gap: float = 10
    # Between an experience's company line and position line
    header_line_gap: float = 5
    # Between the contact line and the header rule
    contact_gap: float = 10
    # Above the contact line
    name_gap: float = 5
    # Above a project's technology line
    technologies_gap: float = 5
    # Under each skill group
    skill_group_gap: float = 5


@dataclass
class LayoutConfig:
    """
    Page geometry, typography and spacing for one layout pass.

    Attributes:
        page_width: Page width in points
        page_height: Page height in points
        margin: Uniform margin on all four sides, in points
        line_height_factor: Line advance as a multiple of font size
        font_family: Font family name (standard Type 1 family, or one given in font_files)
        font_files: Optional TrueType faces keyed by style ("normal", "bold",
            "italic", "bolditalic") for a custom font_family
        bullet_marker: Prefix for the first wrapped line of a bullet
        bullet_continuation: Prefix for continuation lines of a bullet
        bullet_indent: Left indent of bullet lines relative to the margin
        section_rule_width: Stroke width of the rule under section titles
        header_rule_width: Stroke width of the rule under the contact line
    """

    page_width: float = A4_WIDTH
    page_height: float = A4_HEIGHT
    margin: float = 57
    line_height_factor: float = 1.15
    font_family: str = "Helvetica"
    font_files: Dict[str, str] = field(default_factory=dict)
    bullet_marker: str = "• "
    bullet_continuation: str = "  "
    bullet_indent: float = 5
    section_rule_width: float = 0.5
    header_rule_width: float = 1
    sizes: FontSizes = field(default_factory=FontSizes)
    spacing: Spacing = field(default_factory=Spacing)

    @property
    def content_width(self) -> float:
        return self.page_width - 2 * self.margin

    @property
    def content_height(self) -> float:
        return self.page_height - 2 * self.margin

    @property
    def bottom_limit(self) -> float:
        """Lowest baseline allowed on a page, measured from the top edge."""
        return self.page_height - self.margin

    def line_height(self, size: float) -> float:
        return size * self.line_height_factor


def load_layout_config(config_path: Optional[Union[str, Path]] = None) -> LayoutConfig:
    """
    Load layout configuration, merging a YAML file over the defaults.

    Args:
        config_path: Optional YAML path. Defaults to the VITAE_LAYOUT_CONFIG environment
            variable; when neither is set the defaults are returned unchanged.

    Returns:
        LayoutConfig instance

    Raises:
        FileNotFoundError: If the config file does not exist
        omegaconf.errors.ConfigKeyError: If the file contains unknown keys
    """
    if config_path is None:
        config_path = os.getenv(LAYOUT_CONFIG_ENV)

    schema = OmegaConf.structured(LayoutConfig)
    if not config_path:
        return OmegaConf.to_object(schema)

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Layout config not found: {config_path}")

    merged = OmegaConf.merge(schema, OmegaConf.load(config_path))
    return OmegaConf.to_object(merged)
