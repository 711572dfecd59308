"""
Text measurement over reportlab font metrics.

Every wrapping, centering and right-alignment decision is driven by
TextMeasurer.width(). Widths come from reportlab's read-only metrics table, so the
same (text, family, style, size) always gives the same width, and the wrapper,
the renderers and the serializer's link boxes all agree.

Characters the font cannot encode are measured with the glyph reportlab will
actually draw for them (a Symbol or ZapfDingbats substitute, or the notdef glyph),
so measured and drawn widths agree and measurement never raises.
"""

from enum import Enum
from typing import Dict, Mapping, Optional

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from vitae.contexts.layout.exceptions import MeasurementBackendError


class FontStyle(str, Enum):
    """Face selector within a font family."""

    NORMAL = "normal"
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bolditalic"


# Standard Type 1 families shipped with every PDF viewer
STANDARD_FAMILIES: Dict[str, Dict[FontStyle, str]] = {
    "Helvetica": {
        FontStyle.NORMAL: "Helvetica",
        FontStyle.BOLD: "Helvetica-Bold",
        FontStyle.ITALIC: "Helvetica-Oblique",
        FontStyle.BOLD_ITALIC: "Helvetica-BoldOblique",
    },
    "Times": {
        FontStyle.NORMAL: "Times-Roman",
        FontStyle.BOLD: "Times-Bold",
        FontStyle.ITALIC: "Times-Italic",
        FontStyle.BOLD_ITALIC: "Times-BoldItalic",
    },
    "Courier": {
        FontStyle.NORMAL: "Courier",
        FontStyle.BOLD: "Courier-Bold",
        FontStyle.ITALIC: "Courier-Oblique",
        FontStyle.BOLD_ITALIC: "Courier-BoldOblique",
    },
}

# Browser-style names that map onto a standard metric-compatible family
FAMILY_ALIASES = {
    "arial": "Helvetica",
    "helvetica": "Helvetica",
    "times": "Times",
    "times new roman": "Times",
    "courier": "Courier",
    "courier new": "Courier",
}

def register_truetype_family(family: str, font_files: Mapping[str, str]) -> Dict[FontStyle, str]:
    """
    Register TrueType faces for a custom family with reportlab.

    Args:
        family: Family name used in LayoutConfig.font_family
        font_files: Paths keyed by style value ("normal", "bold", "italic", "bolditalic").
            Missing styles fall back to the normal face.

    Returns:
        Mapping of FontStyle to registered face name

    Raises:
        MeasurementBackendError: If the normal face is missing or any file fails to load
    """
    if "normal" not in font_files:
        raise MeasurementBackendError("TrueType family needs a 'normal' face", font_family=family)

    faces = {}
    for style in FontStyle:
        path = font_files.get(style.value, font_files["normal"])
        face_name = f"{family}-{style.value}"
        if face_name not in pdfmetrics.getRegisteredFontNames():
            try:
                pdfmetrics.registerFont(TTFont(face_name, path))
            except Exception as e:
                raise MeasurementBackendError(
                    f"Could not load TrueType face '{path}'", font_family=family, original_error=e
                ) from e
        faces[style] = face_name
    return faces


def resolve_family(family: str, font_files: Optional[Mapping[str, str]] = None) -> Dict[FontStyle, str]:
    """
    Resolve a family name to its four face names.

    Raises:
        MeasurementBackendError: If the family is neither standard nor given as font_files
    """
    if font_files:
        return register_truetype_family(family, font_files)

    canonical = FAMILY_ALIASES.get(family.lower(), family)
    if canonical not in STANDARD_FAMILIES:
        raise MeasurementBackendError(
            f"Unknown font family '{family}'. Standard families: {list(STANDARD_FAMILIES)}; "
            "other families need font_files",
            font_family=family,
        )
    return STANDARD_FAMILIES[canonical]


class TextMeasurer:
    """
    Measures rendered text width in points for one font family.

    Holds no text-keyed state, so a single instance is safe to share across
    concurrent layout passes.

    Args:
        font_family: Standard family name ("Helvetica", "Times", "Courier", or an
            alias such as "Arial"), or a custom family described by font_files
        font_files: Optional TrueType paths keyed by style value

    Raises:
        MeasurementBackendError: If any face of the family cannot be loaded

    Example:
        >>> measurer = TextMeasurer("Helvetica")
        >>> measurer.width("Experience", FontStyle.BOLD, 14)
    """

    def __init__(self, font_family: str = "Helvetica", font_files: Optional[Mapping[str, str]] = None):
        self.font_family = font_family
        self._faces = resolve_family(font_family, font_files)
        for face_name in self._faces.values():
            try:
                pdfmetrics.getFont(face_name)
            except Exception as e:
                raise MeasurementBackendError(
                    f"Font face '{face_name}' is not available",
                    font_family=font_family,
                    original_error=e,
                ) from e

    def font_name(self, style: FontStyle) -> str:
        """Backend face name for a style; the serializer draws with this exact name."""
        return self._faces[FontStyle(style)]

    def width(self, text: str, style: FontStyle = FontStyle.NORMAL, size: float = 11) -> float:
        """
        Width of text in points.

        Args:
            text: Text to measure
            style: Face within the family
            size: Font size in points

        Returns:
            Advance width of the whole string (no kerning)
        """
        if not text:
            return 0.0

        return pdfmetrics.stringWidth(text, self._faces[FontStyle(style)], size)
