"""Colour theme for the debugging interface and the LCD display palettes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

Vec2 = tuple[float, float]
Vec4 = tuple[float, float, float, float]


def rgb_to_vec4(r: int, g: int, b: int) -> Vec4:
    """Convert 8-bit RGB components to an opaque colour with components in 0..1."""
    for component in (r, g, b):
        if not 0 <= component <= 255:
            raise ValueError(f"colour component {component!r} is outside 0..255")
    return (r / 255.0, g / 255.0, b / 255.0, 1.0)


STYLE: Mapping[str, object] = MappingProxyType(
    {
        "Alpha": 1.0,
        "DisabledAlpha": 0.6000000238418579,
        "WindowPadding": (8.0, 8.0),
        "WindowRounding": 0.0,
        "WindowBorderSize": 1.0,
        "WindowMinSize": (32.0, 32.0),
        "WindowTitleAlign": (0.0, 0.5),
        "WindowMenuButtonPosition": "left",
        "ChildRounding": 0.0,
        "ChildBorderSize": 1.0,
        "PopupRounding": 0.0,
        "PopupBorderSize": 1.0,
        "FramePadding": (4.0, 3.0),
        "FrameRounding": 0.0,
        "FrameBorderSize": 0.0,
        "ItemSpacing": (8.0, 4.0),
        "ItemInnerSpacing": (4.0, 4.0),
        "CellPadding": (4.0, 2.0),
        "IndentSpacing": 21.0,
        "ColumnsMinSpacing": 6.0,
        "ScrollbarSize": 14.0,
        "ScrollbarRounding": 9.0,
        "GrabMinSize": 10.0,
        "GrabRounding": 0.0,
        "TabRounding": 4.0,
        "TabBorderSize": 0.0,
        "TabMinWidthForCloseButton": 0.0,
        "ColorButtonPosition": "right",
        "ButtonTextAlign": (0.5, 0.5),
        "SelectableTextAlign": (0.0, 0.0),
    }
)

_COLORS: dict[str, Vec4] = {
    "Text": (1.0, 1.0, 1.0, 1.0),
    "TextDisabled": (0.4980392158031464, 0.4980392158031464, 0.4980392158031464, 1.0),
    "WindowBg": (0.05882352963089943, 0.05882352963089943, 0.05882352963089943, 0.9399999976158142),
    "ChildBg": (1.0, 1.0, 1.0, 0.0),
    "PopupBg": (0.0784313753247261, 0.0784313753247261, 0.0784313753247261, 0.9399999976158142),
    "Border": (0.4274509847164154, 0.4274509847164154, 0.4980392158031464, 0.5),
    "BorderShadow": (0.0, 0.0, 0.0, 0.0),
    "FrameBg": (0.2000000029802322, 0.2078431397676468, 0.2196078449487686, 0.5400000214576721),
    "FrameBgHovered": (0.4000000059604645, 0.4000000059604645, 0.4000000059604645, 0.4000000059604645),
    "FrameBgActive": (0.1764705926179886, 0.1764705926179886, 0.1764705926179886, 0.6700000166893005),
    "TitleBg": (0.03921568766236305, 0.03921568766236305, 0.03921568766236305, 1.0),
    "TitleBgActive": (0.2862745225429535, 0.2862745225429535, 0.2862745225429535, 1.0),
    "TitleBgCollapsed": (0.0, 0.0, 0.0, 0.5099999904632568),
    "MenuBarBg": (0.1372549086809158, 0.1372549086809158, 0.1372549086809158, 1.0),
    "ScrollbarBg": (0.01960784383118153, 0.01960784383118153, 0.01960784383118153, 0.5299999713897705),
    "ScrollbarGrab": (0.3098039329051971, 0.3098039329051971, 0.3098039329051971, 1.0),
    "ScrollbarGrabHovered": (0.407843142747879, 0.407843142747879, 0.407843142747879, 1.0),
    "ScrollbarGrabActive": (0.5098039507865906, 0.5098039507865906, 0.5098039507865906, 1.0),
    "CheckMark": (0.9372549057006836, 0.9372549057006836, 0.9372549057006836, 1.0),
    "SliderGrab": (0.5098039507865906, 0.5098039507865906, 0.5098039507865906, 1.0),
    "SliderGrabActive": (0.8588235378265381, 0.8588235378265381, 0.8588235378265381, 1.0),
    "Button": (0.4392156898975372, 0.4392156898975372, 0.4392156898975372, 0.4000000059604645),
    "ButtonHovered": (0.4588235318660736, 0.4666666686534882, 0.47843137383461, 1.0),
    "ButtonActive": (0.4196078479290009, 0.4196078479290009, 0.4196078479290009, 1.0),
    "Header": (0.6980392336845398, 0.6980392336845398, 0.6980392336845398, 0.3100000023841858),
    "HeaderHovered": (0.6980392336845398, 0.6980392336845398, 0.6980392336845398, 0.800000011920929),
    "HeaderActive": (0.47843137383461, 0.4980392158031464, 0.5176470875740051, 1.0),
    "Separator": (0.4274509847164154, 0.4274509847164154, 0.4980392158031464, 0.5),
    "SeparatorHovered": (0.7176470756530762, 0.7176470756530762, 0.7176470756530762, 0.7799999713897705),
    "SeparatorActive": (0.5098039507865906, 0.5098039507865906, 0.5098039507865906, 1.0),
    "ResizeGrip": (0.9098039269447327, 0.9098039269447327, 0.9098039269447327, 0.25),
    "ResizeGripHovered": (0.8078431487083435, 0.8078431487083435, 0.8078431487083435, 0.6700000166893005),
    "ResizeGripActive": (0.4588235318660736, 0.4588235318660736, 0.4588235318660736, 0.949999988079071),
    "Tab": (0.1764705926179886, 0.3490196168422699, 0.5764706134796143, 0.8619999885559082),
    "TabHovered": (0.2588235437870026, 0.5882353186607361, 0.9764705896377563, 0.800000011920929),
    "TabActive": (0.196078434586525, 0.407843142747879, 0.6784313917160034, 1.0),
    "TabUnfocused": (0.06666667014360428, 0.1019607856869698, 0.1450980454683304, 0.9724000096321106),
    "TabUnfocusedActive": (0.1333333402872086, 0.2588235437870026, 0.4235294163227081, 1.0),
    "PlotLines": (0.6078431606292725, 0.6078431606292725, 0.6078431606292725, 1.0),
    "PlotLinesHovered": (1.0, 0.4274509847164154, 0.3490196168422699, 1.0),
    "PlotHistogram": (0.729411780834198, 0.6000000238418579, 0.1490196138620377, 1.0),
    "PlotHistogramHovered": (1.0, 0.6000000238418579, 0.0, 1.0),
    "TableHeaderBg": (0.1882352977991104, 0.1882352977991104, 0.2000000029802322, 1.0),
    "TableBorderStrong": (0.3098039329051971, 0.3098039329051971, 0.3490196168422699, 1.0),
    "TableBorderLight": (0.2274509817361832, 0.2274509817361832, 0.2470588237047195, 1.0),
    "TableRowBg": (0.0, 0.0, 0.0, 0.0),
    "TableRowBgAlt": (1.0, 1.0, 1.0, 0.05999999865889549),
    "TextSelectedBg": (0.8666666746139526, 0.8666666746139526, 0.8666666746139526, 0.3499999940395355),
    "DragDropTarget": (1.0, 1.0, 0.0, 0.8999999761581421),
    "NavHighlight": (0.6000000238418579, 0.6000000238418579, 0.6000000238418579, 1.0),
    "NavWindowingHighlight": (1.0, 1.0, 1.0, 0.699999988079071),
    "NavWindowingDimBg": (0.800000011920929, 0.800000011920929, 0.800000011920929, 0.2000000029802322),
    "ModalWindowDimBg": (0.800000011920929, 0.800000011920929, 0.800000011920929, 0.3499999940395355),
}


def style_colors() -> dict[str, Vec4]:
    """Return a fresh mapping of interface element names to RGBA colours."""
    return dict(_COLORS)


@dataclass(frozen=True)
class Rgb:
    """An 8-bit RGB colour."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for component in (self.r, self.g, self.b):
            if not 0 <= component <= 255:
                raise ValueError(f"colour component {component!r} is outside 0..255")


@dataclass(frozen=True)
class DisplayPalette:
    """The four shades an LCD palette maps colour ids 0 to 3 onto."""

    color1: Rgb
    color2: Rgb
    color3: Rgb
    color4: Rgb

    @property
    def colors(self) -> tuple[Rgb, Rgb, Rgb, Rgb]:
        """The four shades in colour-id order."""
        return (self.color1, self.color2, self.color3, self.color4)


class PaletteType(Enum):
    """Available display palettes."""

    DOT_MATRIX = 0
    GB_POCKET = 1


_PALETTES: dict[PaletteType, DisplayPalette] = {
    PaletteType.DOT_MATRIX: DisplayPalette(
        Rgb(15, 188, 155), Rgb(15, 172, 139), Rgb(48, 98, 48), Rgb(15, 56, 15)
    ),
    PaletteType.GB_POCKET: DisplayPalette(
        Rgb(196, 207, 161), Rgb(139, 149, 109), Rgb(77, 83, 60), Rgb(31, 31, 31)
    ),
}


def palette(kind: PaletteType) -> DisplayPalette:
    """Return the display palette of the given type."""
    return _PALETTES[PaletteType(kind)]