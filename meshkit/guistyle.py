"""Look of the viewer's GUI dialogs: sizes, roundings, colours and font size."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

Vec2 = tuple[float, float]
RGBA = tuple[float, float, float, float]

BASE_FONT_SIZE = 14.0

_ACCENT = (0.16, 0.62, 0.87)


def _accent(alpha: float) -> RGBA:
    return (*_ACCENT, alpha)


_PMP_COLORS: dict[str, RGBA] = {
    "Text": (0.00, 0.00, 0.00, 1.00),
    "TextDisabled": (0.60, 0.60, 0.60, 1.00),
    "WindowBg": (0.90, 0.90, 0.90, 0.70),
    "ChildBg": (0.00, 0.00, 0.00, 0.00),
    "PopupBg": (0.90, 0.90, 0.90, 0.90),
    "Border": (0.00, 0.00, 0.00, 0.39),
    "BorderShadow": (1.00, 1.00, 1.00, 0.10),
    "FrameBg": (1.00, 1.00, 1.00, 1.00),
    "FrameBgHovered": _accent(0.40),
    "FrameBgActive": _accent(0.67),
    "TitleBg": _accent(0.80),
    "TitleBgActive": _accent(0.80),
    "TitleBgCollapsed": _accent(0.40),
    "MenuBarBg": (0.86, 0.86, 0.86, 1.00),
    "ScrollbarBg": (0.98, 0.98, 0.98, 0.53),
    "ScrollbarGrab": (0.69, 0.69, 0.69, 0.80),
    "ScrollbarGrabHovered": (0.49, 0.49, 0.49, 0.80),
    "ScrollbarGrabActive": (0.49, 0.49, 0.49, 1.00),
    "CheckMark": _accent(1.00),
    "SliderGrab": _accent(0.78),
    "SliderGrabActive": _accent(1.00),
    "Button": _accent(0.40),
    "ButtonHovered": _accent(1.00),
    "ButtonActive": _accent(1.00),
    "Header": _accent(0.31),
    "HeaderHovered": _accent(0.80),
    "HeaderActive": _accent(1.00),
    "ResizeGrip": (1.00, 1.00, 1.00, 0.00),
    "ResizeGripHovered": _accent(0.67),
    "ResizeGripActive": _accent(0.95),
    "PlotLines": (0.39, 0.39, 0.39, 1.00),
    "PlotLinesHovered": (1.00, 0.43, 0.35, 1.00),
    "PlotHistogram": (0.90, 0.70, 0.00, 1.00),
    "PlotHistogramHovered": (1.00, 0.60, 0.00, 1.00),
    "TextSelectedBg": _accent(0.35),
    "ModalWindowDimBg": (0.20, 0.20, 0.20, 0.70),
}


def _check_scale(scale: float) -> float:
    if scale <= 0:
        raise ValueError("GUI scale must be positive")
    return float(scale)


@dataclass(frozen=True)
class GuiStyle:
    """Sizes and colours of GUI elements, in pixels at the given scale."""

    window_border_size: float = 1.0
    window_padding: Vec2 = (8.0, 8.0)
    window_rounding: float = 4.0
    frame_padding: Vec2 = (4.0, 2.0)
    frame_rounding: float = 4.0
    item_spacing: Vec2 = (8.0, 4.0)
    item_inner_spacing: Vec2 = (4.0, 4.0)
    indent_spacing: float = 21.0
    columns_min_spacing: float = 6.0
    scrollbar_size: float = 16.0
    scrollbar_rounding: float = 9.0
    grab_min_size: float = 10.0
    grab_rounding: float = 4.0
    tab_rounding: float = 4.0
    display_window_padding: Vec2 = (19.0, 19.0)
    display_safe_area_padding: Vec2 = (3.0, 3.0)
    colors: dict[str, RGBA] = field(default_factory=dict, hash=False)

    def scaled(self, scale: float) -> "GuiStyle":
        """Return a copy whose element sizes are the default sizes times ``scale``.

        Colours and the window border size are kept.
        """
        s = _check_scale(scale)
        return replace(
            self,
            window_padding=(8 * s, 8 * s),
            window_rounding=4 * s,
            frame_padding=(4 * s, 2 * s),
            frame_rounding=4 * s,
            item_spacing=(8 * s, 4 * s),
            item_inner_spacing=(4 * s, 4 * s),
            indent_spacing=21 * s,
            columns_min_spacing=6 * s,
            scrollbar_size=16 * s,
            scrollbar_rounding=9 * s,
            grab_min_size=10 * s,
            grab_rounding=4 * s,
            tab_rounding=4 * s,
            display_window_padding=(19 * s, 19 * s),
            display_safe_area_padding=(3 * s, 3 * s),
            colors=dict(self.colors),
        )


def pmp_style(scale: float = 1.0) -> GuiStyle:
    """The viewer's own light style with roundings scaled by ``scale``."""
    s = _check_scale(scale)
    return GuiStyle(
        window_border_size=0.0,
        window_rounding=4 * s,
        frame_rounding=4 * s,
        grab_min_size=10 * s,
        grab_rounding=4 * s,
        colors=dict(_PMP_COLORS),
    )


def font_size(scale: float = 1.0) -> float:
    """Pixel size of the GUI font at the given scale."""
    return BASE_FONT_SIZE * _check_scale(scale)