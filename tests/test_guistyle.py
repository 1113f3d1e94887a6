import pytest

from meshkit.guistyle import GuiStyle, font_size, pmp_style


def test_font_size_base():
    assert font_size(1.0) == 14


def test_font_size_is_proportional():
    assert font_size(3.0) == pytest.approx(3 * font_size(1.0))


def test_font_size_rejects_non_positive():
    with pytest.raises(ValueError):
        font_size(0)


def test_pmp_style_unit_values():
    style = pmp_style(1.0)
    assert style.window_border_size == 0
    assert style.window_rounding == 4
    assert style.frame_rounding == 4
    assert style.grab_min_size == 10
    assert style.grab_rounding == 4


def test_pmp_style_scales_roundings():
    one = pmp_style(1.0)
    two = pmp_style(2.0)
    assert two.window_rounding == pytest.approx(2 * one.window_rounding)
    assert two.grab_min_size == pytest.approx(2 * one.grab_min_size)
    assert two.window_border_size == one.window_border_size


def test_pmp_style_colors():
    colors = pmp_style().colors
    assert colors["Text"] == (0.0, 0.0, 0.0, 1.0)
    assert colors["WindowBg"] == (0.90, 0.90, 0.90, 0.70)
    assert colors["Button"] == (0.16, 0.62, 0.87, 0.40)
    assert all(len(c) == 4 for c in colors.values())


def test_pmp_style_rejects_bad_scale():
    with pytest.raises(ValueError):
        pmp_style(-1.0)


def test_scaled_with_one_gives_defaults():
    base = GuiStyle()
    assert base.scaled(1.0) == base


def test_scaled_multiplies_defaults_not_current():
    base = GuiStyle()
    twice = base.scaled(2.0).scaled(2.0)
    assert twice == base.scaled(2.0)


def test_scaled_proportional_sizes():
    base = GuiStyle()
    big = base.scaled(1.5)
    assert big.indent_spacing == pytest.approx(1.5 * base.indent_spacing)
    assert big.window_padding == pytest.approx(
        tuple(1.5 * v for v in base.window_padding)
    )
    assert big.display_safe_area_padding == pytest.approx(
        tuple(1.5 * v for v in base.display_safe_area_padding)
    )


def test_scaled_keeps_colors_and_border():
    style = pmp_style(1.0)
    scaled = style.scaled(1.25)
    assert scaled.colors == style.colors
    assert scaled.window_border_size == style.window_border_size
    assert scaled.colors is not style.colors


def test_scaled_rejects_zero():
    with pytest.raises(ValueError):
        GuiStyle().scaled(0)