import numpy as np
import pytest

from meshkit.colormap import checkerboard_texture, cold_warm_texture

BLUE = (42, 157, 223)
WHITE = (255, 255, 255)


def test_cold_warm_shape_and_dtype():
    tex = cold_warm_texture()
    assert tex.shape == (256, 3)
    assert tex.dtype == np.uint8
    assert tex.size == 768


def test_cold_warm_endpoints():
    tex = cold_warm_texture()
    assert tuple(int(c) for c in tex[0]) == (59, 76, 192)
    assert tuple(int(c) for c in tex[-1]) == (181, 11, 39)


def test_cold_warm_runs_from_cold_to_warm():
    tex = cold_warm_texture().astype(int)
    assert tex[0, 2] > tex[0, 0]
    assert tex[-1, 0] > tex[-1, 2]
    assert any(tuple(row) == (221, 221, 221) for row in tex)


def test_cold_warm_returns_independent_copies():
    first = cold_warm_texture()
    first[0] = (0, 0, 0)
    second = cold_warm_texture()
    assert tuple(int(c) for c in second[0]) == (59, 76, 192)


def test_checkerboard_default_shape():
    tex = checkerboard_texture()
    assert tex.shape == (512, 512, 3)
    assert tex.dtype == np.uint8


@pytest.mark.parametrize("resolution", [1, 64, 100])
def test_checkerboard_custom_resolution(resolution):
    assert checkerboard_texture(resolution).shape == (resolution, resolution, 3)


def test_checkerboard_cell_colors():
    tex = checkerboard_texture(128)
    assert tuple(int(c) for c in tex[0, 0]) == WHITE
    assert tuple(int(c) for c in tex[0, 32]) == BLUE
    assert tuple(int(c) for c in tex[32, 0]) == BLUE
    assert tuple(int(c) for c in tex[32, 32]) == WHITE
    assert tuple(int(c) for c in tex[31, 31]) == WHITE


def test_checkerboard_uses_only_two_colors():
    tex = checkerboard_texture(96)
    colors = {tuple(int(c) for c in px) for px in tex.reshape(-1, 3)}
    assert colors == {BLUE, WHITE}


def test_checkerboard_is_symmetric():
    tex = checkerboard_texture(200)
    assert np.array_equal(tex, tex.transpose(1, 0, 2))


def test_checkerboard_periodic_every_64():
    tex = checkerboard_texture(256)
    assert np.array_equal(tex[:64, :64], tex[64:128, 128:192])


@pytest.mark.parametrize("resolution", [0, -5])
def test_checkerboard_rejects_non_positive(resolution):
    with pytest.raises(ValueError):
        checkerboard_texture(resolution)