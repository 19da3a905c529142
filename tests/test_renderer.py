"""Tests for sampling textures into images."""

import numpy as np
import pytest

from textureforge.color import WHITE, Color
from textureforge.renderer import RenderConfig, render, render_signal
from textureforge.signals import CoordinateSignal
from textureforge.textures import ChannelTexture, SolidTexture


def test_render_solid():
    img = render(SolidTexture(Color(255, 0, 0)), 4, 3)
    assert img.mode == "RGBA"
    assert img.size == (4, 3)
    arr = np.array(img)
    assert (arr == [255, 0, 0, 255]).all()


def test_render_absent_texture_is_black():
    arr = np.array(render(None, 2, 2))
    assert (arr == [0, 0, 0, 255]).all()


def test_render_samples_pixel_centers():
    texture = ChannelTexture(red=CoordinateSignal("u"), green=CoordinateSignal("v"))
    arr = np.array(render(texture, 2, 1))
    assert list(arr[0, :, 0]) == [64, 191]
    assert list(arr[0, :, 1]) == [128, 128]


def test_render_uses_config_size():
    img = render(SolidTexture(WHITE), config=RenderConfig(width=5, height=7))
    assert img.size == (5, 7)


def test_render_background_flattens_alpha():
    clear = SolidTexture(Color(255, 0, 0, 0.0))
    arr = np.array(render(clear, 2, 2, config=RenderConfig(background=WHITE)))
    assert (arr == [255, 255, 255, 255]).all()

    arr = np.array(render(clear, 2, 2))
    assert (arr[:, :, 3] == 0).all()


def test_render_signal():
    img = render_signal(CoordinateSignal("u"), 4, 1)
    assert img.mode == "L"
    assert list(np.array(img)[0]) == [32, 96, 159, 223]


@pytest.mark.parametrize("width,height", [(0, 4), (4, 0), (-1, -1)])
def test_invalid_sizes(width, height):
    with pytest.raises(ValueError):
        render(None, width, height)
    with pytest.raises(ValueError):
        RenderConfig(width=width, height=height)
