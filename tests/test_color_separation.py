"""
Tests for color separation

Covers:
- Channel alphas for white, black and primary colors
- Alpha scaling by source opacity
- Fixed hue per output raster
- Zero-area input
- Pillow conversion and PNG export
"""
import numpy as np
import pytest
from PIL import Image

from cmyk_studio.models.part import Channel
from cmyk_studio.models.raster import SourceRaster
from cmyk_studio.services.color_separation import separate, separate_file


def solid(rgba, width=2, height=2):
    return SourceRaster(np.full((height, width, 4), rgba, dtype=np.uint8))


def alphas(layer_set):
    """Alpha of pixel (0, 0) per channel"""
    return {channel: int(layer_set.alpha(channel)[0, 0]) for channel in Channel}


class TestChannelAlphas:

    def test_opaque_white_has_no_ink(self):
        result = alphas(separate(solid((255, 255, 255, 255))))
        assert result == {Channel.CYAN: 0, Channel.MAGENTA: 0, Channel.YELLOW: 0, Channel.BLACK: 0}

    def test_opaque_black_is_full_ink(self):
        result = alphas(separate(solid((0, 0, 0, 255))))
        assert result == {Channel.CYAN: 255, Channel.MAGENTA: 255, Channel.YELLOW: 255, Channel.BLACK: 255}

    def test_opaque_red(self):
        result = alphas(separate(solid((255, 0, 0, 255))))
        assert result[Channel.CYAN] == 0
        assert result[Channel.MAGENTA] == 255
        assert result[Channel.YELLOW] == 255
        assert result[Channel.BLACK] == 179

    def test_opaque_green_black_uses_luma_weight(self):
        result = alphas(separate(solid((0, 255, 0, 255))))
        assert result[Channel.CYAN] == 255
        assert result[Channel.MAGENTA] == 0
        assert result[Channel.YELLOW] == 255
        # (1 - 0.587) * 255 = 105.315
        assert result[Channel.BLACK] == 105

    def test_transparent_pixel_has_no_ink(self):
        result = alphas(separate(solid((0, 0, 0, 0))))
        assert set(result.values()) == {0}

    def test_alpha_scales_contribution(self):
        # Half-transparent black: every channel is 1.0 * (128 / 255)
        result = alphas(separate(solid((0, 0, 0, 128))))
        assert set(result.values()) == {128}

    def test_per_pixel_values(self):
        pixels = np.array([[[255, 255, 255, 255], [0, 0, 255, 255]]], dtype=np.uint8)
        layers = separate(SourceRaster(pixels))
        # Opaque blue carries no yellow ink
        assert layers.alpha(Channel.CYAN).tolist() == [[0, 255]]
        assert layers.alpha(Channel.MAGENTA).tolist() == [[0, 255]]
        assert layers.alpha(Channel.YELLOW).tolist() == [[0, 0]]
        # (1 - 0.114) * 255 = 225.93
        assert layers.alpha(Channel.BLACK).tolist() == [[0, 226]]


class TestOutputRasters:

    def test_dimensions_match_source(self):
        layers = separate(solid((10, 20, 30, 255), width=5, height=3))
        for channel, raster in layers.in_stack_order():
            assert raster.shape == (3, 5, 4)
        assert (layers.width, layers.height) == (5, 3)

    @pytest.mark.parametrize('channel', list(Channel))
    def test_color_is_fixed_per_raster(self, channel):
        pixels = np.random.default_rng(7).integers(0, 256, size=(4, 4, 4), dtype=np.uint8)
        raster = separate(SourceRaster(pixels)).layer(channel)
        assert (raster[:, :, :3] == np.array(channel.hue, dtype=np.uint8)).all()

    def test_stack_order(self):
        layers = separate(solid((0, 0, 0, 255)))
        order = [channel for channel, _ in layers.in_stack_order()]
        assert order == [Channel.CYAN, Channel.MAGENTA, Channel.YELLOW, Channel.BLACK]

    def test_rasters_are_read_only(self):
        layers = separate(solid((0, 0, 0, 255)))
        with pytest.raises(ValueError):
            layers.cyan[0, 0, 3] = 1

    def test_source_is_not_modified(self):
        source = solid((40, 80, 120, 200))
        before = source.pixels.copy()
        separate(source)
        assert (source.pixels == before).all()

    def test_zero_area_input(self):
        layers = separate(SourceRaster.empty())
        for _, raster in layers.in_stack_order():
            assert raster.shape == (0, 0, 4)


class TestSourceRaster:

    def test_rgb_input_is_opaque(self):
        raster = SourceRaster(np.zeros((2, 3, 3), dtype=np.uint8))
        assert raster.size == (3, 2)
        assert (raster.pixels[:, :, 3] == 255).all()

    def test_rejects_bad_shape(self):
        with pytest.raises(ValueError):
            SourceRaster(np.zeros((4, 4), dtype=np.uint8))

    def test_from_image_converts_mode(self):
        raster = SourceRaster.from_image(Image.new('L', (3, 2), color=0))
        assert raster.pixels.shape == (2, 3, 4)
        assert alphas(separate(raster))[Channel.BLACK] == 255


class TestFileRoundTrip:

    def test_save_and_separate_file(self, tmp_path):
        source_path = tmp_path / 'red.png'
        Image.new('RGBA', (4, 4), (255, 0, 0, 255)).save(source_path)

        layers = separate_file(source_path)
        written = layers.save(tmp_path / 'out', 'red')

        assert sorted(path.name for path in written.values()) == [
            'red_c.png', 'red_k.png', 'red_m.png', 'red_y.png']
        with Image.open(written[Channel.BLACK]) as img:
            assert img.mode == 'RGBA'
            assert img.getpixel((0, 0)) == (0, 0, 0, 179)
