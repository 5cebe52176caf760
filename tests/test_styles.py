"""
Styles 模块单元测试
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
import pytest
from omegaconf import OmegaConf

from stampsim.context import ParameterSet, RasterImage, StyleSelector
from stampsim.ops import create_ops_provider
from stampsim.styles import (
    BaseStyle,
    ComicStyle,
    EtchingStyle,
    GrayscaleStyle,
    StampStyle,
    init_styles,
)


@pytest.fixture
def config():
    """测试配置"""
    return OmegaConf.create({
        "styles": {
            "etching": {"blur_kernel": 3},
            "stamp": {
                "defaults": {
                    "smooth_sharp": 39,
                    "light_dark": 50,
                    "thick_thin": 61,
                    "dense_sparse": 50
                }
            },
            "comic": {
                "downscale_limit": 800,
                "downscale_factor": 0.6,
                "halftone_scale": 0.5,
                "defaults": {
                    "smooth_sharp": 39,
                    "light_dark": 21,
                    "thick_thin": 21,
                    "dense_sparse": 61
                }
            }
        }
    })


@pytest.fixture
def ops():
    return create_ops_provider("opencv")


@pytest.fixture
def flat_gray():
    """4x4 纯灰图像 R=G=B=128, A=255"""
    img = np.full((4, 4, 4), 128, dtype=np.uint8)
    img[:, :, 3] = 255
    return RasterImage(img)


@pytest.fixture
def sample_image():
    """带形状和渐变的测试图像 (96x128)"""
    img = np.zeros((96, 128, 4), dtype=np.uint8)
    img[:, :, 3] = 255

    # 水平渐变背景
    ramp = np.linspace(30, 220, 128).astype(np.uint8)
    img[:, :, 0] = ramp
    img[:, :, 1] = ramp
    img[:, :, 2] = ramp

    # 深色矩形
    img[20:60, 20:50, :3] = (10, 10, 10)
    # 亮色方块
    img[50:80, 70:110, :3] = (250, 250, 250)

    # 添加噪声
    rng = np.random.default_rng(42)
    noise = rng.integers(-15, 15, (96, 128, 3), dtype=np.int16)
    img[:, :, :3] = np.clip(img[:, :, :3].astype(np.int16) + noise, 0, 255).astype(np.uint8)
    return RasterImage(img)


def black_count(image: RasterImage) -> int:
    return int(np.count_nonzero(image.pixels[:, :, 0] == 0))


class TestInitStyles:
    """风格注册测试"""

    def test_all_styles_registered(self, config, ops):
        styles = init_styles(config, ops)
        assert set(styles) == {
            StyleSelector.GRAYSCALE,
            StyleSelector.ETCHING,
            StyleSelector.STAMP,
            StyleSelector.COMIC,
        }
        for selector, style in styles.items():
            assert isinstance(style, BaseStyle)
            assert style.style_id == selector.value

    def test_default_params(self, config, ops):
        assert StampStyle(config, ops).default_params() == ParameterSet(39, 50, 61, 50, 25)
        assert ComicStyle(config, ops).default_params() == ParameterSet(39, 21, 21, 61, 25)

    def test_default_params_without_config(self, ops):
        """配置中没有 defaults 时使用 ParameterSet 默认值"""
        style = GrayscaleStyle(OmegaConf.create({}), ops)
        assert style.default_params() == ParameterSet()


class TestGrayscaleStyle:
    """灰度风格测试"""

    def test_flat_identity(self, config, ops, flat_gray):
        result = GrayscaleStyle(config, ops).apply(flat_gray, ParameterSet())
        assert result == flat_gray

    def test_channels_equal_alpha_kept(self, config, ops):
        rng = np.random.default_rng(5)
        img = RasterImage(rng.integers(0, 256, (16, 24, 4), dtype=np.uint8))
        result = GrayscaleStyle(config, ops).apply(img, ParameterSet())
        px = result.pixels
        assert np.array_equal(px[:, :, 0], px[:, :, 1])
        assert np.array_equal(px[:, :, 1], px[:, :, 2])
        assert np.array_equal(px[:, :, 3], img.pixels[:, :, 3])

    def test_off_grid_colour_rounding(self, config, ops):
        img = RasterImage(np.array([[[0, 1, 201, 255], [0, 2, 152, 128]]], dtype=np.uint8))
        result = GrayscaleStyle(config, ops).apply(img, ParameterSet())
        assert result.pixels[0].tolist() == [[24, 24, 24, 255], [19, 19, 19, 128]]


class TestEtchingStyle:
    """蚀刻风格测试"""

    def test_flat_image_is_white(self, config, ops, flat_gray):
        result = EtchingStyle(config, ops).apply(flat_gray, ParameterSet(etching_threshold=25))
        assert result.pixels.shape == (4, 4, 4)
        assert np.all(result.pixels == 255)

    def test_dark_lines_on_light(self, config, ops, sample_image):
        result = EtchingStyle(config, ops).apply(sample_image, ParameterSet(etching_threshold=25))
        values = set(np.unique(result.pixels[:, :, :3]))
        assert values <= {0, 255}
        # 线条是少数
        assert 0 < black_count(result) < sample_image.width * sample_image.height // 2

    def test_black_count_monotonic_in_threshold(self, config, ops, sample_image):
        """阈值增大时 Canny 阈值降低，黑色线条像素只增不减"""
        style = EtchingStyle(config, ops)
        counts = [
            black_count(style.apply(sample_image, ParameterSet(etching_threshold=t)))
            for t in (-50, -25, 0, 25, 50, 75, 100)
        ]
        assert counts == sorted(counts)

    def test_one_by_one(self, config, ops):
        img = RasterImage(np.array([[[10, 20, 30, 255]]], dtype=np.uint8))
        result = EtchingStyle(config, ops).apply(img, ParameterSet())
        assert result.pixels.shape == (1, 1, 4)


class TestStampStyle:
    """印章风格测试"""

    def test_output_binary_rgba(self, config, ops, sample_image):
        result = StampStyle(config, ops).apply(sample_image, ParameterSet(39, 50, 61, 50))
        assert result.pixels.shape == sample_image.pixels.shape
        assert set(np.unique(result.pixels[:, :, :3])) <= {0, 255}
        assert np.all(result.pixels[:, :, 3] == 255)

    def test_thin_side_is_pass_through(self, config, ops, sample_image):
        """thick_thin <= 50 时形态学阶段不起作用"""
        style = StampStyle(config, ops)
        a = style.apply(sample_image, ParameterSet(39, 30, 0, 50))
        b = style.apply(sample_image, ParameterSet(39, 30, 50, 50))
        assert a == b

    def test_thick_side_grows_lines(self, config, ops, sample_image):
        style = StampStyle(config, ops)
        thin = style.apply(sample_image, ParameterSet(39, 30, 50, 50))
        thick = style.apply(sample_image, ParameterSet(39, 30, 100, 50))
        assert np.count_nonzero(thick.pixels[:, :, 0]) > np.count_nonzero(thin.pixels[:, :, 0])

    @pytest.mark.parametrize("smooth_sharp", [0, 39, 50, 100])
    def test_one_by_one(self, config, ops, smooth_sharp):
        img = RasterImage(np.array([[[200, 100, 50, 255]]], dtype=np.uint8))
        result = StampStyle(config, ops).apply(img, ParameterSet(smooth_sharp, 50, 100, 50))
        assert result.pixels.shape == (1, 1, 4)


class TestComicStyle:
    """漫画风格测试"""

    def test_output_binary_same_size(self, config, ops, sample_image):
        result = ComicStyle(config, ops).apply(sample_image, ParameterSet(39, 21, 21, 61))
        assert result.pixels.shape == sample_image.pixels.shape
        assert set(np.unique(result.pixels[:, :, :3])) <= {0, 255}

    def test_large_image_restored_to_source_size(self, config, ops):
        """超过 800 像素时内部缩小，输出仍为原尺寸"""
        rng = np.random.default_rng(11)
        img = RasterImage(rng.integers(0, 256, (820, 300, 4), dtype=np.uint8))
        result = ComicStyle(config, ops).apply(img, ParameterSet(39, 21, 21, 61))
        assert result.pixels.shape == (820, 300, 4)
        assert set(np.unique(result.pixels[:, :, :3])) <= {0, 255}

    def test_downscale_limit_from_config(self, config, ops):
        config.styles.comic.downscale_limit = 16
        style = ComicStyle(config, ops)
        img = RasterImage(np.full((20, 32, 4), 255, dtype=np.uint8))
        assert style._working_copy(img).shape == (12, 19, 4)
        assert style.apply(img, ParameterSet()).pixels.shape == (20, 32, 4)

    def test_one_by_one(self, config, ops):
        img = RasterImage(np.array([[[128, 128, 128, 255]]], dtype=np.uint8))
        result = ComicStyle(config, ops).apply(img, ParameterSet(100, 50, 100, 50))
        assert result.pixels.shape == (1, 1, 4)
