"""
ComicStyle - 漫画网点风格

（大图先缩小）-> 灰度 -> 平滑/锐化 -> 明暗调整 -> 有序抖动网点
-> RGBA -> 放大回原尺寸。

只输出网点，不叠加 Canny 轮廓。
"""

import logging

from ..context import ParameterSet, RasterImage, StyleSelector
from ..mapping import scaled_size, to_fraction
from ..stages import adjust_light_dark, halftone, smooth_or_sharpen, to_luma, to_rgba
from ..stages.halftone import HALFTONE_SCALE
from .base import BaseStyle

logger = logging.getLogger(__name__)


class ComicStyle(BaseStyle):
    """漫画风格"""

    selector = StyleSelector.COMIC

    def __init__(self, cfg, ops):
        super().__init__(cfg, ops)
        self.downscale_limit = self.style_cfg.get("downscale_limit", 800)
        self.downscale_factor = self.style_cfg.get("downscale_factor", 0.6)
        self.halftone_scale = self.style_cfg.get("halftone_scale", HALFTONE_SCALE)

    def _working_copy(self, image: RasterImage):
        """任一边超过上限时按比例缩小，限制计算量和网点密度"""
        pixels = image.pixels
        if image.width <= self.downscale_limit and image.height <= self.downscale_limit:
            return pixels
        size = scaled_size(image.width, image.height, self.downscale_factor)
        logger.debug("Comic downscale %dx%d -> %dx%d", image.width, image.height, *size)
        return self.ops.resize(pixels, size, interpolation="area")

    def apply(self, image: RasterImage, params: ParameterSet) -> RasterImage:
        work = self._working_copy(image)

        gray = to_luma(self.ops, work)
        gray = smooth_or_sharpen(self.ops, gray, to_fraction(params.smooth_sharp))
        gray = adjust_light_dark(self.ops, gray, to_fraction(params.light_dark))
        dots = halftone(self.ops, gray, to_fraction(params.thick_thin), self.halftone_scale)
        rgba = to_rgba(self.ops, dots)

        if rgba.shape[:2] != (image.height, image.width):
            # 最近邻放大，保持二值硬边
            rgba = self.ops.resize(rgba, image.size, interpolation="nearest")
        return RasterImage(rgba)
