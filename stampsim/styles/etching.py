"""
EtchingStyle - 蚀刻风格

灰度 -> 3x3 轻度高斯 -> Canny -> 二值化 -> 反相（白底黑线）。
"""

from ..context import ParameterSet, RasterImage, StyleSelector
from ..mapping import etching_level, to_fraction
from ..stages import binarize, detect_edges, gaussian_blur, invert, to_luma, to_rgba
from .base import BaseStyle


class EtchingStyle(BaseStyle):
    """蚀刻风格，只由 etching_threshold 控制"""

    selector = StyleSelector.ETCHING

    def __init__(self, cfg, ops):
        super().__init__(cfg, ops)
        self.blur_kernel = self.style_cfg.get("blur_kernel", 3)

    def apply(self, image: RasterImage, params: ParameterSet) -> RasterImage:
        # 阈值为负时 fraction < 0，Canny 阈值会超过名义上限，保留该行为
        fraction = to_fraction(params.etching_threshold)

        gray = to_luma(self.ops, image.pixels)
        gray = gaussian_blur(self.ops, gray, self.blur_kernel, 0.0)
        edges = detect_edges(self.ops, gray, fraction)
        lines = binarize(self.ops, edges, etching_level(fraction))
        lines = invert(self.ops, lines)
        return RasterImage(to_rgba(self.ops, lines))
