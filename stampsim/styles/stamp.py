"""
StampStyle - 印章风格

灰度 -> 平滑/锐化 -> Canny（疏密）-> 二值化（明暗）-> 膨胀（粗细）。
不做网点化。
"""

from ..context import ParameterSet, RasterImage, StyleSelector
from ..mapping import light_dark_level, to_fraction
from ..stages import (
    MorphPolicy,
    binarize,
    detect_edges,
    smooth_or_sharpen,
    thicken,
    to_luma,
    to_rgba,
)
from .base import BaseStyle


class StampStyle(BaseStyle):
    """印章风格"""

    selector = StyleSelector.STAMP

    def apply(self, image: RasterImage, params: ParameterSet) -> RasterImage:
        gray = to_luma(self.ops, image.pixels)
        gray = smooth_or_sharpen(self.ops, gray, to_fraction(params.smooth_sharp))
        edges = detect_edges(self.ops, gray, to_fraction(params.dense_sparse))
        binary = binarize(self.ops, edges, light_dark_level(to_fraction(params.light_dark)))
        binary = thicken(self.ops, binary, to_fraction(params.thick_thin), MorphPolicy.STAMP)
        return RasterImage(to_rgba(self.ops, binary))
