"""
GrayscaleStyle - 灰度风格
"""

from ..context import ParameterSet, RasterImage, StyleSelector
from ..stages import luma_rgba
from .base import BaseStyle


class GrayscaleStyle(BaseStyle):
    """亮度加权灰度，保留 alpha"""

    selector = StyleSelector.GRAYSCALE

    def apply(self, image: RasterImage, params: ParameterSet) -> RasterImage:
        return RasterImage(luma_rgba(image.pixels))
