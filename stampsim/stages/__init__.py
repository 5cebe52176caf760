"""
Stages 模块 - 流水线基础阶段

职责：
- 灰度化、平滑/锐化、边缘检测、二值化、形态学、网点、明暗调整
- 只由 styles 中的风格过程调用
"""

from .grayscale import exact_luma, luma_rgba, to_luma, to_rgba
from .smoothing import gaussian_blur, smooth_or_sharpen, unsharp_mask
from .edges import detect_edges
from .threshold import binarize, invert
from .morphology import MorphPolicy, thicken
from .halftone import DITHER_MATRIX, dither_thresholds, halftone, ordered_dither
from .tone import adjust_light_dark

__all__ = [
    "exact_luma",
    "luma_rgba",
    "to_luma",
    "to_rgba",
    "gaussian_blur",
    "smooth_or_sharpen",
    "unsharp_mask",
    "detect_edges",
    "binarize",
    "invert",
    "MorphPolicy",
    "thicken",
    "DITHER_MATRIX",
    "dither_thresholds",
    "halftone",
    "ordered_dither",
    "adjust_light_dark"
]
