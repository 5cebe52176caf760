"""
网点阶段 - 4x4 有序抖动

在半分辨率副本上做抖动以降低网点密度，膨胀后用最近邻放大回工作分辨率，
保持二值硬边。
"""

import numpy as np

from ..mapping import scaled_size
from ..ops import ImageOpsProvider
from .morphology import MorphPolicy, thicken

# 4x4 聚点抖动矩阵（按行展开）
DITHER_MATRIX = (
    0, 8, 2, 10,
    12, 4, 14, 6,
    3, 11, 1, 9,
    15, 7, 13, 5,
)

HALFTONE_SCALE = 0.5


def dither_thresholds() -> np.ndarray:
    """归一化到 0~255 的 4x4 阈值表，float32"""
    values = np.asarray(DITHER_MATRIX, dtype=np.float32)
    return ((values / 16.0) * 255.0).reshape(4, 4)


def ordered_dither(gray: np.ndarray) -> np.ndarray:
    """
    有序抖动

    像素 (x, y) 与 thresholds[y % 4, x % 4] 比较，严格大于取 255，否则 0。

    Args:
        gray: uint8 (H,W)

    Returns:
        uint8 (H,W)，取值 0/255
    """
    h, w = gray.shape[:2]
    table = dither_thresholds()
    tiled = np.tile(table, ((h + 3) // 4, (w + 3) // 4))[:h, :w]
    return np.where(gray.astype(np.float32) > tiled, 255, 0).astype(np.uint8)


def halftone(
    ops: ImageOpsProvider,
    gray: np.ndarray,
    thick_thin: float,
    scale: float = HALFTONE_SCALE
) -> np.ndarray:
    """
    网点化

    Args:
        ops: 原语提供者
        gray: 明暗调整后的亮度图 uint8 (H,W)
        thick_thin: thick_thin / 100，控制网点膨胀
        scale: 抖动前的缩放比例

    Returns:
        与 gray 同尺寸的网点图 uint8 (H,W)
    """
    h, w = gray.shape[:2]
    small = ops.resize(gray, scaled_size(w, h, scale), interpolation="area")
    dots = ordered_dither(small)
    dots = thicken(ops, dots, thick_thin, MorphPolicy.COMIC)
    return ops.resize(dots, (w, h), interpolation="nearest")
