"""
明暗调整阶段（漫画风格）
"""

import numpy as np

from ..mapping import tone_coefficients
from ..ops import ImageOpsProvider


def adjust_light_dark(ops: ImageOpsProvider, gray: np.ndarray, fraction: float) -> np.ndarray:
    """
    对比度/亮度调整：clamp(alpha * x + beta)

    Args:
        ops: 原语提供者
        gray: uint8 (H,W)
        fraction: light_dark / 100

    Returns:
        uint8 (H,W)，饱和而非回绕
    """
    alpha, beta = tone_coefficients(fraction)
    # 第二路权重为 0，相当于单图线性变换 + 饱和
    return ops.add_weighted(gray, alpha, gray, 0.0, beta)
