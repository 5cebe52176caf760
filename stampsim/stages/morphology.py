"""
形态学阶段 - 方形结构元素膨胀

印章风格只在 thick_thin > 0.5 时加粗；不做腐蚀，避免把本就很细的线条抹掉。
漫画风格在全范围内按比例膨胀网点。
"""

from enum import Enum

import numpy as np

from ..mapping import clamp_kernel, comic_dilation_size, stamp_dilation_size
from ..ops import ImageOpsProvider


class MorphPolicy(Enum):
    """核尺寸公式选择"""

    STAMP = "stamp"
    COMIC = "comic"


def dilation_size(fraction: float, policy: MorphPolicy) -> int | None:
    """按策略计算核边长，None 表示直通"""
    if policy is MorphPolicy.STAMP:
        return stamp_dilation_size(fraction)
    return comic_dilation_size(fraction)


def thicken(
    ops: ImageOpsProvider,
    binary: np.ndarray,
    fraction: float,
    policy: MorphPolicy
) -> np.ndarray:
    """
    膨胀加粗

    Args:
        ops: 原语提供者
        binary: 二值图 uint8 (H,W)
        fraction: thick_thin / 100
        policy: MorphPolicy.STAMP 或 MorphPolicy.COMIC

    Returns:
        膨胀后的图像；印章策略且 fraction <= 0.5 时原样返回输入
    """
    size = dilation_size(fraction, policy)
    if size is None:
        return binary
    return ops.dilate(binary, clamp_kernel(size, binary.shape))
