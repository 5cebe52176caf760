"""
二值化阶段
"""

import numpy as np

from ..mapping import clamp_level
from ..ops import ImageOpsProvider


def binarize(ops: ImageOpsProvider, gray: np.ndarray, level: float) -> np.ndarray:
    """固定阈值二值化，level 先夹取到 [0, 255]"""
    return ops.threshold(gray, clamp_level(level))


def invert(ops: ImageOpsProvider, image: np.ndarray) -> np.ndarray:
    """反相，黑线白底"""
    return ops.invert(image)
