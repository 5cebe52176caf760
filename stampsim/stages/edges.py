"""
边缘检测阶段
"""

import logging

import numpy as np

from ..mapping import canny_thresholds
from ..ops import ImageOpsProvider

logger = logging.getLogger(__name__)


def detect_edges(ops: ImageOpsProvider, gray: np.ndarray, fraction: float) -> np.ndarray:
    """
    Canny 边缘检测，密度由 fraction 控制

    Args:
        ops: 原语提供者
        gray: uint8 (H,W)
        fraction: 0=最密，1=最疏；蚀刻阈值为负时可小于 0

    Returns:
        边缘图 uint8 (H,W)，取值 0/255
    """
    low, high = canny_thresholds(fraction)
    logger.debug("Canny thresholds low=%.2f high=%.2f", low, high)
    return ops.canny(gray, low, high)
