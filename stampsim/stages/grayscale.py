"""
灰度化阶段
"""

import numpy as np

from ..ops import ImageOpsProvider

# 0.299/0.587/0.114 的千分比整数权重
LUMA_WEIGHTS = np.array([299, 587, 114], dtype=np.int32)


def to_luma(ops: ImageOpsProvider, image: np.ndarray) -> np.ndarray:
    """
    转为单通道亮度

    Args:
        ops: 原语提供者
        image: RGBA (H,W,4) 或已是单通道的 (H,W)

    Returns:
        uint8 (H,W)
    """
    if image.ndim == 2:
        return image.copy()
    return ops.to_gray(image)


def exact_luma(rgba: np.ndarray) -> np.ndarray:
    """
    按 0.299/0.587/0.114 精确计算亮度，四舍五入（0.5 向上）

    与 cv2.COLOR_RGBA2GRAY 的定点近似不同，结果为精确加权和的四舍五入

    Args:
        rgba: uint8 (H,W,4)

    Returns:
        uint8 (H,W)
    """
    weighted = rgba[:, :, :3].astype(np.int32) @ LUMA_WEIGHTS
    return np.clip((weighted + 500) // 1000, 0, 255).astype(np.uint8)


def luma_rgba(rgba: np.ndarray) -> np.ndarray:
    """RGB 三通道都设为亮度值，alpha 保持不变"""
    gray = exact_luma(rgba)
    out = rgba.copy()
    out[:, :, :3] = gray[:, :, np.newaxis]
    return out


def to_rgba(ops: ImageOpsProvider, gray: np.ndarray) -> np.ndarray:
    """单通道 -> 不透明 RGBA"""
    return ops.gray_to_rgba(gray)
