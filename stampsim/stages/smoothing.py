"""
平滑 / 锐化阶段

smooth_sharp < 0.5 走高斯模糊，>= 0.5 走反锐化掩模。
"""

import numpy as np

from ..mapping import (
    SHARPEN_BLUR_KERNEL,
    clamp_kernel,
    sharpen_weights,
    smooth_kernel_size,
)
from ..ops import ImageOpsProvider


def gaussian_blur(ops: ImageOpsProvider, image: np.ndarray, ksize: int, sigma: float = 0.0) -> np.ndarray:
    """核尺寸夹取到图像尺寸以内的高斯模糊"""
    k = clamp_kernel(ksize, image.shape, odd=True)
    return ops.gaussian_blur(image, k, sigma)


def unsharp_mask(ops: ImageOpsProvider, image: np.ndarray, fraction: float) -> np.ndarray:
    """
    反锐化掩模

    sharpened = src*(1.5+f) + blurred*(-0.5-f)，结果饱和到 [0, 255]
    """
    blurred = gaussian_blur(ops, image, SHARPEN_BLUR_KERNEL)
    w_orig, w_blur = sharpen_weights(fraction)
    return ops.add_weighted(image, w_orig, blurred, w_blur, 0.0)


def smooth_or_sharpen(ops: ImageOpsProvider, image: np.ndarray, fraction: float) -> np.ndarray:
    """
    根据平滑/锐化分数选择分支

    Args:
        ops: 原语提供者
        image: uint8 图像
        fraction: smooth_sharp / 100，0=最平滑，1=最锐利

    Returns:
        新的 uint8 图像，尺寸不变
    """
    if fraction < 0.5:
        return gaussian_blur(ops, image, smooth_kernel_size(fraction))
    return unsharp_mask(ops, image, fraction)
