"""
OpenCVOps - 基于 OpenCV 的图像原语实现
"""

import cv2
import numpy as np

from .base import ImageOpsProvider


class OpenCVOps(ImageOpsProvider):
    """OpenCV 后端"""

    name = "opencv"

    INTERPOLATIONS = {
        "area": cv2.INTER_AREA,
        "nearest": cv2.INTER_NEAREST,
    }

    def to_gray(self, rgba: np.ndarray) -> np.ndarray:
        return cv2.cvtColor(rgba, cv2.COLOR_RGBA2GRAY)

    def gray_to_rgba(self, gray: np.ndarray) -> np.ndarray:
        return cv2.cvtColor(gray, cv2.COLOR_GRAY2RGBA)

    def gaussian_blur(self, image: np.ndarray, ksize: int, sigma: float = 0.0) -> np.ndarray:
        return cv2.GaussianBlur(image, (ksize, ksize), sigma, sigmaY=sigma)

    def add_weighted(
        self,
        src1: np.ndarray,
        alpha: float,
        src2: np.ndarray,
        beta: float,
        gamma: float = 0.0
    ) -> np.ndarray:
        # uint8 输入时 OpenCV 自动饱和到 [0, 255]
        return cv2.addWeighted(src1, alpha, src2, beta, gamma)

    def canny(self, gray: np.ndarray, low: float, high: float) -> np.ndarray:
        return cv2.Canny(gray, low, high)

    def threshold(self, gray: np.ndarray, level: float) -> np.ndarray:
        _, binary = cv2.threshold(gray, level, 255, cv2.THRESH_BINARY)
        return binary

    def dilate(self, image: np.ndarray, ksize: int) -> np.ndarray:
        kernel = cv2.getStructuringElement(cv2.MORPH_RECT, (ksize, ksize))
        return cv2.dilate(image, kernel, iterations=1)

    def resize(self, image: np.ndarray, size: tuple[int, int], interpolation: str = "area") -> np.ndarray:
        if interpolation not in self.INTERPOLATIONS:
            raise ValueError(f"不支持的插值方式: {interpolation}")
        # cv2.resize 使用 (width, height)
        return cv2.resize(image, size, interpolation=self.INTERPOLATIONS[interpolation])

    def invert(self, image: np.ndarray) -> np.ndarray:
        return cv2.bitwise_not(image)
