"""
ImageOpsProvider - 图像原语接口

引擎只依赖这里声明的同步纯函数，不关心具体由哪个图像库实现。
所有方法都不修改输入，返回新分配的 uint8 数组。
"""

from abc import ABC, abstractmethod

import numpy as np


class ImageOpsProvider(ABC):
    """图像原语提供者基类"""

    name = "base"

    @abstractmethod
    def to_gray(self, rgba: np.ndarray) -> np.ndarray:
        """RGBA (H,W,4) -> 亮度 (H,W)，luma = 0.299R + 0.587G + 0.114B"""

    @abstractmethod
    def gray_to_rgba(self, gray: np.ndarray) -> np.ndarray:
        """亮度 (H,W) -> RGBA (H,W,4)，alpha = 255"""

    @abstractmethod
    def gaussian_blur(self, image: np.ndarray, ksize: int, sigma: float = 0.0) -> np.ndarray:
        """
        方形高斯模糊

        Args:
            image: 输入图像
            ksize: 奇数核边长
            sigma: 标准差，0 表示由核尺寸推导
        """

    @abstractmethod
    def add_weighted(
        self,
        src1: np.ndarray,
        alpha: float,
        src2: np.ndarray,
        beta: float,
        gamma: float = 0.0
    ) -> np.ndarray:
        """saturate(src1*alpha + src2*beta + gamma)"""

    @abstractmethod
    def canny(self, gray: np.ndarray, low: float, high: float) -> np.ndarray:
        """滞后阈值 Canny 边缘检测，输出 0/255"""

    @abstractmethod
    def threshold(self, gray: np.ndarray, level: float) -> np.ndarray:
        """固定阈值二值化：> level 为 255，否则为 0"""

    @abstractmethod
    def dilate(self, image: np.ndarray, ksize: int) -> np.ndarray:
        """方形结构元素膨胀，锚点居中"""

    @abstractmethod
    def resize(self, image: np.ndarray, size: tuple[int, int], interpolation: str = "area") -> np.ndarray:
        """
        缩放

        Args:
            image: 输入图像
            size: 目标 (width, height)
            interpolation: "area" | "nearest"
        """

    @abstractmethod
    def invert(self, image: np.ndarray) -> np.ndarray:
        """255 - x"""
