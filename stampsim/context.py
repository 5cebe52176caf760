"""
Context - 核心数据结构

贯穿整个滤镜流水线的图像、风格选择与参数定义。
"""

from dataclasses import dataclass, fields, replace
from enum import Enum
import math
import numbers

import numpy as np
from omegaconf import DictConfig, OmegaConf

from .errors import InvalidInput


@dataclass
class RasterImage:
    """8 位栅格图像，RGBA (H,W,4) 或单通道亮度 (H,W)"""

    pixels: np.ndarray

    def __post_init__(self):
        """校验形状，必要时转换为 uint8"""
        pixels = self.pixels
        if pixels is None:
            raise InvalidInput("图像数据不能为空")
        pixels = np.asarray(pixels)

        if pixels.ndim == 3 and pixels.shape[2] == 1:
            pixels = pixels[:, :, 0]
        if pixels.ndim not in (2, 3) or (pixels.ndim == 3 and pixels.shape[2] != 4):
            raise InvalidInput(f"图像必须是 (H,W,4) 或 (H,W) 格式，当前: {pixels.shape}")
        if pixels.shape[0] == 0 or pixels.shape[1] == 0:
            raise InvalidInput(f"图像面积不能为零，当前: {pixels.shape}")

        if pixels.dtype != np.uint8:
            if not np.issubdtype(pixels.dtype, np.number) or np.issubdtype(pixels.dtype, np.complexfloating):
                raise InvalidInput(f"不支持的像素类型: {pixels.dtype}")
            if not np.all(np.isfinite(pixels)):
                raise InvalidInput("像素值必须是有限数值")
            pixels = np.clip(np.rint(pixels), 0, 255).astype(np.uint8)

        self.pixels = np.ascontiguousarray(pixels)

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def channels(self) -> int:
        return 1 if self.pixels.ndim == 2 else int(self.pixels.shape[2])

    @property
    def layout(self) -> str:
        """布局标识：RGBA 或 L"""
        return "L" if self.channels == 1 else "RGBA"

    @property
    def size(self) -> tuple[int, int]:
        """(width, height)，与 cv2.resize 的 dsize 顺序一致"""
        return self.width, self.height

    def copy(self) -> "RasterImage":
        return RasterImage(self.pixels.copy())

    def __eq__(self, other):
        if not isinstance(other, RasterImage):
            return NotImplemented
        return self.pixels.shape == other.pixels.shape and np.array_equal(self.pixels, other.pixels)


class StyleSelector(str, Enum):
    """风格选择器"""

    NONE = "none"
    GRAYSCALE = "grayscale"
    ETCHING = "etching"
    STAMP = "stamp"
    COMIC = "comic"

    @classmethod
    def parse(cls, value) -> "StyleSelector":
        """
        解析风格标识

        Args:
            value: StyleSelector、风格名（不区分大小写）或 None

        Returns:
            StyleSelector

        Raises:
            InvalidInput: 未知风格
        """
        if value is None:
            return cls.NONE
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        raise InvalidInput(f"未知风格: {value!r}")


# 滑块取值范围
SLIDER_RANGE = (0.0, 100.0)
ETCHING_THRESHOLD_RANGE = (-50.0, 100.0)


@dataclass(frozen=True)
class ParameterSet:
    """四个连续控制量 + 蚀刻阈值，均为 0~100 的整数刻度"""

    smooth_sharp: float = 39      # 0=最平滑, 100=最锐利
    light_dark: float = 50        # 0=最亮, 100=最暗
    thick_thin: float = 61        # 0=最细, 100=最粗
    dense_sparse: float = 50      # 0=最密, 100=最疏
    etching_threshold: float = 25  # -50~100，仅蚀刻风格使用

    @classmethod
    def from_mapping(cls, values) -> "ParameterSet":
        """从 dict / DictConfig 构建，忽略未知键"""
        if isinstance(values, DictConfig):
            values = OmegaConf.to_container(values, resolve=True)
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in dict(values).items() if k in names})

    def validated(self) -> "ParameterSet":
        """
        返回夹取到合法范围后的副本

        Raises:
            InvalidInput: 字段不是有限数值
        """
        clamped = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidInput(f"参数 {f.name} 必须是数值，当前: {value!r}")
            if not math.isfinite(value):
                raise InvalidInput(f"参数 {f.name} 必须是有限数值，当前: {value!r}")
            lo, hi = ETCHING_THRESHOLD_RANGE if f.name == "etching_threshold" else SLIDER_RANGE
            clamped[f.name] = min(max(value, lo), hi)
        return replace(self, **clamped)

    def as_dict(self) -> dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
