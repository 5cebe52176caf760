"""
BaseStyle - 风格过程基类

定义风格过程的通用接口，每个风格是对 stages 的固定顺序组合。
"""

from abc import ABC, abstractmethod

from omegaconf import DictConfig

from ..context import ParameterSet, RasterImage, StyleSelector
from ..ops import ImageOpsProvider


class BaseStyle(ABC):
    """风格过程基类"""

    selector: StyleSelector = StyleSelector.NONE

    def __init__(self, cfg: DictConfig, ops: ImageOpsProvider):
        """
        初始化风格过程

        Args:
            cfg: 完整配置对象，风格自身的配置位于 cfg.styles.<name>
            ops: 原语提供者
        """
        self.cfg = cfg
        self.style_cfg = cfg.get("styles", {}).get(self.selector.value, {})
        self.ops = ops

    @property
    def style_id(self) -> str:
        return self.selector.value

    def default_params(self) -> ParameterSet:
        """该风格被选中时启用的默认参数组"""
        defaults = self.style_cfg.get("defaults", None)
        if defaults is None:
            return ParameterSet()
        return ParameterSet.from_mapping(defaults)

    @abstractmethod
    def apply(self, image: RasterImage, params: ParameterSet) -> RasterImage:
        """
        对图像执行风格过程

        Args:
            image: RGBA 源图像
            params: 已校验的参数

        Returns:
            RGBA 结果图像，与源图像同尺寸
        """


def init_styles(cfg: DictConfig, ops: ImageOpsProvider) -> dict[StyleSelector, BaseStyle]:
    """
    初始化全部风格过程

    Args:
        cfg: 配置对象
        ops: 原语提供者

    Returns:
        {StyleSelector: style} 字典（不含 NONE）
    """
    from .grayscale import GrayscaleStyle
    from .etching import EtchingStyle
    from .stamp import StampStyle
    from .comic import ComicStyle

    styles = {}
    for style_cls in (GrayscaleStyle, EtchingStyle, StampStyle, ComicStyle):
        styles[style_cls.selector] = style_cls(cfg, ops)
    return styles
