"""
Styles 模块 - 风格过程

职责：
- 灰度、蚀刻、印章、漫画四种风格
- 每种风格是 stages 的固定顺序组合
- 提供各风格的默认参数组
"""

from .base import BaseStyle, init_styles
from .grayscale import GrayscaleStyle
from .etching import EtchingStyle
from .stamp import StampStyle
from .comic import ComicStyle

__all__ = [
    "BaseStyle",
    "init_styles",
    "GrayscaleStyle",
    "EtchingStyle",
    "StampStyle",
    "ComicStyle"
]
