"""
stampsim - 图像印章/蚀刻/漫画风格模拟器
"""

from .context import ParameterSet, RasterImage, StyleSelector
from .errors import InvalidInput, OpsUnavailable, StampsimError
from .pipeline import FilterEngine, load_engine, render

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "FilterEngine",
    "InvalidInput",
    "OpsUnavailable",
    "ParameterSet",
    "RasterImage",
    "StampsimError",
    "StyleSelector",
    "load_engine",
    "render"
]
