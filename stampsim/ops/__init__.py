"""
Ops 模块 - 图像原语

职责：
- 定义引擎依赖的原语接口 ImageOpsProvider
- 提供 OpenCV 实现
- 按配置名称解析后端
"""

from .base import ImageOpsProvider
from ..errors import OpsUnavailable


def create_ops_provider(name: str = "opencv") -> ImageOpsProvider:
    """
    按名称创建原语后端

    Args:
        name: 后端名称，目前支持 "opencv"

    Returns:
        ImageOpsProvider 实例

    Raises:
        OpsUnavailable: 未知后端
    """
    if name == "opencv":
        from .opencv import OpenCVOps
        return OpenCVOps()
    raise OpsUnavailable(f"未知的图像原语后端: {name!r}")


__all__ = [
    "ImageOpsProvider",
    "create_ops_provider"
]
