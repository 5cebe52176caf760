"""
FilterEngine - 滤镜流水线引擎

stampsim 的核心入口：(图像, 风格, 参数) -> 图像 的纯函数式调用。
"""

import logging
import time
from pathlib import Path
from typing import Any

import numpy as np
from omegaconf import DictConfig

from .context import ParameterSet, RasterImage, StyleSelector
from .errors import InvalidInput, OpsUnavailable
from .ops import ImageOpsProvider, create_ops_provider
from .settings import load_config

logger = logging.getLogger(__name__)


class FilterEngine:
    """滤镜流水线引擎"""

    def __init__(self, cfg: DictConfig, ops: ImageOpsProvider):
        """
        初始化引擎

        Args:
            cfg: 配置对象
            ops: 已就绪的原语提供者；构建失败应在此之前抛出
        """
        if ops is None:
            raise OpsUnavailable("引擎需要可用的图像原语提供者")
        self.cfg = cfg
        self.ops = ops

        # 风格过程（延迟加载）
        self._styles = None

    # ==================== 模块懒加载 ====================

    @property
    def styles(self):
        """风格过程表（懒加载）"""
        if self._styles is None:
            from .styles import init_styles
            self._styles = init_styles(self.cfg, self.ops)
        return self._styles

    # ==================== 主处理流程 ====================

    def default_params(self, style: StyleSelector | str | None) -> ParameterSet:
        """风格被选中时的默认参数组"""
        selector = StyleSelector.parse(style)
        if selector is StyleSelector.NONE:
            return ParameterSet()
        return self.styles[selector].default_params()

    def render(
        self,
        source: RasterImage | np.ndarray,
        style: StyleSelector | str | None = StyleSelector.NONE,
        params: ParameterSet | dict[str, Any] | None = None
    ) -> RasterImage:
        """
        渲染单张图像

        Args:
            source: 源图像，RGBA (H,W,4) 或亮度 (H,W)
            style: 风格选择
            params: 参数；None 时使用该风格的默认参数组

        Returns:
            RGBA 结果图像，尺寸与源图像一致；NONE 风格返回源图像副本

        Raises:
            InvalidInput: 零面积图像、非有限参数、未知风格
        """
        if not isinstance(source, RasterImage):
            # 接管所有权，不与调用方共享可变缓冲区
            source = RasterImage(source.copy() if isinstance(source, np.ndarray) else source)
        selector = StyleSelector.parse(style)
        params = self._resolve_params(selector, params)

        if selector is StyleSelector.NONE:
            return source.copy()

        image = source
        if image.layout == "L":
            image = RasterImage(self.ops.gray_to_rgba(image.pixels))

        start = time.perf_counter()
        result = self.styles[selector].apply(image, params)
        logger.debug(
            "Rendered %s %dx%d in %.1f ms",
            selector.value, source.width, source.height,
            (time.perf_counter() - start) * 1000.0,
        )
        return result

    def _resolve_params(
        self,
        selector: StyleSelector,
        params: ParameterSet | dict[str, Any] | None
    ) -> ParameterSet:
        """补全默认参数并夹取到合法范围"""
        if params is None:
            params = self.default_params(selector)
        elif not isinstance(params, ParameterSet):
            try:
                params = ParameterSet.from_mapping(params)
            except (TypeError, ValueError) as e:
                raise InvalidInput(f"无法解析参数: {e}") from e

        validated = params.validated()
        if validated != params:
            logger.info("Parameters clamped: %s -> %s", params.as_dict(), validated.as_dict())
        return validated


def load_engine(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | list[str] | None = None
) -> FilterEngine:
    """
    便捷函数：加载引擎

    Args:
        config_path: 配置文件路径
        overrides: 配置覆盖

    Returns:
        FilterEngine 实例

    Raises:
        OpsUnavailable: 配置的原语后端不可用
    """
    cfg = load_config(config_path, overrides)
    ops = create_ops_provider(cfg.engine.backend)
    return FilterEngine(cfg, ops)


def render(
    source: RasterImage | np.ndarray,
    style: StyleSelector | str | None = StyleSelector.NONE,
    params: ParameterSet | dict[str, Any] | None = None,
    config_path: str | Path | None = None
) -> RasterImage:
    """一次性渲染：每次调用都构建新的引擎，不保留任何状态"""
    return load_engine(config_path).render(source, style, params)
