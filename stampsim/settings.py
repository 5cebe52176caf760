"""
配置加载与日志设置
"""

import logging
from pathlib import Path
from typing import Any

from omegaconf import DictConfig, OmegaConf

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config" / "default.yaml"


def load_config(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | list[str] | None = None
) -> DictConfig:
    """
    加载配置

    Args:
        config_path: 配置文件路径，默认使用 config/default.yaml；
            自定义文件会合并在默认配置之上
        overrides: 额外覆盖，dict 或 dotlist（如 ["styles.comic.downscale_limit=400"]）

    Returns:
        合并后的 DictConfig
    """
    cfg = OmegaConf.load(DEFAULT_CONFIG_PATH)
    if config_path is not None and Path(config_path) != DEFAULT_CONFIG_PATH:
        cfg = OmegaConf.merge(cfg, OmegaConf.load(config_path))
    if overrides:
        if isinstance(overrides, dict):
            cfg = OmegaConf.merge(cfg, OmegaConf.create(overrides))
        else:
            cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(list(overrides)))
    return cfg


def configure_logging(level: str | int | None = None, cfg: DictConfig | None = None) -> logging.Logger:
    """
    配置日志

    Args:
        level: 日志级别，优先于配置
        cfg: 配置对象，读取 logging.level
    """
    if level is None:
        level = cfg.logging.level if cfg is not None else "WARNING"
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    return logging.getLogger("stampsim")
