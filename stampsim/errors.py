"""
异常定义
"""


class StampsimError(Exception):
    """所有 stampsim 异常的基类"""


class InvalidInput(StampsimError, ValueError):
    """输入图像或参数无效（零面积、非有限值、未知风格等）"""


class OpsUnavailable(StampsimError, RuntimeError):
    """图像原语后端不可用，引擎无法构建"""
