"""
参数映射

把 0~100 的滑块值映射为具体的算法参数（核尺寸、阈值、对比度/亮度系数）。
所有取整使用"四舍五入、0.5 向上"的规则，保证与滑块刻度一一对应。
"""

import math

# 平滑分支基础核尺寸与跨度
SMOOTH_BASE_KERNEL = 5
SMOOTH_KERNEL_SPAN = 10
# 反锐化掩模固定模糊核
SHARPEN_BLUR_KERNEL = 5

CANNY_LOW_MAX = 50.0
CANNY_HIGH_MAX = 150.0

ETCHING_LEVEL_MAX = 128.0
TONE_BRIGHTNESS_SPAN = 50.0


def round_half_up(value: float) -> int:
    """四舍五入（0.5 向上取整），Python 内置 round 是银行家舍入"""
    return int(math.floor(value + 0.5))


def to_fraction(value: float) -> float:
    """滑块值 -> 分数"""
    return value / 100.0


def clamp_level(value: float) -> float:
    """夹取到像素强度范围 [0, 255]"""
    return min(max(value, 0.0), 255.0)


def clamp_kernel(size: int, shape: tuple[int, ...], odd: bool = False) -> int:
    """
    把核边长夹取到图像尺寸以内

    Args:
        size: 期望核边长
        shape: 图像 shape，(H,W) 或 (H,W,C)
        odd: 是否要求奇数（高斯核）

    Returns:
        1 <= k <= min(H, W)
    """
    limit = max(1, min(shape[0], shape[1]))
    k = max(1, min(int(size), limit))
    if odd and k % 2 == 0:
        k -= 1
    return k


def smooth_kernel_size(fraction: float) -> int:
    """平滑分支的高斯核边长，低位强制置 1 保证奇数"""
    return round_half_up(SMOOTH_BASE_KERNEL + SMOOTH_KERNEL_SPAN * (0.5 - fraction)) | 1


def sharpen_weights(fraction: float) -> tuple[float, float]:
    """反锐化掩模权重 (原图权重, 模糊图权重)"""
    return 1.5 + fraction, -0.5 - fraction


def canny_thresholds(fraction: float) -> tuple[float, float]:
    """
    Canny 弱/强阈值

    fraction 可能超出 [0, 1]（蚀刻阈值为负时），此时阈值超过名义上限，
    只做非负夹取。
    """
    low = max(0.0, CANNY_LOW_MAX * (1.0 - fraction))
    high = max(0.0, CANNY_HIGH_MAX * (1.0 - fraction))
    return low, high


def light_dark_level(fraction: float) -> float:
    """明暗滑块对应的二值化切割阈值"""
    return clamp_level(255.0 * (1.0 - fraction))


def etching_level(fraction: float) -> float:
    """蚀刻风格的二值化切割阈值"""
    return clamp_level(ETCHING_LEVEL_MAX * (1.0 - fraction))


def stamp_dilation_size(fraction: float) -> int | None:
    """印章风格膨胀核边长；<= 0.5 时不做形态学处理，返回 None"""
    if fraction <= 0.5:
        return None
    return round_half_up(1 + 2 * (fraction - 0.5))


def comic_dilation_size(fraction: float) -> int:
    """漫画网点膨胀核边长 (1~3)"""
    return round_half_up(1 + 2 * fraction)


def tone_coefficients(fraction: float) -> tuple[float, float]:
    """
    明暗调整系数

    Returns:
        (alpha, beta)：alpha 为对比度 [1, 2]，beta 为亮度偏移 [-25, 25]
    """
    alpha = 1.0 + fraction
    if fraction > 0.5:
        beta = -TONE_BRIGHTNESS_SPAN * (fraction - 0.5)
    else:
        beta = TONE_BRIGHTNESS_SPAN * (0.5 - fraction)
    return alpha, beta


def scaled_size(width: int, height: int, factor: float) -> tuple[int, int]:
    """按比例缩放后的 (width, height)，至少 1x1"""
    return (
        max(1, round_half_up(width * factor)),
        max(1, round_half_up(height * factor)),
    )
