"""
stampsim 命令行

使用方法:
    stampsim input.png output.png --style stamp

示例:
    stampsim photo.jpg comic.png --style comic --light-dark 30
    stampsim --create-sample sample_etching.png --style etching --threshold 10
"""

import argparse
import logging
import sys
from pathlib import Path

import numpy as np
from PIL import Image

from .context import StyleSelector
from .errors import StampsimError
from .pipeline import load_engine
from .settings import configure_logging

logger = logging.getLogger(__name__)

# 参数名 -> argparse dest
PARAM_ARGS = {
    "smooth_sharp": "smooth_sharp",
    "light_dark": "light_dark",
    "thick_thin": "thick_thin",
    "dense_sparse": "dense_sparse",
    "etching_threshold": "threshold",
}


def create_sample_image(width: int = 320, height: int = 240) -> np.ndarray:
    """
    创建一个示例图像（渐变天空、建筑、窗户、道路）

    Returns:
        uint8 RGBA 图像
    """
    img = np.zeros((height, width, 4), dtype=np.uint8)
    img[:, :, 3] = 255

    # 天空（上部 30%）- 蓝色渐变
    sky_height = int(height * 0.3)
    ratio = np.linspace(0.0, 1.0, sky_height, endpoint=False)[:, np.newaxis]
    img[:sky_height, :, 0] = (135 + 50 * ratio).astype(np.uint8)
    img[:sky_height, :, 1] = (206 - 30 * ratio).astype(np.uint8)
    img[:sky_height, :, 2] = (235 - 20 * ratio).astype(np.uint8)

    # 建筑（左侧）- 灰色
    building_bottom = int(height * 0.75)
    building_right = int(width * 0.4)
    img[sky_height:building_bottom, :building_right, :3] = (150, 140, 130)

    # 窗户
    for wy in range(sky_height + 10, building_bottom - 20, 30):
        for wx in range(15, building_right - 15, 30):
            img[wy:wy + 15, wx:wx + 12, :3] = (100, 150, 200)

    # 植被（右侧）- 绿色
    img[int(height * 0.35):building_bottom, int(width * 0.45):, :3] = (34, 139, 34)

    # 道路（底部）- 深灰色 + 标线
    img[building_bottom:, :, :3] = 80
    line_y = int(height * 0.85)
    for x in range(0, width, 40):
        img[line_y - 2:line_y + 2, x:x + 20, :3] = 255

    return img


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="stampsim", description="图像印章/蚀刻/漫画风格模拟")
    parser.add_argument("input", nargs="?", help="输入图像路径")
    parser.add_argument("output", nargs="?", default="output.png", help="输出图像路径")
    parser.add_argument(
        "--style",
        default=StyleSelector.STAMP.value,
        choices=[s.value for s in StyleSelector],
        help="风格",
    )
    parser.add_argument("--smooth-sharp", type=float, help="平滑/锐化 0~100")
    parser.add_argument("--light-dark", type=float, help="明/暗 0~100")
    parser.add_argument("--thick-thin", type=float, help="粗/细 0~100")
    parser.add_argument("--dense-sparse", type=float, help="密/疏 0~100")
    parser.add_argument("--threshold", type=float, help="蚀刻阈值 -50~100")
    parser.add_argument("--config", help="配置文件路径")
    parser.add_argument("--create-sample", action="store_true", help="使用合成示例图像作为输入")
    parser.add_argument("--log-level", default=None, help="日志级别")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # 只给了一个位置参数时，视为输出路径
    if args.create_sample and args.input is not None and args.output == "output.png":
        args.input, args.output = None, args.input

    try:
        engine = load_engine(args.config)
        configure_logging(args.log_level, engine.cfg)

        if args.create_sample or args.input is None:
            logger.info("Using generated sample image")
            source = create_sample_image()
        else:
            logger.info("Loading %s", args.input)
            with Image.open(args.input) as img:
                source = np.array(img.convert("RGBA"))

        params = engine.default_params(args.style).as_dict()
        for name, dest in PARAM_ARGS.items():
            value = getattr(args, dest)
            if value is not None:
                params[name] = value

        result = engine.render(source, args.style, params)

        output_path = Path(args.output)
        Image.fromarray(result.pixels).save(output_path)
        logger.info("Saved %s", output_path)
    except (StampsimError, OSError) as e:
        print(f"stampsim: error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
