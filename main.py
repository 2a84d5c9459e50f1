"""
imago
Haar-wavelet image compression and simple image operations.
"""

import argparse
import logging
import sys
import warnings

warnings.filterwarnings('ignore', category=RuntimeWarning)

COLOR_OPS = ('red', 'green', 'blue', 'gray-value', 'gray-intensity', 'brighten')
KERNELS = ('blur', 'sharpen', 'edges')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='imago', description=__doc__.strip().splitlines()[-1])
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('compress', help='Haar-wavelet lossy compression')
    p.add_argument('input', nargs='?', help='input image path (ignored with --synthetic)')
    p.add_argument('output', help='output image path')
    p.add_argument('--ratio', type=float, default=0.5, help='quantile of coefficients to zero, in [0, 1]')
    p.add_argument('--synthetic', choices=('checkerboard', 'stripes', 'gradient', 'noise'),
                   help='use a generated image instead of INPUT')
    p.add_argument('--workers', type=int, default=None, help='thread count (default: IMAGO_MAX_WORKERS)')

    p = sub.add_parser('flip', help='mirror the image')
    p.add_argument('input')
    p.add_argument('output')
    p.add_argument('--axis', choices=('horizontal', 'vertical'), default='horizontal')

    p = sub.add_parser('color', help='per-pixel color operation')
    p.add_argument('input')
    p.add_argument('output')
    p.add_argument('--op', choices=COLOR_OPS, required=True)
    p.add_argument('--amount', type=float, default=0.1, help='brighten amount')

    p = sub.add_parser('filter', help='3x3 convolution filter')
    p.add_argument('input')
    p.add_argument('output')
    p.add_argument('--kernel', choices=KERNELS, required=True)

    return parser


def run_compress(args, logger):
    from models.compression_params import CompressionParams
    from engines.pipeline import compress_reconstruct
    from utils.config import SETTINGS
    from utils.image_io import load_image, save_image
    from utils.test_images import generate_demo_image

    if args.synthetic:
        logger.info("Generating %s test image...", args.synthetic)
        image = generate_demo_image(args.synthetic)
    else:
        logger.info("Loading: %s", args.input)
        image = load_image(args.input)

    params = CompressionParams(
        ratio=args.ratio,
        max_workers=SETTINGS.max_workers if args.workers is None else args.workers,
    )
    result, _ = compress_reconstruct(image, params)

    print(f"Image:     {image.width}x{image.height}")
    print(f"Ratio:     {params.ratio}")
    print(f"PSNR RGB:  {result.psnr_rgb:.2f} dB")
    print(f"SSIM RGB:  {result.ssim_rgb:.4f}")
    print(f"Zeroed:    {result.zeroed_coeffs}/{result.total_coeffs} ({result.zeroed_fraction:.1%})")
    print(f"Time:      {result.encode_time_ms + result.decode_time_ms:.2f} ms")

    save_image(result.reconstructed_image, args.output)
    logger.info("Saved: %s", args.output)


def run_transform(args, logger):
    from engines import color_ops, convolution, geometry
    from utils.image_io import load_image, save_image

    image = load_image(args.input)
    if args.command == 'flip':
        op = geometry.horizontal_flip if args.axis == 'horizontal' else geometry.vertical_flip
        out = op(image)
    elif args.command == 'color':
        ops = {
            'red': color_ops.get_red,
            'green': color_ops.get_green,
            'blue': color_ops.get_blue,
            'gray-value': color_ops.grayscale_by_value,
            'gray-intensity': color_ops.grayscale_by_intensity,
            'brighten': lambda img: color_ops.brighten(img, args.amount),
        }
        out = ops[args.op](image)
    else:
        ops = {
            'blur': convolution.blur,
            'sharpen': convolution.sharpen,
            'edges': convolution.detect_edges,
        }
        out = ops[args.kernel](image)

    save_image(out, args.output)
    logger.info("Saved: %s", args.output)


def main(argv=None) -> int:
    from models.errors import ImagoError
    from utils.config import configure_logging

    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == 'compress' and args.input is None and args.synthetic is None:
        parser.error("compress needs INPUT or --synthetic")

    logger = logging.getLogger("imago")
    try:
        logger = configure_logging()
        if args.command == 'compress':
            run_compress(args, logger)
        else:
            run_transform(args, logger)
    except (ImagoError, ValueError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
