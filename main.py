import logging
import colorlog
import argparse
import sys
from typing import List, Optional
from drawing.config import RenderConfig
from drawing.surface import ImageSurface
from maths.curves.curve import BezierCurve
from maths.curves.degree_reduction import DegreeReducer, WEIGHT_POLICIES
from maths.curves.sampler import AdaptiveSampler, SamplerConfig
from maths.point import Point
from maths.point_sequence import ControlPoints
from utils.utils import parse_color, parse_points


def setup_logging(level: int = logging.INFO):
    handler = colorlog.StreamHandler()
    handler.setFormatter(colorlog.ColoredFormatter(
        '%(blue)s[%(asctime)s]%(reset)s %(log_color)s[%(levelname)s]%(reset)s %(purple)s[%(filename)s:%(lineno)d]%(reset)s: %(message)s',
        datefmt='%H:%M:%S',
        log_colors={
            'DEBUG': 'cyan',
            'INFO': 'green',
            'WARNING': 'yellow',
            'ERROR': 'red',
            'CRITICAL': 'red,bg_white',
        },
        secondary_log_colors={
            'message': {
                'DEBUG': 'cyan',
                'INFO': 'green',
                'WARNING': 'yellow',
                'ERROR': 'red',
                'CRITICAL': 'red',
            }
        },
        style='%'
    ))

    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers = [handler]


def reduce_curve(points: List[Point], times: int = 1, policy: str = 'linear') -> List[Point]:
    reducer = DegreeReducer(weights=WEIGHT_POLICIES[policy])
    curve = BezierCurve(ControlPoints(points))
    for _ in range(times):
        curve.reduce_degree(reducer)
    return list(curve.control_points)


def render_curve(points: List[Point], config: RenderConfig, sampler_config: SamplerConfig,
                 reductions: int = 0, policy: str = 'linear') -> ImageSurface:
    surface = ImageSurface(config.width, config.height, config.background)
    sampler = AdaptiveSampler(config=sampler_config)

    original = BezierCurve(ControlPoints(points), sampler, config.curve_color)
    original.draw(surface)
    logging.info(f"Drew curve of degree {len(points) - 1}")

    if reductions > 0:
        reduced = BezierCurve(ControlPoints(reduce_curve(points, reductions, policy)), sampler,
                              config.reduced_curve_color)
        reduced.draw(surface)
        logging.info(f"Drew reduced curve of degree {len(reduced.control_points) - 1}")

    if config.draw_control_points:
        surface.draw_markers(points, config.control_point_color)

    surface.save(config.output_path)
    return surface


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description='Bezier curve sampling and degree reduction')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    render_parser = subparsers.add_parser('render', help='Render a curve to an image')
    render_parser.add_argument('points', nargs='+', help='Control points as x,y')
    render_parser.add_argument('--output', default='curve.png', help='Output image path')
    render_parser.add_argument('--width', type=int, default=800, help='Image width')
    render_parser.add_argument('--height', type=int, default=600, help='Image height')
    render_parser.add_argument('--color', default='0,0,0', help='Curve color as b,g,r')
    render_parser.add_argument('--reduce', type=int, default=0, help='Also draw the curve reduced this many times')
    render_parser.add_argument('--policy', choices=sorted(WEIGHT_POLICIES), default='linear', help='Blend weight policy')
    render_parser.add_argument('--step', type=float, default=0.01, help='Initial sampling step')
    render_parser.add_argument('--draw-control-points', action='store_true', help='Mark the control points')

    reduce_parser = subparsers.add_parser('reduce', help='Reduce the degree of a curve')
    reduce_parser.add_argument('points', nargs='+', help='Control points as x,y')
    reduce_parser.add_argument('--times', type=int, default=1, help='Number of degree reductions')
    reduce_parser.add_argument('--policy', choices=sorted(WEIGHT_POLICIES), default='linear', help='Blend weight policy')

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        if args.command == 'render':
            config = RenderConfig(
                width=args.width,
                height=args.height,
                curve_color=parse_color(args.color),
                draw_control_points=args.draw_control_points,
                output_path=args.output
            )
            render_curve(
                points=parse_points(args.points),
                config=config,
                sampler_config=SamplerConfig(initial_step=args.step),
                reductions=args.reduce,
                policy=args.policy
            )
        elif args.command == 'reduce':
            reduced = reduce_curve(parse_points(args.points), times=args.times, policy=args.policy)
            for point in reduced:
                logging.info(f"{point.x:.6f},{point.y:.6f}")
        else:
            logging.error("Please specify a command. Use --help for more information.")
            return 1
    except (ValueError, IOError) as e:
        logging.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
