import argparse
import logging
import os
import sys

from svgmorph.config import load_config
from svgmorph.morph import animate, write_frames
from svgmorph.pathdata.interpolate import blend
from svgmorph.pathdata.pathparser import parse_path
from svgmorph.pathdata.utils import log, logger
from svgmorph.render import RenderError
from svgmorph.sheet import contact_sheet


def positive_int(value):
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError('%r should be an integer' % value)
    if number < 1:
        raise argparse.ArgumentTypeError('%r should be at least 1' % value)
    return number


def parse_args(args=None):
    parser = argparse.ArgumentParser(prog='svgmorph',
                                     description='Morph SVG shapes into each other')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')
    subparsers.required = True

    animate_parser = subparsers.add_parser('animate', help='Render a morph file into a GIF')
    animate_parser.add_argument('config', help='Morph file')
    animate_parser.add_argument('-o', dest='output', help='Output GIF (default: next to the SVG)')
    animate_parser.add_argument('--svg-frames', dest='svg_frames', metavar='DIR',
                                help='Only write the SVG frames into DIR, skip rendering')

    blend_parser = subparsers.add_parser('blend', help='Print the path data between two paths')
    blend_parser.add_argument('start', help='Start path data')
    blend_parser.add_argument('end', help='End path data')
    blend_parser.add_argument('-t', dest='t', type=float, default=0.5,
                              help='Blend position, 0 is start and 1 is end (default: 0.5)')
    blend_parser.add_argument('--precision', type=int, default=None,
                              help='Decimal places in the output')

    sheet_parser = subparsers.add_parser('sheet', help='Draw all frames of a morph file on one SVG')
    sheet_parser.add_argument('config', help='Morph file')
    sheet_parser.add_argument('-o', dest='output', help='Output SVG', required=True)
    sheet_parser.add_argument('--columns', type=positive_int, default=6,
                              help='Frames per row (default: 6)')

    return parser.parse_args(args)


def run(ns):
    if ns.command == 'blend':
        path = blend(parse_path(ns.start), parse_path(ns.end), ns.t)
        print(path.d(ns.precision))
        return

    config = load_config(ns.config)

    if ns.command == 'animate':
        if ns.svg_frames:
            os.makedirs(ns.svg_frames, exist_ok=True)
            write_frames(config, ns.svg_frames)
        else:
            log('Saved %s' % animate(config, ns.output), logging.INFO)
    elif ns.command == 'sheet':
        contact_sheet(config, ns.output, ns.columns)


def main(args=None):
    ns = parse_args(args)
    logging.basicConfig()
    if ns.verbose:
        logger.setLevel(logging.DEBUG)

    try:
        run(ns)
    except (ValueError, OSError, RenderError) as e:
        log(str(e), logging.ERROR)
        sys.exit(1)


if __name__ == '__main__':
    main()
