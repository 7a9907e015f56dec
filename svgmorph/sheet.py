import logging

import svgpathtools
from svgwrite import Drawing
from svgwrite.container import Group
from svgwrite.path import Path
from svgwrite.shapes import Ellipse
from svgwrite.text import Text

from svgmorph import document
from svgmorph.frames import frame_positions
from svgmorph.morph import prepare_pairs
from svgmorph.pathdata.pathparser import parse_path
from svgmorph.pathdata.pathseg import Arc, Cubic, Line, Quadratic
from svgmorph.pathdata.utils import format_number, log

MARGIN = 0.1  # fraction of the largest cell side left around each frame


def _measured_segment(prev, segment):
    start = complex(prev.x, prev.y)
    end = complex(segment.x, segment.y)
    if isinstance(segment, Cubic):
        return svgpathtools.CubicBezier(start, complex(segment.c1x, segment.c1y),
                                        complex(segment.c2x, segment.c2y), end)
    if isinstance(segment, Quadratic):
        return svgpathtools.QuadraticBezier(start, complex(segment.cx, segment.cy), end)
    if isinstance(segment, Arc):
        # an arc ending where it starts is not drawn
        if start == end:
            return None
        if segment.rx == 0 or segment.ry == 0:
            return svgpathtools.Line(start, end)
        return svgpathtools.Arc(start, complex(abs(segment.rx), abs(segment.ry)),
                                float(segment.x_axis_rotation),
                                segment.large_arc_flag, segment.sweep_flag, end)
    if isinstance(segment, Line):
        return svgpathtools.Line(start, end)
    return None


def path_bbox(d):
    """(xmin, xmax, ymin, ymax) of path data, None for a lone moveto."""
    path = parse_path(d)
    try:
        measured = [_measured_segment(prev, segment) for prev, segment in zip(path, path[1:])]
        measured = [segment for segment in measured if segment is not None]
        if not measured:
            return None
        return svgpathtools.Path(*measured).bbox()
    except (AssertionError, ArithmeticError) as e:
        log('Cannot measure path "%s": %s' % (d, e), logging.ERROR)
        raise ValueError('Cannot measure path "%s"' % d) from e


def bbox_union(boxes):
    bbox = None
    for box in boxes:
        if box is None:
            continue
        if bbox is None:
            bbox = box
        else:
            bbox = (
                min(box[0], bbox[0]),
                max(box[1], bbox[1]),
                min(box[2], bbox[2]),
                max(box[3], bbox[3])
            )
    return bbox


def _radii(element):
    if element.tagName == 'circle':
        r = float(element.getAttribute('r') or 0)
        return r, r
    return (float(element.getAttribute('rx') or 0),
            float(element.getAttribute('ry') or 0))


def frame_shapes(pairs, shapes, t, precision=None):
    """Blended shapes of one frame as (svgwrite element, bbox) tuples."""
    drawn = []
    for pair in pairs:
        value = pair.at(t)
        if pair.kind == 'path':
            d = value.d(precision)
            drawn.append((Path(d=d), path_bbox(d)))
        else:
            cx, cy = value
            rx, ry = _radii(shapes[pair.end_id])
            drawn.append((Ellipse(center=(cx, cy), r=(rx, ry)),
                          (cx - rx, cx + rx, cy - ry, cy + ry)))
    return drawn


def contact_sheet(config, output, columns=6):
    """Draw every frame of the morph side by side in one SVG document."""
    dom = document.load(config.svg)
    shapes = document.shapes_by_id(dom)
    pairs = prepare_pairs(config, shapes)

    positions = frame_positions(config.frames, config.ease)
    frames = [frame_shapes(pairs, shapes, t, config.precision) for t in positions]

    bbox = bbox_union(box for frame in frames for _, box in frame)
    if bbox is None:
        raise ValueError('Nothing to draw on the contact sheet')

    width = bbox[1] - bbox[0]
    height = bbox[3] - bbox[2]
    margin = MARGIN * max(width, height, 1)
    cell_w = width + 2 * margin
    cell_h = height + 2 * margin

    columns = max(1, min(columns, len(frames)))
    rows = (len(frames) + columns - 1) // columns

    dwg = Drawing(output, profile='full',
                  size=(cell_w * columns, cell_h * rows),
                  viewBox='0 0 %s %s' % (format_number(cell_w * columns), format_number(cell_h * rows)))

    stroke_width = max(cell_w, cell_h) / 200
    for num_frame, (t, frame) in enumerate(zip(positions, frames)):
        col = num_frame % columns
        row = num_frame // columns

        group = Group()
        for element, _ in frame:
            element.stroke(color='black', width=stroke_width)
            element.fill(opacity=0)
            group.add(element)
        group.translate(col * cell_w + margin - bbox[0], row * cell_h + margin - bbox[2])
        dwg.add(group)

        label = Text('t=%.2f' % t, insert=(col * cell_w + stroke_width, (row + 1) * cell_h - stroke_width),
                     font_size=margin / 2)
        dwg.add(label)

    log('Saving contact sheet %s' % output, logging.INFO)
    dwg.save(pretty=True)
    return output
