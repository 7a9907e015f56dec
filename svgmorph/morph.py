import logging
import os
import tempfile
from collections import namedtuple

from svgmorph import document
from svgmorph.frames import frame_positions, playback_order
from svgmorph.pathdata.interpolate import blend, check_congruent, lerp
from svgmorph.pathdata.pathparser import parse_path
from svgmorph.pathdata.utils import format_number, log
from svgmorph.render import assemble_gif, render_png


class MorphPair(namedtuple('MorphPair', ['start_id', 'end_id', 'kind', 'start', 'end'])):
    """Two shapes of one kind, parsed and ready to blend.

    ``start`` and ``end`` are Paths for 'path' pairs and (cx, cy) centres
    for 'circle' and 'ellipse' pairs.
    """

    def at(self, t):
        if self.kind == 'path':
            return blend(self.start, self.end, t)
        return (lerp(self.start[0], self.end[0], t),
                lerp(self.start[1], self.end[1], t))


def _center(element):
    return (float(element.getAttribute('cx') or 0),
            float(element.getAttribute('cy') or 0))


def prepare_pairs(config, shapes):
    """Parse every configured pair once, leaving out the ones that cannot morph."""
    pairs = []
    for start_id, end_id in config.morph_pairs:
        missing = [shape_id for shape_id in (start_id, end_id) if shape_id not in shapes]
        if missing:
            log('Didn\'t find item with ID "%s"' % missing[0], logging.ERROR)
            continue

        start_element = shapes[start_id]
        end_element = shapes[end_id]
        kind = start_element.tagName

        if kind != end_element.tagName:
            log('ID "%s" and ID "%s" have different types' % (start_id, end_id), logging.ERROR)
            continue

        try:
            if kind == 'path':
                start = parse_path(start_element.getAttribute('d'))
                end = parse_path(end_element.getAttribute('d'))
                check_congruent(start, end)
            else:
                start = _center(start_element)
                end = _center(end_element)
        except ValueError as e:
            log('Cannot morph ID "%s" into ID "%s": %s' % (start_id, end_id, e), logging.ERROR)
            continue

        pairs.append(MorphPair(start_id, end_id, kind, start, end))

    if not pairs:
        log('Nothing to morph', logging.WARNING)
    return pairs


def apply_frame(pairs, shapes, t, precision=None):
    """Write the shapes at position ``t`` onto the end elements and hide the start elements."""
    for pair in pairs:
        end_element = shapes[pair.end_id]
        value = pair.at(t)

        if pair.kind == 'path':
            end_element.setAttribute('d', value.d(precision))
        else:
            end_element.setAttribute('cx', format_number(value[0], precision))
            end_element.setAttribute('cy', format_number(value[1], precision))

        document.hide(shapes[pair.start_id])


def write_frames(config, directory):
    """Write one SVG document per frame into ``directory`` and return their filenames."""
    dom = document.load(config.svg)
    shapes = document.shapes_by_id(dom)
    pairs = prepare_pairs(config, shapes)

    filenames = []
    for num_frame, t in enumerate(frame_positions(config.frames, config.ease)):
        percent = int(100 * (num_frame / config.frames))
        log('%s%%: Frame %s of %s' % (percent, num_frame, config.frames), logging.INFO)

        apply_frame(pairs, shapes, t, config.precision)

        filename = os.path.join(directory, 'frame%06d.svg' % num_frame)
        document.save(dom, filename)
        filenames.append(filename)

    return filenames


def animate(config, output=None):
    """Render the morph described by ``config`` into an animated GIF."""
    output = output or config.output_gif

    with tempfile.TemporaryDirectory(prefix='svgmorph_') as workdir:
        pngs = []
        for svg_filename in write_frames(config, workdir):
            png_filename = os.path.splitext(svg_filename)[0] + '.png'
            render_png(svg_filename, png_filename, config.inkscape)
            pngs.append(png_filename)

        order = playback_order(config.frames, config.loop, config.repeat_end_frames)

        log('Assembling %s' % output, logging.INFO)
        assemble_gif([pngs[i] for i in order], output,
                     config.magick, config.resize_percent, config.delay_cents)

    return output
