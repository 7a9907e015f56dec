from svgmorph.pathdata.utils import format_number


def render(path, precision=None):
    """Write ``path`` back as path data.

    Absolute upper case commands only, one space between fields, no
    trailing whitespace. Straight segments come out as the degenerate
    cubics the parser turned them into.
    """
    return ' '.join(render_segment(segment, precision) for segment in path)


def render_segment(segment, precision=None):
    return segment.d(precision)


__all__ = ['render', 'render_segment', 'format_number']
