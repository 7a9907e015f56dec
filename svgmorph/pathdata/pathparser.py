from svgmorph.pathdata.errors import PathStructureError, PathSyntaxError
from svgmorph.pathdata.pathseg import Arc, Cubic, Move, Path, Quadratic
from svgmorph.pathdata.tokenizer import COMMANDS, TokenCursor, UPPERCASE, is_number, tokenize
from svgmorph.pathdata.utils import log

# number of values following each command letter
ARITY = {'M': 2, 'L': 2, 'Q': 4, 'C': 6, 'A': 7, 'Z': 0}

# command implied by bare numbers following the previous one
IMPLICIT = {
    'M': 'L', 'm': 'l',
    'L': 'L', 'l': 'l',
    'Q': 'Q', 'q': 'q',
    'C': 'C', 'c': 'c',
}


def _number(token, position):
    if not is_number(token):
        raise PathSyntaxError('Malformed number', token, position)
    return float(token)


def _flag(token, position):
    if token not in ('0', '1'):
        raise PathSyntaxError('Arc flags must be 0 or 1', token, position)
    return token == '1'


def _move(prev, values, relative, start):
    x, y = values
    if relative and prev is not None:
        return Move.from_relative(prev, x, y)
    # an initial moveto is absolute, even if written as 'm'
    return Move(x, y)


def _line(prev, values, relative, start):
    x, y = values
    if relative:
        x, y = prev.x + x, prev.y + y
    return Cubic.straight(prev, x, y)


def _quadratic(prev, values, relative, start):
    if relative:
        return Quadratic.from_relative(prev, *values)
    return Quadratic(*values)


def _cubic(prev, values, relative, start):
    if relative:
        return Cubic.from_relative(prev, *values)
    return Cubic(*values)


def _arc(prev, values, relative, start):
    if relative:
        return Arc.from_relative(prev, *values)
    return Arc(*values)


def _close(prev, values, relative, start):
    return Cubic.straight(prev, start.x, start.y)


BUILDERS = {
    'M': _move,
    'L': _line,
    'Q': _quadratic,
    'C': _cubic,
    'A': _arc,
    'Z': _close,
}


def _read_values(command, cursor):
    position = cursor.position
    tokens = cursor.take(ARITY[command])
    if command != 'A':
        return [_number(token, position + i) for i, token in enumerate(tokens)]

    rx, ry, rotation, large_arc, sweep, x, y = tokens
    # the rotation is kept as written
    _number(rotation, position + 2)
    return [
        _number(rx, position),
        _number(ry, position + 1),
        rotation,
        _flag(large_arc, position + 3),
        _flag(sweep, position + 4),
        _number(x, position + 5),
        _number(y, position + 6),
    ]


def parse_path(pathdef):
    """Parse path data into a Path of absolute segments.

    Straight segments (L, l, Z, z and the lines implied after a moveto) are
    stored as degenerate cubics; a Line segment is never produced.
    """
    cursor = TokenCursor(tokenize(pathdef))
    if cursor.exhausted:
        raise PathSyntaxError('Empty path data', '', 0)

    segments = []
    last_command = None

    while not cursor.exhausted:
        position = cursor.position
        token = cursor.next()

        if is_number(token):
            # implicit command: the numbers belong to a repetition
            cursor.rewind()
            command = IMPLICIT.get(last_command)
            if command is None:
                raise PathSyntaxError('Unallowed implicit command after %r' % (last_command,),
                                      token, position)
        else:
            command = token

        kind = command.upper()
        if kind not in BUILDERS:
            if token[0] in '0123456789+-.':
                raise PathSyntaxError('Malformed number', token, position)
            if token in COMMANDS:
                raise PathSyntaxError('Unsupported command', token, position)
            raise PathSyntaxError('Unknown command', token, position)

        if kind != 'M' and not segments:
            raise PathStructureError('No current point to draw from', command, position)

        values = _read_values(kind, cursor)
        prev = segments[-1] if segments else None
        start = segments[0] if segments else None
        segments.append(BUILDERS[kind](prev, values, command not in UPPERCASE, start))

        last_command = command

    log('parsed %s segments from %s tokens' % (len(segments), len(cursor)))
    return Path(segments)


__all__ = ['parse_path']
