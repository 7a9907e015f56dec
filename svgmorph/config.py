import logging
import os

from svgmorph.frames import EASINGS
from svgmorph.pathdata.utils import log


class ConfigError(ValueError):
    def __init__(self, message, line=None):
        if line is not None:
            message = 'line %s: %s' % (line, message)
        super().__init__(message)
        self.line = line


class MorphConfig:
    svg = None
    frames = 60
    base_filename = None
    delay_cents = 2
    ease = 'linear'
    loop = True
    resize_percent = '20'
    repeat_end_frames = 1
    precision = None
    inkscape = 'inkscape'
    magick = 'magick'

    def __init__(self):
        self.morph_pairs = []

    @property
    def output_gif(self):
        base = self.base_filename
        if not base:
            base = os.path.splitext(os.path.basename(self.svg))[0]
        return os.path.join(os.path.dirname(self.svg), base + '.gif')


TRUE_VALUES = ('true', 'yes', 'on', '1')
FALSE_VALUES = ('false', 'no', 'off', '0')


def _to_int(value, line, minimum=None):
    try:
        number = int(value)
    except ValueError:
        raise ConfigError('%r should be an integer' % value, line)
    if minimum is not None and number < minimum:
        raise ConfigError('%r should be at least %s' % (value, minimum), line)
    return number


def _to_bool(value, line):
    lowered = value.lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ConfigError('%r should be true or false' % value, line)


def _morph_pair(value, line):
    ids = value.split(',', 1)
    if len(ids) != 2 or not ids[0].strip() or not ids[1].strip():
        raise ConfigError('morph should be in the form START_ID, END_ID', line)
    return ids[0].strip(), ids[1].strip()


def _ease(value, line):
    ease = value.lower()
    if ease not in EASINGS:
        raise ConfigError('unknown ease %r, expected one of %s' % (
            value, ', '.join(sorted(EASINGS))), line)
    return ease


def parse_config(lines, base_dir=''):
    """Build a MorphConfig from the lines of a morph file.

    lines     iterable of 'key: value' lines ('#' starts a comment)
    base_dir  directory a relative svg filename is resolved against
    """
    config = MorphConfig()

    for number, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith('#'):
            continue

        tokens = stripped.split(':', 1)
        if len(tokens) != 2:
            continue

        key = tokens[0].strip().lower()
        value = tokens[1].strip()

        if key == 'svg':
            config.svg = os.path.join(base_dir, value)
        elif key == 'morph':
            config.morph_pairs.append(_morph_pair(value, number))
        elif key == 'frames':
            config.frames = _to_int(value, number, minimum=1)
        elif key == 'base filename':
            config.base_filename = value
        elif key == 'delay cents':
            config.delay_cents = _to_int(value, number, minimum=0)
        elif key == 'ease':
            config.ease = _ease(value, number)
        elif key == 'loop':
            config.loop = _to_bool(value, number)
        elif key == 'resize percent':
            config.resize_percent = value
        elif key == 'repeat end frames':
            config.repeat_end_frames = _to_int(value, number, minimum=1)
        elif key == 'precision':
            config.precision = _to_int(value, number, minimum=0)
        elif key == 'inkscape':
            config.inkscape = value
        elif key == 'magick':
            config.magick = value
        else:
            log('Unidentified key "%s"' % key, logging.ERROR)

    if not config.svg:
        raise ConfigError('no svg file given')

    return config


def load_config(filename):
    with open(filename, 'r') as config_file:
        return parse_config(config_file, os.path.dirname(filename))
