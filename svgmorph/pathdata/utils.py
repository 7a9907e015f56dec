import logging

TOL = pow(10, -9)  # Floating point error is likely to be above 1 epsilon


def almost_equal(a, b, tolerance=TOL):
    if a is None and b is None: return True
    return abs(a - b) < tolerance


def lerp(a, b, t):
    return a + (b - a) * t


def format_number(value, precision=None):
    """Shortest decimal text that reads back as the same float.

    value      the number to write
    precision  round to this many decimal places first (default: keep all)

    Integral values lose their trailing '.0' and negative zero is written
    as '0'.
    """
    value = float(value)
    if precision is not None:
        value = round(value, precision)
    if value == 0:
        value = 0.0
    text = repr(value)
    if text.endswith('.0'):
        text = text[:-2]
    return text


logger = logging.getLogger('svgmorph')
logger.setLevel(logging.INFO)


def log(msg, level=logging.DEBUG):
    logger.log(level, msg)
