from svgmorph.pathdata.errors import SegmentCountMismatch, SegmentTypeMismatch
from svgmorph.pathdata.pathseg import Path
from svgmorph.pathdata.utils import lerp


def check_congruent(path_a, path_b):
    """Raise a CongruenceError unless both paths have the same segment kinds in the same order."""
    if len(path_a) != len(path_b):
        raise SegmentCountMismatch(len(path_a), len(path_b))

    for i, (seg_a, seg_b) in enumerate(zip(path_a, path_b)):
        if seg_a.seg_type != seg_b.seg_type:
            raise SegmentTypeMismatch(i, type(seg_a).__name__, type(seg_b).__name__)


def blend(path_a, path_b, t):
    """Interpolate between two congruent paths.

    t = 0 gives ``path_a``, t = 1 gives ``path_b``. Values outside [0, 1]
    extrapolate. Arc rotation and flags are taken from ``path_a``.
    """
    check_congruent(path_a, path_b)
    t = float(t)
    return Path(seg_a.blend(seg_b, t) for seg_a, seg_b in zip(path_a, path_b))


__all__ = ['blend', 'check_congruent', 'lerp']
