import subprocess

from svgmorph.pathdata.utils import log


class RenderError(RuntimeError):
    pass


def _run(cmd):
    log(' '.join(cmd))
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True)
    except FileNotFoundError:
        raise RenderError('%s not found, is it installed and on the PATH?' % cmd[0])
    if proc.returncode != 0:
        raise RenderError('%s failed with exit status %s:\n%s' % (
            cmd[0], proc.returncode, proc.stderr))
    return proc


def render_png(svg_filename, png_filename, inkscape='inkscape'):
    """Rasterize one SVG frame with Inkscape."""
    return _run([inkscape, svg_filename,
                 '--export-type=png',
                 '--export-filename=%s' % png_filename])


def assemble_gif(png_filenames, gif_filename, magick='magick', resize_percent='20', delay_cents=2):
    """Combine PNG frames, in the order given, into a looping GIF with ImageMagick."""
    cmd = [magick, '-delay', str(delay_cents), '-loop', '0']
    cmd.extend(png_filenames)
    cmd.extend(['-resize', '%s%%' % resize_percent, gif_filename])
    return _run(cmd)
