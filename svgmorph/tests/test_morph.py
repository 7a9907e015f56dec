import os

from svgmorph import document, morph
from svgmorph.config import load_config, parse_config
from svgmorph.morph import MorphPair, animate, apply_frame, prepare_pairs, write_frames
from svgmorph.pathdata.pathparser import parse_path

SQUARE = 'M 10 10 L 40 10 L 40 40 L 10 40 Z'
BLOB = 'M 10 10 C 20 0 30 0 40 10 C 50 20 50 30 40 40 L 10 40 C 0 30 0 20 10 10'


def _shapes(svg_file):
    dom = document.load(svg_file)
    return dom, document.shapes_by_id(dom)


def test_prepare_pairs(svg_file):
    _, shapes = _shapes(svg_file)
    config = parse_config(['svg: x.svg', 'morph: square, blob', 'morph: dot-a, dot-b'])
    pairs = prepare_pairs(config, shapes)

    assert [(p.start_id, p.end_id, p.kind) for p in pairs] == [
        ('square', 'blob', 'path'), ('dot-a', 'dot-b', 'circle')]
    assert pairs[0].start == parse_path(SQUARE)
    assert pairs[0].end == parse_path(BLOB)
    assert pairs[1].start == (10, 80)
    assert pairs[1].end == (90, 60)


def test_prepare_pairs_skips_bad_pairs(svg_file, caplog):
    _, shapes = _shapes(svg_file)
    config = parse_config([
        'svg: x.svg',
        'morph: square, nowhere',
        'morph: square, dot-a',
        'morph: square, wave',
        'morph: egg, egg',
    ])
    pairs = prepare_pairs(config, shapes)

    assert [(p.start_id, p.end_id) for p in pairs] == [('egg', 'egg')]
    assert 'Didn\'t find item with ID "nowhere"' in caplog.text
    assert 'ID "square" and ID "dot-a" have different types' in caplog.text
    assert 'Cannot morph ID "square" into ID "wave"' in caplog.text


def test_morph_pair_at():
    pair = MorphPair('a', 'b', 'circle', (0, 10), (10, 20))
    assert pair.at(0.5) == (5, 15)

    pair = MorphPair('a', 'b', 'path', parse_path('M 0 0'), parse_path('M 10 10'))
    assert pair.at(0.5) == parse_path('M 5 5')


def test_apply_frame(svg_file):
    dom, shapes = _shapes(svg_file)
    config = parse_config(['svg: x.svg', 'morph: square, blob', 'morph: dot-a, dot-b'])
    pairs = prepare_pairs(config, shapes)

    apply_frame(pairs, shapes, 0.5, precision=2)

    assert shapes['dot-b'].getAttribute('cx') == '50'
    assert shapes['dot-b'].getAttribute('cy') == '70'
    assert shapes['blob'].getAttribute('d').startswith('M 10 10 C 22.5 5 27.5 5 40 10')
    assert 'display:none' in shapes['square'].getAttribute('style')
    assert shapes['dot-a'].getAttribute('style') == 'display:none'
    assert 'display:none' not in shapes['blob'].getAttribute('style')


def test_write_frames(config_file, tmp_path):
    config = load_config(config_file)
    out_dir = tmp_path / 'frames'
    out_dir.mkdir()

    filenames = write_frames(config, str(out_dir))
    assert [os.path.basename(f) for f in filenames] == ['frame%06d.svg' % i for i in range(5)]

    _, first = _shapes(filenames[0])
    _, last = _shapes(filenames[-1])
    assert first['blob'].getAttribute('d') == parse_path(SQUARE).d()
    assert last['blob'].getAttribute('d') == parse_path(BLOB).d()
    assert first['dot-b'].getAttribute('cx') == '10'
    assert last['dot-b'].getAttribute('cx') == '90'
    assert 'display:none' in first['square'].getAttribute('style')


def test_animate(config_file, monkeypatch):
    rendered = []
    assembled = []

    def render_png(svg_filename, png_filename, inkscape):
        assert os.path.exists(svg_filename)
        rendered.append(png_filename)

    def assemble_gif(pngs, gif, magick, resize_percent, delay_cents):
        assembled.append((pngs, gif, magick, resize_percent, delay_cents))

    monkeypatch.setattr(morph, 'render_png', render_png)
    monkeypatch.setattr(morph, 'assemble_gif', assemble_gif)

    config = load_config(config_file)
    output = animate(config)

    assert output == os.path.join(os.path.dirname(config_file), 'shapes.gif')
    assert len(rendered) == 5
    pngs, gif, magick, resize_percent, delay_cents = assembled[0]
    assert [os.path.basename(p) for p in pngs] == [
        'frame%06d.png' % i for i in (0, 1, 2, 3, 4, 3, 2, 1)]
    assert gif == output
    assert (magick, resize_percent, delay_cents) == ('magick', '20', 2)
    # the working directory is gone once the GIF is assembled
    assert not os.path.exists(os.path.dirname(pngs[0]))
