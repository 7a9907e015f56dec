import pytest

SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
  <g>
    <path id="square" style="fill:none;stroke:#000000;display:inline" d="M 10 10 L 40 10 L 40 40 L 10 40 Z"/>
    <path id="blob" style="fill:none;stroke:#000000" d="M 10 10 C 20 0 30 0 40 10 C 50 20 50 30 40 40 L 10 40 C 0 30 0 20 10 10"/>
    <path id="wave" style="fill:none" d="M 0 50 Q 25 25 50 50 Q 75 75 100 50"/>
    <circle id="dot-a" cx="10" cy="80" r="5"/>
    <circle id="dot-b" style="fill:red" cx="90" cy="60" r="5"/>
    <ellipse id="egg" cx="50" cy="50" rx="4" ry="6"/>
  </g>
</svg>
'''


@pytest.fixture
def svg_file(tmp_path):
    filename = tmp_path / 'shapes.svg'
    filename.write_text(SVG)
    return str(filename)


@pytest.fixture
def config_file(tmp_path, svg_file):
    filename = tmp_path / 'shapes.morph'
    filename.write_text('''# square into blob
svg: shapes.svg
morph: square, blob
morph: dot-a, dot-b
frames: 5
''')
    return str(filename)
