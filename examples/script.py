import os

from svgmorph.config import load_config
from svgmorph.morph import write_frames
from svgmorph.sheet import contact_sheet

HERE = os.path.dirname(os.path.abspath(__file__))


def frames():
    config = load_config(os.path.join(HERE, 'shapes.morph'))
    out_dir = os.path.join(HERE, 'frames')
    os.makedirs(out_dir, exist_ok=True)
    for filename in write_frames(config, out_dir):
        print(filename)


def sheet():
    config = load_config(os.path.join(HERE, 'shapes.morph'))
    print(contact_sheet(config, os.path.join(HERE, 'sheet.svg'), columns=6))


if __name__ == '__main__':
    sheet()
