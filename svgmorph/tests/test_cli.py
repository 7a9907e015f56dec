import os

from pytest import raises

from svgmorph.cli import main, parse_args


def test_parse_args_animate():
    ns = parse_args(['animate', 'job.morph', '-o', 'out.gif'])
    assert ns.command == 'animate'
    assert ns.config == 'job.morph'
    assert ns.output == 'out.gif'
    assert ns.svg_frames is None
    assert not ns.verbose


def test_parse_args_blend():
    ns = parse_args(['-v', 'blend', 'M 0 0 L 1 1', 'M 0 0 L 2 2', '-t', '0.25', '--precision', '3'])
    assert ns.verbose
    assert ns.command == 'blend'
    assert (ns.start, ns.end, ns.t, ns.precision) == ('M 0 0 L 1 1', 'M 0 0 L 2 2', 0.25, 3)


def test_parse_args_blend_defaults():
    ns = parse_args(['blend', 'M 0 0', 'M 1 1'])
    assert ns.t == 0.5
    assert ns.precision is None


def test_parse_args_sheet():
    ns = parse_args(['sheet', 'job.morph', '-o', 'sheet.svg', '--columns', '3'])
    assert (ns.config, ns.output, ns.columns) == ('job.morph', 'sheet.svg', 3)


def test_wrong_args():
    with raises(SystemExit):
        parse_args([])


def test_args_sheet_no_output():
    with raises(SystemExit):
        parse_args(['sheet', 'job.morph'])


def test_args_wrong_columns():
    with raises(SystemExit):
        parse_args(['sheet', 'job.morph', '-o', 'sheet.svg', '--columns', '0'])


def test_main_blend(capsys):
    main(['blend', 'M 0 0 L 10 0', 'M 0 0 C 0 10 10 10 10 0', '-t', '0.5'])
    assert capsys.readouterr().out.strip() == 'M 0 0 C 2.5 5 7.5 5 10 0'


def test_main_blend_mismatch():
    with raises(SystemExit) as e:
        main(['blend', 'M 0 0 L 1 1', 'M 0 0 Q 1 1 2 2'])
    assert e.value.code == 1


def test_main_svg_frames(config_file, tmp_path):
    frames_dir = str(tmp_path / 'frames')
    main(['animate', config_file, '--svg-frames', frames_dir])
    assert sorted(os.listdir(frames_dir)) == ['frame%06d.svg' % i for i in range(5)]


def test_main_missing_config(tmp_path):
    with raises(SystemExit) as e:
        main(['animate', str(tmp_path / 'missing.morph')])
    assert e.value.code == 1
