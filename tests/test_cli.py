import json

import pytest

from cyclegraph.cli import main


def test_summary_line(capsys):
    assert main(['5']) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "CycleGraph(5): 5 vertices, 5 edges"


def test_edges(capsys):
    main(['5', '--edges'])
    lines = capsys.readouterr().out.splitlines()
    assert lines[1:] == ["1 2", "2 3", "3 4", "4 5", "1 5"]


def test_neighbors_and_has_edge(capsys):
    main(['5', '--neighbors', '1', '--has-edge', '2', '5'])
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "2 5"
    assert lines[2] == "false"


def test_dtype(capsys):
    main(['4', '--dtype', 'uint8'])
    assert capsys.readouterr().out.startswith("CycleGraph(4, dtype=uint8)")


def test_metrics(capsys):
    main(['6', '--metrics'])
    out = capsys.readouterr().out
    summary = json.loads(out[out.index('{'):])
    assert summary['diameter'] == 3
    assert summary['num_edges'] == 6


def test_metrics_acyclic_graph(capsys):
    main(['2', '--metrics'])
    out = capsys.readouterr().out
    summary = json.loads(out[out.index('{'):])
    assert summary['girth'] is None


def test_config_file(tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({'default_dtype': 'int16'}))
    main(['3', '--config', str(path)])
    assert capsys.readouterr().out.startswith("CycleGraph(3, dtype=int16)")


def test_negative_count_is_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(['-1'])
    assert excinfo.value.code == 2
    assert "nv must be >= 0" in capsys.readouterr().err


def test_unknown_dtype_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main(['3', '--dtype', 'float64'])
    assert excinfo.value.code == 2


def test_vertex_out_of_range_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main(['3', '--neighbors', '4'])
    assert excinfo.value.code == 2
