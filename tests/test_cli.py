import json

import pytest

import isotile.__main__ as cli


def test_list_prints_every_type(capsys):
    cli.main(["list"])
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 81
    assert lines[0] == "IH01\tvertices=6\tparams=4\taspects=1\tcolours=3\tedges=JJJ"
    assert not any(line.startswith("IH19\t") for line in lines)


def test_describe_outputs_json(capsys):
    cli.main(["describe", "41"])
    data = json.loads(capsys.readouterr().out)
    assert data["name"] == "IH41"
    assert len(data["vertices"]) == data["num_vertices"]
    assert data["parameters"] == data["default_parameters"]


def test_describe_with_params(capsys):
    cli.main(["describe", "41", "--params", "0.2,1.1"])
    data = json.loads(capsys.readouterr().out)
    assert data["parameters"] == [0.2, 1.1]


def test_fill_lists_tiles_with_colours(capsys):
    cli.main(["fill", "41", "0", "0", "1", "1"])
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines
    for line in lines:
        fields = line.split()
        assert len(fields) == 10
        assert int(fields[3]) in (0, 1, 2)


def test_unknown_type_exits_with_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["describe", "19"])
    assert excinfo.value.code == 1


def test_wrong_parameter_count_exits_with_error():
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["fill", "41", "0", "0", "1", "1", "--params", "0.5"])
    assert excinfo.value.code == 1


def test_debug_log_level_traces_calls(caplog):
    with caplog.at_level("DEBUG", logger="isotile"):
        cli.main(["--log-level", "DEBUG", "describe", "93"])
    assert any("Entering" in record.getMessage() for record in caplog.records)
