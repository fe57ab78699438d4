import json
import logging

import pytest

import vector_report


def test_report_prints_vector_and_statistics(tmp_path, capsys) -> None:
    path = tmp_path / "v.dat"
    path.write_text("1\n2\n3\n4\n")

    vector_report.main([str(path), "--config", str(tmp_path / "none.json")])

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "[1.00 2.00 3.00 4.00] n=4",
        "sum=10.00",
        "mean=2.50",
        "range=3.00",
        "std=1.12",
    ]


def test_report_precision_from_settings(tmp_path, capsys) -> None:
    path = tmp_path / "v.dat"
    path.write_text("2\n")
    config = tmp_path / "settings.json"
    config.write_text('{"print_precision": 1}')

    vector_report.main([str(path), "--config", str(config)])

    assert capsys.readouterr().out.splitlines()[0] == "[2.0] n=1"


def test_report_skips_range_for_empty_file(tmp_path, capsys) -> None:
    path = tmp_path / "v.dat"
    path.write_text("")

    vector_report.main([str(path), "--config", str(tmp_path / "none.json"), "--precision", "0"])

    out = capsys.readouterr().out.splitlines()
    assert out == ["[] n=0", "sum=0", "mean=nan", "std=nan"]


def test_report_missing_file_exits(tmp_path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        vector_report.main([str(tmp_path / "absent.dat"), "--config", str(tmp_path / "none.json")])
    assert "File does not exist" in str(excinfo.value.code)


def test_report_json_logs_on_stderr(tmp_path, capsys) -> None:
    path = tmp_path / "v.dat"
    path.write_text("1\n2\n")

    vector_report.main([str(path), "--config", str(tmp_path / "none.json"), "--json-logs"])

    captured = capsys.readouterr()
    records = [json.loads(line) for line in captured.err.splitlines() if line.startswith("{")]
    loaded = [record for record in records if record["message"] == "Loaded 2 values"]
    assert loaded
    assert loaded[0]["level"] == "INFO"
    assert loaded[0]["vector_path"] == str(path)
    assert captured.out.splitlines()[0] == "[1.00 2.00] n=2"


def test_report_tees_logs_to_file(tmp_path, capsys) -> None:
    path = tmp_path / "v.dat"
    path.write_text("3\n")
    log_file = tmp_path / "report.log"

    vector_report.main(
        [str(path), "--config", str(tmp_path / "none.json"), "--log-file", str(log_file)]
    )

    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "Loaded 1 values" in log_file.read_text()
