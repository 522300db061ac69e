"""Tests for the trace replay entry point."""

from closeby.tracker.main import load_trace, main


def test_builtin_scenario_reaches_destination(tmp_path, capsys):
    code = main(["--log-dir", str(tmp_path)])

    out = capsys.readouterr().out
    assert code == 0
    assert "You're making good progress!" in out
    assert "Destination reached" in out
    assert (tmp_path / "tracking_session.jsonl").exists()


def test_load_trace_skips_invalid_rows(tmp_path):
    trace = tmp_path / "walk.csv"
    trace.write_text(
        "lat,lon,accuracy\n"
        "0.0,0.0,5\n"
        "95.0,0.0,5\n"
        "0.0,0.005,\n",
        encoding="utf-8",
    )

    samples = load_trace(str(trace))

    assert [s.coord.lon for s in samples] == [0.0, 0.005]
    assert samples[0].accuracy == 5.0
    assert samples[1].accuracy is None
    assert samples[0].altitude is None


def test_trace_replay(tmp_path, capsys):
    trace = tmp_path / "walk.csv"
    trace.write_text("lat,lon\n0.0,0.0\n0.0,0.004\n", encoding="utf-8")

    code = main([
        "--trace", str(trace),
        "--dest-lat", "0.0", "--dest-lon", "0.01",
        "--log-dir", str(tmp_path / "logs"),
    ])

    out = capsys.readouterr().out
    assert code == 0
    assert "You're making good progress!" in out
    assert "Destination reached" not in out


def test_invalid_destination(tmp_path):
    assert main(["--dest-lat", "100", "--log-dir", str(tmp_path)]) == 2


def test_missing_trace_file(tmp_path, capsys):
    code = main(["--trace", str(tmp_path / "nope.csv"), "--log-dir", str(tmp_path)])
    assert code == 1
    assert "Could not read trace" in capsys.readouterr().out


def test_trace_missing_column(tmp_path, capsys):
    trace = tmp_path / "walk.csv"
    trace.write_text("lat,altitude\n0.0,12\n", encoding="utf-8")

    code = main(["--trace", str(trace), "--log-dir", str(tmp_path)])

    assert code == 1
    assert "missing column" in capsys.readouterr().out


def test_empty_trace_file(tmp_path, capsys):
    trace = tmp_path / "walk.csv"
    trace.write_text("", encoding="utf-8")

    assert main(["--trace", str(trace), "--log-dir", str(tmp_path)]) == 1
    assert "Could not read trace" in capsys.readouterr().out
