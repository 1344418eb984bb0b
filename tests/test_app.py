import io
import json

import pytest

import app
from config.config_loader import DEFAULT_CONFIG
from simulator.engine import make_console


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "runtime_config.json"
    config = dict(DEFAULT_CONFIG, output_directory=str(tmp_path / "logs"))
    path.write_text(json.dumps(config), encoding="utf-8")
    return str(path)


def test_cli_runs_machine_and_logs(config_path, tmp_path):
    args = app.build_parser().parse_args(["--machine", "busy_beaver_2", "--config", config_path])
    frames = io.StringIO()
    summary = app.cli_main(args, frame_console=make_console(file=frames))

    assert summary.steps == 6
    assert summary.final_state == "H"
    assert "No change occurred stop processing!" in frames.getvalue()

    log_files = list((tmp_path / "logs").glob("tape_machine_*.jsonl"))
    assert len(log_files) == 1
    entry = json.loads(log_files[0].read_text(encoding="utf-8").splitlines()[0])
    assert entry["machine"] == "busy_beaver_2"
    assert entry["halt_reason"] == "no_transition"


def test_cli_overrides_tape_and_skips_log(config_path, tmp_path):
    args = app.build_parser().parse_args(
        ["--machine", "scan_to_one", "--tape", "0001", "--no-log", "--config", config_path]
    )
    summary = app.cli_main(args, frame_console=make_console(file=io.StringIO()))

    assert summary.head_position == 3
    assert summary.tape == "0001"
    assert not (tmp_path / "logs").exists()


def test_cli_max_steps(config_path):
    args = app.build_parser().parse_args(
        ["--machine", "scan_to_one", "--tape", "0000", "--max-steps", "2", "--no-log", "--config", config_path]
    )
    summary = app.cli_main(args, frame_console=make_console(file=io.StringIO()))
    assert summary.steps == 2
    assert summary.halt_reason == "max_steps"


def test_cli_unknown_machine_exits(config_path):
    args = app.build_parser().parse_args(["--machine", "nope", "--no-log", "--config", config_path])
    with pytest.raises(SystemExit) as excinfo:
        app.cli_main(args, frame_console=make_console(file=io.StringIO()))
    assert excinfo.value.code == 1


def test_missing_config_exits(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        app.main(["--list", "--config", str(tmp_path / "missing.json")])
    assert excinfo.value.code == 1


def test_main_prints_frames(config_path, capsys):
    app.main(["--machine", "scan_to_one", "--tape", "01", "--no-log", "--config", config_path])
    out = capsys.readouterr().out
    assert "Current State: b" in out
    assert "rule matched: (1, a) -> (1, b, STAY)" in out


def test_main_rejects_non_positive_max_steps(config_path):
    with pytest.raises(SystemExit) as excinfo:
        app.main(["--max-steps", "0", "--config", config_path])
    assert excinfo.value.code == 2


def test_run_machine_validation_report(capsys):
    summary = app.run_machine("keep_last", tape="", validate=True, frame_console=make_console(file=io.StringIO()))
    assert summary.final_state == "h"
    assert "is consistent with its declarations" in capsys.readouterr().out


def test_interactive_exit(config_path, monkeypatch, capsys):
    monkeypatch.setattr(app.Prompt, "ask", lambda *args, **kwargs: "5")
    app.main(["--config", config_path])
    assert "Goodbye!" in capsys.readouterr().out
