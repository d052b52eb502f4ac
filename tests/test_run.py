import io
import json

import pytest

import cli
from flex_worktime.parser import HRParseError
from flex_worktime.run import run
from flex_worktime.storage import JsonFileStore, encode_share_fragment

HR_WEEK = "\n".join([
    "07:00:00 16:30:00 0 0",
    "07:00:00 16:30:00 10 20",
    "07:22:23 08:05:55 (휴가)반반차 0",
])


def test_run_imports_and_saves(tmp_path):
    state = tmp_path / "period.json"
    result = run(state_path=state, hr_text=HR_WEEK, week="1")
    assert result.imported_days == 3
    assert result.summary.days[0][0].actual_work_minutes == 510
    assert result.summary.days[0][1].actual_work_minutes == 480
    assert state.exists()
    assert JsonFileStore(state).load() == result.period
    assert "총 근무시간" in result.summary_text


def test_run_import_into_second_week_keeps_first(tmp_path):
    state = tmp_path / "period.json"
    run(state_path=state, hr_text=HR_WEEK, week="1")
    result = run(state_path=state, hr_text="09:00:00 18:00:00 0 0", week="2")
    assert result.period.day("week1", 0).start_time == "07:00:00"
    assert result.period.day("week2", 0).start_time == "09:00:00"


def test_run_parse_error_saves_nothing(tmp_path):
    state = tmp_path / "period.json"
    with pytest.raises(HRParseError):
        run(state_path=state, hr_text="   ", week="1")
    assert not state.exists()


def test_run_reset_with_bad_import_keeps_saved_period(tmp_path):
    state = tmp_path / "period.json"
    saved = run(state_path=state, hr_text="09:00:00 17:30:00 0 0", week="1").period
    assert saved.day("week1", 0).start_time == "09:00:00"

    with pytest.raises(HRParseError):
        run(state_path=state, hr_text="   ", week="1", reset=True)
    assert state.exists()
    assert JsonFileStore(state).load() == saved

    with pytest.raises(FileNotFoundError):
        run(state_path=state, hr_path=tmp_path / "missing.txt", week="1", reset=True)
    assert JsonFileStore(state).load() == saved


def test_run_reset_then_import(tmp_path):
    state = tmp_path / "period.json"
    run(state_path=state, hr_text=HR_WEEK, week="1")
    result = run(state_path=state, hr_text="09:00:00 17:30:00 0 0", week="2", reset=True)
    assert result.period.day("week1", 0).start_time == ""
    assert JsonFileStore(state).load().day("week2", 0).start_time == "09:00:00"


def test_run_requires_week_for_import(tmp_path):
    with pytest.raises(ValueError):
        run(state_path=tmp_path / "p.json", hr_text=HR_WEEK)


def test_run_restore_and_reset(tmp_path):
    state = tmp_path / "period.json"
    first = run(state_path=state, hr_text=HR_WEEK, week="2")
    restored = run(state_path=tmp_path / "other.json", restore_fragment=encode_share_fragment(first.period))
    assert restored.period == first.period

    reset = run(state_path=state, reset=True)
    assert reset.summary.total_work == 0


def test_cli_import_file(tmp_path, capsys):
    hr = tmp_path / "hr.txt"
    hr.write_text(HR_WEEK, encoding="utf-8")
    state = tmp_path / "period.json"
    code = cli.main(["--state", str(state), "--import", str(hr), "--week", "1", "--share"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Days updated from HR data: 3" in out
    assert "#!data=" in out


def test_cli_paste_json(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(HR_WEEK))
    code = cli.main(["--state", str(tmp_path / "p.json"), "--paste", "--week", "2", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert code == 0
    assert data["period"]["week2"]["수"]["vacation"] == "quarter"
    assert data["summary"]["per_week"][0] == {"work": 0, "ot": 0}


def test_cli_errors(tmp_path, capsys):
    assert cli.main(["--state", str(tmp_path / "p.json"), "--paste"]) == 1
    assert cli.main(["--state", str(tmp_path / "p.json"), "--import", str(tmp_path / "missing.txt"), "--week", "1"]) == 1
    assert "Error:" in capsys.readouterr().err
