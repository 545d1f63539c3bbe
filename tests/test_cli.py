"""Tests for the command-line interface."""

import json
from datetime import date

import pytest

from oncallcalc.cli import main, parse_month
from oncallcalc.domain.models import RateProfile, Rates
from oncallcalc.state.store import StateStore


class TestCli:
    """Tests for CLI commands."""

    @pytest.fixture
    def state_path(self, tmp_path):
        return str(tmp_path / "state.json")

    def test_parse_month(self):
        assert parse_month("2024-04") == date(2024, 4, 1)
        assert parse_month("2024-04-17") == date(2024, 4, 1)

    def test_holidays(self, capsys):
        assert main(["holidays", "2024"]) == 0
        out = capsys.readouterr().out
        assert "Easter Sunday 2024-03-31" in out
        assert "2024-03-29 (Friday)" in out
        assert "2024-04-01 (Monday)" in out
        assert out.count("\n") == 14

    def test_hours(self, capsys):
        assert main(["hours", "2024-04"]) == 0
        assert "April 2024: 176 standard hours" in capsys.readouterr().out

    def test_demo(self, capsys):
        assert main(["demo"]) == 0
        out = capsys.readouterr().out
        assert "Hourly wage: 454.55" in out
        assert "Standby fee: 1454.55" in out
        assert "Total bonus: 1454.55" in out
        assert "Gross total (salary + bonus): 81454.55" in out

    def test_toggle_cycles_and_saves(self, state_path, capsys):
        for expected in ("full", "start", "end", "split", "removed"):
            assert main(["toggle", "--state", state_path, "2024-04-09"]) == 0
            assert capsys.readouterr().out.strip() == f"2024-04-09: {expected}"
        assert StateStore(state_path).load().assignments == {}

    def test_log_add_update_remove(self, state_path, capsys):
        assert main(["log", "--state", state_path, "add", "--date", "2024-04-09", "--hours", "2"]) == 0
        logs = StateStore(state_path).load().work_logs
        assert len(logs) == 1
        log_id = logs[0].id
        capsys.readouterr()

        assert main(["log", "--state", state_path, "update", log_id, "--hours", "3", "--holiday", "yes"]) == 0
        entry = StateStore(state_path).load().work_logs[0]
        assert entry.hours == 3
        assert entry.holiday_override is True

        assert main(["log", "--state", state_path]) == 0
        assert log_id in capsys.readouterr().out

        assert main(["log", "--state", state_path, "remove", log_id]) == 0
        assert StateStore(state_path).load().work_logs == []

    def test_log_remove_unknown(self, state_path, capsys):
        assert main(["log", "--state", state_path, "remove", "nope"]) == 1
        assert "No work log with id nope" in capsys.readouterr().err

    def test_set_updates_stored_inputs(self, state_path, capsys):
        assert main([
            "set", "--state", state_path,
            "--salary", "90000",
            "--month", "2024-05",
            "--hours", "160",
            "--profile", "custom",
            "--standby-rate", "0.3",
            "--ot-holiday", "2",
        ]) == 0
        assert "Monthly hours: 160" in capsys.readouterr().out

        state = StateStore(state_path).load()
        assert state.salary == 90000
        assert state.month == date(2024, 5, 1)
        assert state.monthly_hours_override == 160
        assert state.profile is RateProfile.CUSTOM
        assert state.custom_rates == Rates(0.3, 0.5, 2.0)

    def test_set_reset_hours(self, state_path, capsys):
        assert main(["set", "--state", state_path, "--hours", "150"]) == 0
        assert main(["set", "--state", state_path, "--reset-hours"]) == 0
        assert "Monthly hours: standard" in capsys.readouterr().out
        assert StateStore(state_path).load().monthly_hours_override is None

    def test_set_keeps_untouched_fields(self, state_path):
        assert main(["toggle", "--state", state_path, "2024-04-09"]) == 0
        assert main(["set", "--state", state_path, "--salary", "70000"]) == 0
        state = StateStore(state_path).load()
        assert state.salary == 70000
        assert date(2024, 4, 9) in state.assignments

    @pytest.mark.parametrize("argv", [
        ["--hours", "0"],
        ["--salary", "-1"],
        ["--profile", "intern"],
        ["--hours", "160", "--reset-hours"],
    ])
    def test_set_rejects_bad_values(self, state_path, argv):
        with pytest.raises(SystemExit) as exc:
            main(["set", "--state", state_path, *argv])
        assert exc.value.code == 2

    def test_calculate_after_set(self, state_path, capsys):
        assert main(["toggle", "--state", state_path, "2024-04-09"]) == 0
        assert main(["set", "--state", state_path, "--month", "2024-04"]) == 0
        capsys.readouterr()
        assert main(["calculate", "--state", state_path]) == 0
        out = capsys.readouterr().out
        assert "Total bonus: 1454.55" in out
        assert "Gross total (salary + bonus): 81454.55" in out

    def test_calculate_from_state(self, state_path, tmp_path, capsys):
        with open(state_path, "w") as f:
            json.dump({
                "monthlySalary": 80000,
                "selectedDate": "2024-04-01",
                "profile": "devops",
                "selectedOnCallDates": ["2024-04-09"],
                "workLogs": [],
            }, f)
        report = tmp_path / "report.txt"

        assert main(["calculate", "--state", state_path, "--report", str(report)]) == 0
        out = capsys.readouterr().out
        assert "On-call compensation for April 2024" in out
        assert "Total bonus: 1454.55" in out
        assert report.exists()

    def test_calculate_malformed_state(self, state_path, capsys):
        with open(state_path, "w") as f:
            json.dump({"selectedOnCallDates": [{"date": "2024-04-09", "type": "weekly"}]}, f)
        assert main(["calculate", "--state", state_path]) == 2
        assert "Unknown shift variant" in capsys.readouterr().err

    def test_calculate_invalid_input(self, state_path, capsys):
        with open(state_path, "w") as f:
            json.dump({
                "selectedDate": "2024-04-01",
                "workLogs": [{"id": "a", "date": "2024-04-09", "hours": -1}],
            }, f)
        assert main(["calculate", "--state", state_path]) == 2
        assert "negative_hours" in capsys.readouterr().err

    def test_no_command(self, capsys):
        assert main([]) == 1
