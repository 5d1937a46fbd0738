from io import StringIO
from unittest import mock

from sportstracker.app import Tracker, main
from sportstracker.console import Console
from sportstracker.models import Activity, ActivityType, Goal
from sportstracker.storage import goals_path_for, load_activities, load_goals


def make_tracker(path, text=""):
    out, err = StringIO(), StringIO()
    console = Console(StringIO(text), out, err, clear_screens=False)
    return Tracker(str(path), console), out, err


def test_add_activity_saved_on_exit(tmp_path):
    path = tmp_path / "acts.csv"
    tracker, out, _ = make_tracker(path, "2024-05-01\n30\n5\n\n")
    with tracker:
        tracker.add_activity(ActivityType.RUNNING)
    expected = [Activity(ActivityType.RUNNING, "2024-05-01", 30.0, 5.0, 0)]
    assert load_activities(path) == expected
    assert "Saved 1 activities to" in out.getvalue()


def test_loading_reports_counts_and_bad_lines(tmp_path):
    path = tmp_path / "acts.csv"
    path.write_text("0,2024-01-01,30.0,5.00,0\nbad\n", encoding="utf-8")
    tracker, out, err = make_tracker(path, "\n")
    assert tracker.activities == [Activity(ActivityType.RUNNING, "2024-01-01", 30.0, 5.0, 0)]
    assert f"Loaded 1 activities from '{path}'." in out.getvalue()
    assert "Error reading line: bad" in err.getvalue()


def test_run_exit(tmp_path):
    tracker, out, _ = make_tracker(tmp_path / "acts.csv", "0\n")
    tracker.run()
    assert out.getvalue().endswith("Exiting the application. Goodbye!\n")


def test_run_adds_strength_activity(tmp_path):
    tracker, _, _ = make_tracker(tmp_path / "acts.csv", "1\n5\n2024-01-02\n45\n12\n\n0\n")
    tracker.run()
    assert tracker.activities == [Activity(ActivityType.STRENGTH, "2024-01-02", 45.0, 0.0, 12)]


def test_goal_achieved_on_load(tmp_path):
    path = tmp_path / "acts.csv"
    path.write_text("0,2024-01-01,30.0,5.00,0\n", encoding="utf-8")
    with open(goals_path_for(str(path)), "w", encoding="utf-8") as handle:
        handle.write("0,Run 5k,2024-12-31,0.0,5.00,0\n")
    tracker, out, _ = make_tracker(path, "\n\n\n")
    assert tracker.goals[0].achieved is True
    assert "GOAL ACHIEVED!" in out.getvalue()


def test_add_goal_writes_goals_file(tmp_path):
    path = tmp_path / "acts.csv"
    tracker, _, _ = make_tracker(path, "Run far\n1\n2030-12-31\n10\n0\n\n")
    goal = tracker.add_goal()
    expected = Goal(ActivityType.RUNNING, "Run far", "2030-12-31", 10.0, 0.0, 0)
    assert goal == expected
    assert load_goals(goals_path_for(str(path))) == [expected]


def test_filter_duration_swaps_bounds(tmp_path):
    tracker, out, _ = make_tracker(tmp_path / "acts.csv", "3\n60\n10\n\n")
    tracker.activities = [
        Activity(ActivityType.CARDIO, "2024-01-01", 30.0),
        Activity(ActivityType.CARDIO, "2024-01-02", 90.0),
    ]
    tracker.filter_activities()
    text = out.getvalue()
    assert "Duration values were swapped" in text
    assert "Between 10 and 60 minutes" in text
    assert "Found 1 activities within the duration range:" in text


def test_filter_date_range_swaps_dates(tmp_path):
    tracker, out, _ = make_tracker(tmp_path / "acts.csv", "2\n2024-12-31\n2024-01-01\n\n")
    tracker.activities = [Activity(ActivityType.WALKING, "2024-06-01", 20.0, 2.0)]
    tracker.filter_activities()
    text = out.getvalue()
    assert "Dates were swapped to ensure correct range." in text
    assert "2024-01-01 to 2024-12-31" in text


def test_search_by_keyword(tmp_path):
    tracker, out, _ = make_tracker(tmp_path / "acts.csv", "1\nrun\n\n")
    tracker.activities = [
        Activity(ActivityType.RUNNING, "2024-01-01", 30.0, 5.0),
        Activity(ActivityType.CARDIO, "2024-01-02", 20.0),
    ]
    tracker.search_activities()
    assert "Found 1 matching activities:" in out.getvalue()


def test_search_without_activities(tmp_path):
    tracker, out, _ = make_tracker(tmp_path / "acts.csv", "\n")
    tracker.search_activities()
    assert "No activities recorded yet." in out.getvalue()


def test_view_goal_details(tmp_path):
    tracker, out, _ = make_tracker(tmp_path / "acts.csv", "1\n\n")
    tracker.goals = [Goal(ActivityType.RUNNING, "Spring run", "2030-01-01", 10.0)]
    tracker.view_goals()
    text = out.getvalue()
    assert "GOAL DETAILS" in text
    assert "Spring run" in text


def test_manage_goals_shows_only_achieved(tmp_path):
    tracker, out, _ = make_tracker(tmp_path / "acts.csv", "3\n\n")
    tracker.goals = [
        Goal(ActivityType.RUNNING, "Done goal", "2030-01-01", achieved=True),
        Goal(ActivityType.RUNNING, "Open goal", "2030-01-01"),
    ]
    tracker.manage_goals()
    text = out.getvalue()
    assert "Done goal" in text
    assert "Open goal" not in text


def test_backup_round_trip(tmp_path):
    path = tmp_path / "acts.csv"
    tracker, _, _ = make_tracker(path, "\n")
    tracker.activities = [Activity(ActivityType.SWIMMING, "2024-03-03", 40.0, 1.5)]
    tracker.goals = [Goal(ActivityType.SWIMMING, "Swim", "2024-12-31", 3.0)]
    written = tracker.backup_data()
    assert written == [str(path) + ".bak", goals_path_for(str(path)) + ".bak"]
    assert load_activities(written[0]) == tracker.activities
    assert load_goals(written[1]) == tracker.goals


def test_main_runs_and_saves(tmp_path, monkeypatch, capsys):
    path = tmp_path / "acts.csv"
    monkeypatch.setattr("sys.stdin", StringIO("0\n"))
    with mock.patch("subprocess.run") as run_mock:
        status = main([str(path)])
    assert status == 0
    assert path.exists()
    assert run_mock.called
    assert "Exiting the application. Goodbye!" in capsys.readouterr().out


def test_main_reports_end_of_input(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", StringIO(""))
    with mock.patch("subprocess.run"):
        status = main([str(tmp_path / "acts.csv")])
    assert status == 1
    assert "An unexpected error occurred" in capsys.readouterr().err