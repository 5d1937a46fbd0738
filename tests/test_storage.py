import pytest

from sportstracker.models import Activity, ActivityType, Goal
from sportstracker.storage import (
    ParseError,
    format_activity_line,
    format_goal_line,
    goals_path_for,
    load_activities,
    load_goals,
    parse_activity_line,
    parse_goal_line,
    save_activities,
    save_goals,
)


def test_goals_path_inserts_before_extension():
    assert goals_path_for("activities_cpp.csv") == "activities_cpp_goals.csv"


def test_goals_path_without_extension():
    assert goals_path_for("data") == "data_goals.csv"


def test_format_activity_line_pinned():
    activity = Activity(ActivityType.RUNNING, "2024-03-05", 30.0, 5.0, 0)
    assert format_activity_line(activity) == "0,2024-03-05,30.0,5.00,0"


@pytest.mark.parametrize(
    "activity",
    [
        Activity(ActivityType.RUNNING, "2024-03-05", 30.5, 5.25, 0),
        Activity(ActivityType.STRENGTH, "2023-12-31", 45.0, 0.0, 120),
        Activity(ActivityType.CARDIO, "2022-01-01", 10.0, 0.0, 0),
    ],
)
def test_activity_round_trip(activity):
    assert parse_activity_line(format_activity_line(activity)) == activity


def test_missing_repetitions_default_to_zero():
    parsed = parse_activity_line("1,2024-01-02,20.0,3.5")
    assert parsed.kind is ActivityType.WALKING
    assert parsed.distance == 3.5
    assert parsed.repetitions == 0


def test_unparseable_final_repetitions_default_to_zero():
    assert parse_activity_line("4,2024-01-02,20.0,0,abc").repetitions == 0


def test_unparseable_repetitions_with_more_fields_raise():
    with pytest.raises(ParseError, match="repetitions"):
        parse_activity_line("4,2024-01-02,20.0,0,abc,extra")


def test_out_of_range_type_becomes_unknown():
    assert parse_activity_line("9,2024-01-02,20.0,0,0").kind is ActivityType.UNKNOWN


@pytest.mark.parametrize(
    "line, field",
    [
        ("", "type"),
        ("x,2024-01-02,20,0,0", "type"),
        ("0", "date"),
        ("0,2024-01-02,abc,0,0", "duration"),
        ("0,2024-01-02,20", "distance"),
    ],
)
def test_bad_activity_lines_raise(line, field):
    with pytest.raises(ParseError, match=field):
        parse_activity_line(line)


def test_goal_round_trip_drops_achieved_flag():
    goal = Goal(ActivityType.STRENGTH, "Lift", "2024-06-30", 0.0, 60.0, 500, achieved=True)
    parsed = parse_goal_line(format_goal_line(goal))
    assert parsed.achieved is False
    assert (parsed.kind, parsed.description, parsed.deadline) == (
        goal.kind,
        goal.description,
        goal.deadline,
    )
    assert (parsed.target_duration, parsed.target_distance, parsed.target_reps) == (
        goal.target_duration,
        goal.target_distance,
        goal.target_reps,
    )


def test_bad_goal_line_raises():
    with pytest.raises(ParseError, match="target duration"):
        parse_goal_line("0,Run far,2024-06-30,oops,5,0")


def test_load_missing_file_returns_empty(tmp_path):
    assert load_activities(tmp_path / "none.csv") == []
    assert load_goals(tmp_path / "none_goals.csv") == []


def test_activities_file_round_trip(tmp_path):
    path = tmp_path / "acts.csv"
    activities = [
        Activity(ActivityType.SWIMMING, "2024-02-01", 40.0, 1.5, 0),
        Activity(ActivityType.STRENGTH, "2024-02-02", 25.0, 0.0, 80),
    ]
    save_activities(path, activities)
    assert load_activities(path) == activities


def test_goals_file_round_trip(tmp_path):
    path = tmp_path / "goals.csv"
    goals = [Goal(ActivityType.RUNNING, "Run far", "2024-06-30", 42.0, 0.0, 0)]
    save_goals(path, goals)
    assert load_goals(path) == goals


def test_bad_lines_reported_and_skipped(tmp_path):
    path = tmp_path / "acts.csv"
    good = Activity(ActivityType.CARDIO, "2024-02-01", 15.0, 0.0, 0)
    path.write_text("garbage\n" + format_activity_line(good) + "\n", encoding="utf-8")
    errors = []
    loaded = load_activities(path, lambda line, exc: errors.append((line, str(exc))))
    assert loaded == [good]
    assert errors == [("garbage", "Failed to parse type")]