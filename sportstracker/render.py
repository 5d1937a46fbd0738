"""Text reports for the terminal: tables, summaries and bar charts."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum

from .dates import days_between
from .models import SELECTABLE_TYPES, Activity, ActivityType, Goal
from .stats import (
    TypeStats,
    daily_totals,
    goal_progress,
    summarize_by_type,
    type_distribution,
)


class Color(str, Enum):
    """ANSI escape sequences used to colour output."""

    RESET = "\033[0m"
    CYAN = "\033[0;36m"
    YELLOW = "\033[0;33m"
    GREEN = "\033[0;32m"
    RED = "\033[0;31m"
    BLUE = "\033[0;34m"
    MAGENTA = "\033[0;35m"

    def __str__(self) -> str:
        return self.value


_RESET = Color.RESET.value
_CYAN = Color.CYAN.value
_YELLOW = Color.YELLOW.value
_GREEN = Color.GREEN.value
_RED = Color.RED.value
_BLUE = Color.BLUE.value
_MAGENTA = Color.MAGENTA.value

_RULE = "=" * 35
_BLOCK = "█"
CHART_WIDTH = 40

_TABLE_SEPARATOR = "---+------------+------------+------------+------------+-------"
_DATE_TABLE_SEPARATOR = "---+------------+------------+------------+-------"
_STATS_SEPARATOR = "-------------------+---------+----------------+---------------"
_GOALS_SEPARATOR = (
    "---+------------+--------------------------------+------------+------------"
)

_DISTRIBUTION_COLORS = {
    ActivityType.RUNNING: _GREEN,
    ActivityType.WALKING: _BLUE,
    ActivityType.SWIMMING: _CYAN,
    ActivityType.CARDIO: _MAGENTA,
    ActivityType.STRENGTH: _YELLOW,
}


def colored_type_name(kind: ActivityType) -> str:
    """Type name in green, or a red ``Unknown`` for unrecognised types."""
    if kind is ActivityType.UNKNOWN:
        return f"{_RED}Unknown{_RESET}"
    return f"{_GREEN}{kind.display_name()}{_RESET}"


def bar_length(value: float, maximum: float, width: int = CHART_WIDTH) -> int:
    """Blocks for ``value`` on a scale where ``maximum`` fills ``width``; at least 1."""
    if maximum <= 0:
        return 0
    return max(1, int(value / maximum * width))


def _join(lines: Iterable[str]) -> str:
    return "\n".join(lines) + "\n"


def _banner(title: str) -> list[str]:
    return [_RULE, title, _RULE]


def _status(goal: Goal) -> str:
    if goal.achieved:
        return f"{_GREEN}ACHIEVED{_RESET}"
    return f"{_YELLOW}PENDING{_RESET}"


def _number(value: float) -> str:
    return f"{value:g}"


def _distance_cell(activity: Activity) -> str:
    if activity.kind.has_distance():
        return f"{activity.distance:<10.2f}"
    return f"{'N/A':<10}"


def _reps_cell(activity: Activity) -> str:
    if activity.kind is ActivityType.STRENGTH:
        return f"{activity.repetitions:<5}"
    return f"{'N/A':<5}"


def _activity_rows(activities: Sequence[Activity]) -> list[str]:
    lines = [
        f"{'ID':<3} | {'Type':<10} | {'Date':<10} | {'Duration':<10} | "
        f"{'Distance':<10} | {'Reps':<5}",
        _TABLE_SEPARATOR,
    ]
    for number, activity in enumerate(activities, start=1):
        lines.append(
            f"{number:<3} | {colored_type_name(activity.kind):<18} | "
            f"{activity.date:<10} | {activity.duration:<10.1f} | "
            f"{_distance_cell(activity)} | {_reps_cell(activity)}"
        )
    return lines


def activity_table(activities: Sequence[Activity]) -> str:
    """The list of all recorded activities."""
    lines = _banner(f"        {_YELLOW}VIEW ACTIVITIES{_RESET}")
    if not activities:
        lines.append("No activities recorded yet.")
    else:
        lines.extend(_activity_rows(activities))
    return _join(lines)


def statistics_table(activities: Sequence[Activity]) -> str:
    """Count and averages per activity type."""
    lines = _banner(f"        {_YELLOW}VIEW STATISTICS{_RESET}")
    if not activities:
        lines.append("No activities recorded yet.")
        return _join(lines)
    lines.append(
        f"{'Activity Type':<18} | {'Count':<7} | {'Avg Duration':<14} | {'Avg Distance':<12}"
    )
    lines.append(_STATS_SEPARATOR)
    summary = summarize_by_type(activities)
    for kind in SELECTABLE_TYPES:
        stats = summary.get(kind)
        if stats is None:
            continue
        if kind.has_distance():
            distance = f"{stats.average_distance():<12.2f}"
        else:
            distance = f"{'N/A':<12}"
        lines.append(
            f"{colored_type_name(kind):<18} | {stats.count:<7} | "
            f"{stats.average_duration():<14.1f} | {distance}"
        )
    return _join(lines)


def keyword_report(keyword: str, results: Sequence[Activity]) -> str:
    """Activities found by a keyword search."""
    lines = _banner(f"  {_YELLOW}SEARCH RESULTS FOR: {_GREEN}{keyword}{_RESET}")
    if not results:
        lines.append(f"No activities found matching '{keyword}'.")
    else:
        lines.append(f"Found {len(results)} matching activities:")
        lines.append("")
        lines.extend(_activity_rows(results))
    return _join(lines)


def date_report(date: str, results: Sequence[Activity]) -> str:
    """Activities recorded on one date, without a date column."""
    lines = _banner(f"  {_YELLOW}ACTIVITIES ON: {_GREEN}{date}{_RESET}")
    if not results:
        lines.append(f"No activities found on {date}.")
        return _join(lines)
    lines.append(f"Found {len(results)} activities on {date}:")
    lines.append("")
    lines.append(
        f"{'ID':<3} | {'Type':<10} | {'Duration':<10} | {'Distance':<10} | {'Reps':<5}"
    )
    lines.append(_DATE_TABLE_SEPARATOR)
    for number, activity in enumerate(results, start=1):
        lines.append(
            f"{number:<3} | {colored_type_name(activity.kind):<18} | "
            f"{activity.duration:<10.1f} | {_distance_cell(activity)} | "
            f"{_reps_cell(activity)}"
        )
    return _join(lines)


def type_filter_report(kind: ActivityType, results: Sequence[Activity]) -> str:
    """Activities of one type, with averages and totals."""
    name = colored_type_name(kind)
    lines = _banner(f"  {_YELLOW}FILTERED BY TYPE: {name}{_RESET}")
    if not results:
        lines.append(f"No activities found of type {name}.")
        return _join(lines)

    with_distance = kind.has_distance()
    with_reps = kind is ActivityType.STRENGTH

    lines.append(f"Found {len(results)} {name} activities:")
    lines.append("")
    header = f"{'ID':<3} | {'Date':<10} | {'Duration':<10} | "
    separator = "---+------------+------------+"
    if with_distance:
        header += f"{'Distance':<10} | "
        separator += "------------+"
    if with_reps:
        header += f"{'Reps':<5}"
        separator += "-------"
    lines.append(header)
    lines.append(separator)

    stats = TypeStats(kind)
    for number, activity in enumerate(results, start=1):
        row = f"{number:<3} | {activity.date:<10} | {activity.duration:<10.1f} | "
        if with_distance:
            row += f"{activity.distance:<10.2f}"
        if with_reps:
            row += f"{activity.repetitions:<5}"
        lines.append(row)
        stats.add(activity)

    lines.append("")
    lines.append(f"{_CYAN}Summary Statistics:{_RESET}")
    lines.append(f"Average Duration: {stats.average_duration():.1f} minutes")
    if with_distance:
        lines.append(f"Average Distance: {stats.average_distance():.2f} kilometers")
        lines.append(f"Total Distance: {stats.total_distance:.2f} kilometers")
    if with_reps:
        lines.append(f"Average Repetitions: {stats.total_reps // stats.count}")
        lines.append(f"Total Repetitions: {stats.total_reps}")
    return _join(lines)


def date_range_report(start: str, end: str, results: Sequence[Activity]) -> str:
    """Activities within a date range, with per-day and per-type summaries."""
    lines = _banner(f"  {_YELLOW}FILTERED BY DATE RANGE{_RESET}")
    lines.insert(2, f"  {_CYAN}{start} to {end}{_RESET}")
    if not results:
        lines.append("No activities found in the date range.")
        return _join(lines)

    lines.append(f"Found {len(results)} activities in the date range:")
    lines.append("")
    lines.extend(_activity_rows(results))

    days = days_between(start, end) + 1
    per_day = len(results) / days if days else float("inf")
    lines.append("")
    lines.append(f"{_CYAN}Summary Statistics for the {days} day period:{_RESET}")
    lines.append(f"Total Activities: {len(results)}")
    lines.append(f"Activities per Day: {per_day:.1f}")
    for kind, stats in summarize_by_type(results).items():
        line = (
            f"{colored_type_name(kind)}: {stats.count} activities, "
            f"Avg Duration: {stats.average_duration():.1f} min"
        )
        if kind.has_distance():
            line += f", Total Distance: {stats.total_distance:.2f} km"
        lines.append(line)
    return _join(lines)


def duration_report(
    min_duration: float, max_duration: float, results: Sequence[Activity]
) -> str:
    """Activities within a duration range; a non-positive maximum means no cap."""
    lines = _banner(f"  {_YELLOW}FILTERED BY DURATION{_RESET}")
    if max_duration > 0:
        bounds = (
            f"  {_CYAN}Between {_number(min_duration)} and "
            f"{_number(max_duration)} minutes{_RESET}"
        )
    else:
        bounds = f"  {_CYAN}Minimum {_number(min_duration)} minutes{_RESET}"
    lines.insert(2, bounds)
    if not results:
        lines.append("No activities found within the duration range.")
        return _join(lines)

    lines.append(f"Found {len(results)} activities within the duration range:")
    lines.append("")
    lines.extend(_activity_rows(results))
    average = sum(activity.duration for activity in results) / len(results)
    lines.append("")
    lines.append(f"{_CYAN}Average Duration: {average:.1f} minutes{_RESET}")
    return _join(lines)


def _bar(blocks: int, color: str) -> str:
    return f"{color}{_BLOCK}{_RESET}" * blocks


def progress_chart(activities: Sequence[Activity]) -> str:
    """Bar charts of daily duration and, where recorded, daily distance."""
    if not activities:
        return _join([f"{_YELLOW}No activities recorded yet.{_RESET}"])

    totals = daily_totals(activities)
    max_duration = max((duration for duration, _ in totals.values()), default=0.0)
    max_distance = max((distance for _, distance in totals.values()), default=0.0)
    max_duration = max(0.0, max_duration)
    max_distance = max(0.0, max_distance)

    lines = _banner(f"        {_YELLOW}PROGRESS CHART{_RESET}")
    lines.append(f"{_CYAN}Activity Duration Over Time:{_RESET}")
    lines.append(
        f"(Each {_GREEN}{_BLOCK}{_RESET} represents approximately "
        f"{max_duration / CHART_WIDTH:.1f} minutes)"
    )
    lines.append("")
    for date, (duration, _) in totals.items():
        blocks = bar_length(duration, max_duration, CHART_WIDTH)
        lines.append(f"{date} | {_bar(blocks, _GREEN)} {duration:.1f} min")

    if max_distance > 0:
        lines.append("")
        lines.append(f"{_CYAN}Distance Covered Over Time:{_RESET}")
        lines.append(
            f"(Each {_BLUE}{_BLOCK}{_RESET} represents approximately "
            f"{max_distance / CHART_WIDTH:.2f} km)"
        )
        lines.append("")
        for date, (_, distance) in totals.items():
            if distance > 0:
                blocks = bar_length(distance, max_distance, CHART_WIDTH)
                lines.append(f"{date} | {_bar(blocks, _BLUE)} {distance:.2f} km")
    return _join(lines)


def distribution_chart(activities: Sequence[Activity]) -> str:
    """Share of each activity type, with time and distance totals per type."""
    if not activities:
        return _join([f"{_YELLOW}No activities recorded yet.{_RESET}"])

    counts = type_distribution(activities)
    total = len(activities)
    summary = summarize_by_type(activities)

    lines = _banner(f"    {_YELLOW}ACTIVITY DISTRIBUTION{_RESET}")
    lines.append(f"{_CYAN}Distribution of Activity Types:{_RESET}")
    lines.append("")
    for kind, count in counts.items():
        percentage = count / total * 100 if total else 0.0
        blocks = bar_length(percentage, 100, CHART_WIDTH) if percentage > 0 else 0
        lines.append(
            f"{colored_type_name(kind):<10} | {_bar(blocks, _DISTRIBUTION_COLORS[kind])} "
            f"{count} ({percentage:.1f}%)"
        )

    lines.append("")
    lines.append(f"{_CYAN}Total Activities: {total}{_RESET}")

    lines.append("")
    lines.append(f"{_CYAN}Total Time Spent by Activity Type:{_RESET}")
    for kind, count in counts.items():
        if count > 0:
            lines.append(
                f"{colored_type_name(kind)}: {summary[kind].total_duration:.1f} minutes"
            )

    lines.append("")
    lines.append(f"{_CYAN}Total Distance by Activity Type:{_RESET}")
    distance_lines = [
        f"{colored_type_name(kind)}: {summary[kind].total_distance:.2f} kilometers"
        for kind, count in counts.items()
        if kind.has_distance() and count > 0
    ]
    lines.extend(distance_lines or ["No distance data available."])
    return _join(lines)


def goals_table(goals: Sequence[Goal]) -> str:
    """The list of goals with their status."""
    lines = _banner(f"      {_YELLOW}YOUR GOALS{_RESET}")
    if not goals:
        lines.append("No goals set yet.")
        return _join(lines)
    lines.append(
        f"{'ID':<3} | {'Type':<10} | {'Description':<30} | {'Deadline':<10} | {'Status':<10}"
    )
    lines.append(_GOALS_SEPARATOR)
    for number, goal in enumerate(goals, start=1):
        lines.append(
            f"{number:<3} | {colored_type_name(goal.kind):<18} | "
            f"{goal.description:<30} | {goal.deadline:<10} | {_status(goal)}"
        )
    return _join(lines)


def goal_details(goal: Goal, activities: Iterable[Activity]) -> str:
    """One goal's targets and the progress made towards them."""
    kind = goal.kind
    lines = _banner(f"       {_YELLOW}GOAL DETAILS{_RESET}")
    lines.append(f"{_CYAN}Description: {_RESET}{goal.description}")
    lines.append(f"{_CYAN}Activity Type: {_RESET}{colored_type_name(kind)}")
    lines.append(f"{_CYAN}Deadline: {_RESET}{goal.deadline}")
    lines.append(f"{_CYAN}Status: {_RESET}{_status(goal)}")

    lines.append("")
    lines.append(f"{_CYAN}Target Values:{_RESET}")
    if goal.target_duration > 0:
        lines.append(f"Duration: {goal.target_duration:.1f} minutes")
    if kind.has_distance() and goal.target_distance > 0:
        lines.append(f"Distance: {goal.target_distance:.2f} kilometers")
    if kind is ActivityType.STRENGTH and goal.target_reps > 0:
        lines.append(f"Repetitions: {goal.target_reps}")

    progress = goal_progress(goal, activities)
    lines.append("")
    lines.append(f"{_CYAN}Current Progress:{_RESET}")
    lines.append(f"Matching Activities: {progress.matching}")
    lines.append(f"Total Duration: {progress.total_duration:.1f} minutes")
    duration_percent = progress.duration_percent()
    if duration_percent is not None:
        lines.append(f"Duration Progress: {duration_percent:.1f}%")
    if kind.has_distance():
        lines.append(f"Total Distance: {progress.total_distance:.2f} kilometers")
        distance_percent = progress.distance_percent()
        if distance_percent is not None:
            lines.append(f"Distance Progress: {distance_percent:.2f}%")
    if kind is ActivityType.STRENGTH:
        lines.append(f"Total Repetitions: {progress.total_reps}")
        reps_percent = progress.reps_percent()
        if reps_percent is not None:
            lines.append(f"Repetitions Progress: {reps_percent:.1f}%")
    return _join(lines)