"""Reading and writing activity and goal records as comma-separated lines."""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Optional, Union

from .models import Activity, Goal, activity_type_from_code

PathLike = Union[str, "os.PathLike[str]"]
ErrorHandler = Callable[[str, "ParseError"], None]

_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")


class ParseError(ValueError):
    """A stored line could not be turned into a record."""


class _Fields:
    """Comma-separated fields read one at a time, as a stream reader would."""

    def __init__(self, line: str) -> None:
        self._parts = line.split(",")
        self._index = 0

    def next(self) -> Optional[str]:
        """The next field, or None when nothing is left to read."""
        index = self._index
        if index >= len(self._parts):
            return None
        self._index += 1
        is_last = index == len(self._parts) - 1
        if is_last and not self._parts[index]:
            return None
        return self._parts[index]

    @property
    def exhausted(self) -> bool:
        """True once the end of the line has been reached."""
        return self._index >= len(self._parts)


def _parse_int(segment: Optional[str]) -> Optional[int]:
    if segment is None:
        return None
    match = _INT_PREFIX.match(segment)
    return int(match.group(1)) if match else None


def _parse_float(segment: Optional[str]) -> Optional[float]:
    if segment is None:
        return None
    match = _FLOAT_PREFIX.match(segment)
    return float(match.group(1)) if match else None


def _require(value, what: str):
    if value is None:
        raise ParseError(f"Failed to parse {what}")
    return value


def _trailing_int(fields: _Fields, what: str) -> int:
    """Parse the last numeric field; a missing one at the end of the line is 0."""
    value = _parse_int(fields.next())
    if value is not None:
        return value
    if fields.exhausted:
        return 0
    raise ParseError(f"Failed to parse {what}")


def goals_path_for(data_path: PathLike) -> str:
    """Name of the goals file that accompanies a data file.

    ``_goals`` is inserted before the last dot; without a dot,
    ``_goals.csv`` is appended.
    """
    text = os.fspath(data_path)
    dot = text.rfind(".")
    if dot == -1:
        return text + "_goals.csv"
    return text[:dot] + "_goals" + text[dot:]


def parse_activity_line(line: str) -> Activity:
    """Parse ``type,date,duration,distance,repetitions``."""
    fields = _Fields(line)
    code = _require(_parse_int(fields.next()), "type")
    date = _require(fields.next(), "date")
    duration = _require(_parse_float(fields.next()), "duration")
    distance = _require(_parse_float(fields.next()), "distance")
    repetitions = _trailing_int(fields, "repetitions")
    return Activity(
        kind=activity_type_from_code(code),
        date=date,
        duration=duration,
        distance=distance,
        repetitions=repetitions,
    )


def format_activity_line(activity: Activity) -> str:
    """Serialise an activity as one stored line (without newline)."""
    return (
        f"{int(activity.kind)},{activity.date},{activity.duration:.1f},"
        f"{activity.distance:.2f},{activity.repetitions}"
    )


def parse_goal_line(line: str) -> Goal:
    """Parse ``type,description,deadline,duration,distance,repetitions``."""
    fields = _Fields(line)
    code = _require(_parse_int(fields.next()), "type")
    description = _require(fields.next(), "description")
    deadline = _require(fields.next(), "deadline")
    target_duration = _require(_parse_float(fields.next()), "target duration")
    target_distance = _require(_parse_float(fields.next()), "target distance")
    target_reps = _trailing_int(fields, "target repetitions")
    return Goal(
        kind=activity_type_from_code(code),
        description=description,
        deadline=deadline,
        target_distance=target_distance,
        target_duration=target_duration,
        target_reps=target_reps,
    )


def format_goal_line(goal: Goal) -> str:
    """Serialise a goal as one stored line; the achieved flag is not stored."""
    return (
        f"{int(goal.kind)},{goal.description},{goal.deadline},"
        f"{goal.target_duration:.1f},{goal.target_distance:.2f},{goal.target_reps}"
    )


def _load(path: PathLike, parse, on_error: Optional[ErrorHandler]) -> list:
    try:
        handle = open(path, encoding="utf-8", newline="")
    except OSError:
        return []
    records = []
    with handle:
        for raw in handle:
            line = raw[:-1] if raw.endswith("\n") else raw
            try:
                records.append(parse(line))
            except ParseError as exc:
                if on_error is not None:
                    on_error(line, exc)
    return records


def _save(path: PathLike, lines: Iterable[str]) -> None:
    with Path(path).open("w", encoding="utf-8", newline="") as handle:
        for line in lines:
            handle.write(line + "\n")


def load_activities(path: PathLike, on_error: Optional[ErrorHandler] = None) -> list[Activity]:
    """Read activities; a missing file yields none, bad lines go to ``on_error``."""
    return _load(path, parse_activity_line, on_error)


def save_activities(path: PathLike, activities: Iterable[Activity]) -> None:
    """Overwrite ``path`` with the given activities."""
    _save(path, (format_activity_line(activity) for activity in activities))


def load_goals(path: PathLike, on_error: Optional[ErrorHandler] = None) -> list[Goal]:
    """Read goals; a missing file yields none, bad lines go to ``on_error``."""
    return _load(path, parse_goal_line, on_error)


def save_goals(path: PathLike, goals: Iterable[Goal]) -> None:
    """Overwrite ``path`` with the given goals."""
    _save(path, (format_goal_line(goal) for goal in goals))