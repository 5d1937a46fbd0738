"""Aggregation, goal progress, searching and filtering over activities."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from .dates import is_date_in_range
from .models import SELECTABLE_TYPES, Activity, ActivityType, Goal


@dataclass
class TypeStats:
    """Running totals for activities of one type."""

    kind: ActivityType
    count: int = 0
    total_duration: float = 0.0
    total_distance: float = 0.0
    total_reps: int = 0

    def add(self, activity: Activity) -> None:
        """Fold one activity into the totals."""
        self.count += 1
        self.total_duration += activity.duration
        if self.kind.has_distance():
            self.total_distance += activity.distance
        if self.kind is ActivityType.STRENGTH:
            self.total_reps += activity.repetitions

    def average_duration(self) -> float:
        """Mean duration in minutes, 0 when empty."""
        return self.total_duration / self.count if self.count else 0.0

    def average_distance(self) -> float:
        """Mean distance in kilometres, 0 when empty."""
        return self.total_distance / self.count if self.count else 0.0


@dataclass
class GoalProgress:
    """How far the matching activities go towards a goal."""

    goal: Goal
    matching: int = 0
    total_duration: float = 0.0
    total_distance: float = 0.0
    total_reps: int = 0

    def is_met(self) -> bool:
        """Whether every positive target has been reached."""
        goal = self.goal
        if goal.target_duration > 0 and self.total_duration < goal.target_duration:
            return False
        if goal.target_distance > 0 and self.total_distance < goal.target_distance:
            return False
        if goal.target_reps > 0 and self.total_reps < goal.target_reps:
            return False
        return True

    def duration_percent(self) -> Optional[float]:
        """Duration progress capped at 100, or None without a duration target."""
        if self.goal.target_duration <= 0:
            return None
        return min(100.0, self.total_duration / self.goal.target_duration * 100)

    def distance_percent(self) -> Optional[float]:
        """Distance progress capped at 100, or None when not applicable."""
        if not self.goal.kind.has_distance() or self.goal.target_distance <= 0:
            return None
        return min(100.0, self.total_distance / self.goal.target_distance * 100)

    def reps_percent(self) -> Optional[float]:
        """Repetition progress capped at 100, or None when not applicable."""
        if self.goal.kind is not ActivityType.STRENGTH or self.goal.target_reps <= 0:
            return None
        return min(100.0, self.total_reps / self.goal.target_reps * 100)


def summarize_by_type(activities: Iterable[Activity]) -> dict[ActivityType, TypeStats]:
    """Totals per activity type present, ordered by type."""
    stats: dict[ActivityType, TypeStats] = {}
    for activity in activities:
        stats.setdefault(activity.kind, TypeStats(activity.kind)).add(activity)
    return dict(sorted(stats.items()))


def goal_progress(goal: Goal, activities: Iterable[Activity]) -> GoalProgress:
    """Totals over activities of the goal's type dated on or before its deadline."""
    progress = GoalProgress(goal)
    for activity in activities:
        if activity.kind != goal.kind or activity.date > goal.deadline:
            continue
        progress.matching += 1
        progress.total_duration += activity.duration
        if goal.kind.has_distance():
            progress.total_distance += activity.distance
        if goal.kind is ActivityType.STRENGTH:
            progress.total_reps += activity.repetitions
    return progress


def update_achievements(goals: Iterable[Goal], activities: Iterable[Activity]) -> list[Goal]:
    """Mark newly reached goals as achieved and return them."""
    goals = list(goals)
    activities = list(activities)
    if not goals or not activities:
        return []
    newly_achieved = []
    for goal in goals:
        if goal.achieved:
            continue
        if goal_progress(goal, activities).is_met():
            goal.achieved = True
            newly_achieved.append(goal)
    return newly_achieved


def search_by_keyword(activities: Iterable[Activity], keyword: str) -> list[Activity]:
    """Activities whose type name (case-insensitive) or date contains ``keyword``."""
    lowered = keyword.lower()
    return [
        activity
        for activity in activities
        if lowered in activity.kind.display_name().lower() or keyword in activity.date
    ]


def search_by_date(activities: Iterable[Activity], date: str) -> list[Activity]:
    """Activities recorded on exactly ``date``."""
    return [activity for activity in activities if activity.date == date]


def filter_by_type(activities: Iterable[Activity], kind: ActivityType) -> list[Activity]:
    """Activities of the given type."""
    return [activity for activity in activities if activity.kind == kind]


def filter_by_date_range(activities: Iterable[Activity], start: str, end: str) -> list[Activity]:
    """Activities dated within ``start``..``end`` inclusive."""
    return [activity for activity in activities if is_date_in_range(activity.date, start, end)]


def filter_by_duration(
    activities: Iterable[Activity], min_duration: float, max_duration: float
) -> list[Activity]:
    """Activities lasting at least ``min_duration``; a non-positive maximum means no cap."""
    return [
        activity
        for activity in activities
        if activity.duration >= min_duration
        and (max_duration <= 0 or activity.duration <= max_duration)
    ]


def daily_totals(activities: Iterable[Activity]) -> dict[str, tuple[float, float]]:
    """Per date, in date order: total duration and total distance."""
    totals: dict[str, tuple[float, float]] = {}
    for activity in activities:
        duration, distance = totals.get(activity.date, (0.0, 0.0))
        duration += activity.duration
        if activity.kind.has_distance():
            distance += activity.distance
        totals[activity.date] = (duration, distance)
    return dict(sorted(totals.items()))


def type_distribution(activities: Iterable[Activity]) -> dict[ActivityType, int]:
    """Count of activities for each selectable type, zeros included, in menu order."""
    counts = {kind: 0 for kind in SELECTABLE_TYPES}
    for activity in activities:
        if activity.kind in counts:
            counts[activity.kind] += 1
    return counts