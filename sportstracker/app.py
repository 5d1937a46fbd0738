"""The interactive activity tracker and its command-line entry point."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable, Sequence
from typing import Optional

from . import render
from .console import Console
from .dates import current_date
from .models import SELECTABLE_TYPES, Activity, ActivityType, Goal
from .render import Color
from .stats import (
    filter_by_date_range,
    filter_by_duration,
    filter_by_type,
    search_by_date,
    search_by_keyword,
    update_achievements,
)
from .storage import (
    ParseError,
    goals_path_for,
    load_activities,
    load_goals,
    save_activities,
    save_goals,
)

DEFAULT_DATA_FILE = "activities_cpp.csv"

_RESET = Color.RESET.value
_CYAN = Color.CYAN.value
_YELLOW = Color.YELLOW.value
_GREEN = Color.GREEN.value
_RULE = "=" * 35


def _block(lines: Sequence[str]) -> str:
    return "\n".join(lines) + "\n"


def _menu(title: str, entries: Sequence[str]) -> str:
    return _block([_RULE, title, _RULE, *entries, _RULE])


MAIN_MENU = _block(
    [
        _RULE,
        f"    {_CYAN}SPORTS ACTIVITY TRACKER{_RESET}",
        _RULE,
        f"{_YELLOW}ACTIVITIES:{_RESET}",
        "  1 - Add Activity",
        "  2 - View Activities",
        "  3 - Search Activities",
        "  4 - Filter Activities",
        f"{_YELLOW}STATISTICS:{_RESET}",
        "  5 - View Statistics",
        "  6 - Show Progress Chart",
        f"{_YELLOW}GOALS:{_RESET}",
        "  7 - Set New Goal",
        "  8 - View Goals & Achievements",
        f"{_YELLOW}SYSTEM:{_RESET}",
        "  9 - Backup Data",
        "  0 - Exit",
        _RULE,
    ]
)

ADD_MENU = _menu(
    f"        {_YELLOW}ADD NEW ACTIVITY{_RESET}",
    [
        *(
            f"{number} - {_GREEN}{kind.display_name()}{_RESET}"
            for number, kind in enumerate(SELECTABLE_TYPES, start=1)
        ),
        "0 - Back to Main Menu",
    ],
)

FILTER_MENU = _menu(
    f"        {_YELLOW}FILTER ACTIVITIES{_RESET}",
    ["1 - By Activity Type", "2 - By Date Range", "3 - By Duration Range", "0 - Back to Main Menu"],
)

SEARCH_MENU = _menu(
    f"        {_YELLOW}SEARCH ACTIVITIES{_RESET}",
    ["1 - By Keyword", "2 - By Specific Date", "0 - Back to Main Menu"],
)

GOALS_MENU = _menu(
    f"        {_YELLOW}GOALS MENU{_RESET}",
    [
        "1 - Add New Goal",
        "2 - View All Goals",
        "3 - View Achieved Goals",
        "4 - View Pending Goals",
        "0 - Back to Main Menu",
    ],
)

_NO_ACTIVITIES = f"{_YELLOW}No activities recorded yet.{_RESET}\n"


class Tracker:
    """Holds activities and goals, persists them and drives the menus."""

    def __init__(self, filename: str = DEFAULT_DATA_FILE, console: Optional[Console] = None) -> None:
        self.console = console if console is not None else Console()
        self.data_path = os.fspath(filename)
        self.goals_path = goals_path_for(self.data_path)
        self.activities: list[Activity] = []
        self.goals: list[Goal] = []
        self._load()
        self.check_goal_achievements()

    def __enter__(self) -> "Tracker":
        return self

    def __exit__(self, *args) -> None:
        self.save()

    # --- persistence ---

    def _report_bad_line(self, line: str, exc: ParseError) -> None:
        self.console.error(f"Error reading line: {line} -> {exc}")

    def _load(self) -> None:
        if os.path.exists(self.data_path):
            self.activities = load_activities(self.data_path, self._report_bad_line)
            self.console.write(
                f"Loaded {len(self.activities)} activities from '{self.data_path}'.\n"
            )
            self.console.wait_for_enter()
        if os.path.exists(self.goals_path):
            self.goals = load_goals(self.goals_path, self._report_bad_line)
            self.console.write(f"Loaded {len(self.goals)} goals from '{self.goals_path}'.\n")
            self.console.wait_for_enter()

    def _save_activities(self) -> None:
        try:
            save_activities(self.data_path, self.activities)
        except OSError:
            self.console.error(f"Error: Could not open file {self.data_path} for writing.")
            return
        self.console.write(f"Saved {len(self.activities)} activities to '{self.data_path}'.\n")

    def _save_goals(self) -> None:
        try:
            save_goals(self.goals_path, self.goals)
        except OSError:
            self.console.error(f"Error: Could not open file {self.goals_path} for writing.")
            return
        self.console.write(f"Saved {len(self.goals)} goals to '{self.goals_path}'.\n")

    def save(self) -> None:
        """Write activities and goals to their files."""
        self._save_activities()
        self._save_goals()

    # --- main loop ---

    def run(self) -> None:
        """Show the main menu until the user chooses to exit."""
        handlers: dict[int, Callable[[], object]] = {
            2: self.view_activities,
            3: self.search_activities,
            4: self.filter_activities,
            5: self.view_statistics,
            6: self.show_progress_chart,
            7: self.add_goal,
            8: self.view_goals,
            9: self.backup_data,
        }
        console = self.console
        while True:
            console.clear_screen()
            console.write(MAIN_MENU)
            option = console.ask_int("Enter option: ", 0, 9)
            if option == 0:
                console.write("Exiting the application. Goodbye!\n")
                return
            console.clear_screen()
            if option == 1:
                console.write(ADD_MENU)
                choice = console.ask_int("Enter option: ", 0, 5)
                if choice:
                    self.add_activity(SELECTABLE_TYPES[choice - 1])
                    self.check_goal_achievements()
            else:
                handlers[option]()

    # --- activities ---

    def add_activity(self, kind: ActivityType) -> Activity:
        """Ask for the details of a new activity of ``kind`` and record it."""
        console = self.console
        console.clear_screen()
        console.write(_block([_RULE, f"          ADD {render.colored_type_name(kind)}", _RULE]))
        activity = Activity(kind=kind)
        activity.date = console.ask_date("Date (YYYY-MM-DD)", current_date())
        activity.duration = console.ask_float("Duration (minutes, > 0): ", 0.0, False)
        if kind.has_distance():
            activity.distance = console.ask_float("Distance (kilometers, >= 0): ", 0.0, True)
        elif kind is ActivityType.STRENGTH:
            activity.repetitions = console.ask_int("Number of repetitions (>= 0): ", 0, 100000)
        self.activities.append(activity)
        console.write(
            f"\n{_GREEN}{render.colored_type_name(kind)} activity added successfully!{_RESET}\n"
        )
        console.wait_for_enter()
        return activity

    def view_activities(self) -> None:
        """Show every recorded activity."""
        self.console.write(render.activity_table(self.activities))
        self.console.wait_for_enter()

    def view_statistics(self) -> None:
        """Show counts and averages per activity type."""
        self.console.write(render.statistics_table(self.activities))
        self.console.wait_for_enter()

    def search_activities(self) -> None:
        """Search by keyword or by a specific date."""
        console = self.console
        if not self.activities:
            console.write(_NO_ACTIVITIES)
            console.wait_for_enter()
            return
        console.write(SEARCH_MENU)
        option = console.ask_int("Enter option: ", 0, 2)
        if option == 1:
            keyword = console.ask_string("Enter search keyword", "")
            if keyword:
                console.clear_screen()
                console.write(
                    render.keyword_report(keyword, search_by_keyword(self.activities, keyword))
                )
                console.wait_for_enter()
        elif option == 2:
            date = console.ask_date("Enter date (YYYY-MM-DD)", current_date())
            console.clear_screen()
            console.write(render.date_report(date, search_by_date(self.activities, date)))
            console.wait_for_enter()

    def filter_activities(self) -> None:
        """Filter by type, date range or duration range."""
        console = self.console
        if not self.activities:
            console.write(_NO_ACTIVITIES)
            console.wait_for_enter()
            return
        console.write(FILTER_MENU)
        option = console.ask_int("Enter option: ", 0, 3)
        if option == 1:
            console.write(ADD_MENU)
            choice = console.ask_int("Select activity type: ", 0, 5)
            if choice == 0:
                return
            kind = SELECTABLE_TYPES[choice - 1]
            console.clear_screen()
            console.write(render.type_filter_report(kind, filter_by_type(self.activities, kind)))
            console.wait_for_enter()
        elif option == 2:
            start = console.ask_date("Enter start date (YYYY-MM-DD)", "2000-01-01")
            end = console.ask_date("Enter end date (YYYY-MM-DD)", current_date())
            if start > end:
                start, end = end, start
                console.write(f"{_YELLOW}Dates were swapped to ensure correct range.{_RESET}\n")
            console.clear_screen()
            console.write(
                render.date_range_report(
                    start, end, filter_by_date_range(self.activities, start, end)
                )
            )
            console.wait_for_enter()
        elif option == 3:
            low = console.ask_float("Enter minimum duration (minutes): ", 0.0, True)
            high = console.ask_float(
                "Enter maximum duration (minutes, 0 for no maximum): ", 0.0, True
            )
            if high > 0 and low > high:
                low, high = high, low
                console.write(
                    f"{_YELLOW}Duration values were swapped to ensure correct range.{_RESET}\n"
                )
            console.clear_screen()
            console.write(
                render.duration_report(low, high, filter_by_duration(self.activities, low, high))
            )
            console.wait_for_enter()

    # --- charts ---

    def show_progress_chart(self) -> None:
        """Bar charts of daily duration and distance."""
        if self.activities:
            self.console.clear_screen()
        self.console.write(render.progress_chart(self.activities))
        self.console.wait_for_enter()

    def show_activity_distribution(self) -> None:
        """Share of each activity type with totals."""
        if self.activities:
            self.console.clear_screen()
        self.console.write(render.distribution_chart(self.activities))
        self.console.wait_for_enter()

    # --- goals ---

    def manage_goals(self) -> None:
        """Goals submenu: add, view all, view achieved, view pending."""
        console = self.console
        console.write(GOALS_MENU)
        option = console.ask_int("Enter option: ", 0, 4)
        if option == 1:
            self.add_goal()
        elif option == 2:
            self.view_goals()
        elif option in (3, 4):
            wanted = option == 3
            selected = [goal for goal in self.goals if goal.achieved == wanted]
            console.clear_screen()
            console.write(render.goals_table(selected))
            console.wait_for_enter()

    def add_goal(self) -> Goal:
        """Ask for a new goal, record it and save the goals file."""
        console = self.console
        console.clear_screen()
        console.write(_block([_RULE, f"        {_YELLOW}SET NEW GOAL{_RESET}", _RULE]))
        description = console.ask_string("Goal Description", "Complete a 5K run")
        console.write(ADD_MENU)
        kind = SELECTABLE_TYPES[console.ask_int("Select activity type: ", 1, 5) - 1]
        deadline = console.ask_date("Deadline (YYYY-MM-DD)", current_date())
        target_distance = 0.0
        target_reps = 0
        if kind.has_distance():
            target_distance = console.ask_float("Target distance (kilometers): ", 0.0, True)
        target_duration = console.ask_float(
            "Target duration (minutes, 0 for no target): ", 0.0, True
        )
        if kind is ActivityType.STRENGTH:
            target_reps = console.ask_int("Target repetitions: ", 0, 1000)
        goal = Goal(
            kind=kind,
            description=description,
            deadline=deadline,
            target_distance=target_distance,
            target_duration=target_duration,
            target_reps=target_reps,
        )
        self.goals.append(goal)
        self._save_goals()
        console.write(f"\n{_GREEN}New goal added successfully!{_RESET}\n")
        console.wait_for_enter()
        return goal

    def view_goals(self) -> None:
        """List goals and optionally show one goal's details and progress."""
        console = self.console
        console.clear_screen()
        console.write(render.goals_table(self.goals))
        if not self.goals:
            console.wait_for_enter()
            return
        goal_id = console.ask_int(
            "Enter goal ID to view details (0 to go back): ", 0, len(self.goals)
        )
        if goal_id > 0:
            console.clear_screen()
            console.write(render.goal_details(self.goals[goal_id - 1], self.activities))
        console.wait_for_enter()

    def check_goal_achievements(self) -> list[Goal]:
        """Mark goals reached by the recorded activities and announce them."""
        newly_achieved = update_achievements(self.goals, self.activities)
        if newly_achieved:
            console = self.console
            self._save_goals()
            console.clear_screen()
            console.write(
                _block(
                    [
                        _RULE,
                        f"     {_GREEN}GOAL ACHIEVED!{_RESET}",
                        _RULE,
                        "Congratulations! You have achieved one or more of your goals!",
                        "Check your goals page for details.",
                    ]
                )
            )
            console.wait_for_enter()
        return newly_achieved

    # --- data management ---

    def backup_data(self) -> list[str]:
        """Write copies of activities and goals to ``.bak`` files beside the data files."""
        console = self.console
        written = []
        targets = (
            (self.data_path + ".bak", save_activities, self.activities),
            (self.goals_path + ".bak", save_goals, self.goals),
        )
        for target, saver, records in targets:
            try:
                saver(target, records)
            except OSError:
                console.error(f"Error: Could not open file {target} for writing.")
                continue
            written.append(target)
            console.write(f"{_GREEN}Backup written to '{target}'.{_RESET}\n")
        console.wait_for_enter()
        return written


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the tracker on a data file; returns the process exit status."""
    parser = argparse.ArgumentParser(description="Record and review sports activities.")
    parser.add_argument(
        "filename",
        nargs="?",
        default=DEFAULT_DATA_FILE,
        help="activity data file (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    try:
        with Tracker(args.filename) as tracker:
            tracker.run()
    except Exception as exc:
        print(f"An unexpected error occurred: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())