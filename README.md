# sportstracker

A menu-driven terminal application for logging sports activities (running,
walking, swimming, cardio and strength training), reviewing statistics,
drawing progress charts in the terminal and tracking personal goals.

## Installation

```
pip install .
```

## Usage

```
sportstracker [FILENAME]
```

`FILENAME` is the activity data file and defaults to `activities_cpp.csv` in
the current directory.

The main menu offers:

- **1 Add Activity**: record a date, a duration in minutes, and either a
  distance in kilometres (running, walking, swimming) or a number of
  repetitions (strength).
- **2 View Activities**: a table of everything recorded.
- **3 Search Activities**: by keyword (matched case-insensitively against the
  activity type, or as text within the date) or by a specific date.
- **4 Filter Activities**: by type, by date range or by duration range, with
  summary figures. Reversed ranges are swapped; a maximum duration of 0 means
  no maximum.
- **5 View Statistics**: count, average duration and average distance per type.
- **6 Show Progress Chart**: bar charts of daily total duration and distance.
- **7 Set New Goal**: a description, activity type, deadline and targets for
  distance, duration or repetitions. The goals file is saved immediately.
- **8 View Goals & Achievements**: the list of goals with their status, and
  for a chosen goal its targets and progress.
- **9 Backup Data**: writes copies of both data files with a `.bak` suffix
  added (for example `activities_cpp.csv.bak`).
- **0 Exit**: saves both files and quits.

Dates use the `YYYY-MM-DD` format, between 1900 and 2100; pressing Enter at a
date prompt accepts the default shown in brackets (usually today).

A goal is achieved once the activities of its type dated on or before its
deadline reach every target greater than zero. Goals are checked at start-up
and after each new activity.

## Data files

Activities are stored one per line as
`type,date,duration,distance,repetitions`, where `type` is a code from 0
(running) to 4 (strength). Goals are stored in a second file named by
inserting `_goals` before the file extension (`activities_cpp_goals.csv` by
default) as `type,description,deadline,duration,distance,repetitions`. Lines
that cannot be read are reported and skipped. Both files are written back when
the program exits.

The achieved status of a goal is not stored; it is worked out again from the
activities each time the program starts. Because fields are separated by
commas, a goal description must not contain a comma.

## What it does not do

There is no restore command: to go back to a backup, copy the `.bak` file over
the data file yourself. Goals cannot be edited or deleted from the menus, and
recorded activities cannot be changed or removed.

## Using it as a library

The building blocks can be used on their own:

```python
from sportstracker.models import Activity, ActivityType, Goal
from sportstracker.storage import load_activities, save_activities
from sportstracker.stats import summarize_by_type, filter_by_duration, goal_progress
from sportstracker.dates import is_date_valid, days_between
from sportstracker import render

activities = load_activities("activities_cpp.csv")
for kind, stats in summarize_by_type(activities).items():
    print(kind.display_name(), stats.count, stats.average_duration())

print(render.distribution_chart(activities))
```

- `sportstracker.models`: `ActivityType`, `Activity`, `Goal`,
  `activity_type_from_code`.
- `sportstracker.dates`: `is_date_valid`, `is_date_in_range`, `days_between`,
  `format_duration`, `current_date`.
- `sportstracker.storage`: line parsing and formatting, `load_*`/`save_*` for
  activities and goals, `goals_path_for`, and `ParseError`.
- `sportstracker.stats`: per-type totals (`TypeStats`), goal progress
  (`GoalProgress`, `update_achievements`), searches, filters, `daily_totals`
  and `type_distribution`.
- `sportstracker.render`: the text tables, reports and bar charts, as strings
  with ANSI colours.
- `sportstracker.console.Console`: validated prompts over any text streams.
- `sportstracker.app.Tracker`: the interactive application. It also has
  `show_activity_distribution` and `manage_goals` (including lists of achieved
  or pending goals), which the main menu does not offer.

## Running the tests

```
pip install .[test]
pytest
```