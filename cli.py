"""cli.py

Interactive command-line interface for the course planner.

Program flow when you run `python main.py`:
  1) Create an empty course HashTable.
  2) Loop over a small menu:
       - load a course CSV into the table
       - print the full course list in course-number order
       - look up a single course
       - show the first few hash table buckets (screenshot aid)

Note:
- The CLI is intentionally small; storage lives in hash_table.py, ordering in
  sorting.py and CSV parsing in data_loader.py.
- The table is created here and passed to each action; there is no global catalog.
"""

from __future__ import annotations

import os
from typing import Callable, Optional

from hash_table import HashTable
from data_loader import load_courses_into
from sorting import format_course
from util import normalize_course_number


DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')
DEFAULT_CSV = 'courses.csv'

MENU = (
    "  1. Load Data Structure\n"
    "  2. Print Course List\n"
    "  3. Print Course\n"
    "  4. Show first 10 hash table buckets\n"
    "  9. Exit\n"
)


def resolve_csv_path(name: str) -> Optional[str]:
    """Find a course CSV: as given (relative to the cwd) first, then in data/."""
    name = (name or '').strip() or DEFAULT_CSV
    if os.path.isfile(name):
        return name
    bundled = os.path.join(DATA_DIR, name)
    if os.path.isfile(bundled):
        return bundled
    return None


def load_action(table: HashTable, name: str) -> int:
    """Load a CSV into the table. Returns the number of courses loaded (0 on failure)."""
    path = resolve_csv_path(name)
    if path is None:
        print(f"Failed to open file {name}")
        return 0

    print(f"Loading CSV file {path}")
    try:
        count = load_courses_into(table, path)
    except UnicodeDecodeError:
        # The whole file is read before inserting, so the table is unchanged.
        print(f"Failed to read file {path}: not UTF-8 text")
        return 0
    except OSError as e:
        print(f"Failed to open file {path}: {e.strerror or e}")
        return 0
    print(f"{count} courses loaded.")
    return count


def print_course_list(table: HashTable) -> None:
    """Print every course, sorted by course number."""
    courses = table.enumerate_sorted()
    if not courses:
        print("No courses loaded.")
        return
    for course in courses:
        print(format_course(course))


def print_course(table: HashTable, number: str) -> bool:
    """Look up one course (case-insensitive) and print it. Returns True if found."""
    key = normalize_course_number(number)
    course = table.search(key)
    if course is None:
        print(f"Course Number {key} not found.")
        return False
    print(format_course(course))
    return True


def print_buckets(table: HashTable, n: int = 10) -> None:
    """Print the first n buckets and their chains."""
    print(f"\nFirst {n} buckets (of {table.capacity}, load factor {table.load_factor():.2f}):\n")
    for idx, numbers in enumerate(table.first_n_buckets(n)):
        chain = ' -> '.join(numbers) if numbers else '(empty)'
        print(f"Bucket {idx}: {chain}")
    print()


def run_cli(input_fn: Callable[[str], str] = input) -> None:
    """CLI entry point."""
    print("Welcome to the course planner.")

    table = HashTable()

    # ---- Interactive menu ----
    while True:
        print()
        print(MENU)
        try:
            choice = input_fn("What would you like to do? ").strip()
        except EOFError:
            break

        if choice == '1':
            try:
                name = input_fn(f"Enter file name to load (default {DEFAULT_CSV}): ")
            except EOFError:
                break
            load_action(table, name)

        elif choice == '2':
            print_course_list(table)

        elif choice == '3':
            try:
                number = input_fn("What course do you want to know about? ")
            except EOFError:
                break
            print_course(table, number)

        elif choice == '4':
            print_buckets(table)

        elif choice == '9':
            break

        else:
            print(f"{choice} is not a valid option.")

    print("Good bye.")
