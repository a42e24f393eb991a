"""data_loader.py

CSV loader for course catalogs.

Expected shape, one course per row, no header:
    CSCI100,Introduction to Computer Science
    CSCI101,Introduction to Programming in C++,CSCI100
    MATH201,Discrete Mathematics

Catalog exports are often hand-edited, so the loader is forgiving:
- blank rows and rows without a course name are skipped
- prerequisites that are not themselves courses in the same file are dropped
- empty trailing cells (e.g. 'CSCI100,Intro,,') are ignored
Anything skipped or dropped is logged at WARNING.
"""

from __future__ import annotations

import csv
import logging
from typing import List

from hash_table import HashTable
from models import Course


logger = logging.getLogger(__name__)


def _read_rows(path: str) -> List[tuple]:
    """Read (line_no, cells) pairs with every cell stripped."""
    rows = []
    with open(path, newline='', encoding='utf-8-sig') as f:
        for line_no, row in enumerate(csv.reader(f), start=1):
            rows.append((line_no, [(cell or '').strip() for cell in row]))
    return rows


def load_courses_csv(path: str) -> List[Course]:
    """Load courses from a CSV into a list of Course records (file order)."""
    rows = _read_rows(path)

    # 1) Collect every course number so prerequisites can be checked against the file.
    known = {cells[0] for _, cells in rows if cells and cells[0]}

    # 2) Build the records.
    courses: List[Course] = []
    for line_no, cells in rows:
        if not cells or not any(cells):
            continue

        number = cells[0]
        name = cells[1] if len(cells) > 1 else ''
        if not number or not name:
            logger.warning(f'{path}:{line_no}: skipping row without course number/name: {cells!r}')
            continue

        prerequisites = []
        for prereq in cells[2:]:
            if not prereq:
                continue
            if prereq in known:
                prerequisites.append(prereq)
            else:
                logger.warning(f'{path}:{line_no}: dropping unknown prerequisite {prereq!r} of {number}')

        courses.append(Course(number=number, name=name, prerequisites=tuple(prerequisites)))

    logger.info(f'Loaded {len(courses)} courses from {path}')
    return courses


def load_courses_into(table: HashTable, path: str) -> int:
    """Insert every course from the CSV into `table`; returns how many were inserted.

    No de-duplication: loading the same file twice stores each course twice.
    """
    courses = load_courses_csv(path)
    for course in courses:
        table.insert(course)
    return len(courses)
