"""sorting.py

Ordered listing of the catalog.

The hash table hands us its courses in bucket order. We sort them by course
number with an in-place quicksort (midpoint pivot, Hoare-style partition):
  - average O(n log n), worst case O(n^2)
  - not stable: courses sharing a number may come out in either order
"""

from __future__ import annotations

from typing import Iterable, List

from models import Course
from util import join_prerequisites


def partition(courses: List[Course], low: int, high: int) -> int:
    """Partition courses[low..high] around the midpoint's course number.

    Returns the index of the last element of the lower part.
    """
    # Capture the pivot value; the element itself may move while we swap.
    midpoint = low + (high - low) // 2
    pivot = courses[midpoint].number

    while True:
        while courses[low].number < pivot:
            low += 1
        while pivot < courses[high].number:
            high -= 1

        # Zero or one elements left between the pointers: done.
        if low >= high:
            return high

        courses[low], courses[high] = courses[high], courses[low]
        low += 1
        high -= 1


def quicksort(courses: List[Course], begin: int, end: int) -> None:
    """Sort courses[begin..end] (inclusive) by course number, in place."""
    if begin >= end:
        return

    # Recursion depth grows with bad pivots; fine for catalog-sized inputs.
    mid = partition(courses, begin, end)
    quicksort(courses, begin, mid)
    quicksort(courses, mid + 1, end)


def sort_courses(courses: Iterable[Course]) -> List[Course]:
    """Return a new list of `courses` in ascending course-number order."""
    ordered = list(courses)
    quicksort(ordered, 0, len(ordered) - 1)
    return ordered


def format_course(course: Course) -> str:
    """One display line: number, name and (if any) the prerequisites."""
    line = f'Number: {course.number} Name: {course.name}'
    if course.prerequisites:
        line += f' Prerequisites: {join_prerequisites(course.prerequisites)}'
    return line
