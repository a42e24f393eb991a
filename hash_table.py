# Custom Hash Table (separate chaining, fixed capacity) for course storage
# Key: course number (str, e.g. 'CSCI101'). Value: the Course record itself.

from __future__ import annotations

import logging
from typing import Iterator, List, Optional

from models import Course
from sorting import sort_courses
from util import parse_leading_int


logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 179

# Course numbers are a 4-letter department code followed by digits.
PREFIX_LENGTH = 4


def course_hash(key: str, capacity: int) -> int:
    """Bucket index for a course number.

    index = (int(key[4:]) + ord(key[0])) % capacity

    The numeric tail is parsed leniently (non-numeric -> 0). Keys shorter than
    the prefix have an empty tail, and an empty key contributes 0 for its first
    character, so malformed keys land deterministically instead of raising.
    Non-uniform on purpose: same-department courses with nearby numbers
    cluster into neighbouring buckets.
    """
    numeric = parse_leading_int(key[PREFIX_LENGTH:])
    first = ord(key[0]) if key else 0
    return (numeric + first) % capacity


class _Node:
    """One entry of a bucket chain."""

    __slots__ = ('course', 'key', 'next')

    def __init__(self, course: Course, key: int, next: Optional[_Node] = None):
        self.course = course
        self.key = key          # hash of this node's own course number
        self.next = next

    def __repr__(self):
        return f'_Node({self.course.number!r}, key={self.key})'


class HashTable:
    def __init__(self, capacity=DEFAULT_CAPACITY):
        if not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f'capacity must be a positive integer, got {capacity!r}')
        # None marks an empty bucket; otherwise the slot holds the head of its chain.
        self._buckets: List[Optional[_Node]] = [None] * capacity
        self._size = 0
        logger.debug(f'Created course hash table with {capacity} buckets')

    def __len__(self):
        return self._size

    @property
    def capacity(self) -> int:
        return len(self._buckets)

    def _index(self, key: str) -> int:
        return course_hash(key, len(self._buckets))

    def insert(self, course: Course) -> None:
        """Store a course; never fails and never resizes.

        Equal keys are not merged: a second insert appends another node, and
        search keeps returning whichever one sits earlier in the chain.
        """
        i = self._index(course.number)
        node = _Node(course, i)
        head = self._buckets[i]
        if head is None:
            self._buckets[i] = node
        else:
            while head.next is not None:
                head = head.next
            head.next = node
        self._size += 1

    def search(self, number: str) -> Optional[Course]:
        """Return the first course stored under `number`, or None."""
        node = self._buckets[self._index(number)]
        while node is not None:
            if node.course.number == number:
                return node.course
            node = node.next
        return None

    def remove(self, number: str) -> bool:
        """Unlink the first course stored under `number`.

        Returns False (and changes nothing) when there is no such course.
        """
        i = self._index(number)
        head = self._buckets[i]
        if head is None:
            return False

        if head.course.number == number:
            # Promote the next chain node (or leave the bucket empty).
            self._buckets[i] = head.next
            head.next = None
            self._size -= 1
            return True

        prev, node = head, head.next
        while node is not None:
            if node.course.number == number:
                prev.next = node.next
                node.next = None
                self._size -= 1
                return True
            prev, node = node, node.next
        return False

    def __iter__(self) -> Iterator[Course]:
        """Yield every course in bucket order, then chain order (unsorted)."""
        for head in self._buckets:
            node = head
            while node is not None:
                yield node.course
                node = node.next

    def enumerate_sorted(self) -> List[Course]:
        """All courses in ascending course-number order."""
        return sort_courses(self)

    def load_factor(self) -> float:
        return self._size / len(self._buckets)

    # Helpers for screenshots/debug
    def first_n_buckets(self, n=10) -> List[List[str]]:
        """Course numbers held by each of the first `n` buckets, in chain order."""
        view = []
        for head in self._buckets[:n]:
            numbers = []
            node = head
            while node is not None:
                numbers.append(node.course.number)
                node = node.next
            view.append(numbers)
        return view
