import random

from exam_seating.models import Room, Student


class NoShuffle(random.Random):
    """Keeps each subject group in roster order."""

    def shuffle(self, x):
        pass


def make_roster(counts):
    """counts: {subject: n} -> students with ids like MATH-3."""
    students = []
    for subject, n in counts.items():
        for i in range(1, n + 1):
            students.append(Student(f"{subject.upper()}-{i}", f"{subject} student {i}", subject))
    return students


def make_rooms(capacities):
    return [Room(f"R{i}", f"Room {i}", cap, rows=cap // 5 + 1, columns=5) for i, cap in enumerate(capacities, 1)]
