import pytest

from exam_seating.models import Exam, Room, Student


@pytest.fixture
def exam():
    return Exam(exam_id="EX-2024-12", subject="Finals", exam_date="2024-12-20", session="Morning")


@pytest.fixture
def example_students():
    return [
        Student("S1", "Asha", "Math"),
        Student("S2", "Bilal", "Math"),
        Student("S3", "Chen", "Phys"),
    ]


@pytest.fixture
def example_rooms():
    # deliberately not sorted by capacity
    return [
        Room("R2", "Hall B", 3, rows=1, columns=3),
        Room("R1", "Hall A", 2, rows=1, columns=2),
    ]
