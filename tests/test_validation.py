import pytest

from exam_seating.errors import CapacityError, ValidationError
from exam_seating.models import Room, Student
from exam_seating.validation import check_capacity, validate_inputs

from tests.helpers import make_roster, make_rooms


def kind_of(exam, students, rooms):
    with pytest.raises(ValidationError) as exc:
        validate_inputs(exam, students, rooms)
    return exc.value


def test_missing_exam(example_students, example_rooms):
    assert kind_of(None, example_students, example_rooms).kind == ValidationError.MISSING_EXAM


@pytest.mark.parametrize("students", [None, []])
def test_empty_roster(exam, example_rooms, students):
    assert kind_of(exam, students, example_rooms).kind == ValidationError.EMPTY_ROSTER


@pytest.mark.parametrize("rooms", [None, []])
def test_empty_rooms(exam, example_students, rooms):
    assert kind_of(exam, example_students, rooms).kind == ValidationError.EMPTY_ROOMS


def test_all_duplicate_students_are_named(exam, example_rooms):
    students = [
        Student("A", "a", "Math"), Student("B", "b", "Math"),
        Student("A", "a2", "Phys"), Student("B", "b2", "Phys"), Student("C", "c", "Phys"),
    ]
    err = kind_of(exam, students, example_rooms)
    assert err.kind == ValidationError.DUPLICATE_STUDENT
    assert err.identifiers == ("A", "B")
    assert "A" in str(err) and "B" in str(err)


def test_duplicate_room(exam, example_students):
    rooms = [Room("R1", "one", 5), Room("R1", "again", 3)]
    err = kind_of(exam, example_students, rooms)
    assert err.kind == ValidationError.DUPLICATE_ROOM
    assert err.identifiers == ("R1",)


def test_non_positive_capacity(exam, example_students):
    rooms = [Room("R1", "one", 5), Room("R0", "closet", 0)]
    err = kind_of(exam, example_students, rooms)
    assert err.kind == ValidationError.INVALID_CAPACITY
    assert err.identifiers == ("R0",)


def test_valid_input_passes(exam, example_students, example_rooms):
    validate_inputs(exam, example_students, example_rooms)


def test_capacity_check():
    check_capacity(make_roster({"Math": 5}), make_rooms([2, 3]))
    with pytest.raises(CapacityError):
        check_capacity(make_roster({"Math": 6}), make_rooms([2, 3]))
