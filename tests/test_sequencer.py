import random

from exam_seating.models import Student
from exam_seating.sequencer import adjacent_conflicts, group_by_subject, sequence

from tests.helpers import NoShuffle, make_roster


def test_empty_roster_gives_empty_sequence():
    assert sequence([]) == []


def test_round_robin_merge_in_first_seen_subject_order(example_students):
    ordered = sequence(example_students, NoShuffle())
    assert [s.student_id for s in ordered] == ["S1", "S3", "S2"]


def test_groups_keep_first_occurrence_order():
    students = make_roster({"Chem": 1, "Bio": 2})
    students.append(Student("X", "x", "Chem"))
    assert list(group_by_subject(students)) == ["Chem", "Bio"]


def test_two_subjects_alternate_until_one_runs_out():
    students = make_roster({"Math": 7, "Phys": 4})
    ordered = sequence(students, random.Random(3))

    head = ordered[:8]
    for prev, cur in zip(head, head[1:]):
        assert prev.subject != cur.subject
    assert all(s.subject == "Math" for s in ordered[8:])


def test_balanced_subjects_have_no_adjacent_conflicts():
    students = make_roster({"Math": 10, "Phys": 10, "Chem": 10})
    assert adjacent_conflicts(sequence(students, random.Random(1))) == 0


def test_single_subject_cannot_be_separated():
    students = make_roster({"Math": 5})
    assert adjacent_conflicts(sequence(students, random.Random(0))) == 4


def test_same_seed_same_order():
    students = make_roster({"Math": 12, "Phys": 9, "Bio": 3})
    first = sequence(students, random.Random(42))
    second = sequence(students, random.Random(42))
    assert first == second


def test_every_student_appears_once():
    students = make_roster({"Math": 6, "Phys": 2, "": 3})
    ordered = sequence(students, random.Random(7))
    assert sorted(s.student_id for s in ordered) == sorted(s.student_id for s in students)


def test_empty_subject_is_an_ordinary_group():
    students = [Student("A", "a", ""), Student("B", "b", ""), Student("C", "c", "Art")]
    ordered = sequence(students, NoShuffle())
    assert [s.student_id for s in ordered] == ["A", "C", "B"]


def test_does_not_touch_global_random_state():
    random.seed(99)
    expected = random.random()

    random.seed(99)
    sequence(make_roster({"Math": 5, "Phys": 5}), random.Random(1))
    assert random.random() == expected


def test_input_list_is_not_reordered():
    students = make_roster({"Math": 4, "Phys": 4})
    before = list(students)
    sequence(students, random.Random(5))
    assert students == before
