"""Pydantic schemas used when an arrangement leaves or enters the process."""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from exam_seating.models import Exam, Room, SeatingArrangement, SeatingAssignment, Student


class ExamSchema(BaseModel):
    exam_id: str
    subject: str = ""
    exam_date: Optional[str] = None
    session: Optional[str] = None

    @classmethod
    def from_model(cls, exam):
        return cls(
            exam_id=exam.exam_id,
            subject=exam.subject,
            exam_date=exam.exam_date,
            session=exam.session
        )

    def to_model(self):
        return Exam(
            exam_id=self.exam_id,
            subject=self.subject,
            exam_date=self.exam_date,
            session=self.session
        )


class StudentSchema(BaseModel):
    student_id: str
    name: str
    subject: str
    special_requirements: List[str] = []

    @classmethod
    def from_model(cls, student):
        return cls(
            student_id=student.student_id,
            name=student.name,
            subject=student.subject,
            special_requirements=list(student.special_requirements)
        )

    def to_model(self):
        return Student(
            student_id=self.student_id,
            name=self.name,
            subject=self.subject,
            special_requirements=tuple(self.special_requirements)
        )


class RoomSchema(BaseModel):
    room_id: str
    name: str
    capacity: int
    rows: int = 0
    columns: int = 0
    facilities: List[str] = []

    @classmethod
    def from_model(cls, room):
        return cls(
            room_id=room.room_id,
            name=room.name,
            capacity=room.capacity,
            rows=room.rows,
            columns=room.columns,
            facilities=list(room.facilities)
        )

    def to_model(self):
        return Room(
            room_id=self.room_id,
            name=self.name,
            capacity=self.capacity,
            rows=self.rows,
            columns=self.columns,
            facilities=tuple(self.facilities)
        )


class SeatingAssignmentSchema(BaseModel):
    student_id: str
    room_id: str
    seat_number: int
    row: int
    column: int
    qr_code: str

    @classmethod
    def from_model(cls, assignment):
        return cls(
            student_id=assignment.student_id,
            room_id=assignment.room_id,
            seat_number=assignment.seat_number,
            row=assignment.row,
            column=assignment.column,
            qr_code=assignment.qr_code
        )

    def to_model(self):
        return SeatingAssignment(
            student_id=self.student_id,
            room_id=self.room_id,
            seat_number=self.seat_number,
            row=self.row,
            column=self.column,
            qr_code=self.qr_code
        )


class SeatingArrangementSchema(BaseModel):
    exam_id: str
    total_students: int
    total_rooms: int
    generated_at: datetime
    assignments: List[SeatingAssignmentSchema] = []

    @classmethod
    def from_model(cls, arrangement):
        return cls(
            exam_id=arrangement.exam_id,
            total_students=arrangement.total_students,
            total_rooms=arrangement.total_rooms,
            generated_at=arrangement.generated_at,
            assignments=[SeatingAssignmentSchema.from_model(a) for a in arrangement.assignments]
        )

    def to_model(self):
        return SeatingArrangement(
            exam_id=self.exam_id,
            total_students=self.total_students,
            total_rooms=self.total_rooms,
            generated_at=self.generated_at,
            assignments=tuple(a.to_model() for a in self.assignments)
        )


def arrangement_to_json(arrangement, indent=None):
    return SeatingArrangementSchema.from_model(arrangement).model_dump_json(indent=indent)


def arrangement_from_json(data):
    return SeatingArrangementSchema.model_validate_json(data).to_model()
