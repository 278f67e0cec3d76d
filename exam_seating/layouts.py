from collections import namedtuple

from exam_seating.config import QR_PREFIX, SEATS_PER_ROW

Seat = namedtuple("Seat", ["seat_number", "row", "column"])


def seat_position(seat_number, seats_per_row=SEATS_PER_ROW):
    """Translate a 1-based seat number into a (row, column) pair."""
    if seat_number < 1:
        raise ValueError(f"seat numbers start at 1, got {seat_number}")
    row = (seat_number - 1) // seats_per_row + 1
    column = (seat_number - 1) % seats_per_row + 1
    return row, column


def generate_layout(seat_count, first_seat=1):
    seats = []

    for seat_number in range(first_seat, first_seat + seat_count):
        row, column = seat_position(seat_number)
        seats.append(
            Seat(
                seat_number=seat_number,
                row=row,
                column=column
            )
        )

    return seats


def qr_code(student_id, room_id, seat_number):
    return f"{QR_PREFIX}_{student_id}_{room_id}_{seat_number}"
