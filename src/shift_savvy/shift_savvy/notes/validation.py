from __future__ import annotations

from ..common.datetime_utils import parse_hhmm
from ..core.constants import MAX_NOTE_CONTENT_LENGTH, MAX_NOTE_TITLE_LENGTH
from ..core.exceptions import ValidationError
from .model import Note


def collect_note_errors(note: Note) -> dict[str, str]:
    errors: dict[str, str] = {}

    if not note.title.strip():
        errors["title"] = "Tiêu đề không được để trống"
    elif len(note.title) > MAX_NOTE_TITLE_LENGTH:
        errors["title"] = f"Tiêu đề quá dài (tối đa {MAX_NOTE_TITLE_LENGTH} ký tự)"

    if not note.content.strip():
        errors["content"] = "Nội dung không được để trống"
    elif len(note.content) > MAX_NOTE_CONTENT_LENGTH:
        errors["content"] = f"Nội dung quá dài (tối đa {MAX_NOTE_CONTENT_LENGTH} ký tự)"

    if not note.reminder_time:
        errors["reminder_time"] = "Thời gian nhắc nhở không được để trống"
    else:
        try:
            parse_hhmm(note.reminder_time)
        except ValueError:
            errors["reminder_time"] = "Giờ không hợp lệ (định dạng HH:MM)"

    if not note.associated_shift_ids and not note.explicit_reminder_days:
        errors["days"] = "Vui lòng chọn ít nhất một ngày hoặc liên kết với một ca làm việc"

    return errors


def validate_note(note: Note) -> Note:
    errors = collect_note_errors(note)
    if errors:
        raise ValidationError("Ghi chú không hợp lệ", errors)
    return note
