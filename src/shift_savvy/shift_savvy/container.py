from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.calculator.standard_calculator import StandardDailyStatusCalculator
from .attendance.factory import StatusStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .backup.service import BackupService
from .database.connection import DBConfig, DatabaseConnection
from .notes.mysql_note_repository import MySQLNoteRepository
from .notes.repository import NoteRepository
from .notes.service import NoteService
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsRepository
from .settings.service import SettingsService
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.repository import ShiftRepository
from .shifts.service import ShiftService
from .statistics.service import StatisticsService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    shifts_repo: ShiftRepository
    attendance_repo: AttendanceRepository
    settings_repo: SettingsRepository
    notes_repo: NoteRepository

    shift_service: ShiftService
    attendance_service: AttendanceService
    settings_service: SettingsService
    note_service: NoteService
    statistics_service: StatisticsService
    backup_service: BackupService


def assemble(
    *,
    shifts_repo: ShiftRepository,
    attendance_repo: AttendanceRepository,
    settings_repo: SettingsRepository,
    notes_repo: NoteRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    attendance_service = AttendanceService(
        attendance_repo,
        shifts_repo,
        settings_repo,
        calculator=StandardDailyStatusCalculator(strategy_factory=StatusStrategyFactory()),
    )

    return Container(
        conn=conn,
        shifts_repo=shifts_repo,
        attendance_repo=attendance_repo,
        settings_repo=settings_repo,
        notes_repo=notes_repo,
        shift_service=ShiftService(shifts_repo),
        attendance_service=attendance_service,
        settings_service=SettingsService(settings_repo),
        note_service=NoteService(notes_repo),
        statistics_service=StatisticsService(attendance_repo),
        backup_service=BackupService(shifts_repo, attendance_repo, settings_repo, notes_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return assemble(
        shifts_repo=MySQLShiftRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        settings_repo=MySQLSettingsRepository(conn),
        notes_repo=MySQLNoteRepository(conn),
        conn=conn,
    )
