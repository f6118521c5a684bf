from .seminar_service import SeminarService
from .attendee_service import AttendeeService
from .report_service import ReportService

__all__ = ["SeminarService", "AttendeeService", "ReportService"]
