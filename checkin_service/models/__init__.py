from .common import ApiResponse, NonBlankStr, fail, ok, validate_date_key
from .seminar_models import Seminar, SeminarCreate, SeminarUpdate
from .attendee_models import (
    Attendee,
    AttendeeCreate,
    AttendeeUpdate,
    BulkAttendee,
    BulkAttendeeRequest,
)
from .report_models import BreakfastReport, DashboardSummary, ReportRow
