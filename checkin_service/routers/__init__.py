from .seminar_router import router as seminar_router
from .attendee_router import router as attendee_router
from .dashboard_router import router as dashboard_router
from .health_router import router as health_router

__all__ = ["seminar_router", "attendee_router", "dashboard_router", "health_router"]
