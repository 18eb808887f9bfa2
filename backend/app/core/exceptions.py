"""
Custom Exceptions for StudyFlow
===============================

Use these instead of generic Exception so the API layer can map them
to HTTP status codes:

    ResourceNotFoundError -> 404
    ValidationError       -> 400
    StudyFlowError        -> 500

Usage:
    from app.core.exceptions import TaskNotFoundError

    task = storage.get_task(task_id)
    if not task:
        raise TaskNotFoundError(task_id)
"""

from typing import Optional, Any, Dict, List


class StudyFlowError(Exception):
    """Base exception for all StudyFlow errors"""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details
        }


# ============================================
# Resource Errors (404-type)
# ============================================

class ResourceNotFoundError(StudyFlowError):
    """Base class for not found errors"""

    def __init__(self, resource_type: str, resource_id: Any):
        super().__init__(
            f"{resource_type} not found",
            code=f"{resource_type.upper().replace(' ', '_')}_NOT_FOUND",
            details={"resource_type": resource_type, "resource_id": resource_id}
        )


class UserNotFoundError(ResourceNotFoundError):
    def __init__(self, user_id: int):
        super().__init__("User", user_id)


class CourseNotFoundError(ResourceNotFoundError):
    def __init__(self, course_id: int):
        super().__init__("Course", course_id)


class TaskNotFoundError(ResourceNotFoundError):
    def __init__(self, task_id: int):
        super().__init__("Task", task_id)


class NodeNotFoundError(ResourceNotFoundError):
    """Mind map node not found"""

    def __init__(self, node_id: int):
        super().__init__("Node", node_id)


class EdgeNotFoundError(ResourceNotFoundError):
    """Mind map edge not found"""

    def __init__(self, edge_id: int):
        super().__init__("Edge", edge_id)


class GoalNotFoundError(ResourceNotFoundError):
    def __init__(self, goal_id: int):
        super().__init__("Goal", goal_id)


class SessionNotFoundError(ResourceNotFoundError):
    """Pomodoro session not found"""

    def __init__(self, session_id: int):
        super().__init__("Session", session_id)


# ============================================
# Validation Errors (400-type)
# ============================================

class ValidationError(StudyFlowError):
    """Input validation failed"""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="VALIDATION_ERROR", details=details)


class InvalidViewOptionError(ValidationError):
    """Unknown filter or sort key for a derived view"""

    def __init__(self, option: str, value: str, allowed: List[str]):
        super().__init__(
            f"Invalid {option} '{value}'. Must be one of: {', '.join(allowed)}",
            field=option
        )
        self.code = "INVALID_VIEW_OPTION"
        self.details["allowed"] = allowed


class InvalidTimerSettingsError(ValidationError):
    """Pomodoro durations and interval must be positive"""

    def __init__(self, setting: str, value: Any):
        super().__init__(
            f"Timer setting '{setting}' must be a positive integer, got {value!r}",
            field=setting
        )
        self.code = "INVALID_TIMER_SETTINGS"
        self.details["value"] = value


# ============================================
# Helper function for API responses
# ============================================

def error_response(error: StudyFlowError) -> Dict[str, Any]:
    """Convert exception to API error response format"""
    return {
        "message": error.message,
        "error": error.to_dict()
    }
