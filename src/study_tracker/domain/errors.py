"""Error taxonomy for session scheduling.

Every error carries a message meant to be shown to the user as-is.
"""

from __future__ import annotations


class StudyTrackerError(Exception):
    """Base class for failures surfaced to the caller."""


class SessionValidationError(StudyTrackerError):
    """A candidate session was rejected by the validation rules."""


class MissingField(SessionValidationError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"The {field} field is required.")


class InvalidFormat(SessionValidationError):
    def __init__(self, field: str, value: object, expected: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field} {value!r}: expected {expected}.")


class InvalidDuration(SessionValidationError):
    def __init__(self, duration: object) -> None:
        self.duration = duration
        super().__init__("Duration must be a positive number of minutes.")


class CrossesMidnight(SessionValidationError):
    def __init__(self) -> None:
        super().__init__("Session cannot extend past midnight.")


class Overlap(SessionValidationError):
    def __init__(self, conflicting_title: str) -> None:
        self.conflicting_title = conflicting_title
        super().__init__(f'This session overlaps with "{conflicting_title}".')


class UnknownField(SessionValidationError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Field {field!r} cannot be edited.")


class SessionNotFound(StudyTrackerError):
    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"Session {session_id} not found.")


class UnknownSetting(StudyTrackerError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown setting {name!r}.")
