"""Domain errors raised by the service layer.

The API maps each class to a status code in ``workout_log.main``. Ownership
misses are reported as ``NotFoundError`` so callers cannot tell another user's
record from a missing one.
"""


class WorkoutLogError(Exception):
    """Base class for service-level errors."""

    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class UnauthenticatedError(WorkoutLogError):
    """No user identity was presented with the request."""

    status_code = 401


class NotFoundError(WorkoutLogError):
    """Target record does not exist or is not owned by the caller."""

    status_code = 404


class ValidationError(WorkoutLogError):
    """Input rejected before reaching storage."""

    status_code = 422


class ConstraintError(WorkoutLogError):
    """A unique, check or foreign-key constraint rejected the write."""

    status_code = 409


class DuplicateNameError(ConstraintError):
    """The user already has an exercise with this name."""
