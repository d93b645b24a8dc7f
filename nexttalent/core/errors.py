"""Errors raised by the workflow services and translated to HTTP statuses in main."""


class WorkflowError(Exception):
    """Base class for expected workflow failures."""


class NotFoundError(WorkflowError):
    pass


class PermissionDeniedError(WorkflowError):
    pass


class InvalidTransitionError(WorkflowError):
    """Raised when a status change is not in the transition table."""


class ConflictError(WorkflowError):
    """Raised when the target already exists or a precondition does not hold."""


class InvalidRequestError(WorkflowError):
    """Raised when input is rejected before anything is written."""
