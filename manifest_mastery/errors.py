"""Wizard error types."""


class WizardError(Exception):
    """Base class for errors raised by wizard operations."""


class InvalidFileError(WizardError):
    """Uploaded vision board file is missing or not a readable image."""


class UnknownGoalError(WizardError):
    """Goal name is not one of the offered career goals."""


class UnknownFieldError(WizardError):
    """Field name does not exist on the record being edited."""


class GoalNotSelectedError(WizardError):
    """Operation refers to a goal that is not currently selected."""


class SessionNotFoundError(WizardError):
    """No wizard session exists for the given id."""
