"""
Error taxonomy raised by the service layer.

Routes catch these at the request boundary and turn them into a flash and
redirect, a rendered error page, or a plain text body.
"""


class JobBoardError(Exception):
    """Base class for every error the services raise on purpose."""
    default_message = 'Something went wrong'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(JobBoardError):
    """A required field was missing or malformed."""
    default_message = 'Invalid input'


class DuplicateEmail(JobBoardError):
    """A user with this email already exists."""
    default_message = 'Email already exists'


class InvalidCredentials(JobBoardError):
    default_message = 'Invalid credentials'


class NotFound(JobBoardError):
    default_message = 'Not found'


class PersistenceError(JobBoardError):
    """The database rejected a read or write."""
    default_message = 'Database error'
