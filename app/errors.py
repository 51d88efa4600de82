## Application error taxonomy
#
# Every error carries a human-readable message and the HTTP status it maps to.
# The handler in app.main turns these into {"error": message} responses.


class AppError(Exception):
    status_code = 500
    default_message = "Something went wrong"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotAuthenticated(AppError):
    status_code = 401
    default_message = "Unauthorized"


class NotFound(AppError):
    status_code = 404
    default_message = "Not found"


class InvalidRequest(AppError):
    status_code = 400
    default_message = "Invalid request"


class GenerationFailure(AppError):
    """Remote model call, parse or validation failed with no fallback defined."""

    status_code = 502
    default_message = "Failed to generate content"


class PersistenceFailure(AppError):
    """Store read/write failed. The original error is logged, never returned."""

    status_code = 500
    default_message = "Failed to save changes"
