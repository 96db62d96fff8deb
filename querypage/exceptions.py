"""
Custom exception classes for the application.

Every exception carries an ``http_status`` so the HTTP layer can translate
it without a per-endpoint try/except (see querypage.utils.error_handler).
"""

from querypage.constants import STAGE_COUNT, STAGE_FETCH


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        http_status: HTTP status code for REST API responses.
    """

    http_status: int = 500

    def __init__(self, message: str):
        """
        Initialize the exception with a message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)


class InvalidPageRequest(AppException):
    """
    Page request parameters are out of range.

    Raised for a negative offset, a non-positive or oversize limit, or a
    sort on a field that is not sortable. Always raised before the query
    executor is called.

    HTTP Status: 400 Bad Request
    """

    http_status = 400


class QueryExecutionError(AppException):
    """
    A delegated query failed while fetching a page.

    The ``stage`` attribute tells which delegated call failed: the bounded
    content fetch (``"fetch"``) or the total-count query (``"count"``).
    The underlying exception, if any, is chained as ``__cause__``.

    HTTP Status: 503 Service Unavailable
    """

    http_status = 503

    def __init__(self, stage: str, message: str):
        """
        Initialize the exception with the failing stage and a message.

        Args:
            stage: Either STAGE_FETCH or STAGE_COUNT.
            message: Human-readable error description.

        Raises:
            ValueError: If stage is not one of the known stages.
        """
        if stage not in (STAGE_FETCH, STAGE_COUNT):
            raise ValueError(f"Unknown query stage: {stage!r}")
        self.stage = stage
        super().__init__(f"{stage} query failed: {message}")
