# =============================================================================
# core/services/error_classifier.py - Failure to Response Mapping
# =============================================================================
# Maps every failure to a (status code, message) pair for the HTTP layer.
#
# Status families:
# - 4xx: the caller sent something we refuse (bad input, out of range)
# - 418: an unchecked fault surfaced (simulated via the sentinel input)
# - 5xx: the server failed doing its job
#
# The catch-all arm never leaks internal detail to the client.
# =============================================================================

from http import HTTPStatus

from pydantic import BaseModel, ConfigDict

from core.errors import DomainError, ErrorKind

DEFAULT_SUPPORT_CONTACT = "mail@domain.com"

SIMULATED_FAULT_MARKER = "NPE"
NOT_FOUND_PREFIX = "File not available. Please check the request and try again. "
STORAGE_FAILURE_PREFIX = "Could not store the sequence in a file: "


class ErrorClassification(BaseModel):
    """What the boundary should send back for a failure."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    code: ErrorKind
    message: str


def classify(
    error: BaseException,
    support_contact: str = DEFAULT_SUPPORT_CONTACT,
) -> ErrorClassification:
    """
    Classify a failure into a status code and client-facing message.

    Specific kinds are checked first; anything that is not a recognised
    DomainError falls through to the generic 500.

    Args:
        error: The exception raised while handling the request
        support_contact: Address named in the generic failure message

    Returns:
        ErrorClassification for the boundary to emit
    """
    kind = error.kind if isinstance(error, DomainError) else ErrorKind.UNCATEGORIZED

    if kind is ErrorKind.INVALID_INPUT:
        return ErrorClassification(
            status_code=HTTPStatus.BAD_REQUEST, code=kind, message=error.message
        )
    elif kind is ErrorKind.SIMULATED_FAULT:
        return ErrorClassification(
            status_code=HTTPStatus.IM_A_TEAPOT, code=kind, message=SIMULATED_FAULT_MARKER
        )
    elif kind is ErrorKind.OUT_OF_RANGE:
        return ErrorClassification(
            status_code=HTTPStatus.BAD_REQUEST, code=kind, message=error.message
        )
    elif kind is ErrorKind.NOT_FOUND:
        return ErrorClassification(
            status_code=HTTPStatus.NOT_FOUND,
            code=kind,
            message=NOT_FOUND_PREFIX + error.message,
        )
    elif kind is ErrorKind.INTERNAL_IO:
        return ErrorClassification(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            code=kind,
            message=STORAGE_FAILURE_PREFIX + error.message,
        )
    elif kind is ErrorKind.DIVISION_BY_ZERO:
        return ErrorClassification(
            status_code=HTTPStatus.BAD_REQUEST, code=kind, message=error.message
        )

    return ErrorClassification(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        code=ErrorKind.UNCATEGORIZED,
        message=f"It is not you, it is us! Reach out to {support_contact}",
    )
