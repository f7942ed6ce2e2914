# =============================================================================
# app/routers/fibonacci.py - Fibonacci Endpoints
# =============================================================================
# Endpoints come in pairs: a plain version that lets failures escape, and
# a "WithException..." version that turns them into classified responses.
#
# Examples:
#   curl -i -X GET  "http://localhost:8000/fibonacci/findNumber?n=3"
#   curl -i -X POST "http://localhost:8000/fibonacci/createSequence?n=3"
#   curl -i -X GET  "http://localhost:8000/fibonacci/getSequence?filename=fibonacci.txt"
#   curl -i -X GET  "http://localhost:8000/fibonacci/getWithExceptionHandling?filename=not_found.txt"
#   curl -i -X POST "http://localhost:8000/fibonacci/createSequenceWithExceptionHandling?n=npe"
#   curl -i -X GET  "http://localhost:8000/fibonacci/findNumberWithException?n=8"
#   curl -i -X GET  "http://localhost:8000/fibonacci/findRatio?n=8"
#
# Handlers are plain functions so recursion and file I/O run in the
# threadpool instead of on the event loop.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Query
from fastapi.responses import PlainTextResponse

from app.dependencies import SequenceStoreDep
from core.errors import (
    FATAL_ERRORS,
    DomainError,
    SequenceNotFoundError,
    SequenceStorageError,
    UnexpectedError,
)
from core.services.input_validator import parse_count_with_fault_simulation
from core.services.ratio_calculator import ratio
from core.services.sequence_generator import (
    fibonacci_at,
    fibonacci_at_bounded,
    fibonacci_sequence,
)

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Single Numbers
# =============================================================================

@router.get("/findNumber", response_class=PlainTextResponse)
def find_fibonacci_number(
    n: Annotated[int, Query(description="Position of the Fibonacci number")],
):
    """
    Determine the n-th Fibonacci number.

    No upper bound: very large positions exhaust the recursion limit and
    the request fails ungracefully.
    """
    return str(fibonacci_at(n))


@router.get("/findNumberWithException", response_class=PlainTextResponse)
def find_fibonacci_number_with_exception(
    n: Annotated[int, Query(description="Position of the Fibonacci number")],
):
    """
    Determine the n-th Fibonacci number, rejecting positions >= 8 with a 400.
    """
    return str(fibonacci_at_bounded(n))


@router.get("/findRatio", response_class=PlainTextResponse)
def find_ratio(
    n: Annotated[int, Query(description="Position of the dividend")],
):
    """
    Ratio between the n-th and (n-1)-th Fibonacci numbers.

    Approaches the golden ratio (1.618033988749895). Position 1 would
    divide by fib(0) and is answered with a 400.
    """
    return str(ratio(n))


# =============================================================================
# Stored Sequences
# =============================================================================

@router.post("/createSequence", response_class=PlainTextResponse)
def create_sequence(
    store: SequenceStoreDep,
    n: Annotated[int, Query(description="How many numbers to store after the leading 0")],
):
    """
    Store the first n Fibonacci numbers in a text file.

    Returns the name of the file. Write failures are not handled here.
    """
    return store.write(fibonacci_sequence(n))


@router.post("/createSequenceWithExceptionHandling", response_class=PlainTextResponse)
def create_sequence_with_exception_handling(
    store: SequenceStoreDep,
    n: Annotated[str, Query(description="Count as raw text; 'npe' simulates a fault")],
):
    """
    Store the first n Fibonacci numbers, classifying every failure.

    - non-numeric n -> 400
    - "npe" -> 418
    - write failure -> 500 with the I/O detail
    - anything else -> 500 with a generic message
    """
    try:
        sequence = parse_count_with_fault_simulation(n)
        filename = store.write(sequence)
    except DomainError:
        raise
    except FATAL_ERRORS:
        raise
    except OSError as e:
        logger.error(f"Could not store sequence for n={n!r}: {e}")
        raise SequenceStorageError(str(e)) from e
    except Exception as e:
        logger.exception(f"Unexpected failure storing sequence for n={n!r}")
        raise UnexpectedError(str(e)) from e

    return filename


@router.get("/getSequence", response_class=PlainTextResponse)
def get_sequence(
    store: SequenceStoreDep,
    filename: Annotated[str, Query(description="Name of the stored sequence file")],
):
    """
    Return a stored sequence. A missing file is not handled here.
    """
    return store.read(filename)


@router.get("/getWithExceptionHandling", response_class=PlainTextResponse)
def get_sequence_with_exception_handling(
    store: SequenceStoreDep,
    filename: Annotated[str, Query(description="Name of the stored sequence file")],
):
    """
    Return a stored sequence, answering a missing or unreadable file with a 404.
    """
    try:
        return store.read(filename)
    except (FileNotFoundError, IsADirectoryError, PermissionError) as e:
        raise SequenceNotFoundError(filename, e.strerror) from e
