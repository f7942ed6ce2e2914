# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends

from app.config import settings
from core.services.sequence_store import SequenceStore


def get_sequence_store() -> SequenceStore:
    """
    Get the sequence store configured for this process.

    Tests swap it out through app.dependency_overrides.
    """
    return SequenceStore(
        base_dir=settings.STORAGE_DIR,
        filename=settings.SEQUENCE_FILENAME,
    )


# Type alias for dependency injection
SequenceStoreDep = Annotated[SequenceStore, Depends(get_sequence_store)]
