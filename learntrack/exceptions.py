"""HTTP mapping for domain errors."""

from fastapi import HTTPException
from starlette import status

from learntrack.domain.catalog.exceptions import CategoryNameTakenError, TagNameTakenError
from learntrack.domain.common.exceptions import (
    DomainError,
    EntityNotFoundError,
    InvariantViolationError,
)
from learntrack.domain.learning.exceptions import DuplicateDependencyError

CONFLICT_ERRORS = (DuplicateDependencyError, CategoryNameTakenError, TagNameTakenError)


def status_code_for(error: DomainError) -> int:
    """Pick the HTTP status for a domain error; anything unlisted is a client error."""
    if isinstance(error, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(error, CONFLICT_ERRORS):
        return status.HTTP_409_CONFLICT
    if isinstance(error, InvariantViolationError):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)
