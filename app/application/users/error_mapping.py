"""
Translation of repository errors into domain errors.

Use cases wrap every repository call in ``repository_errors()`` so the
interface layer only ever sees the domain vocabulary.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from app.domain.users.errors import (
    ConflictError,
    DuplicateEmailError,
    InternalError,
    NotFoundError,
    StorageError,
    UserNotFoundError,
)


@contextmanager
def repository_errors() -> Iterator[None]:
    """Re-raise repository errors as their domain counterparts.

    Raises:
        DuplicateEmailError: On ConflictError.
        UserNotFoundError: On NotFoundError.
        InternalError: On StorageError. The storage reason stays server-side.
    """
    try:
        yield
    except ConflictError as exc:
        raise DuplicateEmailError(exc.email) from exc
    except NotFoundError as exc:
        raise UserNotFoundError(exc.user_id) from exc
    except StorageError as exc:
        raise InternalError("storage unavailable") from exc
