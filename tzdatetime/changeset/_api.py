from .changeset import (
    CASTERS,
    CastError,
    Changeset,
    ChangesetInvalid,
    FieldError,
)

__all__ = [
    'CASTERS',
    'CastError',
    'Changeset',
    'ChangesetInvalid',
    'FieldError',
]
