"""
Pending changes to a record, with per-field validation errors.

Changesets are immutable: every operation returns a new changeset. The record
(`data`) is only touched by `apply_changes` / `apply_action`.
"""

import datetime
import typing as T
from collections.abc import Mapping
from datetime import UTC

import attr


class CastError(ValueError):
    pass


class ChangesetInvalid(Exception):
    def __init__(self, changeset: 'Changeset', action: str):
        errors = '; '.join(f'{e.field} {e.message}' for e in changeset.errors)
        super().__init__(f'Cannot {action}, changeset is invalid: {errors}')
        self.changeset = changeset
        self.action = action


def _parse_datetime(value) -> datetime.datetime:
    if isinstance(value, str):
        value = datetime.datetime.fromisoformat(value)
    if not isinstance(value, datetime.datetime):
        raise CastError(f'Not a datetime: {value!r}')
    return value


def cast_naive_datetime(value) -> datetime.datetime:
    value = _parse_datetime(value)
    if value.tzinfo is not None:
        raise CastError(f'Expected a naive datetime, got {value!r}')
    return value


def cast_utc_datetime(value) -> datetime.datetime:
    value = _parse_datetime(value)
    if value.tzinfo is None:
        raise CastError(f'Expected an aware datetime, got {value!r}')
    return value.astimezone(UTC)


def cast_string(value) -> str:
    if not isinstance(value, str):
        raise CastError(f'Not a string: {value!r}')
    return value


def cast_integer(value) -> int:
    if isinstance(value, bool):
        raise CastError(f'Not an integer: {value!r}')
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return int(value.strip())
    raise CastError(f'Not an integer: {value!r}')


CASTERS: dict[str, T.Callable[[T.Any], T.Any]] = {
    'naive_datetime': cast_naive_datetime,
    'utc_datetime': cast_utc_datetime,
    'string': cast_string,
    'integer': cast_integer,
}


def _data_value(data: T.Any, name: str, default: T.Any = None) -> T.Any:
    if isinstance(data, Mapping):
        return data.get(name, default)
    return getattr(data, name, default)


@attr.define(frozen=True)
class FieldError:
    field: str
    message: str
    context: dict[str, T.Any] = attr.ib(factory=dict)


@attr.define(frozen=True)
class Changeset:
    data: T.Any
    changes: dict[str, T.Any] = attr.ib(factory=dict)
    errors: tuple[FieldError, ...] = ()
    types: dict[str, str] = attr.ib(factory=dict)

    @classmethod
    def cast(
        cls,
        data: T.Any,
        params: Mapping[str, T.Any],
        permitted: T.Iterable[str],
        types: Mapping[str, str] | None = None,
    ) -> 'Changeset':
        """
        Start a changeset from external params.

        Only `permitted` fields are taken from `params`. Values are cast by the
        type names in `types` (defaults to `data.changeset_types`); values that
        fail casting become "is invalid" errors. Empty strings count as None.
        """
        if types is None:
            types = getattr(data, 'changeset_types', {})
        changeset = cls(data=data, types=dict(types))

        for name in permitted:
            if name not in params:
                continue
            if name not in changeset.types:
                raise KeyError(f'No type declared for field "{name}"')
            type_name = changeset.types[name]
            raw = params[name]
            if raw is None or raw == '':
                value = None
            else:
                try:
                    value = CASTERS[type_name](raw)
                except (CastError, ValueError, TypeError):
                    changeset = changeset.add_error(name, 'is invalid', type=type_name)
                    continue
            changeset = changeset.put_change(name, value)

        return changeset

    @property
    def valid(self) -> bool:
        return not self.errors

    def get_field(self, name: str, default: T.Any = None) -> T.Any:
        if name in self.changes:
            return self.changes[name]
        return _data_value(self.data, name, default)

    def get_change(self, name: str, default: T.Any = None) -> T.Any:
        return self.changes.get(name, default)

    def changed(self, name: str) -> bool:
        return name in self.changes

    def has_error(self, name: str) -> bool:
        return any(e.field == name for e in self.errors)

    def errors_on(self, name: str) -> list[str]:
        return [e.message for e in self.errors if e.field == name]

    def put_change(self, name: str, value: T.Any) -> 'Changeset':
        changes = dict(self.changes)
        if value == _data_value(self.data, name):
            # Setting the stored value again is not a change
            changes.pop(name, None)
        else:
            changes[name] = value
        return attr.evolve(self, changes=changes)

    def add_error(self, name: str, message: str, **context: T.Any) -> 'Changeset':
        error = FieldError(field=name, message=message, context=context)
        return attr.evolve(self, errors=self.errors + (error,))

    def validate_required(self, names: T.Iterable[str]) -> 'Changeset':
        changeset = self
        for name in names:
            if changeset.has_error(name):
                continue
            value = changeset.get_field(name)
            if value is None or (isinstance(value, str) and not value.strip()):
                changeset = changeset.add_error(
                    name, "can't be blank", validation='required'
                )
        return changeset

    def apply_changes(self) -> T.Any:
        """Write the changes onto the record and return it."""
        if isinstance(self.data, Mapping):
            return {**self.data, **self.changes}
        if attr.has(type(self.data)):
            return attr.evolve(self.data, **self.changes)
        for name, value in self.changes.items():
            setattr(self.data, name, value)
        return self.data

    def apply_action(self, action: str) -> T.Any:
        if not self.valid:
            raise ChangesetInvalid(self, action)
        return self.apply_changes()
