"""Check outcomes and field errors — the data validation produces.

A check may answer with ``True``/``None`` (valid), ``False`` (invalid,
default message) or a string (invalid, the string says why).
``interpret`` turns that loose answer into a tagged ``Valid`` /
``Invalid`` outcome so the engine can ``match`` on it instead of on
truthiness.

``ErrorSet`` is the ordered, immutable collection of ``FieldError`` one
evaluation pass produces. Order is rule declaration order; a field may
appear any number of times.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import overload

from izgood.errors import CheckResultError

type CheckResult = bool | str | None


@dataclass(frozen=True, slots=True)
class Valid:
    """The check accepted the value."""


@dataclass(frozen=True, slots=True)
class Invalid:
    """The check rejected the value.

    ``reason`` is the check's own explanation, or None when it returned
    ``False`` or an empty string.
    """

    reason: str | None = None


type Outcome = Valid | Invalid

VALID = Valid()


def interpret(name: str, result: object) -> Outcome:
    """Map a raw check result onto ``Valid`` or ``Invalid``.

    An empty string is invalid with no reason, like ``False``.

    Raises:
        CheckResultError: For any result that is not bool, str or None.
    """
    match result:
        case True | None:
            return VALID
        case False:
            return Invalid()
        case str() if result:
            return Invalid(result)
        case str():
            return Invalid()
        case _:
            raise CheckResultError(name, result)


@dataclass(frozen=True, slots=True)
class FieldError:
    """One failed rule: the field it targets and the message to show."""

    name: str
    message: str


class ErrorSet(Sequence[FieldError]):
    """Immutable ordered collection of ``FieldError``.

    Falsy when empty, so the usual pattern reads naturally::

        errors = evaluate(form, rules)
        if errors:
            return render("signup.html", errors=errors.as_dict())
    """

    __slots__ = ("_errors",)

    def __init__(self, errors: Sequence[FieldError] = ()) -> None:
        self._errors: tuple[FieldError, ...] = tuple(errors)

    @overload
    def __getitem__(self, index: int) -> FieldError: ...
    @overload
    def __getitem__(self, index: slice) -> ErrorSet: ...

    def __getitem__(self, index: int | slice) -> FieldError | ErrorSet:
        if isinstance(index, slice):
            return ErrorSet(self._errors[index])
        return self._errors[index]

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[FieldError]:
        return iter(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ErrorSet):
            return self._errors == other._errors
        if isinstance(other, (list, tuple)):
            return self._errors == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._errors)

    def __repr__(self) -> str:
        items = ", ".join(f"{e.name!r}: {e.message!r}" for e in self._errors)
        return f"ErrorSet([{items}])"

    # -- Queries -----------------------------------------------------------

    def for_field(self, name: str) -> ErrorSet:
        """Errors targeting *name*, in order."""
        return ErrorSet([e for e in self._errors if e.name == name])

    def has_errors(self, name: str | None = None) -> bool:
        """True if there is at least one error (for *name*, when given).

        An empty *name* means every field.
        """
        if not name:
            return bool(self._errors)
        return any(e.name == name for e in self._errors)

    def get_messages(self, name: str | None = None) -> list[str]:
        """Messages in order, optionally only those for *name*."""
        errors = self.for_field(name) if name else self._errors
        return [e.message for e in errors]

    def first_message(self, name: str | None = None) -> str | None:
        """The first message (for *name*, when given), or None."""
        messages = self.get_messages(name)
        return messages[0] if messages else None

    def names(self) -> list[str]:
        """Field names with errors, in first-seen order."""
        return list(dict.fromkeys(e.name for e in self._errors))

    def as_dict(self) -> dict[str, list[str]]:
        """Field name → list of messages, the shape templates usually want."""
        grouped: dict[str, list[str]] = {}
        for e in self._errors:
            grouped.setdefault(e.name, []).append(e.message)
        return grouped

    # -- Derivation ----------------------------------------------------------

    def without(self, name: str) -> ErrorSet:
        """A copy with every error for *name* removed."""
        return ErrorSet([e for e in self._errors if e.name != name])

    def merged(self, name: str, fresh: ErrorSet) -> ErrorSet:
        """Replace the errors for *name* with those for *name* in *fresh*.

        Errors for other fields are kept in their original order; the
        replacements go at the end.
        """
        return ErrorSet([*self.without(name), *fresh.for_field(name)])


EMPTY = ErrorSet()
