"""Validation session — keeps the last errors between validate calls.

A session is created once per form (or other validation context) with a
fixed rule list. Each ``validate`` call runs every rule; a call scoped
to one field name only replaces that field's stored errors, so per-field
validation (e.g. on blur) never clobbers errors already shown for other
fields::

    session = ValidationSession([
        ("username", not_empty),
        ("password", not_empty, "Password is required"),
    ])

    session.validate(form, "username")   # only username's errors change
    if not session.validate(form):        # full replace
        return render("signup.html", errors=session.errors.as_dict())

The session does no locking; callers sharing one across threads must
serialize ``validate``.
"""

import logging
from collections.abc import Iterable
from typing import Any

from izgood.config import DEFAULT_CONFIG, ValidationConfig
from izgood.engine import evaluate
from izgood.result import EMPTY, ErrorSet
from izgood.rules import Rule, RuleDecl, normalize_rules

logger = logging.getLogger("izgood.session")


class ValidationSession:
    """Stateful holder of the most recent ``ErrorSet``.

    Rules are normalized once at construction. To change rules, create a
    new session.
    """

    __slots__ = ("_config", "_errors", "_rules")

    def __init__(
        self,
        rules: Iterable[RuleDecl],
        *,
        config: ValidationConfig | None = None,
    ) -> None:
        self._rules: tuple[Rule, ...] = normalize_rules(rules)
        self._config = (config or DEFAULT_CONFIG).validated()
        self._errors: ErrorSet = EMPTY

    @property
    def rules(self) -> tuple[Rule, ...]:
        """The normalized rules, in declaration order."""
        return self._rules

    @property
    def errors(self) -> ErrorSet:
        """Errors stored by the last ``validate`` call(s)."""
        return self._errors

    def validate(self, source: Any, name: str | None = None) -> bool:
        """Run every rule against *source* and update the stored errors.

        Args:
            source: Any source ``evaluate`` accepts.
            name: When given (and non-empty), only stored errors for this
                field are replaced; errors for other fields are kept as
                they were.

        Returns:
            True if the full evaluation found no errors at all. With
            *name* this still reflects every rule, not just the scoped
            field.
        """
        result = evaluate(source, self._rules, config=self._config)
        if not name:
            self._errors = result
        else:
            self._errors = self._errors.merged(name, result)
            logger.debug(
                "Scoped validate %r: %d field error(s), %d total stored",
                name,
                len(result.for_field(name)),
                len(self._errors),
            )
        return not result

    def has_errors(self, name: str | None = None) -> bool:
        """True if any error is stored (for *name*, when given)."""
        return self._errors.has_errors(name)

    def get_messages(self, name: str | None = None) -> list[str]:
        """Stored messages in order, optionally only those for *name*."""
        return self._errors.get_messages(name)

    def __repr__(self) -> str:
        return f"ValidationSession({len(self._rules)} rule(s), {len(self._errors)} error(s))"


def validation(
    source: Any,
    rules: Iterable[RuleDecl],
    *,
    config: ValidationConfig | None = None,
) -> ErrorSet:
    """Evaluate once and return the errors, no session state.

    Handy when the data is already complete, e.g. rendering a page for an
    existing record::

        errors = validation(record, rules)
        errors.has_errors("email")
    """
    return evaluate(source, rules, config=config)
