"""Evaluation engine — run rules against a source, collect field errors.

Usage::

    from izgood import evaluate, not_empty, email

    errors = evaluate(form, [
        ("username", not_empty),
        ("username", email),
        ("password", not_empty, "An empty password would not be secure"),
    ])
    errors.get_messages("username")

Every rule runs on every pass, in declaration order, with no
short-circuiting. The result depends only on ``(source, rules)``.
"""

import logging
from collections.abc import Iterable
from typing import Any

from izgood.config import DEFAULT_CONFIG, ValidationConfig
from izgood.resolve import resolve_value
from izgood.result import ErrorSet, FieldError, Invalid, Valid, interpret
from izgood.rules import Rule, RuleDecl, normalize_rule

logger = logging.getLogger("izgood.engine")


def check_rule(
    rule: Rule,
    source: Any,
    config: ValidationConfig = DEFAULT_CONFIG,
) -> FieldError | None:
    """Evaluate a single rule. Returns the error, or None if it passed.

    The rule's own ``message`` always wins over the check's reason.
    """
    value = resolve_value(source, rule.name, config)
    override = rule.message
    match interpret(rule.name, rule.run(value)):
        case Valid():
            return None
        case Invalid(reason=None):
            return FieldError(rule.name, config.default_message if override is None else override)
        case Invalid(reason=reason):
            return FieldError(rule.name, reason if override is None else override)


def evaluate(
    source: Any,
    rules: Iterable[RuleDecl],
    *,
    config: ValidationConfig | None = None,
) -> ErrorSet:
    """Validate *source* against *rules*.

    Args:
        source: A ``FormData`` (or any multi-value mapping), a flat
            mapping, a nested mapping addressed with dotted/bracketed
            names, or None.
        rules: Rule declarations — ``Rule`` instances, tuples
            ``(name, check, message?, args?)`` or mappings.
        config: Engine configuration; defaults to ``DEFAULT_CONFIG``.

    Returns:
        An ``ErrorSet`` with one ``FieldError`` per failing rule, in
        declaration order. Empty when everything passed.

    Raises:
        ConfigurationError: *config* is invalid.
        RuleDefinitionError: A declaration could not be normalized.
        CheckResultError: A check returned an unsupported type.
        TypeError: A check is not callable.
    """
    config = (config or DEFAULT_CONFIG).validated()
    errors: list[FieldError] = []
    checked = 0

    for decl in rules:
        rule = normalize_rule(decl)
        checked += 1
        error = check_rule(rule, source, config)
        if error is not None:
            logger.debug("Rule failed for %r: %s", error.name, error.message)
            errors.append(error)

    logger.debug("Evaluated %d rule(s), %d error(s)", checked, len(errors))
    return ErrorSet(errors)


def is_valid(
    source: Any,
    rules: Iterable[RuleDecl],
    *,
    config: ValidationConfig | None = None,
) -> bool:
    """True if *source* passes every rule."""
    return not evaluate(source, rules, config=config)
