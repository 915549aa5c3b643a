"""Rule declarations and their normalization.

Rules can be written three ways; all become a ``Rule``::

    rules = [
        ("username", not_empty),
        ("username", email),
        ("password", not_empty, "An empty password would not be secure"),
        ("age", more_than, None, 17),
        Rule("bio", max_length(500)),
        {"name": "terms", "check": not_empty, "message": "Please accept"},
    ]

Tuples are positional: ``(name, check, message?, args?)``. Nothing here
checks that ``check`` is callable; a bad check fails when the engine
calls it.
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Final

from izgood.errors import RuleDefinitionError
from izgood.result import CheckResult


class _Unset:
    """Marker for "no args declared" (``None`` is a valid argument)."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Final = _Unset()

type Check = Callable[..., CheckResult]
type RuleDecl = Rule | tuple[Any, ...] | list[Any] | Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class Rule:
    """A named check targeting one field.

    ``message`` overrides whatever the check reports. ``args`` is passed
    as the check's second positional argument when set.
    """

    name: str
    check: Check
    message: str | None = None
    args: Any = UNSET

    def run(self, value: Any) -> Any:
        """Invoke the check on *value*, with ``args`` when declared."""
        if self.args is UNSET:
            return self.check(value)
        return self.check(value, self.args)


def rule(name: str, check: Check, message: str | None = None, args: Any = UNSET) -> Rule:
    """Shorthand constructor, reads well in rule lists."""
    return Rule(name, check, message, args)


def normalize_rule(decl: RuleDecl) -> Rule:
    """Turn one declaration into a ``Rule``.

    Raises:
        RuleDefinitionError: Wrong tuple arity, a mapping without
            ``name``/``check``, or an unsupported declaration type.
    """
    if isinstance(decl, Rule):
        return decl

    if isinstance(decl, (tuple, list)):
        if not 2 <= len(decl) <= 4:
            msg = (
                f"Rule tuple must be (name, check, message?, args?), "
                f"got {len(decl)} item(s): {decl!r}"
            )
            raise RuleDefinitionError(msg)
        return Rule(*decl)

    if isinstance(decl, Mapping):
        check = decl.get("check", decl.get("validator"))
        if "name" not in decl or check is None:
            msg = f"Rule mapping needs 'name' and 'check' keys: {dict(decl)!r}"
            raise RuleDefinitionError(msg)
        return Rule(
            name=decl["name"],
            check=check,
            message=decl.get("message"),
            args=decl.get("args", UNSET),
        )

    msg = f"Unsupported rule declaration: {type(decl).__name__}"
    raise RuleDefinitionError(msg)


def normalize_rules(decls: Iterable[RuleDecl]) -> tuple[Rule, ...]:
    """Normalize a sequence of declarations, keeping their order."""
    return tuple(normalize_rule(d) for d in decls)
