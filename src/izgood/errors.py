"""izgood exception hierarchy.

Validation failures are data, not exceptions: they end up in an
``ErrorSet``. The types here are for programming errors, raised loudly
so a bad rule or config never passes silently.
"""


class IzgoodError(Exception):
    """Base for all izgood-specific errors."""


class ConfigurationError(IzgoodError):
    """Raised when a ``ValidationConfig`` is invalid."""


class RuleDefinitionError(IzgoodError, ValueError):
    """A rule declaration could not be normalized.

    Raised for tuples of the wrong arity, mappings without a ``name`` or
    ``check``, and declarations that are neither a ``Rule``, a mapping,
    nor a tuple/list.
    """


class CheckResultError(IzgoodError, TypeError):
    """A check returned something other than ``bool``, ``str`` or ``None``."""

    def __init__(self, name: str, result: object) -> None:
        self.name = name
        self.result = result
        super().__init__(
            f"Check for {name!r} returned {type(result).__name__}; "
            "expected bool, str or None"
        )
