"""izgood — rule-based validation for form-like data.

Declare rules once, validate form submissions, flat dicts or nested
records, and query the field errors that come back.

Basic usage::

    from izgood import ValidationSession, email, not_empty

    session = ValidationSession([
        ("username", not_empty),
        ("username", email),
        ("password", not_empty, "An empty password would not be secure"),
    ])

    if not session.validate(form):
        session.get_messages("password")

One-shot evaluation::

    from izgood import evaluate

    errors = evaluate({"user": {"email": ""}}, [("user.email", not_empty)])
    errors.as_dict()   # {"user.email": ["Invalid input"]}
"""

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_CONFIG",
    "UNSET",
    "CheckResultError",
    "ConfigurationError",
    "ErrorSet",
    "FieldError",
    "FormData",
    "Invalid",
    "IzgoodError",
    "Rule",
    "RuleDefinitionError",
    "UploadFile",
    "Valid",
    "ValidationConfig",
    "ValidationSession",
    "email",
    "evaluate",
    "integer",
    "interpret",
    "is_valid",
    "less_than",
    "matches",
    "max_length",
    "min_length",
    "more_than",
    "normalize_rules",
    "not_empty",
    "number",
    "one_of",
    "optional",
    "resolve_value",
    "rule",
    "url",
    "validation",
]

# Public name → defining module
_LAZY_IMPORTS: dict[str, str] = {
    "DEFAULT_CONFIG": "izgood.config",
    "UNSET": "izgood.rules",
    "CheckResultError": "izgood.errors",
    "ConfigurationError": "izgood.errors",
    "ErrorSet": "izgood.result",
    "FieldError": "izgood.result",
    "FormData": "izgood.http.forms",
    "Invalid": "izgood.result",
    "IzgoodError": "izgood.errors",
    "Rule": "izgood.rules",
    "RuleDefinitionError": "izgood.errors",
    "UploadFile": "izgood.http.forms",
    "Valid": "izgood.result",
    "ValidationConfig": "izgood.config",
    "ValidationSession": "izgood.session",
    "email": "izgood.checks",
    "evaluate": "izgood.engine",
    "integer": "izgood.checks",
    "interpret": "izgood.result",
    "is_valid": "izgood.engine",
    "less_than": "izgood.checks",
    "matches": "izgood.checks",
    "max_length": "izgood.checks",
    "min_length": "izgood.checks",
    "more_than": "izgood.checks",
    "normalize_rules": "izgood.rules",
    "not_empty": "izgood.checks",
    "number": "izgood.checks",
    "one_of": "izgood.checks",
    "optional": "izgood.checks",
    "resolve_value": "izgood.resolve",
    "rule": "izgood.rules",
    "url": "izgood.checks",
    "validation": "izgood.session",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import izgood`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
