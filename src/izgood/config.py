"""Validation configuration.

ValidationConfig is a frozen dataclass — immutable after creation, shared
freely between sessions, no string-key dict lookups.
"""

from __future__ import annotations

from dataclasses import dataclass

from izgood.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    """Engine configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ValidationConfig(default_message="Please check this field")
    """

    # Message used when a check returns False and the rule has no message
    default_message: str = "Invalid input"

    # Walk dotted/bracketed names through nested mappings and lists
    nested_paths: bool = True

    # Resolve uploaded files from FormData when no string value exists
    files_as_values: bool = True

    def validated(self) -> ValidationConfig:
        """Return ``self`` after checking field values.

        Raises:
            ConfigurationError: If ``default_message`` is empty.
        """
        if not self.default_message:
            msg = "ValidationConfig.default_message must be a non-empty string"
            raise ConfigurationError(msg)
        return self


DEFAULT_CONFIG = ValidationConfig()
