"""Field validation engine.

Rules are declared per field as an ordered list of predicate/message pairs.
Every rule of a field is evaluated (no short-circuit) so that all violations
of a field are reported together.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

FieldsErrors = dict[str, list[str]]


class EntityValidationError(Exception):
    """Raised when an entity fails its field rules.

    Attributes:
        error: Mapping of field name to the ordered violation messages
    """

    def __init__(self, error: FieldsErrors, message: str = "Validation Error") -> None:
        self.error = error
        super().__init__(message)

    def count(self) -> int:
        """Number of fields with at least one violation."""
        return len(self.error)


@dataclass(frozen=True)
class FieldRule:
    """A single predicate with the message reported when it fails.

    ``message`` may contain ``{field}`` which is replaced by the field name.
    """

    check: Callable[[Any], bool]
    message: str

    def apply(self, field_name: str, value: Any) -> str | None:
        """Return the formatted message if ``value`` violates the rule."""
        if self.check(value):
            return None
        return self.message.format(field=field_name)


@dataclass(frozen=True)
class FieldRules:
    """Ordered rules for one field.

    Optional fields skip every rule when their value is ``None``.
    """

    rules: tuple[FieldRule, ...]
    optional: bool = False

    def violations(self, field_name: str, value: Any) -> list[str]:
        if self.optional and value is None:
            return []
        messages = (rule.apply(field_name, value) for rule in self.rules)
        return [message for message in messages if message is not None]


def is_not_empty() -> FieldRule:
    return FieldRule(
        check=lambda value: value is not None and value != "",
        message="{field} should not be empty",
    )


def is_string() -> FieldRule:
    return FieldRule(
        check=lambda value: isinstance(value, str),
        message="{field} must be a string",
    )


def is_boolean() -> FieldRule:
    return FieldRule(
        check=lambda value: isinstance(value, bool),
        message="{field} must be a boolean value",
    )


def max_length(limit: int) -> FieldRule:
    # Non-strings have no length and always violate the bound
    return FieldRule(
        check=lambda value: isinstance(value, str) and len(value) <= limit,
        message="{field} must be shorter than or equal to " + str(limit) + " characters",
    )


class ValidatorFields:
    """Base validator evaluating declared field rules against an object.

    Subclasses declare ``rules``; ``validate`` reads each field from the
    target (attribute or mapping key), collects violations in declaration
    order and stores them in ``errors``.

    Usage:
        validator = CategoryValidator()
        if not validator.validate(category):
            raise EntityValidationError(validator.errors)
    """

    rules: Mapping[str, FieldRules] = {}

    def __init__(self) -> None:
        self.errors: FieldsErrors | None = None

    def validate(self, data: Any) -> bool:
        """Validate ``data`` against the declared rules.

        Args:
            data: Object or mapping holding the fields

        Returns:
            True if every rule passed, False otherwise (see ``errors``)
        """
        errors: FieldsErrors = {}
        for field_name, field_rules in self.rules.items():
            value = self._read(data, field_name)
            messages = field_rules.violations(field_name, value)
            if messages:
                errors[field_name] = messages

        self.errors = errors or None
        return not errors

    @staticmethod
    def _read(data: Any, field_name: str) -> Any:
        if isinstance(data, Mapping):
            return data.get(field_name)
        return getattr(data, field_name, None)
