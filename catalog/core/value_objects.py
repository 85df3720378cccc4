"""Identity value object."""

import re
import uuid
from dataclasses import dataclass, field

# Canonical 8-4-4-4-12 form, RFC 4122 versions 1-8 plus the nil and max UUIDs
_UUID_PATTERN = re.compile(
    r"^(?:[0-9a-f]{8}-[0-9a-f]{4}-[1-8][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}"
    r"|00000000-0000-0000-0000-000000000000"
    r"|ffffffff-ffff-ffff-ffff-ffffffffffff)$",
    re.IGNORECASE,
)


def generate_uuid() -> str:
    """Generate a new UUID4 string."""
    return str(uuid.uuid4())


class InvalidUuidError(Exception):
    """Raised when an identifier is not a valid UUID string."""

    def __init__(self, message: str = "ID must be a valid UUID") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Uuid:
    """Immutable, validated UUID identifier.

    Constructed without arguments it generates a fresh UUID4. Two instances
    are equal when their string forms are equal.

    Attributes:
        id: Canonical UUID string
    """

    id: str = field(default_factory=generate_uuid)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check the identifier format.

        Raises:
            InvalidUuidError: If ``id`` is not a canonical UUID string
        """
        if not isinstance(self.id, str) or not _UUID_PATTERN.match(self.id):
            raise InvalidUuidError()

    def __str__(self) -> str:
        return self.id
