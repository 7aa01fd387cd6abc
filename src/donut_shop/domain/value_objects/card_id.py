from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID, uuid4

from donut_shop.domain.exceptions import InvalidCardIdError


@dataclass(frozen=True, slots=True)
class CardId:
    """Value object for credit card account identifiers.

    Payments are grouped and matched on CardId rather than on object
    identity, so two copies of the same card still count as one account.
    """

    value: UUID

    @classmethod
    def generate(cls) -> CardId:
        """Generate a new unique CardId."""
        return cls(value=uuid4())

    @classmethod
    def from_string(cls, id_str: str) -> CardId:
        """Parse a CardId from a string representation.

        Args:
            id_str: UUID string (with or without hyphens, any case).

        Returns:
            A CardId instance.

        Raises:
            InvalidCardIdError: If the string is not a valid UUID.
        """
        try:
            return cls(value=UUID(id_str))
        except (ValueError, AttributeError) as e:
            raise InvalidCardIdError(f"Invalid card ID: {id_str}") from e

    def __str__(self) -> str:
        return str(self.value)
