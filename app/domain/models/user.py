# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

# Local application imports
from ..exceptions import InvalidUserStateError
from ...utils.datetime_utils import utc_now


@dataclass(eq=False)
class User:
    """
    Pure domain model for User entity - no external dependencies.

    A User is transient (id is None) until the repository assigns an id on
    first save. Name and email are always valid once the object exists;
    construction or update with bad values raises InvalidUserStateError.
    Two users are the same entity when both id and email match.
    """
    name: str
    email: str
    id: Optional[int] = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        self._validate(self.name, self.email)
        if self.updated_at is None:
            self.updated_at = self.created_at

    def __setattr__(self, key: str, value: Any) -> None:
        # created_at is stamped once and never reassigned
        if key == "created_at" and "created_at" in self.__dict__:
            raise InvalidUserStateError("created_at cannot be modified")
        super().__setattr__(key, value)

    @classmethod
    def rehydrate(
        cls,
        id: Optional[int],
        name: str,
        email: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        """Rebuild a user loaded from storage, applying the same validation"""
        return cls(
            id=id,
            name=name,
            email=email,
            created_at=created_at,
            updated_at=updated_at,
        )

    def update_user(self, new_name: str, new_email: str) -> None:
        """
        Replace name and email and refresh updated_at.

        The new values are checked before any field changes, so a failed
        update leaves the entity exactly as it was.

        Raises:
            InvalidUserStateError: If the new name or email is invalid
        """
        self._validate(new_name, new_email)
        self.name = new_name
        self.email = new_email
        self.updated_at = utc_now()

    @staticmethod
    def _validate(name: Optional[str], email: Optional[str]) -> None:
        if name is None or not name.strip():
            raise InvalidUserStateError("Name cannot be null or empty")
        if email is None or not email.strip():
            raise InvalidUserStateError("Email cannot be null or empty")
        if not User._is_valid_email(email):
            raise InvalidUserStateError("Email format is invalid")

    @staticmethod
    def _is_valid_email(email: str) -> bool:
        # Only '@' and '.' are required here; UserValidator applies the full pattern
        return "@" in email and "." in email

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, User):
            return NotImplemented
        return self.id == other.id and self.email == other.email

    def __hash__(self) -> int:
        return hash((self.id, self.email))
