"""User profile aggregate."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from notebook.domain.shared.time import utc_now
from notebook.domain.user.value_objects import EntityStatus


class UserProfile:
    """
    User profile aggregate root.

    Holds the personal data of an account. Credentials live in the
    identity store; ``identity_id`` links the two one-to-one.
    """

    def __init__(
        self,
        identity_id: str,
        first_name: str,
        last_name: str,
        email: str,
        phone: str = "",
        country: str = "",
        date_of_birth: datetime | None = None,
        status: Union[int, EntityStatus] = EntityStatus.ACTIVE,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._identity_id = identity_id
        self._first_name = first_name
        self._last_name = last_name
        self._email = email
        self._phone = phone
        self._country = country
        self._date_of_birth = date_of_birth or utc_now()
        self._status = EntityStatus(status)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def identity_id(self) -> str:
        return self._identity_id

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def email(self) -> str:
        return self._email

    @property
    def phone(self) -> str:
        return self._phone

    @property
    def country(self) -> str:
        return self._country

    @property
    def date_of_birth(self) -> datetime:
        return self._date_of_birth

    @property
    def status(self) -> EntityStatus:
        return self._status

    @property
    def is_active(self) -> bool:
        return self._status == EntityStatus.ACTIVE

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @classmethod
    def create(
        cls,
        identity_id: str,
        first_name: str,
        last_name: str,
        email: str,
    ) -> "UserProfile":
        """New active profile for a freshly created identity.

        Date of birth starts at the current UTC time; phone and country
        start empty.
        """
        return cls(
            identity_id=identity_id,
            first_name=first_name,
            last_name=last_name,
            email=email,
        )

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        identity_id: str,
        first_name: str,
        last_name: str,
        email: str,
        phone: str,
        country: str,
        date_of_birth: datetime,
        status: int,
        created_at: datetime,
        updated_at: datetime,
    ) -> "UserProfile":
        return cls(
            id=id,
            identity_id=identity_id,
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone=phone,
            country=country,
            date_of_birth=date_of_birth,
            status=status,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserProfile):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"UserProfile(id={self._id}, identity_id={self._identity_id})"
