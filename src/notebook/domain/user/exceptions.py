"""User profile domain exceptions."""


class UserProfileNotFoundError(Exception):
    """No profile is linked to the identity."""

    def __init__(self, identity_id: str) -> None:
        self.identity_id = identity_id
        super().__init__(f"User profile not found for identity: {identity_id}")
