from notebook.domain.user.repositories.user_profile_repository import (
    UserProfileRepository,
)

__all__ = ["UserProfileRepository"]
