from notebook.domain.user.aggregates.user_profile import UserProfile

__all__ = ["UserProfile"]
