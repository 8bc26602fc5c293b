from notebook.domain.user.value_objects.entity_status import EntityStatus

__all__ = ["EntityStatus"]
