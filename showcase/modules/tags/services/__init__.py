from .tag_service import TagService, TAG_NOT_FOUND, TAG_CONFLICT

__all__ = ["TagService", "TAG_NOT_FOUND", "TAG_CONFLICT"]
