from .tag_schemas import TagIn, TagOut

__all__ = ["TagIn", "TagOut"]
