from .project_schemas import (
    ProjectImageIn,
    ProjectRepositoryIn,
    ProjectIn,
    ProjectImageOut,
    ProjectRepositoryOut,
    ProjectOut,
)

__all__ = [
    "ProjectImageIn",
    "ProjectRepositoryIn",
    "ProjectIn",
    "ProjectImageOut",
    "ProjectRepositoryOut",
    "ProjectOut",
]
