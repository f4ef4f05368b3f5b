from .project import Project
from .selection import SelectionError, SelectionErrorKind, SelectionResult
from .wrappers import ProjectsFile

__all__ = [
    "Project",
    "ProjectsFile",
    "SelectionError",
    "SelectionErrorKind",
    "SelectionResult",
]
