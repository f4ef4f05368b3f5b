from .project_repository import ProjectRepository

__all__ = [
    'ProjectRepository'
]
