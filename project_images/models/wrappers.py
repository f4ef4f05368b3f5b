from pydantic.dataclasses import dataclass

from project_images.models.project import Project

@dataclass(frozen=True)
class ProjectsFile:
    projects: list[Project]
