import os
import shutil
import tempfile
from typing import Any

from ruamel.yaml import YAML
from project_images.errors import ProjectNotFoundError, StoreUnavailableError
from project_images.models import Project, ProjectsFile
from project_images.utils.yaml_loader import get_yaml_instance


class ProjectRepository:
    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.yaml: YAML = get_yaml_instance()

    def find_all(self) -> list[Project]:
        data = self._load()
        if data is None:
            return []
        return self._parse(data).projects

    def find_by_id(self, project_id: str) -> Project | None:
        return next((p for p in self.find_all() if p.id == project_id), None)

    def set_image(self, project_id: str, image_name: str | None) -> None:
        data = self._load()
        projects = self._parse(data).projects if data is not None else []
        index_of_project = next(
            (i for i, p in enumerate(projects) if p.id == project_id),
            None,
        )
        if index_of_project is None:
            raise ProjectNotFoundError(project_id)

        # edit the loaded document in place so unknown keys and comments survive
        data["projects"][index_of_project]["image"] = image_name
        self._write(data)

    def _load(self) -> Any:
        if not os.path.isfile(self.file_path):
            return None
        try:
            with open(self.file_path, "r") as f:
                return self.yaml.load(f)
        except OSError as e:
            raise StoreUnavailableError(f"Cannot read {self.file_path}: {e}") from e

    def _parse(self, data: Any) -> ProjectsFile:
        try:
            return ProjectsFile(**data)
        except Exception as e:
            raise ValueError(f"Invalid projects.yaml structure: {e}") from e

    def _write(self, data: Any) -> None:
        directory = os.path.dirname(os.path.abspath(self.file_path))
        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile("w", dir=directory, prefix=".projects-", suffix=".yaml", delete=False) as f:
                tmp_path = f.name
                self.yaml.dump(data, f)
            if os.path.exists(self.file_path):
                shutil.copymode(self.file_path, tmp_path)
            os.replace(tmp_path, self.file_path)
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise StoreUnavailableError(f"Error writing projects: {e}") from e
