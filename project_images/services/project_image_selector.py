import logging

from project_images.errors import ProjectNotFoundError, StoreUnavailableError
from project_images.models import SelectionErrorKind, SelectionResult
from project_images.services.collaborators import ProjectStore
from project_images.services.image_pattern_resolver import ImagePatternResolver
from project_images.utils.logging import setup_logger


class ProjectImageSelector:
    def __init__(self, projects: ProjectStore, resolver: ImagePatternResolver, enforce_project_prefix: bool = False):
        self.projects: ProjectStore = projects
        self.resolver: ImagePatternResolver = resolver
        self.enforce_project_prefix: bool = enforce_project_prefix
        self.logger: logging.Logger = setup_logger("ProjectImageSelector")

    def set_active_image(self, project_id: str, image_name: str | None) -> SelectionResult:
        try:
            if self.enforce_project_prefix and not self.resolver.belongs_to(project_id, image_name or ""):
                message = f"Image {image_name} does not belong to project {project_id}"
                self.logger.warning(message)
                return SelectionResult.failed(SelectionErrorKind.REJECTED, message)
            self.projects.set_image(project_id, image_name)
        except ProjectNotFoundError as e:
            return self._failed(SelectionErrorKind.NOT_FOUND, e)
        except StoreUnavailableError as e:
            return self._failed(SelectionErrorKind.STORE_UNAVAILABLE, e)
        except Exception as e:
            return self._failed(SelectionErrorKind.OTHER, e)

        self.logger.info(f"Set image of project {project_id} to {image_name}")
        return SelectionResult.accepted(image_name)

    def _failed(self, kind: SelectionErrorKind, error: Exception) -> SelectionResult:
        self.logger.warning(f"Setting project image failed ({kind.value}): {error}")
        return SelectionResult.failed(kind, str(error))
