import logging

from project_images.errors import InvalidProjectIdError
from project_images.services.collaborators import ImageInventory
from project_images.services.image_pattern_resolver import ImagePatternResolver
from project_images.utils.logging import setup_logger


class ImageListingService:
    def __init__(self, resolver: ImagePatternResolver, inventory: ImageInventory):
        self.resolver: ImagePatternResolver = resolver
        self.inventory: ImageInventory = inventory
        self.logger: logging.Logger = setup_logger("ImageListingService")

    def list_images(self, project_id: str) -> list[str]:
        if not project_id or "/" in project_id:
            raise InvalidProjectIdError(f"Invalid project id: {project_id!r}")

        pattern = self.resolver.resolve_pattern(project_id)
        images = self.resolver.filter_images(self.inventory.list_known_images(), pattern)
        self.logger.info(f"Found {len(images)} images matching {pattern}")
        return images
