from project_images.services.collaborators import Registry


class ImagePatternResolver:
    def __init__(self, registry: Registry):
        self.registry: Registry = registry

    def resolve_pattern(self, project_id: str) -> str:
        return self.registry.get_registry_with_group() + "/" + project_id

    @staticmethod
    def filter_images(all_images: list[str], pattern: str) -> list[str]:
        # exact prefix match, input order kept
        return [image for image in all_images if image.startswith(pattern)]

    def belongs_to(self, project_id: str, image_name: str) -> bool:
        return image_name.startswith(self.resolve_pattern(project_id))
