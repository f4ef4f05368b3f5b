from typing import Protocol


class Registry(Protocol):
    def get_registry_with_group(self) -> str: ...


class ImageInventory(Protocol):
    def list_known_images(self) -> list[str]: ...


class ProjectStore(Protocol):
    def set_image(self, project_id: str, image_name: str | None) -> None: ...
