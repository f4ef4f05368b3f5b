import os

from pydantic.dataclasses import dataclass

from project_images.clients.docker_client import DockerClient
from project_images.clients.registry_catalog_client import RegistryCatalogClient
from project_images.clients.registry_naming import RegistryNaming
from project_images.services.collaborators import ImageInventory

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
IMAGE_SOURCES = ("docker", "registry")
TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    registry: str = "localhost:5000"
    registry_group: str = "karavan"
    projects_file: str = f"{ROOT_DIR}/projects.yaml"
    image_source: str = "docker"
    docker_binary: str = "docker"
    registry_url: str | None = None
    enforce_image_prefix: bool = False

    def __post_init__(self):
        if self.image_source not in IMAGE_SOURCES:
            raise ValueError(f"Unsupported image source {self.image_source}, expected one of {IMAGE_SOURCES}")

    @classmethod
    def from_env(cls) -> "Settings":
        registry = os.environ.get("REGISTRY", "localhost:5000")
        return cls(
            registry=registry,
            registry_group=os.environ.get("REGISTRY_GROUP", "karavan"),
            projects_file=os.environ.get("PROJECTS_FILE", f"{ROOT_DIR}/projects.yaml"),
            image_source=os.environ.get("IMAGE_SOURCE", "docker"),
            docker_binary=os.environ.get("DOCKER_BINARY", "docker"),
            registry_url=os.environ.get("REGISTRY_URL", f"http://{registry}"),
            enforce_image_prefix=os.environ.get("ENFORCE_IMAGE_PREFIX", "false").lower() in TRUTHY,
        )

    def registry_naming(self) -> RegistryNaming:
        return RegistryNaming(registry=self.registry, group=self.registry_group)

    def image_inventory(self, source: str | None = None) -> ImageInventory:
        match source or self.image_source:
            case "docker":
                return DockerClient(self.docker_binary)
            case "registry":
                return RegistryCatalogClient(self.registry_url or f"http://{self.registry}", self.registry)
            case other:
                raise ValueError(f"Unsupported image source {other}")
