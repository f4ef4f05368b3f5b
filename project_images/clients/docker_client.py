import subprocess
import logging

from project_images.errors import RuntimeInventoryError

logger = logging.getLogger(__name__)

IMAGE_FORMAT = "{{.Repository}}:{{.Tag}}"
DANGLING = "<none>"


class DockerClient:
    def __init__(self, binary: str = "docker"):
        self.binary: str = binary

    def list_known_images(self) -> list[str]:
        cmd = [self.binary, "image", "ls", "--format", IMAGE_FORMAT]
        try:
            result = subprocess.run(cmd, check=False, capture_output=True, text=True)
        except FileNotFoundError as e:
            raise RuntimeInventoryError(f"Container runtime binary {self.binary} not found") from e
        if result.returncode != 0:
            logger.error(f"Listing images failed with code {result.returncode}")
            raise RuntimeInventoryError(f"Failed to list images: {result.stderr.strip()}")

        images = []
        for line in result.stdout.splitlines():
            line = line.strip()
            if not line or DANGLING in line.split(":"):
                continue
            images.append(line)
        return images
