import requests
import logging
from urllib.parse import urljoin

from project_images.errors import RuntimeInventoryError

logger = logging.getLogger(__name__)


class RegistryCatalogClient:
    def __init__(self, registry_url: str, registry_host: str | None = None):
        self.registry_url: str = registry_url.rstrip("/")
        self.registry_host: str = registry_host or self.registry_url.split("://", 1)[-1]

    def list_known_images(self) -> list[str]:
        images = []
        for repository in self._get_all(f"{self.registry_url}/v2/_catalog", "repositories"):
            tags = self._get_all(f"{self.registry_url}/v2/{repository}/tags/list", "tags")
            images.extend(f"{self.registry_host}/{repository}:{tag}" for tag in tags)
        return images

    def _get_all(self, url: str, key: str) -> list[str]:
        # both endpoints paginate through Link: <...>; rel="next"
        items = []
        next_url: str | None = url
        while next_url:
            response = self._get(next_url)
            items.extend(response.json().get(key) or [])
            next_link = response.links.get("next", {}).get("url")
            next_url = urljoin(next_url, next_link) if next_link else None
        return items

    def _get(self, url: str) -> requests.Response:
        try:
            response = requests.get(url=url, timeout=5)
        except Exception as e:
            logger.error(f"Error querying registry {url}: {e}")
            raise RuntimeInventoryError(f"Registry {self.registry_url} unreachable: {e}") from e
        if response.status_code != 200:
            logger.warning(f"Registry request {url} failed (status code {response.status_code})")
            raise RuntimeInventoryError(f"Registry request {url} failed with status {response.status_code}")
        return response
