#!/usr/bin/env python3
import argparse
import json
import sys
from project_images.config import IMAGE_SOURCES, Settings
from project_images.services.image_listing_service import ImageListingService
from project_images.services.image_pattern_resolver import ImagePatternResolver
from project_images.utils.logging import setup_logger


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="List the images of a project")
    parser.add_argument("project_id", help="Project whose images are listed")
    parser.add_argument("--source", choices=IMAGE_SOURCES, help="Override the configured image source")
    args = parser.parse_args(argv)
    logger = setup_logger("ListImages")
    try:
        settings = Settings.from_env()
        resolver = ImagePatternResolver(settings.registry_naming())
        service = ImageListingService(resolver, settings.image_inventory(args.source))
        print(json.dumps(service.list_images(args.project_id)))
        return 0
    except Exception as e:
        logger.error(f"Listing images of project {args.project_id} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
