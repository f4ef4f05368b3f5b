#!/usr/bin/env python3
import argparse
import json
import sys
from project_images.config import Settings
from project_images.repositories import ProjectRepository
from project_images.services.image_pattern_resolver import ImagePatternResolver
from project_images.services.project_image_selector import ProjectImageSelector
from project_images.utils.logging import setup_logger


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Set the active image of a project")
    parser.add_argument("project_id", help="Project to update")
    parser.add_argument("image_name", help="Image reference to record as active")
    args = parser.parse_args(argv)
    logger = setup_logger("SetImage")
    try:
        settings = Settings.from_env()
        logger.info(f"Using projects file: {settings.projects_file}")
        selector = ProjectImageSelector(
            ProjectRepository(settings.projects_file),
            ImagePatternResolver(settings.registry_naming()),
            enforce_project_prefix=settings.enforce_image_prefix,
        )
        result = selector.set_active_image(args.project_id, args.image_name)
    except Exception as e:
        logger.error(f"Setting image of project {args.project_id} failed: {e}")
        return 1

    if result.ok:
        print(json.dumps({"imageName": result.image_name}))
        return 0
    print(json.dumps({"error": result.error.kind.value, "message": result.error.message}))
    return 1


if __name__ == "__main__":
    sys.exit(main())
