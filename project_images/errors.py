class StoreError(Exception):
    """Base class for project store failures."""


class ProjectNotFoundError(StoreError):
    def __init__(self, project_id: str):
        super().__init__(f"Project {project_id} not found")
        self.project_id: str = project_id


class StoreUnavailableError(StoreError):
    pass


class RuntimeInventoryError(Exception):
    pass


class InvalidProjectIdError(ValueError):
    pass
