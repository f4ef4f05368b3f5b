from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class Project:
    id: str
    name: str | None = None
    description: str | None = None
    image: str | None = None
