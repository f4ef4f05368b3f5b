from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class RegistryNaming:
    registry: str
    group: str

    def get_registry_with_group(self) -> str:
        return f"{self.registry}/{self.group}"
