"""Dependency Injection Container."""
from typing import Optional

from itdepends.core.config import get_config
from itdepends.core.config import ItDependsConfig
from itdepends.parsers.base import TreeParser
from itdepends.parsers.registry import get_parser
from itdepends.services.pipeline_service import PipelineService
from itdepends.services.registry_service import RegistryService


class Container:
    """Simple DI Container to manage service lifecycles."""

    _instance: Optional['Container'] = None

    def __init__(self) -> None:
        self.config: ItDependsConfig = get_config()
        self._registry_service: RegistryService | None = None

    @classmethod
    def get_instance(cls) -> 'Container':
        if cls._instance is None:
            cls._instance = Container()
        return cls._instance

    def get_parser(self) -> TreeParser:
        return get_parser(self.config.input_format)

    def get_registry_service(self) -> RegistryService:
        if not self._registry_service:
            self._registry_service = RegistryService(config=self.config.registry)
        return self._registry_service

    def create_pipeline(self, fetch: bool = True) -> PipelineService:
        """Factory for the pipeline (not singleton, one per run)."""
        registry = self.get_registry_service() if fetch else None
        return PipelineService(self.get_parser(), registry)

# Global Accessor


def get_container() -> Container:
    return Container.get_instance()
