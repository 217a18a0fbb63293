from collections.abc import Callable
from pathlib import Path

import structlog

from itdepends.core.errors import InputError
from itdepends.models.artifact import Artifact
from itdepends.models.artifact import FlatArtifact
from itdepends.parsers.base import TreeParser
from itdepends.services.flatten_service import filter_artifacts
from itdepends.services.flatten_service import flatten
from itdepends.services.registry_service import RegistryService

logger = structlog.get_logger('pipeline_service')


class PipelineService:
    """Runs parse -> flatten -> filter -> enrich for one input document."""

    def __init__(self, parser: TreeParser, registry: RegistryService | None = None):
        self.parser = parser
        self.registry = registry

    def load(self, path: str | Path) -> Artifact:
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            raise InputError(f"{path}: {e.strerror or e}", cause=e) from e
        return self.parser.parse(data)

    def run(
        self,
        path: str | Path,
        fetch: bool = True,
        on_progress: Callable[[FlatArtifact], None] | None = None,
    ) -> list[FlatArtifact]:
        root = self.load(path)
        artifacts = filter_artifacts(flatten(root), root.group_id)

        if fetch:
            if self.registry is None:
                raise ValueError('Registry enrichment requested without a registry service')
            self.registry.enrich(artifacts, on_progress=on_progress)
        else:
            logger.info('Skipping registry enrichment')

        return artifacts
