import time
from collections.abc import Callable

import requests
import structlog
from pydantic import ValidationError

from itdepends.core.client import get_http_client
from itdepends.core.config import get_config
from itdepends.core.config import RegistryConfig
from itdepends.core.errors import NetworkError
from itdepends.core.errors import ResponseFormatError
from itdepends.core.stats import EnrichStats
from itdepends.models.artifact import FlatArtifact
from itdepends.models.registry import SearchEnvelope

logger = structlog.get_logger('registry_service')


class RegistryService:
    """Looks up the latest published version of artifacts on Maven Central."""

    def __init__(self, session: requests.Session | None = None, config: RegistryConfig | None = None):
        self.config = config or get_config().registry
        self.session = session or get_http_client(user_agent=self.config.user_agent)
        self.stats = EnrichStats()

    def build_params(self, artifact: FlatArtifact) -> dict[str, str]:
        return {
            'q': f"g:{artifact.group_id} AND a:{artifact.artifact_id}",
            'rows': str(self.config.rows),
            'wt': 'json',
        }

    def get_latest_version(self, artifact: FlatArtifact) -> str | None:
        """Return the latest version known to the registry, or None if it has no match."""
        try:
            response = self.session.get(
                self.config.base_url,
                params=self.build_params(artifact),
                timeout=self.config.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise NetworkError(
                f"{artifact.group_id}:{artifact.artifact_id}: {e}", cause=e,
            ) from e
        self.stats.requests += 1

        try:
            envelope = SearchEnvelope.model_validate_json(response.content)
        except ValidationError as e:
            raise ResponseFormatError(
                f"{artifact.group_id}:{artifact.artifact_id}: {e}", cause=e,
            ) from e

        docs = envelope.response.docs
        if not docs:
            self.stats.missing += 1
            logger.info(
                'No registry match', _style='dim',
                group=artifact.group_id, artifact=artifact.artifact_id,
            )
            return None
        self.stats.found += 1
        return docs[0].latest_version

    def enrich(
        self,
        artifacts: list[FlatArtifact],
        on_progress: Callable[[FlatArtifact], None] | None = None,
    ) -> list[FlatArtifact]:
        """
        Set ``latest_version`` on every artifact, one request at a time.

        Waits ``request_delay`` seconds before each request but the first.
        Nothing is assigned until every lookup has succeeded, so a failure
        leaves ``artifacts`` unchanged.
        """
        self.stats = EnrichStats(total=len(artifacts))
        versions: list[str | None] = []

        for i, artifact in enumerate(artifacts):
            if i > 0 and self.config.request_delay > 0:
                time.sleep(self.config.request_delay)

            logger.info(
                'Fetching metadata',
                group=artifact.group_id, artifact=artifact.artifact_id,
            )
            versions.append(self.get_latest_version(artifact))
            if on_progress:
                on_progress(artifact)

        for artifact, latest in zip(artifacts, versions):
            artifact.latest_version = latest

        logger.info(
            'Enrichment complete',
            total=self.stats.total,
            requests=self.stats.requests,
            found=self.stats.found,
            missing=self.stats.missing,
            elapsed=f"{self.stats.elapsed_time:.2f}s",
        )
        return artifacts
