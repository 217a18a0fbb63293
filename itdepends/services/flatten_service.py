from collections.abc import Iterable

import structlog

from itdepends.models.artifact import Artifact
from itdepends.models.artifact import FlatArtifact

logger = structlog.get_logger('flatten_service')


def flatten(root: Artifact) -> list[FlatArtifact]:
    """
    Collect every transitive dependency of ``root`` once, sorted by coordinate.

    The root itself is not part of the result. When the same coordinate shows
    up more than once, the first occurrence in depth-first pre-order is kept.
    """
    seen: dict[tuple[str, str, str], FlatArtifact] = {}
    for node in root.walk():
        kept = seen.get(node.coordinate)
        if kept is None:
            seen[node.coordinate] = node.without_children()
        elif kept.scope != node.scope:
            logger.debug(
                'Duplicate coordinate with different scope',
                artifact=node.key, kept_scope=kept.scope, dropped_scope=node.scope,
            )

    flattened = sorted(seen.values(), key=lambda a: a.coordinate)
    logger.info('Flattened dependency tree', root=root.key, unique=len(flattened))
    return flattened


def filter_artifacts(artifacts: Iterable[FlatArtifact], namespace: str) -> list[FlatArtifact]:
    """Drop the project's own modules and anything not on the runtime classpath."""
    kept = [
        a for a in artifacts
        if not a.belongs_to(namespace) and a.is_runtime()
    ]
    logger.info('Filtered artifacts', namespace=namespace, kept=len(kept))
    return kept
