import structlog
from pydantic import ValidationError

from itdepends.core.errors import ParseError
from itdepends.models.artifact import Artifact
from itdepends.parsers.base import TreeParser

logger = structlog.get_logger('maven_parser')


class MavenTreeParser(TreeParser):
    """
    Parser for the JSON output of ``mvn dependency:tree -DoutputType=json``.

    Each node carries groupId, artifactId, version, type, scope, classifier,
    optional and a nested ``children`` list. The JSON decoder rejects
    documents nested deeper than 99 tree levels.
    """

    name = 'maven'

    def parse(self, data: bytes) -> Artifact:
        try:
            root = Artifact.model_validate_json(data)
        except ValidationError as e:
            raise ParseError(str(e), cause=e) from e

        logger.debug(
            'Parsed dependency tree', root=root.key,
            direct_dependencies=len(root.children),
        )
        return root
