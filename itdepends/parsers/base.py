from abc import ABC
from abc import abstractmethod

from itdepends.models.artifact import Artifact


class TreeParser(ABC):
    """Turns an external dependency-tree document into an Artifact tree."""

    name: str = ''

    @abstractmethod
    def parse(self, data: bytes) -> Artifact:
        """
        Decode ``data`` into the root Artifact.

        Raises:
            ParseError: if the document is malformed or incomplete.
        """
