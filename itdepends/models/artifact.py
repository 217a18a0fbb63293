from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

# Scopes that end up on the runtime classpath
RUNTIME_SCOPES = frozenset({'compile', 'runtime'})


def belongs_to(group: str, namespace: str) -> bool:
    """True if ``group`` is ``namespace`` or a dot-separated descendant of it."""
    if not namespace:
        return False
    return group == namespace or group.startswith(namespace + '.')


class Coordinate(BaseModel):
    """
    Fields shared by tree nodes and flattened entries.

    Identity is the (group, artifact, version) triple only: scope, type,
    classifier and latest_version never take part in equality, hashing or
    ordering.
    """
    group_id: str = Field(alias='groupId')
    artifact_id: str = Field(alias='artifactId')
    version: str
    type: str = 'jar'
    scope: str = ''
    classifier: str = ''
    optional: bool = False
    latest_version: str | None = None

    model_config = ConfigDict(
        populate_by_name=True,
        extra='ignore',
    )

    @field_validator('optional', mode='before')
    @classmethod
    def parse_optional(cls, v: Any) -> Any:
        # The tree export writes booleans as "true"/"false" strings
        if isinstance(v, str):
            if v == 'true':
                return True
            if v == 'false':
                return False
            raise ValueError(f"expected 'true' or 'false', got {v!r}")
        return v

    @property
    def coordinate(self) -> tuple[str, str, str]:
        return (self.group_id, self.artifact_id, self.version)

    @property
    def key(self) -> str:
        return ':'.join(self.coordinate)

    def belongs_to(self, namespace: str) -> bool:
        return belongs_to(self.group_id, namespace)

    def is_runtime(self) -> bool:
        return self.scope.lower() in RUNTIME_SCOPES

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.coordinate == other.coordinate

    def __hash__(self) -> int:
        return hash(self.coordinate)

    def __lt__(self, other: 'Coordinate') -> bool:
        return self.coordinate < other.coordinate

    def __le__(self, other: 'Coordinate') -> bool:
        return self.coordinate <= other.coordinate

    def __gt__(self, other: 'Coordinate') -> bool:
        return self.coordinate > other.coordinate

    def __ge__(self, other: 'Coordinate') -> bool:
        return self.coordinate >= other.coordinate


class FlatArtifact(Coordinate):
    """A flattened artifact: a tree node without its children."""


class Artifact(Coordinate):
    """A node of a dependency tree."""
    children: list['Artifact'] = Field(default_factory=list)

    def without_children(self) -> FlatArtifact:
        return FlatArtifact.model_validate(self.model_dump(exclude={'children'}))

    def walk(self):
        """Yield every descendant depth-first, in pre-order. The node itself is skipped."""
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))
