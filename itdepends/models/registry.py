from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class SearchDoc(BaseModel):
    """A single result document of the Maven Central search API."""
    id: str = ''
    group_id: str = Field(alias='g', default='')
    artifact_id: str = Field(alias='a', default='')
    latest_version: str = Field(alias='latestVersion')

    model_config = ConfigDict(extra='ignore')


class SearchResponse(BaseModel):
    docs: list[SearchDoc] = Field(default_factory=list)

    model_config = ConfigDict(extra='ignore')


class SearchEnvelope(BaseModel):
    """Top-level body: ``{"response": {"docs": [...]}}``."""
    response: SearchResponse

    model_config = ConfigDict(extra='ignore')
