from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class BackendConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str = "localhost"
    port: int = 8080
    core: str = "biblio"
    timeout: Optional[float] = None


class ProxyResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: int
    qtime: int
    query_string: str = Field(alias="q")
    count: int = Field(ge=0)


# Subset of a Solr select reply; everything else is ignored.
class ResponseHeader(BaseModel):
    status: int
    qtime: int = Field(alias="QTime")


class ResultSet(BaseModel):
    num_found: int = Field(alias="numFound", ge=0)


class SelectResponse(BaseModel):
    header: ResponseHeader = Field(alias="responseHeader")
    response: ResultSet
