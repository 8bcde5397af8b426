"""Unified data models for a parsed OpenAPI document.

The loader converts OpenAPI 3.x and Swagger 2.0 input into these models;
converters only ever read them.
"""

from pydantic import BaseModel, ConfigDict, Field


class Server(BaseModel):
    url: str
    description: str = ""


class Schema(BaseModel):
    """A schema definition: either a reference to a named component or an inline shape."""

    ref: str = ""  # "#/components/schemas/Pet"
    type: str = ""  # string / integer / object / array ...
    format: str = ""
    description: str = ""
    properties: dict[str, "Schema"] = {}
    items: "Schema | None" = None


class MediaType(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    schema_: Schema = Field(default_factory=Schema, alias="schema")


class RequestBody(BaseModel):
    description: str = ""
    required: bool = False
    content: dict[str, MediaType] = {}  # {media_type: MediaType}


class Parameter(BaseModel):
    """A single operation parameter (query, path, header, or cookie)."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    location: str  # query / path / header / cookie
    description: str = ""
    required: bool = False
    schema_: Schema = Field(default_factory=Schema, alias="schema")


class Response(BaseModel):
    status_code: str  # "200", "4XX", "default"
    description: str = ""
    content: dict[str, MediaType] = {}


class Operation(BaseModel):
    """A single HTTP operation on a path."""

    method: str  # GET / POST / PUT / DELETE / PATCH ...
    summary: str = ""
    description: str = ""
    tags: list[str] = []
    parameters: list[Parameter] = []
    request_body: RequestBody | None = None
    responses: list[Response] = []


class PathItem(BaseModel):
    path: str  # /pets/{petId}
    operations: list[Operation] = []


class OpenAPIDocument(BaseModel):
    """A whole API description: metadata, servers, paths and component schemas."""

    title: str
    version: str
    description: str = ""
    servers: list[Server] = []
    paths: list[PathItem] = []
    components: dict[str, Schema] = {}  # {component_name: Schema}
