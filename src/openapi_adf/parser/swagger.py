"""OpenAPI / Swagger document loader.

Parses OpenAPI 3.x and Swagger 2.0 documents into an OpenAPIDocument model.
Local `#/...` references to parameters, responses and request bodies are
resolved while loading; schema references are kept as references.
"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .base import (
    MediaType,
    OpenAPIDocument,
    Operation,
    Parameter,
    PathItem,
    RequestBody,
    Response,
    Schema,
    Server,
)

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")

DEFAULT_MEDIA_TYPE = "application/json"


class DocumentError(ValueError):
    """Raised when an input file is not a loadable OpenAPI/Swagger document."""


def parse_openapi(file_path: Path) -> OpenAPIDocument:
    """Parse an OpenAPI/Swagger file (YAML or JSON) into an OpenAPIDocument."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DocumentError(f"{file_path}: not valid UTF-8 text: {e}") from e
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentError(f"{file_path}: invalid YAML/JSON: {e}") from e
    return parse_openapi_dict(data)


def parse_openapi_dict(data: dict) -> OpenAPIDocument:
    """Map an already loaded OpenAPI/Swagger mapping onto the domain model."""
    if not isinstance(data, dict):
        raise DocumentError("document root must be a mapping")
    if "openapi" not in data and "swagger" not in data:
        raise DocumentError("document has neither an 'openapi' nor a 'swagger' version key")

    try:
        return _parse_document(data)
    except ValidationError as e:
        raise DocumentError(f"document does not match the OpenAPI model: {e}") from e


def _parse_document(data: dict) -> OpenAPIDocument:
    swagger2 = "swagger" in data
    info = _mapping(data.get("info"))

    if swagger2:
        servers = _swagger2_servers(data)
        components = _mapping(data.get("definitions"))
    else:
        servers = [
            Server(url=_text(s.get("url")), description=_text(s.get("description")))
            for s in _list(data.get("servers"))
            if isinstance(s, dict)
        ]
        components = _mapping(_mapping(data.get("components")).get("schemas"))

    consumes = [str(mt) for mt in _list(data.get("consumes"))] or [DEFAULT_MEDIA_TYPE]
    paths = [
        _parse_path(str(path), item, data, swagger2, consumes)
        for path, item in _mapping(data.get("paths")).items()
        if isinstance(item, dict)
    ]

    return OpenAPIDocument(
        title=_text(info.get("title")),
        version=_text(info.get("version")),
        description=_text(info.get("description")),
        servers=servers,
        paths=paths,
        components={str(name): _parse_schema(s) for name, s in components.items()},
    )


def _text(value) -> str:
    """str() for scalars, with a YAML/JSON null read as empty."""
    return "" if value is None else str(value)


def _mapping(value) -> dict:
    return value if isinstance(value, dict) else {}


def _list(value) -> list:
    return value if isinstance(value, list) else []


def _resolve(node, root: dict) -> dict:
    """Follow local '#/...' references until a non-reference mapping is reached.

    Unresolvable, external or cyclic references resolve to an empty mapping.
    """
    seen = set()
    while isinstance(node, dict) and isinstance(node.get("$ref"), str):
        ref = node["$ref"]
        if not ref.startswith("#/") or ref in seen:
            return {}
        seen.add(ref)
        node = root
        for token in ref[2:].split("/"):
            token = token.replace("~1", "/").replace("~0", "~")
            if not isinstance(node, dict) or token not in node:
                return {}
            node = node[token]
    return _mapping(node)


def _swagger2_servers(data: dict) -> list[Server]:
    host = data.get("host")
    if not host:
        return []
    scheme = (_list(data.get("schemes")) or ["https"])[0]
    return [Server(url=f"{scheme}://{host}{_text(data.get('basePath'))}")]


def _parse_path(path: str, item: dict, root: dict, swagger2: bool, consumes: list[str]) -> PathItem:
    shared = [_resolve(p, root) for p in _list(item.get("parameters"))]
    operations = []

    for method in HTTP_METHODS:
        operation = item.get(method)
        if not isinstance(operation, dict):
            continue

        own = [_resolve(p, root) for p in _list(operation.get("parameters"))]
        raw_params = _merge_parameters(shared, own)
        params = [_parse_parameter(p) for p in raw_params if p.get("in") != "body"]

        if swagger2:
            body_params = [p for p in raw_params if p.get("in") == "body"]
            media_types = [str(mt) for mt in _list(operation.get("consumes"))] or consumes
            request_body = _swagger2_request_body(body_params, media_types)
        else:
            request_body = _parse_request_body(operation.get("requestBody"), root)

        operations.append(
            Operation(
                method=method.upper(),
                summary=_text(operation.get("summary")),
                description=_text(operation.get("description")),
                tags=[str(t) for t in _list(operation.get("tags")) if t is not None],
                parameters=params,
                request_body=request_body,
                responses=_parse_responses(_mapping(operation.get("responses")), root, swagger2),
            )
        )

    return PathItem(path=path, operations=operations)


def _merge_parameters(shared: list[dict], own: list[dict]) -> list[dict]:
    """Path-level parameters apply unless the operation redeclares the same (name, in)."""
    own = [p for p in own if p]
    declared = {(p.get("name"), p.get("in")) for p in own}
    inherited = [p for p in shared if p and (p.get("name"), p.get("in")) not in declared]
    return inherited + own


def _parse_parameter(p: dict) -> Parameter:
    # Swagger 2.0 keeps the type on the parameter itself
    schema = p.get("schema") if "schema" in p else {k: p[k] for k in ("type", "format", "items") if k in p}
    return Parameter(
        name=_text(p.get("name")),
        location=_text(p.get("in")) or "query",
        description=_text(p.get("description")),
        required=bool(p.get("required", False)),
        schema=_parse_schema(schema),
    )


def _parse_request_body(body, root: dict) -> RequestBody | None:
    if not isinstance(body, dict):
        return None
    body = _resolve(body, root)
    return RequestBody(
        description=_text(body.get("description")),
        required=bool(body.get("required", False)),
        content=_parse_content(_mapping(body.get("content"))),
    )


def _swagger2_request_body(body_params: list[dict], media_types: list[str]) -> RequestBody | None:
    if not body_params:
        return None
    body = body_params[0]
    schema = _parse_schema(body.get("schema"))
    return RequestBody(
        description=_text(body.get("description")),
        required=bool(body.get("required", False)),
        content={mt: MediaType(schema=schema) for mt in media_types},
    )


def _parse_content(content: dict) -> dict[str, MediaType]:
    return {
        str(media_type): MediaType(schema=_parse_schema(_mapping(media).get("schema")))
        for media_type, media in content.items()
    }


def _parse_responses(responses: dict, root: dict, swagger2: bool) -> list[Response]:
    result = []
    for status_code, resp in responses.items():
        resp = _resolve(resp, root)
        if swagger2:
            content = {DEFAULT_MEDIA_TYPE: MediaType(schema=_parse_schema(resp["schema"]))} if "schema" in resp else {}
        else:
            content = _parse_content(_mapping(resp.get("content")))
        result.append(
            Response(
                status_code=str(status_code),
                description=_text(resp.get("description")),
                content=content,
            )
        )
    return result


def _parse_schema(schema: dict | None) -> Schema:
    if not isinstance(schema, dict):
        return Schema()
    if "$ref" in schema:
        return Schema(ref=_text(schema["$ref"]))

    schema_type = schema.get("type")
    if isinstance(schema_type, list):
        # OpenAPI 3.1 allows ["string", "null"]
        schema_type = next((t for t in schema_type if t != "null"), None)

    items = schema.get("items")
    return Schema(
        type=_text(schema_type),
        format=_text(schema.get("format")),
        description=_text(schema.get("description")),
        properties={str(k): _parse_schema(v) for k, v in _mapping(schema.get("properties")).items()},
        items=_parse_schema(items) if isinstance(items, dict) else None,
    )
