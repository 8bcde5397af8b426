"""Atlassian Document Format (ADF) node types and builders.

Every builder is a pure function returning freshly built nodes. Fields left
as None are dropped when the tree is serialized.
"""

import logging
from typing import Any

from pydantic import BaseModel

from openapi_adf.converter.refs import extract_ref_name
from openapi_adf.parser.base import Operation, Parameter, Response, Schema, Server

logger = logging.getLogger(__name__)


class AdfMark(BaseModel):
    type: str  # strong / code / link
    attrs: dict[str, Any] | None = None


class AdfAttrs(BaseModel):
    level: int | None = None
    order: int | None = None
    url: str | None = None


class AdfNode(BaseModel):
    type: str
    attrs: AdfAttrs | None = None
    content: list["AdfNode"] | None = None
    text: str | None = None
    marks: list[AdfMark] | None = None


class AdfDocument(BaseModel):
    version: int = 1
    type: str = "doc"
    content: list[AdfNode] = []


def format_method(method: str) -> str:
    return method.upper()


# -- inline -------------------------------------------------------------------

def text(value: str, marks: list[AdfMark] | None = None) -> AdfNode:
    return AdfNode(type="text", text=value or None, marks=marks)


def bold_text(value: str) -> AdfNode:
    return text(value, [AdfMark(type="strong")])


def code_text(value: str) -> AdfNode:
    return text(value, [AdfMark(type="code")])


# -- blocks -------------------------------------------------------------------

def heading(value: str, level: int) -> AdfNode:
    return AdfNode(type="heading", attrs=AdfAttrs(level=level), content=[text(value)])


def paragraph(value: str) -> AdfNode:
    return AdfNode(type="paragraph", content=[text(value)])


def rule() -> AdfNode:
    return AdfNode(type="rule")


def _inline_paragraph(*inline: AdfNode) -> AdfNode:
    return AdfNode(type="paragraph", content=list(inline))


def _bullet_list(paragraphs: list[AdfNode]) -> AdfNode:
    items = [AdfNode(type="listItem", content=[p]) for p in paragraphs]
    return AdfNode(type="bulletList", content=items)


def server_list(servers: list[Server]) -> AdfNode:
    """One item per server: 'URL' or 'URL - description'."""
    return _bullet_list([
        paragraph(f"{s.url} - {s.description}" if s.description else s.url)
        for s in servers
    ])


def parameter_list(params: list[Parameter]) -> AdfNode:
    """One item per parameter: `name` (location): description [(required)]."""
    return _bullet_list([
        _inline_paragraph(
            code_text(p.name),
            text(f" ({p.location}): {p.description}{' (required)' if p.required else ''}"),
        )
        for p in params
    ])


def response_list(responses: list[Response]) -> AdfNode:
    """One item per response: `status`: description."""
    return _bullet_list([
        _inline_paragraph(code_text(r.status_code), text(f": {r.description}"))
        for r in responses
    ])


def _type_label(schema: Schema) -> str:
    if schema.format:
        return f"{schema.type} ({schema.format})"
    return schema.type


def component_schema_nodes(name: str, schema: Schema) -> list[AdfNode]:
    """Bold name, type line, description and an alphabetical property list for one component."""
    nodes = [_inline_paragraph(bold_text(name))]

    if schema.type:
        nodes.append(paragraph(f"Type: {_type_label(schema)}"))

    if schema.description:
        nodes.append(paragraph(schema.description))

    if schema.properties:
        items = []
        for prop_name in sorted(schema.properties):
            prop = schema.properties[prop_name]
            prop_type = extract_ref_name(prop.ref) if prop.ref else _type_label(prop)
            items.append(_inline_paragraph(code_text(prop_name), text(f" ({prop_type})")))
        nodes.append(_bullet_list(items))

    return nodes


def tag_component_nodes(names: list[str], components: dict[str, Schema]) -> list[AdfNode]:
    """'Schemas Used' heading plus one block per known component; unknown names are skipped."""
    nodes = [heading("Schemas Used", 4)]
    for name in names:
        schema = components.get(name)
        if schema is None:
            logger.debug("Skipping unknown component %r", name)
            continue
        nodes.extend(component_schema_nodes(name, schema))
    return nodes


def operation_nodes(path: str, operation: Operation) -> list[AdfNode]:
    """Heading, summary, description, parameters and responses of one endpoint, closed by a rule."""
    nodes = [heading(f"{format_method(operation.method)} {path}", 5)]

    if operation.summary:
        nodes.append(_inline_paragraph(bold_text(operation.summary)))

    if operation.description:
        nodes.append(paragraph(operation.description))

    if operation.parameters:
        nodes.append(heading("Parameters", 6))
        nodes.append(parameter_list(operation.parameters))

    if operation.responses:
        nodes.append(heading("Responses", 6))
        nodes.append(response_list(operation.responses))

    nodes.append(rule())
    return nodes
