"""Component reference collection.

Walks schema definitions and records which named component schemas they
reference. A reference is recorded but never expanded, so cyclic component
graphs terminate.
"""

from openapi_adf.converter.grouping import EndpointRef
from openapi_adf.parser.base import Schema


def extract_ref_name(ref: str) -> str:
    """'#/components/schemas/Pet' -> 'Pet' (also handles '#/definitions/Pet')."""
    return ref.rsplit("/", 1)[-1]


def collect_refs(schema: Schema | None, refs: set[str]) -> None:
    """Add every component name referenced by schema to refs.

    Recurses into inline properties and array items only; a reference is a leaf.
    """
    if schema is None:
        return
    if schema.ref:
        refs.add(extract_ref_name(schema.ref))
        return

    for prop in schema.properties.values():
        collect_refs(prop, refs)

    if schema.items is not None:
        collect_refs(schema.items, refs)


def collect_tag_components(endpoints: list[EndpointRef]) -> list[str]:
    """Gather all unique component names used by the endpoints of one tag, sorted by name."""
    refs: set[str] = set()

    for ep in endpoints:
        operation = ep.operation
        if operation.request_body is not None:
            for media in operation.request_body.content.values():
                collect_refs(media.schema_, refs)

        for response in operation.responses:
            for media in response.content.values():
                collect_refs(media.schema_, refs)

        for param in operation.parameters:
            collect_refs(param.schema_, refs)

    return sorted(refs)
