"""Group a document's operations by tag."""

from typing import NamedTuple

from openapi_adf.parser.base import OpenAPIDocument, Operation

DEFAULT_TAG = "Default"


class EndpointRef(NamedTuple):
    path: str
    method: str
    operation: Operation


def group_by_tag(doc: OpenAPIDocument) -> dict[str, list[EndpointRef]]:
    """Group every operation under each of its tags. Untagged operations go to 'Default'.

    Each group is sorted by path, then method. Tag keys are left unsorted;
    callers sort them before iterating.
    """
    groups: dict[str, list[EndpointRef]] = {}
    for path in doc.paths:
        for op in path.operations:
            for tag in op.tags or [DEFAULT_TAG]:
                groups.setdefault(tag, []).append(EndpointRef(path.path, op.method, op))

    for endpoints in groups.values():
        endpoints.sort(key=lambda ep: (ep.path, ep.method))
    return groups
