"""OpenAPI -> Atlassian Document Format (ADF) converter for Confluence."""

import json
import logging
from typing import IO

from openapi_adf.converter.base import ConversionError
from openapi_adf.converter.grouping import group_by_tag
from openapi_adf.converter.nodes import (
    AdfDocument,
    heading,
    operation_nodes,
    paragraph,
    server_list,
    tag_component_nodes,
)
from openapi_adf.converter.refs import collect_tag_components
from openapi_adf.parser.base import OpenAPIDocument

logger = logging.getLogger(__name__)

ADF_FORMAT = "confluence"


class ADFConverter:
    """Converts OpenAPI documents to ADF JSON."""

    def format(self) -> str:
        return ADF_FORMAT

    def build(self, doc: OpenAPIDocument) -> AdfDocument:
        """Assemble the ADF tree: title, description, servers, then endpoints grouped by tag."""
        adf = AdfDocument()
        content = adf.content

        content.append(heading(doc.title, 1))
        content.append(paragraph(f"Version: {doc.version}"))

        if doc.description:
            content.append(heading("Description", 2))
            content.append(paragraph(doc.description))

        if doc.servers:
            content.append(heading("Servers", 2))
            content.append(server_list(doc.servers))

        if doc.paths:
            content.append(heading("API Endpoints", 2))

            groups = group_by_tag(doc)
            logger.debug("Grouped operations into %d tags", len(groups))

            for tag in sorted(groups):
                endpoints = groups[tag]
                content.append(heading(tag, 3))

                component_names = collect_tag_components(endpoints)
                logger.debug("Tag %r uses %d components", tag, len(component_names))
                if component_names:
                    content.extend(tag_component_nodes(component_names, doc.components))

                for ep in endpoints:
                    content.extend(operation_nodes(ep.path, ep.operation))

        return adf

    def convert(self, doc: OpenAPIDocument, output: IO[str]) -> None:
        """Write doc to output as two-space indented ADF JSON."""
        adf = self.build(doc)
        try:
            json.dump(adf.model_dump(exclude_none=True), output, indent=2, ensure_ascii=False)
            output.write("\n")
        except (TypeError, ValueError, OSError) as e:
            raise ConversionError(f"failed to encode ADF: {e}") from e
