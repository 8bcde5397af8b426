from openapi_adf.parser.base import (
    MediaType,
    OpenAPIDocument,
    Operation,
    Parameter,
    Response,
    Schema,
)


class TestSchema:
    def test_defaults_are_empty(self):
        s = Schema()
        assert s.ref == ""
        assert s.type == ""
        assert s.properties == {}
        assert s.items is None

    def test_nested_properties_and_items(self):
        s = Schema(
            type="object",
            properties={
                "tags": Schema(type="array", items=Schema(ref="#/components/schemas/Tag")),
            },
        )
        assert s.properties["tags"].items.ref == "#/components/schemas/Tag"

    def test_defaults_are_not_shared(self):
        a = Schema()
        b = Schema()
        a.properties["x"] = Schema(type="string")
        assert b.properties == {}


class TestMediaTypeAndParameter:
    def test_schema_alias(self):
        m = MediaType(schema=Schema(type="string"))
        assert m.schema_.type == "string"

    def test_schema_by_field_name(self):
        m = MediaType(schema_=Schema(type="integer"))
        assert m.schema_.type == "integer"

    def test_parameter_defaults(self):
        p = Parameter(name="id", location="path")
        assert p.required is False
        assert p.description == ""
        assert p.schema_ == Schema()


class TestOpenAPIDocument:
    def test_create_minimal_document(self):
        doc = OpenAPIDocument(title="API", version="1.0")
        assert doc.servers == []
        assert doc.paths == []
        assert doc.components == {}

    def test_operation_serialization_roundtrip(self):
        op = Operation(
            method="GET",
            tags=["pets"],
            parameters=[Parameter(name="limit", location="query", schema=Schema(type="integer"))],
            responses=[Response(status_code="200", description="OK")],
        )
        data = op.model_dump(by_alias=True)
        op2 = Operation(**data)
        assert op2 == op
        assert op2.request_body is None
