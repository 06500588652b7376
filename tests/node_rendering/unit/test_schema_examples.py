"""Example payload tests."""

from __future__ import annotations

from openapi_docs.api_document.document_loader import parse_api_document
from openapi_docs.api_document.document_models import SchemaReference
from openapi_docs.node_rendering.schema_examples import example_from_schema
from openapi_docs.reference_resolution.resolution_outcomes import ABSENT, CircularReference

_DOCUMENT = parse_api_document(
    {
        "info": {"title": "Examples"},
        "components": {
            "schemas": {
                "Pet": {
                    "type": "object",
                    "properties": {
                        "id": {"type": "integer", "example": 7},
                        "status": {"type": "string", "enum": ["available", "sold"]},
                        "name": {"type": "string"},
                        "vaccinated": {"type": "boolean"},
                        "tags": {"type": "array", "items": {"type": "string"}},
                        "category": {"$ref": "#/components/schemas/Category"},
                    },
                },
                "Category": {
                    "type": "object",
                    "properties": {
                        "weight": {"type": "number"},
                        "parent": {"$ref": "#/components/schemas/Category"},
                    },
                },
                "Pets": {"type": "array", "items": {"$ref": "#/components/schemas/Pet"}},
            }
        },
    }
)


def test_object_example_uses_examples_enums_and_type_defaults_in_property_order() -> None:
    example = example_from_schema(SchemaReference("#/components/schemas/Pet"), _DOCUMENT)

    assert example == {
        "id": 7,
        "status": "available",
        "name": "string",
        "vaccinated": False,
        "tags": ["string"],
        "category": {"weight": 0, "parent": "<circular: Category>"},
    }
    assert list(example) == ["id", "status", "name", "vaccinated", "tags", "category"]


def test_array_example_wraps_item_example() -> None:
    example = example_from_schema(SchemaReference("#/components/schemas/Pets"), _DOCUMENT)

    assert isinstance(example, list)
    assert example[0]["category"]["parent"] == "<circular: Category>"


def test_resolved_markers_are_accepted_directly() -> None:
    assert example_from_schema(CircularReference(name="Pet"), _DOCUMENT) == "<circular: Pet>"
    assert example_from_schema(ABSENT, _DOCUMENT) is None
    assert example_from_schema(SchemaReference("#/components/schemas/Missing"), _DOCUMENT) is None
