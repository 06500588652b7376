"""API document loading tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from openapi_docs.api_document.document_loader import (
    DocumentError,
    load_api_document,
    parse_api_document,
)
from openapi_docs.api_document.document_models import (
    HttpMethod,
    Schema,
    SchemaReference,
)


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_json_document_preserving_key_order(tmp_path: Path) -> None:
    document_path = _write_file(
        tmp_path / "api.json",
        json.dumps(
            {
                "openapi": "3.1.0",
                "info": {"title": "Pets", "version": "1.0.0", "description": "Store"},
                "paths": {
                    "/pets": {
                        "post": {"operationId": "createPet"},
                        "summary": "ignored path-level key",
                        "get": {"operationId": "listPets"},
                    },
                    "/owners": {"get": {"operationId": "listOwners"}},
                },
            }
        ),
    )

    document = load_api_document(document_path)

    assert document.title == "Pets"
    assert document.version == "1.0.0"
    assert document.description == "Store"
    assert list(document.paths) == ["/pets", "/owners"]
    pets = document.paths["/pets"]
    assert pets is not None
    assert list(pets.operations) == [HttpMethod.POST, HttpMethod.GET]
    assert pets.operations[HttpMethod.GET].operation_id == "listPets"


def test_loads_yaml_document(tmp_path: Path) -> None:
    document_path = _write_file(
        tmp_path / "api.yaml",
        """
openapi: 3.0.3
info:
  title: Pets
  version: 2
paths:
  /pets:
    get:
      summary: List pets
      responses:
        "200":
          description: ok
          content:
            application/json:
              schema:
                $ref: "#/components/schemas/Pet"
components:
  schemas:
    Pet:
      type: object
      required: [id]
      properties:
        id:
          type: integer
""",
    )

    document = load_api_document(document_path)

    assert document.version == "2"
    pets = document.paths["/pets"]
    assert pets is not None
    operation = pets.operations[HttpMethod.GET]
    assert operation.summary == "List pets"
    assert operation.responses is not None
    response = operation.responses["200"]
    assert response.description == "ok"
    assert response.schema_for("application/json") == SchemaReference("#/components/schemas/Pet")
    pet = document.schemas["Pet"]
    assert isinstance(pet, Schema)
    assert pet.required == frozenset({"id"})
    assert pet.properties == {"id": Schema(type="integer")}


def test_parse_tolerates_missing_and_malformed_sections() -> None:
    document = parse_api_document(
        {
            "info": "not a mapping",
            "paths": {
                "/null": None,
                "/pets": {
                    "get": {
                        "requestBody": "oops",
                        "responses": {"200": "oops", "204": {"description": "empty"}},
                    },
                    "post": "not an operation",
                },
            },
            "components": {"schemas": {"Broken": "not a schema"}},
        }
    )

    assert document.title == ""
    assert document.paths["/null"] is None
    pets = document.paths["/pets"]
    assert pets is not None
    assert list(pets.operations) == [HttpMethod.GET]
    operation = pets.operations[HttpMethod.GET]
    assert operation.request_body is None
    assert operation.responses is not None
    assert list(operation.responses) == ["204"]
    assert dict(document.schemas) == {}


def test_schema_type_lists_normalize_to_first_non_null_type() -> None:
    document = parse_api_document(
        {
            "info": {"title": "Types"},
            "components": {
                "schemas": {
                    "Nullable": {"type": ["null", "string"]},
                    "OnlyNull": {"type": ["null"]},
                    "Untyped": {"description": "anything"},
                }
            },
        }
    )

    assert document.schemas["Nullable"] == Schema(type="string")
    assert document.schemas["OnlyNull"] == Schema(type="null")
    assert document.schemas["Untyped"] == Schema(description="anything")


def test_media_type_without_schema_is_kept_as_empty_slot() -> None:
    document = parse_api_document(
        {
            "info": {"title": "Media"},
            "paths": {
                "/upload": {
                    "post": {"requestBody": {"content": {"application/octet-stream": {}}}}
                }
            },
        }
    )

    upload = document.paths["/upload"]
    assert upload is not None
    request_body = upload.operations[HttpMethod.POST].request_body
    assert request_body is not None
    assert dict(request_body.content) == {"application/octet-stream": None}
    assert request_body.schema_for("application/json") is None


def test_document_registries_are_read_only() -> None:
    document = parse_api_document({"info": {"title": "Frozen"}})

    with pytest.raises(TypeError):
        document.schemas["Injected"] = Schema()  # type: ignore[index]


def test_missing_document_raises_document_error(tmp_path: Path) -> None:
    with pytest.raises(DocumentError, match="not found"):
        load_api_document(tmp_path / "missing.json")


def test_invalid_json_raises_document_error(tmp_path: Path) -> None:
    document_path = _write_file(tmp_path / "api.json", "{not-valid-json}")

    with pytest.raises(DocumentError, match="Invalid JSON"):
        load_api_document(document_path)


def test_non_mapping_root_raises_document_error(tmp_path: Path) -> None:
    document_path = _write_file(tmp_path / "api.yml", "- just\n- a list\n")

    with pytest.raises(DocumentError, match="root must be a mapping"):
        load_api_document(document_path)


def test_non_utf8_document_raises_document_error(tmp_path: Path) -> None:
    document_path = tmp_path / "api.json"
    document_path.write_bytes(b'{"info": {"title": "\xff\xfe"}}')

    with pytest.raises(DocumentError, match="Failed to read API document"):
        load_api_document(document_path)
