from pathlib import Path

import pytest

from api_doc_gen.builder import build_documentation, parse_openapi
from api_doc_gen.errors import SpecLoadError
from api_doc_gen.models import UNTAGGED, HttpMethod
from api_doc_gen.parser.base import RawDocument
from api_doc_gen.parser.loader import load_spec, load_spec_text

FIXTURES = Path(__file__).parent / "fixtures"


def _raw(paths: dict, tags: list | None = None) -> RawDocument:
    data = {"swagger": "2.0", "info": {"title": "T", "version": "1"}, "paths": paths}
    if tags is not None:
        data["tags"] = tags
    return RawDocument.model_validate(data)


def _op(**fields) -> dict:
    return {"responses": {"200": {"description": "OK"}}, **fields}


class TestLoadSpec:
    def test_load_yaml(self):
        raw = load_spec(FIXTURES / "petstore.yaml")
        assert raw.info.title == "Petstore"
        assert raw.swagger == "2.0"

    def test_load_json(self):
        raw = load_spec(FIXTURES / "users.json")
        assert raw.info.version == "2.1"
        assert list(raw.paths) == ["/users"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(SpecLoadError) as exc:
            load_spec(tmp_path / "nope.json")
        assert exc.value.stage == "loading"

    def test_missing_title_is_fatal(self):
        with pytest.raises(SpecLoadError) as exc:
            load_spec(FIXTURES / "missing_title.json")
        assert "info.title" in str(exc.value)

    def test_syntax_error(self):
        with pytest.raises(SpecLoadError):
            load_spec_text('{"swagger": "2.0", "info": ')

    def test_non_mapping_root(self):
        with pytest.raises(SpecLoadError):
            load_spec_text("- just\n- a list\n")


class TestEndpoints:
    def test_petstore_endpoints(self):
        doc = parse_openapi(FIXTURES / "petstore.yaml")
        assert [(e.method.value, e.path) for e in doc.endpoints] == [
            ("GET", "/pets"),
            ("POST", "/pets"),
            ("GET", "/pets/{petId}"),
            ("DELETE", "/pets/{petId}"),
            ("POST", "/store/orders"),
            ("GET", "/health"),
        ]

    def test_one_endpoint_per_present_slot(self):
        slots = ["trace", "head", "options", "patch", "delete", "put", "post", "get"]
        doc = build_documentation(_raw({"/all": {slot: _op() for slot in slots}}))
        assert [e.method for e in doc.endpoints] == list(HttpMethod)

    def test_methods_are_canonical(self):
        doc = parse_openapi(FIXTURES / "petstore.yaml")
        assert all(isinstance(e.method, HttpMethod) for e in doc.endpoints)

    def test_deprecated_defaults_to_false(self):
        doc = parse_openapi(FIXTURES / "petstore.yaml")
        flags = {e.operation_id: e.deprecated for e in doc.endpoints}
        assert flags["Pets_delete"] is True
        assert flags["Pets_list"] is False

    def test_required_stays_tri_state(self):
        doc = parse_openapi(FIXTURES / "petstore.yaml")
        params = {p.name: p.required for p in doc.endpoints[0].parameters}
        assert params == {"limit": False, "X-Trace": None}

    def test_responses_keep_declaration_order(self):
        doc = parse_openapi(FIXTURES / "petstore.yaml")
        list_pets = doc.endpoints[0]
        assert list(list_pets.responses) == ["200", "default"]
        assert list_pets.responses["200"].schema_type == "Pets"

    def test_security_inherits_from_document(self):
        doc = parse_openapi(FIXTURES / "petstore.yaml")
        security = {e.operation_id: e.security for e in doc.endpoints}
        assert security["Pets_list"] == ["apiKey"]
        # explicit empty list on the operation disables auth
        assert security["Pets_show"] == []


class TestServices:
    def test_declared_tags_keep_order_and_description(self):
        doc = parse_openapi(FIXTURES / "petstore.yaml")
        assert [s.name for s in doc.services] == ["Pets", "Store"]
        assert doc.services[0].description == "Everything about your pets"

    def test_untagged_operation(self):
        doc = parse_openapi(FIXTURES / "petstore.yaml")
        health = [e for e in doc.endpoints if e.path == "/health"][0]
        assert health.services == [UNTAGGED]
        assert health.tags == []

    def test_tags_outside_declared_services_are_dropped(self):
        doc = build_documentation(
            _raw(
                {"/a": {"get": _op(tags=["B", "A"])}, "/b": {"get": _op(tags=["B"])}},
                tags=[{"name": "A"}],
            )
        )
        assert doc.endpoints[0].services == ["A"]
        assert doc.endpoints[1].services == [UNTAGGED]
        assert doc.endpoints[1].tags == ["B"]

    def test_duplicate_declared_tags(self):
        doc = build_documentation(_raw({}, tags=[{"name": "A", "description": "first"}, {"name": "A"}]))
        assert len(doc.services) == 1
        assert doc.services[0].description == "first"

    def test_inferred_services_are_sorted(self):
        doc = parse_openapi(FIXTURES / "inferred.yaml")
        assert [s.name for s in doc.services] == ["Animals", "Zoo"]
        assert all(s.description is None for s in doc.services)

    def test_inferred_services_cover_operation_tags(self):
        doc = parse_openapi(FIXTURES / "inferred.yaml")
        used = {t for e in doc.endpoints for t in e.tags}
        assert {s.name for s in doc.services} == used
        services = {e.operation_id: e.services for e in doc.endpoints}
        assert services["listZoo"] == ["Zoo", "Animals"]
        assert services["getAnimals"] == [UNTAGGED]

    def test_no_tags_anywhere(self):
        doc = build_documentation(_raw({"/a": {"get": _op(), "post": _op()}}))
        assert doc.services == []
        assert all(e.services == [UNTAGGED] for e in doc.endpoints)

    def test_build_is_deterministic(self):
        first = parse_openapi(FIXTURES / "inferred.yaml")
        second = parse_openapi(FIXTURES / "inferred.yaml")
        assert first == second
