"""Tests for client module generation.

The sample document exercises every converting format, maps, arrays,
inline objects, enums, keys that are not identifiers, recursion, repeated
and required query parameters, an int64 path parameter and a method without
a response. Generated source is executed and driven through a recording
session.
"""

import ast
from datetime import datetime, timedelta, timezone

import pytest

from pdum.gapi.generator import api_modules, compile_module, generate, index_html
from pdum.gapi.generator.schema import SchemaRenderer
from pdum.gapi.types import DirectoryItem, GenerationError, GoogleApiError

ORIGIN = "https://github.com/example/clients"


def load_module(source):
    namespace = {}
    exec(compile(source, "widgets_v1.py", "exec"), namespace)
    return namespace


@pytest.fixture
def widgets(sample_document):
    return load_module(generate(sample_document, ORIGIN))


def test_source_parses_and_has_header(sample_document):
    source = generate(sample_document, ORIGIN)

    ast.parse(source)
    assert source.startswith('"""Widgets API client.')
    assert f"Source: {ORIGIN}" in source
    assert "Docs: https://widgets.example.com/docs" in source
    assert "revision 20240101" in source


def test_imports_only_what_is_used(sample_document):
    source = generate(sample_document, ORIGIN)

    assert "from datetime import datetime, timedelta" in source
    assert "from typing import Any, Literal, Optional, TypedDict, cast" in source
    assert "    serialize_duration,\n" in source
    assert "    deserialize_bytes,\n" in source


def test_client_class_and_methods(widgets):
    client_class = widgets["Widgets"]
    client = client_class()

    assert client._base_url == "https://widgets.example.com/"
    for name in ("widgets_create", "widgets_delete", "widgets_get", "widgets_list", "widgets_parts_move"):
        assert callable(getattr(client, name))


def test_typed_dict_forms(sample_document):
    source = generate(sample_document, ORIGIN)

    assert "class Widget(TypedDict, total=False):" in source
    assert "class WidgetDimensions(TypedDict, total=False):" in source
    assert 'Part = TypedDict(\n    "Part",' in source
    assert '"from": "str",' in source
    assert '"@type": "str",' in source
    assert 'color: Literal["COLOR_UNSPECIFIED", "RED", "BLUE"]' in source
    assert "counts: dict[str, int]" in source
    assert "labels: dict[str, str]" in source
    assert "SizeList = list[int]" in source
    assert "class Empty(TypedDict, total=False):\n    pass" in source


def test_get_deserializes_fields(widgets, session):
    session.respond(
        {
            "name": "projects/p/widgets/w",
            "sizeBytes": "12",
            "createTime": "2024-01-02T03:04:05.123456789Z",
            "payload": "aGk=",
            "ttl": "3.5s",
            "counts": {"a": "1"},
            "history": ["2024-01-01T00:00:00Z"],
            "dimensions": {"width": "7", "label": "x"},
            "parent": {"sizeBytes": "3"},
            "parts": [{"from": "acme", "@type": "type.example.com/Part"}],
            "color": "RED",
        }
    )
    client = widgets["Widgets"](session=session)

    widget = client.widgets_get("projects/p/widgets/w")

    assert session.last["method"] == "GET"
    assert session.last["url"] == "https://widgets.example.com/v1/projects/p/widgets/w"
    assert widget["sizeBytes"] == 12
    assert widget["createTime"] == datetime(2024, 1, 2, 3, 4, 5, 123456, tzinfo=timezone.utc)
    assert widget["payload"] == b"hi"
    assert widget["ttl"] == timedelta(seconds=3.5)
    assert widget["counts"] == {"a": 1}
    assert widget["history"] == [datetime(2024, 1, 1, tzinfo=timezone.utc)]
    assert widget["dimensions"] == {"width": 7, "label": "x"}
    assert widget["parent"] == {"sizeBytes": 3}
    assert widget["parts"] == [{"from": "acme", "@type": "type.example.com/Part"}]
    assert widget["color"] == "RED"


def test_create_serializes_body(widgets, session):
    session.respond({"name": "w", "sizeBytes": "5"})
    client = widgets["Widgets"](session=session)

    created = client.widgets_create(
        {
            "name": "w",
            "sizeBytes": 5,
            "createTime": datetime(2024, 1, 1, tzinfo=timezone.utc),
            "ttl": timedelta(seconds=90),
        }
    )

    assert session.last["method"] == "POST"
    assert session.last["url"] == "https://widgets.example.com/v1/widgets"
    assert session.last["json"] == {
        "name": "w",
        "sizeBytes": "5",
        "createTime": "2024-01-01T00:00:00Z",
        "ttl": "90s",
    }
    assert created == {"name": "w", "sizeBytes": 5}


def test_list_builds_query(widgets, session):
    session.respond({"widgets": [{"sizeBytes": "1"}], "nextPageToken": "t"})
    client = widgets["Widgets"](session=session)

    page = client.widgets_list("us", filter=["a", "b"], min_size=5, page_size=10)

    assert session.last["url"] == (
        "https://widgets.example.com/v1/widgets?region=us&filter=a&filter=b&minSize=5&pageSize=10"
    )
    assert page == {"widgets": [{"sizeBytes": 1}], "nextPageToken": "t"}


def test_optional_query_parameters_are_omitted(widgets, session):
    session.respond({})
    widgets["Widgets"](session=session).widgets_list("eu")
    assert session.last["url"] == "https://widgets.example.com/v1/widgets?region=eu"


def test_delete_with_int64_path_returns_none(widgets, session):
    session.respond(status=204)
    client = widgets["Widgets"](session=session)

    assert client.widgets_delete(42) is None
    assert session.last["method"] == "DELETE"
    assert session.last["url"] == "https://widgets.example.com/v1/widgets/42"


def test_body_without_conversion_is_sent_as_is(widgets, session):
    session.respond({"from": "acme"})
    client = widgets["Widgets"](session=session)

    moved = client.widgets_parts_move("projects/p/widgets/w/parts/1", {"from": "acme"})

    assert session.last["url"] == "https://widgets.example.com/v1/projects/p/widgets/w/parts/1:move"
    assert session.last["json"] == {"from": "acme"}
    assert moved == {"from": "acme"}


def test_errors_propagate(widgets, session):
    session.respond({"error": {"code": 403, "message": "Denied", "status": "PERMISSION_DENIED"}}, status=403)
    client = widgets["Widgets"](session=session)

    with pytest.raises(GoogleApiError) as excinfo:
        client.widgets_get("projects/p/widgets/w")
    assert excinfo.value.reason == "PERMISSION_DENIED"


def test_custom_base_url(widgets, session):
    session.respond({})
    widgets["Widgets"]("unused-credentials", "http://localhost:8080/", session=session).widgets_get("w")
    assert session.last["url"] == "http://localhost:8080/v1/w"


def test_alias_converters(widgets):
    assert widgets["serialize_size_list"]([1, 2]) == ["1", "2"]
    assert widgets["deserialize_size_list"](["3"]) == [3]


def test_unknown_reference_raises(sample_document):
    sample_document["resources"]["widgets"]["methods"]["get"]["response"] = {"$ref": "Missing"}
    with pytest.raises(GenerationError, match="Missing"):
        generate(sample_document, ORIGIN)


def test_schema_names_avoid_module_names():
    renderer = SchemaRenderer({"Any": {"type": "object"}, "Widgets": {"type": "object"}}, frozenset({"Widgets"}))
    assert renderer.ref_name("Any") == "Any_"
    assert renderer.ref_name("Widgets") == "Widgets_"


def test_converter_names_avoid_codec_helpers():
    renderer = SchemaRenderer({})
    assert renderer.function_name("serialize", "Int64") == "serialize_int64_message"
    assert renderer.function_name("deserialize", "V2Key") == "deserialize_v2_key"


def test_compile_module(sample_document):
    module = compile_module(sample_document, ORIGIN)

    assert module.name == "widgets_v1"
    assert module.api_id == "widgets:v1"
    assert module.filename == "widgets_v1.py"


def test_code_module_write(sample_document, tmp_path):
    path = compile_module(sample_document, ORIGIN).write(tmp_path / "out")
    assert path == tmp_path / "out" / "widgets_v1.py"
    assert path.read_text(encoding="utf-8").startswith('"""Widgets API client.')


def test_api_modules_skips_failures(sample_document):
    good = DirectoryItem("widgets", "v1", "Widgets API")
    unreachable = DirectoryItem("down", "v1", "Down API")
    broken = DirectoryItem("broken", "v1", "Broken API")
    documents = {good.id: sample_document, broken.id: {"version": "v1"}}

    def fetch(item):
        if item.id == unreachable.id:
            raise GoogleApiError("Service Unavailable", status_code=503)
        return documents[item.id]

    done = []
    modules = api_modules([good, unreachable, broken], ORIGIN, fetch=fetch, on_done=done.append)

    assert [m.name for m in modules] == ["widgets_v1"]
    assert done == [good, unreachable, broken]


def test_index_html():
    items = [
        DirectoryItem(
            "homegraph",
            "v1",
            "HomeGraph API",
            documentation_link="https://developers.home.google.com/cloud-to-cloud/get-started",
        ),
        DirectoryItem("apikeys", "v2", "API Keys API", discovery_rest_url="https://apikeys.googleapis.com/$discovery"),
    ]

    page = index_html(ORIGIN, items)

    assert page.startswith("<!DOCTYPE html>")
    assert "from homegraph_v1 import HomeGraph" in page
    assert "from apikeys_v2 import APIKeys" in page
    assert f"{ORIGIN}/blob/main/build/apikeys_v2.py" in page
    assert "https://developers.home.google.com/cloud-to-cloud/get-started" in page


def things_document(schemas, response, parameters=None):
    """A one-method document: ``GET v1/things/{thingId}`` returning ``response``."""
    return {
        "name": "things",
        "version": "v1",
        "title": "Things API",
        "rootUrl": "https://things.example.com/",
        "schemas": schemas,
        "resources": {
            "things": {
                "methods": {
                    "get": {
                        "id": "things.things.get",
                        "path": "v1/things/{thingId}",
                        "httpMethod": "GET",
                        "parameters": {
                            "thingId": {"type": "string", "location": "path", "required": True},
                            **(parameters or {}),
                        },
                        "parameterOrder": ["thingId"],
                        "response": {"$ref": response},
                    }
                }
            }
        },
    }


INT64 = {"type": "string", "format": "int64"}


def test_inline_class_renamed_after_clash_keeps_its_own_converters(session):
    schemas = {
        "Foo": {"type": "object", "properties": {"bar": {"type": "object", "properties": {"y": INT64}}}},
        "FooBar": {"type": "object", "properties": {"x": INT64}},
    }
    source = generate(things_document(schemas, "Foo"), ORIGIN)
    things = load_module(source)
    session.respond({"bar": {"y": "1"}})

    thing = things["Things"](session=session).things_get("t")

    assert "class FooBar_(TypedDict, total=False):" in source
    assert source.count("def deserialize_foo_bar(") == 1
    assert thing == {"bar": {"y": 1}}
    assert things["deserialize_foo_bar"]({"x": "2"}) == {"x": 2}


def test_schemas_with_the_same_snake_name_get_distinct_converters(session):
    schemas = {
        "HTTPRequest": {"type": "object", "properties": {"x": INT64}},
        "HttpRequest": {"type": "object", "properties": {"y": INT64}},
    }
    things = load_module(generate(things_document(schemas, "HttpRequest"), ORIGIN))
    session.respond({"y": "5"})

    assert things["Things"](session=session).things_get("t") == {"y": 5}
    assert things["deserialize_http_request"]({"x": "4"}) == {"x": 4}
    assert things["deserialize_http_request_2"]({"y": "6"}) == {"y": 6}


def test_parameters_do_not_shadow_module_names(session):
    schemas = {"Thing": {"type": "object", "properties": {"id": INT64}}}
    parameters = {
        "request": {"type": "string", "location": "query"},
        "cast": {"type": "string", "location": "query"},
        "deserializeThing": {"type": "string", "location": "query"},
    }
    source = generate(things_document(schemas, "Thing", parameters), ORIGIN)
    things = load_module(source)
    session.respond({"id": "3"})

    thing = things["Things"](session=session).things_get("t", request_="r", cast_="c", deserialize_thing_="d")

    assert "request_: Optional[str] = None," in source
    assert session.last["url"] == "https://things.example.com/v1/things/t?cast=c&deserializeThing=d&request=r"
    assert thing == {"id": 3}
