"""Tests for parsing Discovery documents."""

import pytest

from pdum.gapi.generator import Method, RestDescription
from pdum.gapi.types import GenerationError


def test_from_dict(sample_document):
    service = RestDescription.from_dict(sample_document)

    assert service.id == "widgets:v1"
    assert service.title == "Widgets API"
    assert service.base_url == "https://widgets.example.com/"
    assert service.revision == "20240101"
    assert set(service.schemas) == {"Empty", "ListWidgetsResponse", "Part", "SizeList", "Widget"}


def test_methods_are_collected_from_nested_resources(sample_document):
    service = RestDescription.from_dict(sample_document)

    ids = sorted(method.id for method in service.methods)
    assert ids == [
        "widgets.widgets.create",
        "widgets.widgets.delete",
        "widgets.widgets.get",
        "widgets.widgets.list",
        "widgets.widgets.parts.move",
    ]


def test_parameter_split(sample_document):
    service = RestDescription.from_dict(sample_document)
    method = next(m for m in service.methods if m.id == "widgets.widgets.list")

    assert [p.name for p in method.positional_parameters] == ["region"]
    assert [p.name for p in method.optional_parameters] == ["filter", "minSize", "pageSize"]
    assert method.parameters["filter"].repeated
    assert method.response_ref == "ListWidgetsResponse"
    assert method.request_ref is None


def test_path_parameters_are_positional_even_without_order():
    method = Method.from_dict(
        {
            "id": "x.things.get",
            "path": "v1/{b}/{a}",
            "parameters": {
                "a": {"type": "string", "location": "path"},
                "b": {"type": "string", "location": "path"},
                "view": {"type": "string", "location": "query"},
            },
        }
    )

    assert [p.name for p in method.positional_parameters] == ["a", "b"]
    assert [p.name for p in method.optional_parameters] == ["view"]
    assert method.http_method == "GET"


def test_base_url_fallback():
    service = RestDescription.from_dict(
        {"name": "legacy", "version": "v1", "baseUrl": "https://legacy.example.com/legacy/v1"}
    )

    assert service.base_url == "https://legacy.example.com/legacy/v1/"
    assert service.title == "legacy"


def test_service_path_joined():
    service = RestDescription.from_dict(
        {
            "name": "doubleclickbidmanager",
            "version": "v2",
            "rootUrl": "https://doubleclickbidmanager.googleapis.com/",
            "servicePath": "v2/",
        }
    )

    assert service.base_url == "https://doubleclickbidmanager.googleapis.com/v2/"


def test_missing_name_raises():
    with pytest.raises(GenerationError):
        RestDescription.from_dict({"version": "v1"})


def test_method_without_path_raises():
    with pytest.raises(GenerationError):
        Method.from_dict({"id": "x.y.z"})
