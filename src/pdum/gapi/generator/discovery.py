"""Typed view of a Discovery ``RestDescription``.

Only the parts the generator needs are modelled: the service identity, its
base URL, the schemas (kept as raw JSON schema dicts) and a flat list of
methods collected from the nested ``resources`` tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

from pdum.gapi.types import GenerationError


@dataclass
class Parameter:
    """A path or query parameter of a method."""

    name: str
    type: str = "string"
    format: Optional[str] = None
    location: str = "query"
    required: bool = False
    repeated: bool = False
    description: str = ""
    enum: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, name: str, data: dict[str, Any]) -> "Parameter":
        return cls(
            name=name,
            type=data.get("type", "string"),
            format=data.get("format"),
            location=data.get("location", "query"),
            required=bool(data.get("required", False)),
            repeated=bool(data.get("repeated", False)),
            description=data.get("description", ""),
            enum=list(data.get("enum", [])),
        )


@dataclass
class Method:
    """One RPC of the API."""

    id: str
    path: str
    http_method: str
    description: str = ""
    parameters: dict[str, Parameter] = field(default_factory=dict)
    parameter_order: list[str] = field(default_factory=list)
    request_ref: Optional[str] = None
    response_ref: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Method":
        if "id" not in data or "path" not in data:
            raise GenerationError(f"Method is missing 'id' or 'path': {data!r}")
        return cls(
            id=data["id"],
            path=data["path"],
            http_method=data.get("httpMethod", "GET").upper(),
            description=data.get("description", ""),
            parameters={
                name: Parameter.from_dict(name, spec) for name, spec in data.get("parameters", {}).items()
            },
            parameter_order=list(data.get("parameterOrder", [])),
            request_ref=(data.get("request") or {}).get("$ref"),
            response_ref=(data.get("response") or {}).get("$ref"),
        )

    @property
    def positional_parameters(self) -> list[Parameter]:
        """Parameters passed positionally: ``parameterOrder`` first, then any other path parameter."""
        ordered = [self.parameters[name] for name in self.parameter_order if name in self.parameters]
        seen = {p.name for p in ordered}
        extra = sorted(
            (p for p in self.parameters.values() if p.location == "path" and p.name not in seen),
            key=lambda p: p.name,
        )
        return ordered + extra

    @property
    def optional_parameters(self) -> list[Parameter]:
        """Remaining (query) parameters, sorted by name."""
        positional = {p.name for p in self.positional_parameters}
        return sorted((p for p in self.parameters.values() if p.name not in positional), key=lambda p: p.name)


@dataclass
class RestDescription:
    """The subset of a Discovery document used to generate a client module."""

    name: str
    version: str
    title: str
    description: str = ""
    documentation_link: str = ""
    root_url: str = ""
    service_path: str = ""
    revision: str = ""
    schemas: dict[str, dict[str, Any]] = field(default_factory=dict)
    methods: list[Method] = field(default_factory=list)

    @property
    def id(self) -> str:
        return f"{self.name}:{self.version}"

    @property
    def base_url(self) -> str:
        return f"{self.root_url}{self.service_path}"

    @classmethod
    def from_dict(cls, document: dict[str, Any]) -> "RestDescription":
        """Parse a Discovery document.

        Raises:
            GenerationError: If the document lacks a name or version.
        """
        name = document.get("name")
        version = document.get("version")
        if not name or not version:
            raise GenerationError("Discovery document is missing 'name' or 'version'")

        root_url = document.get("rootUrl") or document.get("baseUrl", "")
        if root_url and not root_url.endswith("/"):
            root_url += "/"

        return cls(
            name=name,
            version=version,
            title=document.get("title") or name,
            description=document.get("description", ""),
            documentation_link=document.get("documentationLink", ""),
            root_url=root_url,
            service_path=document.get("servicePath", "") if document.get("rootUrl") else "",
            revision=document.get("revision", ""),
            schemas=dict(document.get("schemas", {})),
            methods=[Method.from_dict(m) for m in _walk_methods(document)],
        )


def _walk_methods(node: dict[str, Any]) -> Iterator[dict[str, Any]]:
    yield from node.get("methods", {}).values()
    for resource in node.get("resources", {}).values():
        yield from _walk_methods(resource)


__all__ = ["Method", "Parameter", "RestDescription"]
