"""Turn Discovery documents into Python client modules.

A generated module contains, in order:

1. a header docstring naming the API, its documentation and the origin;
2. imports (only the names the module uses);
3. the client class, one method per RPC;
4. a ``TypedDict`` per schema, each followed by its ``serialize_*`` and
   ``deserialize_*`` helpers when some field needs converting.
"""

from __future__ import annotations

import ast
import html
import json
import logging
import textwrap
from typing import Any, Callable, Iterable, Optional, Union

import requests

from pdum.gapi.types import DEFAULT_ORIGIN, CodeModule, DirectoryItem, GenerationError, GoogleApiError

from .discovery import Method, Parameter, RestDescription
from .naming import method_name, module_name, primary_name, snake_case
from .schema import CONVERTING_FORMATS, NATIVE_TYPES, SchemaRenderer, TypedDictSpec

logger = logging.getLogger(__name__)

_WIDTH = 79
_INDENT = "    "
_BODY_GLOBALS = frozenset({"append_query", "build_url", "cast", "expand_path", "request", "requests"})


def generate(service: Union[RestDescription, dict[str, Any]], origin: str = DEFAULT_ORIGIN) -> str:
    """Return the Python source of a client module for ``service``.

    Args:
        service: A parsed ``RestDescription`` or the raw Discovery document.
        origin: Project URL mentioned in the module header.

    Raises:
        GenerationError: If the document is unusable or the emitted source
            does not parse.
    """
    if isinstance(service, dict):
        service = RestDescription.from_dict(service)

    source = _ModuleWriter(service, origin).render()
    try:
        ast.parse(source)
    except SyntaxError as e:
        raise GenerationError(f"Generated source for {service.id} is invalid: {e}") from e
    return source


def compile_module(document: dict[str, Any], origin: str = DEFAULT_ORIGIN) -> CodeModule:
    """Generate the module for one Discovery document."""
    service = RestDescription.from_dict(document)
    return CodeModule(
        name=module_name(service.name, service.version),
        api_id=service.id,
        source=generate(service, origin),
    )


def api_modules(
    items: Iterable[DirectoryItem],
    origin: str = DEFAULT_ORIGIN,
    *,
    fetch: Optional[Callable[[DirectoryItem], dict[str, Any]]] = None,
    on_done: Optional[Callable[[DirectoryItem], None]] = None,
) -> list[CodeModule]:
    """Fetch and generate a module for every directory entry.

    An entry whose document cannot be fetched or generated is logged and
    skipped; the others still produce modules.

    Args:
        items: Directory entries to generate.
        origin: Project URL mentioned in module headers.
        fetch: Returns the Discovery document of an entry. Defaults to
            ``pdum.gapi.directory.fetch_rest_description``.
        on_done: Called after each entry, successful or not (progress display).
    """
    if fetch is None:
        from pdum.gapi.directory import fetch_rest_description

        fetch = fetch_rest_description

    modules: list[CodeModule] = []
    for item in items:
        try:
            document = fetch(item)
        except (GoogleApiError, requests.RequestException) as e:
            logger.warning("Failed to fetch %s: %s", item.id, e)
        else:
            try:
                modules.append(compile_module(document, origin))
            except GenerationError as e:
                logger.error("Failed to generate %s %s: %s", item.version, item.name, e)
        if on_done is not None:
            on_done(item)
    return modules


def index_html(origin: str, items: Iterable[DirectoryItem]) -> str:
    """An HTML page listing the generated clients and how to import them."""
    rows = []
    for item in items:
        module = module_name(item.name, item.version)
        client = primary_name(item.name, item.title.split())
        url = f"{origin}/blob/main/build/{module}.py"
        docs = item.documentation_link or item.discovery_rest_url
        rows.append(
            f"""
        <tr>
          <td><a href="{html.escape(url)}">{html.escape(item.title)}</a></td>
          <td><code>{html.escape(item.id)}</code></td>
          <td><pre>from {module} import {client}</pre></td>
          <td><a href="{html.escape(docs)}">Docs</a></td>
        </tr>"""
        )
    table = "".join(rows)

    return f"""<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <title>Google APIs for Python</title>
  </head>
  <body>
    <h1>Google APIs for Python</h1>
    <p>Clients generated from Google Discovery documents by pdum_gapi.</p>
    <h2>Example</h2>
    <pre><code>from pdum.gapi.base import GoogleAuth
from homegraph_v1 import HomeGraph

credentials = GoogleAuth().from_file("service-account.json")
homegraph = HomeGraph(credentials)
devices = homegraph.devices_sync({{"agentUserId": "user-1"}})
print(devices)</code></pre>
    <h2>Services</h2>
    <p>Source: <a href="{html.escape(origin)}">{html.escape(origin)}</a></p>
    <table>
      <thead>
        <tr><th>Service</th><th>Id</th><th>Usage</th><th>Docs</th></tr>
      </thead>
      <tbody>{table}
      </tbody>
    </table>
  </body>
</html>
"""


class _ModuleWriter:
    """Emits the source of one module."""

    def __init__(self, service: RestDescription, origin: str) -> None:
        self.service = service
        self.origin = origin
        self.client = primary_name(service.name, service.title.split())
        self.schemas = SchemaRenderer(service.schemas, reserved=frozenset({self.client}))
        self.typing: set[str] = {"Optional"}

    def render(self) -> str:
        specs = self.schemas.specs()
        blocks = [self._client()]
        for spec in specs:
            blocks.extend(self._spec(spec))
        header = self._header()
        imports = self._imports()
        return "\n\n\n".join([header + "\n\n" + imports, *blocks]) + "\n"

    # -- header and imports -------------------------------------------------

    def _header(self) -> str:
        service = self.service
        text = f"{service.title} client."
        if service.description:
            text += f"\n\n{service.description}"
        links = []
        if service.documentation_link:
            links.append(f"Docs: {service.documentation_link}")
        links.append(f"Source: {self.origin}")
        text += "\n\n" + "\n".join(links)
        generated = f"Generated from the ``{service.id}`` Discovery document"
        if service.revision:
            generated += f" (revision {service.revision})"
        text += f"\n\n{generated}. Do not edit by hand."
        return "\n".join(_docstring(text, ""))

    def _imports(self) -> str:
        used = self.schemas.imports
        lines = ["from __future__ import annotations", ""]
        dates = sorted(name for name in ("datetime", "timedelta") if name in used)
        if dates:
            lines.append(f"from datetime import {', '.join(dates)}")
        typing_names = set(self.typing)
        typing_names.update(name for name in ("Any", "Literal") if name in used)
        lines.append(f"from typing import {', '.join(sorted(typing_names))}")
        lines.extend(["", "import requests", "from google.auth.credentials import Credentials", ""])

        helpers = sorted(
            {"build_url", "request"} | {name for name in used if name.startswith(("serialize_", "deserialize_"))}
            | {name for name in used if name in ("append_query", "expand_path")}
        )
        lines.append("from pdum.gapi.base import (")
        lines.extend(f"{_INDENT}{name}," for name in helpers)
        lines.append(")")
        return "\n".join(lines)

    # -- client class -------------------------------------------------------

    def _client(self) -> str:
        service = self.service
        text = f"{service.title} client."
        if service.description:
            text += f"\n\n{service.description}"
        doc = _wrap_paragraphs(_escape(text), _WIDTH - len(_INDENT))
        doc.extend(
            [
                "",
                "Args:",
                "    credentials: Credentials used to authorize requests. Requests are",
                "        sent unauthenticated when omitted.",
                "    base_url: Root of the API, ending in ``/``.",
                "    session: Session to send requests through, e.g. a shared",
                "        ``google.auth.transport.requests.AuthorizedSession``.",
            ]
        )
        lines = [f"class {self.client}:"]
        lines.extend(_quote(doc, _INDENT))
        lines.extend(
            [
                "",
                f"{_INDENT}def __init__(",
                f"{_INDENT * 2}self,",
                f"{_INDENT * 2}credentials: Optional[Credentials] = None,",
                f"{_INDENT * 2}base_url: str = {json.dumps(service.base_url)},",
                f"{_INDENT * 2}*,",
                f"{_INDENT * 2}session: Optional[requests.Session] = None,",
                f"{_INDENT}) -> None:",
                f"{_INDENT * 2}self._credentials = credentials",
                f"{_INDENT * 2}self._base_url = base_url",
                f"{_INDENT * 2}self._session = session",
            ]
        )

        names: set[str] = {"__init__"}
        for method in sorted(service.methods, key=lambda m: method_name(m.id)):
            name = method_name(method.id)
            while name in names:
                name += "_"
            names.add(name)
            lines.append("")
            lines.extend(self._method(name, method))
        return "\n".join(lines)

    def _method(self, name: str, method: Method) -> list[str]:
        positional = method.positional_parameters
        optional = method.optional_parameters

        # locals of the method body and the module-level names it calls
        taken = {"self", "body", "query", "path", "url", "data"} | _BODY_GLOBALS | self.schemas.function_names
        args: dict[str, str] = {}
        for param in positional + optional:
            arg = snake_case(param.name)
            while arg in taken:
                arg += "_"
            taken.add(arg)
            args[param.name] = arg

        request_type = self.schemas.ref_name(method.request_ref) if method.request_ref else None
        response_type = self.schemas.ref_name(method.response_ref) if method.response_ref else None

        d = _INDENT * 2
        lines = [f"{_INDENT}def {name}(", f"{d}self,"]
        for param in positional:
            lines.append(f"{d}{args[param.name]}: {self._param_annotation(param)},")
        if request_type:
            lines.append(f"{d}body: {request_type},")
        if optional:
            lines.append(f"{d}*,")
            for param in optional:
                lines.append(f"{d}{args[param.name]}: Optional[{self._param_annotation(param)}] = None,")
        lines.append(f"{_INDENT}) -> {response_type or 'None'}:")

        lines.extend(self._method_docstring(method, positional + optional, args))

        query_params = [p for p in positional + optional if p.location != "path"]
        path_params = [p for p in positional if p.location == "path"]

        if path_params:
            self.schemas.imports.add("expand_path")
            mapping = ", ".join(f"{json.dumps(p.name)}: {args[p.name]}" for p in path_params)
            lines.append(f"{d}path = expand_path({json.dumps(method.path)}, {{{mapping}}})")
        else:
            lines.append(f"{d}path = {json.dumps(method.path)}")

        if query_params:
            self.schemas.imports.add("append_query")
            lines.append(f"{d}query: list[tuple[str, str]] = []")
            for param in query_params:
                call = f"append_query(query, {json.dumps(param.name)}, {args[param.name]}"
                codec = CONVERTING_FORMATS.get(param.format or "") if param.type == "string" else None
                if codec:
                    serializer = f"serialize_{codec}"
                    self.schemas.imports.add(serializer)
                    call += f", {serializer}"
                lines.append(f"{d}{call})")
            lines.append(f"{d}url = build_url(self._base_url, path, query)")
        else:
            lines.append(f"{d}url = build_url(self._base_url, path)")

        call = [f"{d}{'data = ' if response_type else ''}request(", f"{d}{_INDENT}url,"]
        call.append(f"{d}{_INDENT}method={json.dumps(method.http_method)},")
        call.append(f"{d}{_INDENT}credentials=self._credentials,")
        if request_type:
            body = "body"
            if self.schemas.needs_conversion({"$ref": method.request_ref}):
                body = f"{self.schemas.function_name('serialize', request_type)}(body)"
            call.append(f"{d}{_INDENT}body={body},")
        call.append(f"{d}{_INDENT}session=self._session,")
        call.append(f"{d})")
        lines.extend(call)

        if response_type:
            if self.schemas.needs_conversion({"$ref": method.response_ref}):
                lines.append(f"{d}return {self.schemas.function_name('deserialize', response_type)}(data)")
            else:
                self.typing.add("cast")
                lines.append(f"{d}return cast({response_type}, data)")
        return lines

    def _method_docstring(self, method: Method, params: list[Parameter], args: dict[str, str]) -> list[str]:
        indent = _INDENT * 2
        text = _escape(method.description.strip() or f"Calls ``{method.id}``.")
        lines = _wrap_paragraphs(text, _WIDTH - len(indent))
        documented = [p for p in params if p.description.strip()]
        if documented:
            lines.extend(["", "Args:"])
            for param in documented:
                entry = f"{args[param.name]}: {_escape(' '.join(param.description.split()))}"
                lines.extend(
                    textwrap.wrap(
                        entry,
                        width=_WIDTH - len(indent),
                        initial_indent=_INDENT,
                        subsequent_indent=_INDENT * 2,
                        break_long_words=False,
                        break_on_hyphens=False,
                    )
                )
        return _quote(lines, indent)

    def _param_annotation(self, param: Parameter) -> str:
        codec = CONVERTING_FORMATS.get(param.format or "") if param.type == "string" else None
        if codec:
            native = NATIVE_TYPES[codec]
            if native in ("datetime", "timedelta"):
                self.schemas.imports.add(native)
            annotation = native
        elif param.type == "integer":
            annotation = "int"
        elif param.type == "number":
            annotation = "float"
        elif param.type == "boolean":
            annotation = "bool"
        elif param.enum:
            self.schemas.imports.add("Literal")
            annotation = "Literal[" + ", ".join(json.dumps(value) for value in param.enum) + "]"
        else:
            annotation = "str"
        if param.repeated:
            annotation = f"list[{annotation}]"
        return annotation

    # -- schema classes -----------------------------------------------------

    def _spec(self, spec: TypedDictSpec) -> list[str]:
        if spec.alias is not None:
            blocks = [self._alias(spec)]
        elif spec.functional:
            blocks = [self._functional(spec)]
        else:
            blocks = [self._class(spec)]
        if spec.converts:
            self.schemas.imports.add("Any")
            self.typing.add("cast")
            blocks.extend(self._converters(spec))
        return blocks

    def _class(self, spec: TypedDictSpec) -> str:
        self.typing.add("TypedDict")
        lines = [f"class {spec.name}(TypedDict, total=False):"]
        if spec.description.strip():
            lines.extend(_docstring(spec.description, _INDENT))
            if spec.fields:
                lines.append("")
        elif not spec.fields:
            lines.append(f"{_INDENT}pass")
        for f in spec.fields:
            lines.extend(_comment(f.description, _INDENT, "#: "))
            lines.append(f"{_INDENT}{f.key}: {f.annotation}")
        return "\n".join(lines)

    def _functional(self, spec: TypedDictSpec) -> str:
        self.typing.add("TypedDict")
        lines = _comment(spec.description, "", "# ")
        lines.extend([f"{spec.name} = TypedDict(", f"{_INDENT}{json.dumps(spec.name)},", f"{_INDENT}{{"])
        for f in spec.fields:
            lines.extend(_comment(f.description, _INDENT * 2, "#: "))
            lines.append(f"{_INDENT * 2}{f.literal}: {json.dumps(f.annotation)},")
        lines.extend([f"{_INDENT}}},", f"{_INDENT}total=False,", ")"])
        return "\n".join(lines)

    def _alias(self, spec: TypedDictSpec) -> str:
        lines = _comment(spec.description, "", "# ")
        lines.append(f"{spec.name} = {spec.alias}")
        return "\n".join(lines)

    def _converters(self, spec: TypedDictSpec) -> list[str]:
        serialize = self.schemas.function_name("serialize", spec.name)
        deserialize = self.schemas.function_name("deserialize", spec.name)

        if spec.alias is not None:
            return [
                f"def {serialize}(data: {spec.name}) -> Any:\n{_INDENT}return {spec.alias_serialize}",
                f"def {deserialize}(data: Any) -> {spec.name}:\n{_INDENT}return {spec.alias_deserialize}",
            ]

        def body(direction: str) -> list[str]:
            lines = [f"{_INDENT}result: dict[str, Any] = dict(data)"]
            for f in spec.fields:
                expr = f.serialize if direction == "serialize" else f.deserialize
                if expr is None:
                    continue
                lines.append(f"{_INDENT}if data.get({f.literal}) is not None:")
                lines.append(f"{_INDENT * 2}result[{f.literal}] = {expr}")
            return lines

        ser = [f"def {serialize}(data: {spec.name}) -> dict[str, Any]:", *body("serialize"), f"{_INDENT}return result"]
        de = [
            f"def {deserialize}(data: dict[str, Any]) -> {spec.name}:",
            *body("deserialize"),
            f"{_INDENT}return cast({spec.name}, result)",
        ]
        return ["\n".join(ser), "\n".join(de)]


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')


def _wrap_paragraphs(text: str, width: int) -> list[str]:
    lines: list[str] = []
    for raw in text.strip().splitlines():
        raw = raw.strip()
        if not raw:
            if lines and lines[-1]:
                lines.append("")
            continue
        lines.extend(textwrap.wrap(raw, width=width, break_long_words=False, break_on_hyphens=False))
    return lines or [""]


def _quote(lines: list[str], indent: str) -> list[str]:
    if len(lines) == 1 and len(indent) + len(lines[0]) + 6 <= _WIDTH and not lines[0].endswith('"'):
        return [f'{indent}"""{lines[0]}"""']
    return [f'{indent}"""{lines[0]}', *[f"{indent}{line}" if line else "" for line in lines[1:]], f'{indent}"""']


def _docstring(text: str, indent: str) -> list[str]:
    return _quote(_wrap_paragraphs(_escape(text), _WIDTH - len(indent)), indent)


def _comment(text: str, indent: str, marker: str) -> list[str]:
    text = " ".join(text.split())
    if not text:
        return []
    width = _WIDTH - len(indent) - len(marker)
    return [
        f"{indent}{marker}{line}"
        for line in textwrap.wrap(text, width=width, break_long_words=False, break_on_hyphens=False)
    ]


__all__ = ["api_modules", "compile_module", "generate", "index_html"]
