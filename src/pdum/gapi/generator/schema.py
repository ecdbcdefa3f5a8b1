"""JSON schema fragments to Python annotations and field conversions.

Discovery schemas become ``TypedDict`` classes keyed by the wire field
names. Fields whose wire form differs from the natural Python value (int64
strings, timestamps, base64, durations) get conversion expressions that the
emitted ``serialize_*``/``deserialize_*`` helpers apply.
"""

from __future__ import annotations

import json
import keyword
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

from pdum.gapi.types import GenerationError

from .naming import class_name, pascal_case, snake_case

# Discovery ``format`` -> codec kind in pdum.gapi.base.codec
CONVERTING_FORMATS: dict[str, str] = {
    "int64": "int64",
    "uint64": "int64",
    "date-time": "datetime",
    "google-datetime": "datetime",
    "byte": "bytes",
    "google-duration": "duration",
}

NATIVE_TYPES: dict[str, str] = {
    "int64": "int",
    "datetime": "datetime",
    "bytes": "bytes",
    "duration": "timedelta",
}

# Names a generated module imports; schema classes must not shadow them.
RESERVED_NAMES: frozenset[str] = frozenset(
    {"Any", "Credentials", "Literal", "Optional", "TypedDict", "cast", "datetime", "requests", "timedelta"}
)

_CODEC_HELPERS: frozenset[str] = frozenset(
    f"{direction}_{kind}" for direction in ("serialize", "deserialize") for kind in NATIVE_TYPES
)


@dataclass
class FieldSpec:
    """One property of a generated ``TypedDict``."""

    key: str
    annotation: str
    description: str = ""
    serialize: Optional[str] = None
    deserialize: Optional[str] = None

    @property
    def literal(self) -> str:
        return json.dumps(self.key)


@dataclass
class TypedDictSpec:
    """A generated class (or, for non-object schemas, a type alias)."""

    name: str
    description: str = ""
    fields: list[FieldSpec] = field(default_factory=list)
    alias: Optional[str] = None
    alias_serialize: Optional[str] = None
    alias_deserialize: Optional[str] = None

    @property
    def converts(self) -> bool:
        if self.alias is not None:
            return self.alias_serialize is not None
        return any(f.serialize for f in self.fields)

    @property
    def functional(self) -> bool:
        """Whether some key cannot be written with the class syntax (``"@type"``, ``"from"``)."""
        return any(not f.key.isidentifier() or keyword.iskeyword(f.key) for f in self.fields)


class SchemaRenderer:
    """Renders the schemas of one Discovery document.

    Args:
        schemas: The document's ``schemas`` mapping.
        reserved: Extra names schema classes must avoid (e.g. the client class).
    """

    def __init__(self, schemas: dict[str, dict[str, Any]], reserved: frozenset[str] = frozenset()) -> None:
        self.schemas = schemas
        self.imports: set[str] = set()
        self._taken: set[str] = set(RESERVED_NAMES) | set(reserved)
        self._names: dict[str, str] = {}
        # class name -> stem of its serialize_/deserialize_ helpers
        self._stems: dict[str, str] = {}
        for schema_id in sorted(schemas):
            name = class_name(schema_id)
            while name in self._taken:
                name += "_"
            self._taken.add(name)
            self._names[schema_id] = name
            self._register(name)
        self._inline_names: dict[int, str] = {}
        self._pending: list[TypedDictSpec] = []
        self._needs = self._compute_needs()

    # -- naming -----------------------------------------------------------

    def ref_name(self, ref: str) -> str:
        try:
            return self._names[ref]
        except KeyError:
            raise GenerationError(f"Unknown schema reference: {ref}") from None

    def _register(self, name: str) -> str:
        stem = snake_case(name)
        if f"serialize_{stem}" in _CODEC_HELPERS:
            stem += "_message"
        # ``FooBar_`` and ``FooBar``, or ``HTTPRequest`` and ``HttpRequest``, share a snake name
        candidate, n = stem, 2
        while candidate in self._stems.values():
            candidate = f"{stem}_{n}"
            n += 1
        self._stems[name] = candidate
        return candidate

    def function_name(self, direction: str, name: str) -> str:
        """``serialize_<snake name>`` of class ``name``, unique within the module."""
        stem = self._stems.get(name) or self._register(name)
        return f"{direction}_{stem}"

    @property
    def function_names(self) -> set[str]:
        """Every helper name handed out so far, plus the codec helpers."""
        names = set(_CODEC_HELPERS)
        for stem in self._stems.values():
            names.update((f"serialize_{stem}", f"deserialize_{stem}"))
        return names

    # -- conversion analysis ---------------------------------------------

    def _compute_needs(self) -> dict[str, bool]:
        needs = {schema_id: _has_converting_format(schema) for schema_id, schema in self.schemas.items()}
        refs = {schema_id: set(_refs(schema)) for schema_id, schema in self.schemas.items()}
        changed = True
        while changed:
            changed = False
            for schema_id in self.schemas:
                if not needs[schema_id] and any(needs.get(ref, False) for ref in refs[schema_id]):
                    needs[schema_id] = True
                    changed = True
        return needs

    def needs_conversion(self, schema: dict[str, Any]) -> bool:
        """Whether values of ``schema`` differ between wire and Python form."""
        if _has_converting_format(schema):
            return True
        return any(self._needs.get(ref, False) for ref in _refs(schema))

    # -- annotations --------------------------------------------------------

    def annotation(self, schema: dict[str, Any], owner: str, prop: str) -> str:
        """Python annotation for a property ``prop`` of class ``owner``."""
        ref = schema.get("$ref")
        if ref:
            return self.ref_name(ref)

        kind = schema.get("type")
        if kind == "string":
            codec = CONVERTING_FORMATS.get(schema.get("format", ""))
            if codec:
                native = NATIVE_TYPES[codec]
                if native in ("datetime", "timedelta"):
                    self.imports.add(native)
                return native
            enum = schema.get("enum")
            if enum:
                self.imports.add("Literal")
                return "Literal[" + ", ".join(json.dumps(value) for value in enum) + "]"
            return "str"
        if kind == "integer":
            return "int"
        if kind == "number":
            return "float"
        if kind == "boolean":
            return "bool"
        if kind == "array":
            return f"list[{self.annotation(schema.get('items', {}), owner, prop)}]"
        if kind == "object" or "properties" in schema or "additionalProperties" in schema:
            if schema.get("properties"):
                return self._inline(schema, owner, prop)
            extra = schema.get("additionalProperties")
            if isinstance(extra, dict) and extra:
                return f"dict[str, {self.annotation(extra, owner, prop)}]"
            self.imports.add("Any")
            return "dict[str, Any]"
        self.imports.add("Any")
        return "Any"

    def _inline(self, schema: dict[str, Any], owner: str, prop: str) -> str:
        existing = self._inline_names.get(id(schema))
        if existing:
            return existing
        name = owner + pascal_case(prop)
        while name in self._taken:
            name += "_"
        self._taken.add(name)
        self._register(name)
        self._inline_names[id(schema)] = name
        self._pending.append(self.typed_dict(name, schema))
        return name

    # -- conversion expressions ------------------------------------------

    def convert_expr(self, schema: dict[str, Any], expr: str, direction: str, depth: int = 0) -> Optional[str]:
        """Expression converting ``expr`` (a value of ``schema``), or None if no conversion applies.

        ``direction`` is ``"serialize"`` or ``"deserialize"``. ``annotation``
        must have been called for the same fragment first so inline classes
        are named.
        """
        if not self.needs_conversion(schema):
            return None

        ref = schema.get("$ref")
        if ref:
            return f"{self.function_name(direction, self.ref_name(ref))}({expr})"

        kind = schema.get("type")
        if kind == "string":
            helper = f"{direction}_{CONVERTING_FORMATS[schema['format']]}"
            self.imports.add(helper)
            return f"{helper}({expr})"

        suffix = str(depth) if depth else ""
        if kind == "array":
            var = f"item{suffix}"
            inner = self.convert_expr(schema.get("items", {}), var, direction, depth + 1)
            return f"[{inner} for {var} in {expr}]"

        if schema.get("properties"):
            return f"{self.function_name(direction, self._inline_names[id(schema)])}({expr})"

        extra = schema.get("additionalProperties")
        if isinstance(extra, dict):
            key, value = f"key{suffix}", f"value{suffix}"
            inner = self.convert_expr(extra, value, direction, depth + 1)
            return f"{{{key}: {inner} for {key}, {value} in {expr}.items()}}"
        return None

    # -- specs --------------------------------------------------------------

    def typed_dict(self, name: str, schema: dict[str, Any]) -> TypedDictSpec:
        properties = schema.get("properties", {})
        fields = []
        for key in sorted(properties):
            prop = properties[key]
            annotation = self.annotation(prop, name, key)
            value = f"data[{json.dumps(key)}]"
            fields.append(
                FieldSpec(
                    key=key,
                    annotation=annotation,
                    description=prop.get("description", ""),
                    serialize=self.convert_expr(prop, value, "serialize"),
                    deserialize=self.convert_expr(prop, value, "deserialize"),
                )
            )
        return TypedDictSpec(name=name, description=schema.get("description", ""), fields=fields)

    def specs(self) -> list[TypedDictSpec]:
        """Classes for every schema in name order, each followed by its inline classes.

        Non-object schemas become aliases and are listed last.
        """
        classes: list[TypedDictSpec] = []
        aliases: list[TypedDictSpec] = []
        for schema_id in sorted(self.schemas, key=lambda s: self._names[s]):
            schema = self.schemas[schema_id]
            name = self._names[schema_id]
            self._pending = []
            if _is_object(schema):
                classes.append(self.typed_dict(name, schema))
                classes.extend(self._pending)
                continue
            # the fragment is the schema itself, so any inline class is named after the alias
            annotation = self.annotation(schema, name, "")
            classes.extend(self._pending)
            aliases.append(
                TypedDictSpec(
                    name=name,
                    description=schema.get("description", ""),
                    alias=annotation,
                    alias_serialize=self.convert_expr(schema, "data", "serialize"),
                    alias_deserialize=self.convert_expr(schema, "data", "deserialize"),
                )
            )
        return classes + aliases


def _is_object(schema: dict[str, Any]) -> bool:
    if "$ref" in schema:
        return False
    if schema.get("properties"):
        return True
    return schema.get("type", "object") == "object" and not isinstance(schema.get("additionalProperties"), dict)


def _has_converting_format(schema: dict[str, Any]) -> bool:
    """Converting formats reachable without following ``$ref``."""
    return any(
        node.get("type") == "string" and node.get("format") in CONVERTING_FORMATS for node in _nodes(schema)
    )


def _refs(schema: dict[str, Any]) -> Iterator[str]:
    for node in _nodes(schema):
        ref = node.get("$ref")
        if ref:
            yield ref


def _nodes(schema: dict[str, Any]) -> Iterator[dict[str, Any]]:
    yield schema
    for prop in schema.get("properties", {}).values():
        yield from _nodes(prop)
    items = schema.get("items")
    if isinstance(items, dict):
        yield from _nodes(items)
    extra = schema.get("additionalProperties")
    if isinstance(extra, dict):
        yield from _nodes(extra)


__all__ = [
    "CONVERTING_FORMATS",
    "FieldSpec",
    "NATIVE_TYPES",
    "RESERVED_NAMES",
    "SchemaRenderer",
    "TypedDictSpec",
]
