"""Expand a preprocessed Specification into per-tag operation groups.

Each document operation becomes an Operation descriptor with Java type
names; operations are filed under their primary tag, one TagGroup per tag.
Type references are named, not resolved.
"""

from __future__ import annotations

import logging
from typing import Any

from .models import Operation, Parameter, Response, Specification, SpecOperation, TagGroup
from .naming import build_nickname, to_api_name

logger = logging.getLogger(__name__)

DEFAULT_TAG = "default"

# (type, format) -> Java type; format None is the fallback for the type
_PRIMITIVE_TYPES: dict[tuple[str, str | None], str] = {
    ("string", None): "String",
    ("string", "date"): "Date",
    ("string", "date-time"): "Date",
    ("string", "byte"): "byte[]",
    ("string", "binary"): "byte[]",
    ("integer", None): "Integer",
    ("integer", "int64"): "Long",
    ("number", None): "BigDecimal",
    ("number", "float"): "Float",
    ("number", "double"): "Double",
    ("boolean", None): "Boolean",
    ("file", None): "File",
    ("object", None): "Object",
}


def _ref_name(ref: str) -> str:
    """Return the definition name a $ref points at."""
    return ref.rsplit("/", 1)[-1]


def _primitive_type(schema_type: str | None, fmt: str | None) -> str:
    if schema_type is None:
        return "Object"
    return _PRIMITIVE_TYPES.get(
        (schema_type, fmt), _PRIMITIVE_TYPES.get((schema_type, None), "Object"),
    )


def resolve_type(schema: dict[str, Any] | None) -> tuple[str | None, str | None, str | None]:
    """Return (data_type, base_type, container) for a schema or parameter.

    An empty schema has no type at all: (None, None, None).
    """
    if not schema:
        return None, None, None

    if "$ref" in schema:
        name = _ref_name(schema["$ref"])
        return name, name, None

    schema_type = schema.get("type")
    if schema_type == "array":
        _, inner, _ = resolve_type(schema.get("items") or {"type": "object"})
        inner = inner or "Object"
        return f"List<{inner}>", inner, "array"

    additional = schema.get("additionalProperties")
    if schema_type == "object" and isinstance(additional, dict):
        _, inner, _ = resolve_type(additional)
        inner = inner or "Object"
        return f"Map<String, {inner}>", inner, "map"

    if schema_type is None and "properties" not in schema:
        return None, None, None

    java_type = _primitive_type(schema_type or "object", schema.get("format"))
    return java_type, java_type, None


def build_parameter(raw: dict[str, Any]) -> Parameter:
    location = raw.get("in", "query")
    source = raw.get("schema") if location == "body" else raw
    data_type, _, _ = resolve_type(source)
    return Parameter(
        name=raw.get("name", ""),
        location=location,
        data_type=data_type or "Object",
        required=bool(raw.get("required", location == "path")),
        description=raw.get("description") or "",
    )


def build_response(code: str, raw: dict[str, Any]) -> Response:
    data_type, base_type, container = resolve_type(raw.get("schema"))
    return Response(
        code="0" if code == "default" else code,
        message=raw.get("description") or "",
        data_type=data_type,
        base_type=base_type,
        container_type=container,
        vendor_extensions={k: v for k, v in raw.items() if k.startswith("x-")},
    )


def _method_response(responses: dict[str, dict[str, Any]]) -> dict[str, Any] | None:
    """Pick the response whose schema becomes the method's return type."""
    for code, resp in responses.items():
        if code.startswith("2"):
            return resp
    return responses.get("default")


def build_operation(
    spec: Specification, method: str, path: str, spec_op: SpecOperation,
) -> Operation:
    """Convert a document operation into an Operation descriptor."""
    return_type = return_base_type = return_container = None
    method_response = _method_response(spec_op.responses)
    if method_response is not None:
        return_type, return_base_type, return_container = resolve_type(
            method_response.get("schema"),
        )

    return Operation(
        path=path,
        http_method=method.upper(),
        nickname=build_nickname(method, path, spec_op.operation_id),
        summary=spec_op.summary,
        notes=spec_op.description,
        tags=list(spec_op.tags or []),
        consumes=list(spec_op.consumes or spec.consumes),
        produces=list(spec_op.produces or spec.produces),
        all_params=[build_parameter(p) for p in spec_op.parameters],
        responses=[build_response(code, r) for code, r in spec_op.responses.items()],
        return_type=return_type,
        return_base_type=return_base_type,
        return_container=return_container,
        vendor_extensions=dict(spec_op.vendor_extensions),
    )


def build_tag_groups(spec: Specification) -> list[TagGroup]:
    """Group every operation under its primary tag, sorted by tag.

    Tags that map to the same API class ("pet" and "Pet") share one group,
    named after the first tag seen, so they render to a single set of files.
    """
    groups: dict[str, TagGroup] = {}

    for path, path_item in sorted((spec.paths or {}).items()):
        for method, spec_op in path_item.iter_operations():
            operation = build_operation(spec, method, path, spec_op)
            tag = operation.tags[0] if operation.tags else DEFAULT_TAG
            class_name = to_api_name(tag)

            group = groups.get(class_name)
            if group is None:
                group = groups[class_name] = TagGroup(tag=tag, class_name=class_name, base_name=tag)
            elif group.tag != tag:
                logger.warning(
                    "%s %s: tag %r merged into %r (both render as %s)",
                    method.upper(), path, tag, group.tag, class_name,
                )
            group.operations.append(operation)

    ordered = sorted(groups.values(), key=lambda g: g.tag)
    logger.debug(
        "Grouped operations into %d tags: %s", len(ordered), ", ".join(g.tag for g in ordered),
    )
    return ordered
