"""Load a Swagger 2.0 document into a Specification.

Reads JSON or YAML and keeps paths, operations and vendor extensions.
Schema references are left as-is.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .errors import SpecLoadError
from .models import HTTP_METHODS, Info, PathItem, SpecOperation, Specification


def read_document(path: Path) -> dict[str, Any]:
    """Read the raw document from disk."""
    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix == ".json":
                document = json.load(f)
            else:
                document = yaml.safe_load(f)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SpecLoadError(f"Cannot read API document {path}: {exc}") from exc

    if not isinstance(document, dict):
        raise SpecLoadError(f"API document {path} is not a mapping")
    return document


def _vendor_extensions(node: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in node.items() if k.startswith("x-")}


def _parse_operation(raw: dict[str, Any], shared_params: list[dict[str, Any]]) -> SpecOperation:
    own_params = raw.get("parameters") or []
    own_keys = {(p.get("name"), p.get("in")) for p in own_params}
    params = [
        p for p in shared_params if (p.get("name"), p.get("in")) not in own_keys
    ] + list(own_params)

    responses = {str(code): resp or {} for code, resp in (raw.get("responses") or {}).items()}

    return SpecOperation(
        tags=raw.get("tags"),
        summary=raw.get("summary") or "",
        description=raw.get("description") or "",
        operation_id=raw.get("operationId"),
        consumes=raw.get("consumes"),
        produces=raw.get("produces"),
        parameters=params,
        responses=responses,
        vendor_extensions=_vendor_extensions(raw),
    )


def parse_spec(document: dict[str, Any]) -> Specification:
    """Build a Specification from a raw Swagger 2.0 mapping."""
    paths: dict[str, PathItem] = {}
    for path, raw_item in (document.get("paths") or {}).items():
        if path.startswith("x-") or not isinstance(raw_item, dict):
            continue
        shared_params = raw_item.get("parameters") or []
        operations = {
            method: _parse_operation(raw_item[method] or {}, shared_params)
            for method in HTTP_METHODS
            if method in raw_item
        }
        paths[path] = PathItem(operations=operations)

    info = document.get("info") or {}
    return Specification(
        base_path=document.get("basePath") or "",
        host=document.get("host"),
        info=Info(
            title=info.get("title") or "",
            version=str(info.get("version") or ""),
            description=info.get("description") or "",
        ),
        consumes=document.get("consumes") or [],
        produces=document.get("produces") or [],
        paths=paths,
    )


def load_spec(path: Path) -> Specification:
    """Load the API document at path."""
    return parse_spec(read_document(path))
