"""Java identifiers for tags and operations.

Pattern: {Tag}Api for API classes, lowerCamel operation nicknames.

Examples:
  tag "pet"                     -> PetApi
  tag "store-orders"            -> StoreOrdersApi
  tag ""                        -> DefaultApi
  GET  /pet/{petId}             -> getPetByPetId
  POST /store/order             -> postStoreOrder
  operationId "find_pets"       -> findPets
"""

from __future__ import annotations

import re

DEFAULT_API_NAME = "DefaultApi"


def sanitize_name(name: str) -> str:
    """Replace characters that cannot appear in a Java identifier with '_'."""
    name = re.sub(r"[\[\]]", "_", name)
    name = re.sub(r"[^A-Za-z0-9_]", "_", name)
    return name


def camelize(name: str, lower_first: bool = False) -> str:
    """Convert snake_case/kebab-case/space separated words to CamelCase."""
    words = [w for w in re.split(r"[_\-\s./]+", name) if w]
    result = "".join(w[0].upper() + w[1:] for w in words)
    if lower_first and result:
        result = result[0].lower() + result[1:]
    return result


def to_api_name(tag: str) -> str:
    """Return the API class name for a tag."""
    if not tag:
        return DEFAULT_API_NAME
    return camelize(sanitize_name(tag)) + "Api"


def build_nickname(method: str, path: str, operation_id: str | None = None) -> str:
    """Return the Java method name for an operation.

    The operationId wins when present; otherwise the name is built from the
    HTTP method and the path segments.
    """
    if operation_id:
        return camelize(sanitize_name(operation_id), lower_first=True)

    parts = [method.lower()]
    for segment in path.split("/"):
        if not segment:
            continue
        if segment.startswith("{") and segment.endswith("}"):
            parts.append("By" + camelize(sanitize_name(segment[1:-1])))
        else:
            parts.append(camelize(sanitize_name(segment)))
    return camelize("_".join(parts), lower_first=True)
