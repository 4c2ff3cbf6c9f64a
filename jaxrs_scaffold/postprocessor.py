"""Annotate grouped operations for the JAX-RS templates.

Handles:
- multipart/form-data consumers (operation flag + per-parameter x-multipart)
- "default" (code 0) responses rendered as 200
- x-jaxrs-WebApplicationException per response status
- void sentinels for responses and operations without a payload type
- array/map containers renamed to List/Map
"""

from __future__ import annotations

import logging

from .exceptions import classify
from .models import Operation, Response, TagGroup, VendorExtension

logger = logging.getLogger(__name__)

MULTIPART_FORM_DATA = "multipart/form-data"

VOID_TYPE = "void"
VOID_BASE_TYPE = "Void"

_CONTAINER_HINTS: dict[str, str] = {
    "array": "List",
    "map": "Map",
}


def rename_container(container: str | None) -> str | None:
    """Return the Java collection name for array/map, anything else as is."""
    if container is None:
        return None
    return _CONTAINER_HINTS.get(container, container)


def _process_multipart(operation: Operation) -> None:
    consumes = operation.consumes or []
    if consumes and consumes[0] == MULTIPART_FORM_DATA:
        operation.is_multipart = True

    is_multipart_post = any(
        media_type and media_type.startswith(MULTIPART_FORM_DATA)
        for media_type in consumes
    )
    if not is_multipart_post:
        return

    for param in operation.all_params:
        param.set_extension(VendorExtension.MULTIPART, "true")
    logger.debug(
        "%s: flagged %d parameters as multipart",
        operation.nickname, len(operation.all_params),
    )


def _process_response(response: Response) -> None:
    if response.code == "0":
        response.code = "200"

    descriptor = classify(response.code)
    if descriptor is not None:
        response.set_extension(VendorExtension.WEB_APPLICATION_EXCEPTION, descriptor)

    if response.base_type is None:
        response.data_type = VOID_TYPE
        response.base_type = VOID_BASE_TYPE
        response.set_extension(VendorExtension.IS_RESPONSE_VOID, True)

    response.container_type = rename_container(response.container_type)


def postprocess_operation(operation: Operation) -> Operation:
    """Apply every annotation to a single operation in place."""
    _process_multipart(operation)

    for response in operation.responses or []:
        _process_response(response)

    if operation.return_base_type is None:
        operation.return_type = VOID_TYPE
        operation.return_base_type = VOID_BASE_TYPE
        operation.set_extension(VendorExtension.IS_RESPONSE_VOID, True)

    operation.return_container = rename_container(operation.return_container)
    return operation


def postprocess(group: TagGroup) -> TagGroup:
    """Annotate every operation in the group and return the same group."""
    for operation in group.operations or []:
        postprocess_operation(operation)
    return group
