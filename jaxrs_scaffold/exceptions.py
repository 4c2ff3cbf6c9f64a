"""Map HTTP status codes to the JAX-RS exceptions generated code throws.

Responses with a recognised error status get the matching
javax.ws.rs exception; any other code sorting at or after "3" gets the
generic WebApplicationException.
"""

from __future__ import annotations

from types import MappingProxyType

from .models import ExceptionDescriptor

_JAXRS_PACKAGE = "javax.ws.rs"


def _descriptor(simple_name: str, is_child_class: bool = True) -> ExceptionDescriptor:
    return ExceptionDescriptor(
        class_name=f"{_JAXRS_PACKAGE}.{simple_name}",
        class_simple_name=simple_name,
        is_child_class=is_child_class,
    )


WEB_APPLICATION_EXCEPTION = _descriptor("WebApplicationException", is_child_class=False)

EXCEPTIONS_BY_CODE = MappingProxyType({
    "400": _descriptor("BadRequestException"),
    "401": _descriptor("NotAuthorizedException"),
    "403": _descriptor("ForbiddenException"),
    "404": _descriptor("NotFoundException"),
    "405": _descriptor("NotAllowedException"),
    "406": _descriptor("NotAcceptableException"),
    "415": _descriptor("NotSupportedException"),
    "500": _descriptor("InternalServerErrorException"),
    "503": _descriptor("ServiceUnavailableException"),
})


def classify(code: str | None) -> ExceptionDescriptor | None:
    """Return the exception descriptor for a response status code.

    The fallback compares the code as a string, so "99" and "3000" also
    get the generic descriptor while "200" and "201" get None.
    """
    if code is None:
        return None
    descriptor = EXCEPTIONS_BY_CODE.get(code)
    if descriptor is not None:
        return descriptor
    if code >= "3":
        return WEB_APPLICATION_EXCEPTION
    return None
