"""Data models shared by every generator stage.

The spec-level models mirror the Swagger 2.0 document as loaded from disk.
The codegen-level models (Operation, Parameter, Response) are what the
postprocessor annotates and the templates read.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch")


class VendorExtension(str, Enum):
    """Keys the generator writes into an extension bag."""

    TAGS = "x-tags"
    MULTIPART = "x-multipart"
    IS_RESPONSE_VOID = "x-java-is-response-void"
    WEB_APPLICATION_EXCEPTION = "x-jaxrs-WebApplicationException"


class Extensible(BaseModel):
    """Base for models carrying a vendor extension bag."""

    vendor_extensions: dict[str, Any] = Field(default_factory=dict)

    def set_extension(self, key: VendorExtension, value: Any) -> None:
        self.vendor_extensions[key.value] = value

    def get_extension(self, key: VendorExtension, default: Any = None) -> Any:
        return self.vendor_extensions.get(key.value, default)

    def has_extension(self, key: VendorExtension) -> bool:
        return key.value in self.vendor_extensions


class ExceptionDescriptor(BaseModel):
    """A JAX-RS exception class a generated endpoint can throw."""

    model_config = ConfigDict(frozen=True)

    class_name: str  # fully qualified
    class_simple_name: str
    is_child_class: bool = False  # subclass of WebApplicationException


class TagWrapper(BaseModel):
    """One entry of the x-tags sequence rendered as a comma-separated list."""

    tag: str
    has_more: bool = False


class Info(BaseModel):
    title: str = ""
    version: str = ""
    description: str = ""


class SpecOperation(Extensible):
    """An operation as declared in the API document."""

    tags: list[str] | None = None
    summary: str = ""
    description: str = ""
    operation_id: str | None = None
    consumes: list[str] | None = None
    produces: list[str] | None = None
    parameters: list[dict[str, Any]] = Field(default_factory=list)
    responses: dict[str, dict[str, Any]] = Field(default_factory=dict)


class PathItem(BaseModel):
    operations: dict[str, SpecOperation] = Field(default_factory=dict)

    def iter_operations(self):
        """Yield (method, operation) in the fixed HTTP method order."""
        for method in HTTP_METHODS:
            operation = self.operations.get(method)
            if operation is not None:
                yield method, operation


class Specification(BaseModel):
    """Root of a parsed Swagger 2.0 document."""

    base_path: str = ""
    host: str | None = None
    info: Info = Field(default_factory=Info)
    consumes: list[str] = Field(default_factory=list)
    produces: list[str] = Field(default_factory=list)
    paths: dict[str, PathItem] | None = Field(default_factory=dict)


class Parameter(Extensible):
    name: str
    location: str = "query"  # path / query / header / formData / body
    data_type: str = "String"
    required: bool = False
    description: str = ""


class Response(Extensible):
    code: str | None = None  # "0" is the document's "default" response
    message: str = ""
    data_type: str | None = None
    base_type: str | None = None
    container_type: str | None = None  # array / map before postprocessing


class Operation(Extensible):
    """One endpoint + method pair as handed to the templates."""

    path: str
    http_method: str
    nickname: str
    summary: str = ""
    notes: str = ""
    tags: list[str] = Field(default_factory=list)
    consumes: list[str] = Field(default_factory=list)
    produces: list[str] = Field(default_factory=list)
    all_params: list[Parameter] = Field(default_factory=list)
    responses: list[Response] = Field(default_factory=list)
    return_type: str | None = None
    return_base_type: str | None = None
    return_container: str | None = None
    is_multipart: bool = False


class TagGroup(BaseModel):
    """Operations filed under one primary tag; one set of output files."""

    tag: str
    class_name: str
    base_name: str
    operations: list[Operation] = Field(default_factory=list)
