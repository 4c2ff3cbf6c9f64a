"""Normalize the parsed document before operations are grouped by tag.

Handles:
- "/" base path -> "" so route templates never start with "//"
- server port derived from the spec host unless configured
- multi-tag operations: x-tags wrapper list + collapse to the primary tag
"""

from __future__ import annotations

import logging

from .config import GeneratorConfig
from .models import SpecOperation, Specification, TagWrapper, VendorExtension

logger = logging.getLogger(__name__)

DEFAULT_SERVER_PORT = "8080"


def derive_server_port(host: str | None) -> str:
    """Return the port part of 'host:port', or the JEE default."""
    if host:
        parts = host.split(":")
        # trailing empty segments carry no port ("host:" -> default)
        while parts and not parts[-1]:
            parts.pop()
        if len(parts) > 1:
            return parts[1]
    return DEFAULT_SERVER_PORT


def build_tag_wrappers(tags: list[str]) -> list[TagWrapper]:
    """Wrap tags so templates can join them without a trailing separator."""
    last = len(tags) - 1
    return [TagWrapper(tag=tag, has_more=i < last) for i, tag in enumerate(tags)]


def _restructure_tags(operation: SpecOperation) -> None:
    if not operation.tags:
        return
    operation.set_extension(VendorExtension.TAGS, build_tag_wrappers(operation.tags))
    operation.tags = [operation.tags[0]]


def preprocess(spec: Specification, config: GeneratorConfig) -> None:
    """Normalize base path, server port and tags in place."""
    if spec.base_path == "/":
        spec.base_path = ""

    if config.server_port is None:
        config.server_port = derive_server_port(spec.host)
        logger.debug("Derived server port %s from host %r", config.server_port, spec.host)

    for path, path_item in (spec.paths or {}).items():
        for method, operation in path_item.iter_operations():
            if operation.tags and len(operation.tags) > 1:
                logger.debug(
                    "%s %s: filing under %r of tags %s",
                    method.upper(), path, operation.tags[0], operation.tags,
                )
            _restructure_tags(operation)
