"""Run the generator stages in order for a server flavor.

preprocess(spec) -> group by tag -> postprocess(group) -> render.

A flavor bundles the stage implementations and templates for one kind of
server; GeneratorConfig.flavor selects it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from . import codegen
from .config import GeneratorConfig
from .context_builder import build_tag_groups
from .errors import UnknownFlavorError
from .models import Specification, TagGroup
from .paths import PathResolver
from .postprocessor import postprocess
from .preprocessor import preprocess

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Flavor:
    name: str
    preprocess: Callable[[Specification, GeneratorConfig], None]
    postprocess: Callable[[TagGroup], TagGroup]
    resolver_factory: Callable[[GeneratorConfig], PathResolver]
    template_dir: Path
    templates: tuple[str, ...]


JAXRS = Flavor(
    name="jaxrs",
    preprocess=preprocess,
    postprocess=postprocess,
    resolver_factory=PathResolver,
    template_dir=codegen.TEMPLATE_ROOT / "JavaJaxRS",
    templates=("api.j2", "apiService.j2", "apiServiceImpl.j2", "apiServiceFactory.j2"),
)

FLAVORS: dict[str, Flavor] = {JAXRS.name: JAXRS}


def get_flavor(name: str) -> Flavor:
    try:
        return FLAVORS[name]
    except KeyError:
        known = ", ".join(sorted(FLAVORS))
        raise UnknownFlavorError(f"Unknown flavor {name!r} (known: {known})") from None


def run(spec: Specification, config: GeneratorConfig) -> list[TagGroup]:
    """Preprocess the spec and return the postprocessed tag groups."""
    flavor = get_flavor(config.flavor)
    flavor.preprocess(spec, config)
    groups = [flavor.postprocess(group) for group in build_tag_groups(spec)]
    logger.debug(
        "Prepared %d operations in %d groups",
        sum(len(g.operations) for g in groups), len(groups),
    )
    return groups


def generate(spec: Specification, config: GeneratorConfig) -> list[Path]:
    """Run every stage and render the flavor's templates."""
    flavor = get_flavor(config.flavor)
    groups = run(spec, config)
    return codegen.generate(
        groups,
        spec,
        config,
        flavor.template_dir,
        flavor.templates,
        flavor.resolver_factory(config),
    )
