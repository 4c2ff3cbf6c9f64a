"""Render templates and write generated output.

Takes the prepared tag groups and renders every API template once per
group, writing each result to the path the resolver chooses.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import jinja2

from .config import GeneratorConfig
from .errors import TemplateRenderError
from .models import Specification, TagGroup
from .paths import PathResolver

logger = logging.getLogger(__name__)

TEMPLATE_ROOT = Path(__file__).parent / "templates"


def make_environment(template_dir: Path) -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(template_dir)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )


def build_template_context(
    group: TagGroup, spec: Specification, config: GeneratorConfig,
) -> dict[str, Any]:
    """Assemble the variables one template render sees."""
    return {
        **config.template_properties(),
        "basePath": spec.base_path,
        "appName": spec.info.title,
        "appVersion": spec.info.version,
        "classname": group.class_name,
        "baseName": group.base_name,
        "tag": group.tag,
        "operations": group.operations,
    }


def render_group(
    env: jinja2.Environment,
    template_name: str,
    group: TagGroup,
    spec: Specification,
    config: GeneratorConfig,
) -> str:
    try:
        template = env.get_template(template_name)
        return template.render(**build_template_context(group, spec, config))
    except jinja2.TemplateError as exc:
        raise TemplateRenderError(
            f"Rendering {template_name} for tag {group.tag!r} failed: {exc}"
        ) from exc


def generate(
    groups: list[TagGroup],
    spec: Specification,
    config: GeneratorConfig,
    template_dir: Path,
    templates: tuple[str, ...],
    resolver: PathResolver,
) -> list[Path]:
    """Render each template for each group; return the written paths."""
    env = make_environment(template_dir)
    written: list[Path] = []

    for group in groups:
        for template_name in templates:
            output = render_group(env, template_name, group, spec, config)
            output_path = Path(resolver.api_filename(template_name, group.tag))
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(output, encoding="utf-8")
            written.append(output_path)
            logger.info("Generated %s", output_path)

    return written
