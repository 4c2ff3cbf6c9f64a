"""Entry point: python -m jaxrs_scaffold SPEC_PATH -o OUTPUT

Reads a Swagger 2.0 document and writes JAX-RS server stubs.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from .config import GeneratorConfig
from .errors import ScaffoldError
from .loader import load_spec
from .pipeline import generate


@click.command()
@click.argument("spec_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", "output_folder", default=".", type=click.Path(path_type=Path), help="Root folder for generated sources.")
@click.option("--impl-folder", default=None, help="Folder for implementation and factory classes.")
@click.option("--api-package", default=None, help="Java package of the generated API classes.")
@click.option("--server-port", default=None, help="Port the server starts on (default: from the spec host, else 8080).")
@click.option("--title", default=None, help="A title describing the application.")
@click.option("--use-bean-validation/--no-bean-validation", default=True, help="Use BeanValidation API annotations.")
@click.option("--use-annotated-base-path", is_flag=True, help="Use @Path annotations for basePath.")
@click.option("-v", "--verbose", is_flag=True, help="Log every stage decision.")
def main(
    spec_path: Path,
    output_folder: Path,
    impl_folder: str | None,
    api_package: str | None,
    server_port: str | None,
    title: str | None,
    use_bean_validation: bool,
    use_annotated_base_path: bool,
    verbose: bool,
) -> None:
    """Generate a JAX-RS server scaffold from an API document."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = GeneratorConfig.from_options({
        "outputFolder": str(output_folder),
        "implFolder": impl_folder,
        "apiPackage": api_package,
        "serverPort": server_port,
        "title": title,
        "useBeanValidation": use_bean_validation,
        "useAnnotatedBasePath": use_annotated_base_path,
    })

    try:
        spec = load_spec(spec_path)
        written = generate(spec, config)
    except ScaffoldError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"Generated {len(written)} files in {output_folder} (server port {config.server_port})")


if __name__ == "__main__":
    main()
