"""Decide where each rendered template is written.

One tag renders several templates; each lands in its own file:

  api.j2                -> {source}/{apiPackage}/PetApi.java
  apiService.j2         -> {source}/{apiPackage}/PetApiService.java
  apiServiceImpl.j2     -> {impl}/{apiPackage}/impl/PetApiServiceImpl.java
  apiServiceFactory.j2  -> {impl}/{apiPackage}/factories/PetApiServiceFactory.java
"""

from __future__ import annotations

from .config import GeneratorConfig
from .naming import to_api_name

TEMPLATE_EXTENSIONS = (".mustache", ".jinja2", ".j2")
JAVA_EXTENSION = ".java"

IMPL_SUFFIX = "ServiceImpl.java"
FACTORY_SUFFIX = "ServiceFactory.java"
SERVICE_SUFFIX = "Service.java"


def template_stem(template_name: str) -> str:
    """Strip a known template extension from a template file name."""
    for ext in TEMPLATE_EXTENSIONS:
        if template_name.endswith(ext):
            return template_name[: -len(ext)]
    return template_name


def _relocate(
    default_path: str,
    sub_folder: str,
    suffix: str,
    impl_root: str,
    api_file_folder: str,
) -> str:
    folder, _, filename = default_path.rpartition("/")
    if filename.endswith(JAVA_EXTENSION):
        filename = filename[: -len(JAVA_EXTENSION)]
    result = f"{sub_folder}/{filename}{suffix}"
    if folder:
        result = f"{folder}/{result}"
    if not api_file_folder:
        return result
    return result.replace(api_file_folder, impl_root, 1)


def resolve_path(
    default_path: str,
    template_name: str,
    impl_output_root: str,
    api_package_path: str,
    api_file_folder: str,
) -> str:
    """Return the output path for a template, given the tag's default path.

    Implementation and factory classes move from api_file_folder to
    impl_output_root/api_package_path; service interfaces stay beside the API.
    """
    stem = template_stem(template_name)
    impl_root = f"{impl_output_root}/{api_package_path}"

    if stem.endswith("Impl"):
        return _relocate(default_path, "impl", IMPL_SUFFIX, impl_root, api_file_folder)
    if stem.endswith("Factory"):
        return _relocate(default_path, "factories", FACTORY_SUFFIX, impl_root, api_file_folder)
    if stem.endswith("Service"):
        ix = default_path.rfind(".")
        if ix == -1:
            return default_path + SERVICE_SUFFIX
        return default_path[:ix] + SERVICE_SUFFIX
    return default_path


class PathResolver:
    """Resolve output paths using the folders in a GeneratorConfig."""

    def __init__(self, config: GeneratorConfig) -> None:
        self.config = config

    def api_file_folder(self) -> str:
        c = self.config
        return f"{c.output_folder}/{c.source_folder}/{c.api_package_path}"

    def impl_output_root(self) -> str:
        return f"{self.config.output_folder}/{self.config.impl_folder}"

    def impl_file_folder(self) -> str:
        return f"{self.impl_output_root()}/{self.config.api_package_path}"

    def default_path(self, tag: str) -> str:
        return f"{self.api_file_folder()}/{to_api_name(tag)}{JAVA_EXTENSION}"

    def api_filename(self, template_name: str, tag: str) -> str:
        return resolve_path(
            self.default_path(tag),
            template_name,
            self.impl_output_root(),
            self.config.api_package_path,
            self.api_file_folder(),
        )
