"""Generator configuration.

Options arrive from the CLI as a flat string-keyed mapping; they are read
once into a GeneratorConfig that every stage receives explicitly.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

# Option name -> config field
_OPTION_FIELDS: dict[str, str] = {
    "outputFolder": "output_folder",
    "sourceFolder": "source_folder",
    "implFolder": "impl_folder",
    "apiPackage": "api_package",
    "modelPackage": "model_package",
    "invokerPackage": "invoker_package",
    "artifactId": "artifact_id",
    "title": "title",
    "useBeanValidation": "use_bean_validation",
    "useAnnotatedBasePath": "use_annotated_base_path",
    "serverPort": "server_port",
    "flavor": "flavor",
}

_BOOLEAN_FIELDS = {"use_bean_validation", "use_annotated_base_path"}


def _to_bool(value: Any) -> bool:
    """Convert an option value to bool; strings other than 'true' are False."""
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"


class GeneratorConfig(BaseModel):
    """Settings for one generator run."""

    output_folder: str = "."
    source_folder: str = "src/gen/java"
    impl_folder: str = "src/main/java"
    api_package: str = "io.swagger.api"
    model_package: str = "io.swagger.model"
    invoker_package: str = "io.swagger.api"
    artifact_id: str = "swagger-jaxrs-server"
    title: str = "Swagger Server"
    use_bean_validation: bool = True
    use_annotated_base_path: bool = False
    server_port: str | None = None  # derived from the spec host when unset
    flavor: str = "jaxrs"

    @classmethod
    def from_options(cls, options: dict[str, Any]) -> GeneratorConfig:
        """Build a config from CLI-style options, ignoring unknown keys."""
        values: dict[str, Any] = {}
        for option, field_name in _OPTION_FIELDS.items():
            if option not in options or options[option] is None:
                continue
            value = options[option]
            if field_name in _BOOLEAN_FIELDS:
                value = _to_bool(value)
            else:
                value = str(value)
            values[field_name] = value
        return cls(**values)

    @property
    def api_package_path(self) -> str:
        return self.api_package.replace(".", "/")

    def template_properties(self) -> dict[str, Any]:
        """Values exposed to templates alongside each tag group."""
        props: dict[str, Any] = {
            "title": self.title,
            "serverPort": self.server_port,
            "apiPackage": self.api_package,
            "modelPackage": self.model_package,
            "invokerPackage": self.invoker_package,
            "artifactId": self.artifact_id,
            "useAnnotatedBasePath": self.use_annotated_base_path,
            "jackson": "true",
        }
        if self.use_bean_validation:
            props["useBeanValidation"] = True
        return props
