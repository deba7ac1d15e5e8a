from typing import Any

from jinja2 import Environment, StrictUndefined
from pydantic import BaseModel, ConfigDict

_environment = Environment(undefined=StrictUndefined, keep_trailing_newline=True)


class Prompt(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    version: str
    description: str
    inputs: dict[str, str]
    template: str

    def render(self, **values: Any) -> str:
        """Render the Jinja2 template.

        Every declared input must be passed, even when its value is None;
        templates use ``{% if ... %}`` for optional parts.

        Raises:
            ValueError: If a declared input is missing.
        """
        missing = sorted(set(self.inputs) - set(values))
        if missing:
            raise ValueError(
                f"Prompt '{self.name}' v{self.version} missing inputs: {', '.join(missing)}"
            )
        return _environment.from_string(self.template).render(**values)
