import re

from pydantic import BaseModel

_PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")


class Prompt(BaseModel):
    name: str
    version: str
    description: str
    inputs: dict[str, str]
    template: str

    class Config:
        extra = "forbid"

    def placeholders(self) -> set[str]:
        return set(_PLACEHOLDER.findall(self.template))

    def render(self, **values: str) -> str:
        """Fill `{{ name }}` placeholders; every placeholder needs a value."""
        missing = sorted(self.placeholders() - values.keys())
        if missing:
            raise ValueError(
                f"Prompt '{self.name}' v{self.version} missing inputs: {', '.join(missing)}"
            )
        return _PLACEHOLDER.sub(lambda m: str(values[m.group(1)]), self.template)
