"""GraphQL type declarations produced by type projection."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ObjectTypeDef(BaseModel):
    """One generated GraphQL object type.

    ``fields`` maps field name to a GraphQL type reference and keeps
    declaration order.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    fields: dict[str, str]
    interfaces: list[str] = Field(default_factory=list)
    infer: bool = False

    def to_sdl(self) -> str:
        """Render the declaration as SDL."""
        header = f"type {self.name}"
        if self.interfaces:
            header += " implements " + " & ".join(self.interfaces)
        header += " @infer" if self.infer else " @dontInfer"

        lines = [f"{header} {{"]
        lines.extend(f"  {name}: {type_ref}" for name, type_ref in self.fields.items())
        lines.append("}")
        return "\n".join(lines)


class SchemaRegistration(BaseModel):
    """Everything type projection registers with the host, in one batch."""

    model_config = ConfigDict(frozen=True)

    base_type_defs: str
    object_types: list[ObjectTypeDef] = Field(default_factory=list)

    @property
    def type_names(self) -> list[str]:
        return [type_def.name for type_def in self.object_types]

    def get(self, name: str) -> Optional[ObjectTypeDef]:
        for type_def in self.object_types:
            if type_def.name == name:
                return type_def
        return None

    def to_sdl(self) -> str:
        """Base declarations followed by every generated object type."""
        parts = [self.base_type_defs.strip()]
        parts.extend(type_def.to_sdl() for type_def in self.object_types)
        return "\n\n".join(parts) + "\n"
