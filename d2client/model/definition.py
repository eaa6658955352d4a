"""
Model definitions derived from the server's schema documents.

A schema document (``GET schemas/<name>``) lists ``properties``; each one
becomes a ValidationRule, and properties flagged ``owner`` are the ones
sent back to the server when a model is saved or validated.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from d2client.api.client import Api, get_api
from d2client.model.rules import ValidationRule


@dataclass(frozen=True)
class ModelDefinition:
    name: str
    plural: str | None = None
    validations: dict[str, ValidationRule] = field(default_factory=dict)
    owned_properties: tuple[str, ...] = ()

    @classmethod
    def from_schema(cls, schema: dict[str, Any]) -> ModelDefinition:
        validations: dict[str, ValidationRule] = {}
        owned: list[str] = []
        for prop in schema.get("properties") or []:
            field_name = prop.get("fieldName") or prop.get("name")
            if not field_name:
                continue
            validations[field_name] = ValidationRule(
                type=prop.get("propertyType"),
                min=prop.get("min"),
                max=prop.get("max"),
                required=prop.get("required"),
            )
            if prop.get("owner"):
                owned.append(field_name)
        return cls(
            name=schema.get("singular") or schema.get("name") or "",
            plural=schema.get("plural"),
            validations=validations,
            owned_properties=tuple(owned),
        )

    def get_owned_property_json(self, model: Model) -> dict[str, Any]:
        """Owned fields of *model* that carry a value."""
        return {
            name: model.data[name]
            for name in self.owned_properties
            if model.data.get(name) is not None
        }


@dataclass
class Model:
    model_definition: ModelDefinition
    data: dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.data[key] = value


def fetch_model_definition(name: str, api: Api | None = None) -> ModelDefinition:
    """Load the schema for *name* from the server."""
    api = api if api is not None else get_api()
    return ModelDefinition.from_schema(api.get(f"schemas/{name}"))
