"""
Unit tests -- model definitions built from schema documents.
"""
from d2client.model.definition import Model, ModelDefinition, fetch_model_definition
from d2client.model.rules import ValidationRule

_SCHEMA = {
    "singular": "dataElement",
    "plural": "dataElements",
    "properties": [
        {"fieldName": "name", "propertyType": "TEXT", "min": 1, "max": 230,
         "required": True, "owner": True},
        {"fieldName": "code", "propertyType": "IDENTIFIER", "max": 50,
         "required": False, "owner": True},
        {"name": "href", "propertyType": "URL", "owner": False},
        {"propertyType": "TEXT"},  # no name -- skipped
    ],
}


def test_from_schema_names():
    definition = ModelDefinition.from_schema(_SCHEMA)
    assert definition.name == "dataElement"
    assert definition.plural == "dataElements"


def test_from_schema_rules():
    definition = ModelDefinition.from_schema(_SCHEMA)
    assert set(definition.validations) == {"name", "code", "href"}
    assert definition.validations["name"] == ValidationRule(type="TEXT", min=1, max=230, required=True)
    assert definition.validations["code"].required is False


def test_from_schema_owned_properties():
    definition = ModelDefinition.from_schema(_SCHEMA)
    assert definition.owned_properties == ("name", "code")


def test_owned_property_json_skips_unset_and_unowned():
    definition = ModelDefinition.from_schema(_SCHEMA)
    model = Model(definition, {"name": "ANC 1st visit", "code": None, "href": "http://x"})
    assert definition.get_owned_property_json(model) == {"name": "ANC 1st visit"}


def test_model_item_access():
    model = Model(ModelDefinition(name="dataElement"))
    model["name"] = "ANC"
    assert model["name"] == "ANC"
    assert model.data == {"name": "ANC"}


def test_fetch_model_definition(fake_api):
    fake_api.response = _SCHEMA
    definition = fetch_model_definition("dataElement", api=fake_api)
    assert fake_api.calls == [("GET", "schemas/dataElement", None)]
    assert definition.name == "dataElement"
