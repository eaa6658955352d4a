"""
ModelValidation -- checks property values against their declared rules.

Checks performed, in this order, all accumulated into one result:
  1. Value has the type the rule's type tag requires
  2. Numeric values lie within min/max
  3. Strings and sequences have a length within min/max
  4. Type-specific predicates (e.g. phone number characters)

A rule with ``required=False`` accepts any empty value outright.
Validation failures are returned as data, never raised.
"""
from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any

from d2client.api.client import Api, get_api
from d2client.core.check import is_array, is_integer, is_string, to_number
from d2client.core.logging import get_logger
from d2client.model.definition import Model
from d2client.model.rules import ValidationResult, ValidationRule
from d2client.model.type_rules import TypeSpecificValidators, default_type_rules
from d2client.model.types import TypeTag


class ModelValidationError(ValueError):
    """A model cannot be sent for schema validation."""


def _as_rule(validation_settings: Any) -> ValidationRule:
    if isinstance(validation_settings, ValidationRule):
        return validation_settings
    if not isinstance(validation_settings, Mapping):
        raise TypeError("validation_settings should be of type Mapping")
    return ValidationRule.model_validate(dict(validation_settings))


def _format_bound(bound: Any) -> str:
    """Render a bound the way it reads: ``5.0`` becomes ``5``."""
    if isinstance(bound, float) and is_integer(bound):
        return str(int(bound))
    return str(bound)


def _numeric_bounds(result: ValidationResult, value: Any, rule: ValidationRule) -> None:
    number = to_number(value)
    if number is None:
        return
    low = to_number(rule.min)
    if low is not None and number < low:
        result.fail(f"Value needs to be larger than or equal to {_format_bound(rule.min)}", value)
    high = to_number(rule.max)
    if high is not None and number > high:
        result.fail(f"Value needs to be smaller than or equal to {_format_bound(rule.max)}", value)


def _length_bounds(result: ValidationResult, value: Any, rule: ValidationRule) -> None:
    if not (is_array(value) or is_string(value)):
        return
    # Non-integer bounds place no constraint on length
    if is_integer(rule.min) and len(value) < rule.min:
        result.fail(f"Value needs to be longer than or equal to {_format_bound(rule.min)}", value)
    if is_integer(rule.max) and len(value) > rule.max:
        result.fail(f"Value needs to be shorter than or equal to {_format_bound(rule.max)}", value)


class ModelValidation:
    """Validation engine.

    Parameters
    ----------
    logger : logging.Logger, optional
        Receives diagnostics such as unknown type tags.
    api : Api, optional
        Used by ``validate_against_schema``; defaults to ``get_api()`` on use.
    type_validators : TypeSpecificValidators, optional
        Extra per-type predicates; defaults to the bundled rules.
    """

    _instance: ModelValidation | None = None
    _instance_lock = threading.Lock()

    def __init__(
        self,
        logger: logging.Logger | None = None,
        api: Api | None = None,
        type_validators: TypeSpecificValidators | None = None,
    ):
        if logger is None:
            logger = get_logger(__name__)
        elif not callable(getattr(logger, "warning", None)):
            raise TypeError("logger should be a logging.Logger")
        self.logger = logger
        self.api = api
        self.type_validators = type_validators if type_validators is not None else default_type_rules()

    # ── Local validation ────────────────────────────────

    def validate(self, validation_settings: Mapping[str, Any] | ValidationRule, value: Any) -> ValidationResult:
        """Validate *value* against *validation_settings*.

        Returns a ValidationResult whose ``messages`` explain every failed
        check (empty when ``status`` is True).
        """
        rule = _as_rule(validation_settings)
        result = ValidationResult()

        # No value when not required is a valid value
        if rule.required is False and not value:
            return result

        tag = TypeTag.parse(rule.type)
        if not self._type_matches(tag, rule.type, value):
            result.fail("This is not a valid type", value)

        _numeric_bounds(result, value, rule)
        _length_bounds(result, value, rule)

        for validator in self.type_validators.for_type(tag):
            if not validator.predicate(value):
                result.fail(validator.message, value)

        return result

    def validate_model(self, model: Model) -> dict[str, ValidationResult]:
        """Validate every field of *model* that its definition has a rule for."""
        return {
            name: self.validate(rule, model.data.get(name))
            for name, rule in model.model_definition.validations.items()
        }

    def _type_matches(self, tag: TypeTag | None, raw_tag: Any, value: Any) -> bool:
        if tag is None:
            self.logger.warning("No type validator found for %r", raw_tag)
            return False
        return tag.accepts(value)

    # ── Server-side validation ──────────────────────────

    def validate_against_schema(self, model: Any) -> Any:
        """POST the model's owned properties to ``schemas/<name>``.

        Returns the server's verdict exactly as received.

        Raises
        ------
        ModelValidationError
            If the model has no definition name; nothing is sent.
        """
        definition = getattr(model, "model_definition", None)
        name = getattr(definition, "name", None)
        if not (model and definition and name):
            raise ModelValidationError("model.model_definition.name can not be found")

        api = self.api if self.api is not None else get_api()
        return api.post(f"schemas/{name}", definition.get_owned_property_json(model))

    # ── Singleton ───────────────────────────────────────

    @classmethod
    def get_model_validation(cls) -> ModelValidation:
        """Return the process-wide instance, creating it on first use."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls(get_logger(__name__))
        return cls._instance


def get_model_validation() -> ModelValidation:
    return ModelValidation.get_model_validation()
