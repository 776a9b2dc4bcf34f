"""Shared base models."""

import logging
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT", bound="OptionsModel")


class OptionsModel(BaseModel):
    """Base for option bundles that tolerate bad input.

    Invalid or unknown values are dropped one field at a time, so a caller
    that passes ``{"ignore_case": "maybe"}`` gets the default for that field
    instead of an exception.
    """

    model_config = ConfigDict(
        frozen=True, extra="ignore", populate_by_name=True, alias_generator=to_camel
    )

    @classmethod
    def field_name(cls, key: Any) -> Optional[str]:
        """Resolve a snake_case name or camelCase alias to a field name."""
        for name, field in cls.model_fields.items():
            if key == name or key == field.alias:
                return name
        return None

    @classmethod
    def coerce(
        cls: type[OptionsT],
        value: Any,
        defaults: Optional[dict[str, Any]] = None,
    ) -> OptionsT:
        """
        Build an options instance from a model, a mapping or None.

        Args:
            value: An instance of this model, a dict of field values, or None
            defaults: Field values applied before ``value`` when ``value`` is
                not already an instance

        Returns:
            A valid options instance
        """
        if isinstance(value, cls):
            return value

        data: dict[str, Any] = dict(defaults or {})
        if isinstance(value, BaseModel):
            value = value.model_dump()
        if isinstance(value, dict):
            data.update(value)
        elif value is not None:
            logger.warning(f"Ignoring {cls.__name__} of type {type(value).__name__}")

        accepted: dict[str, Any] = {}
        for key, field_value in data.items():
            name = cls.field_name(key)
            if name is None:
                continue
            try:
                cls.model_validate({name: field_value})
            except ValidationError:
                logger.warning(f"Ignoring invalid {cls.__name__}.{name}: {field_value!r}")
                continue
            accepted[name] = field_value

        return cls.model_validate(accepted)
