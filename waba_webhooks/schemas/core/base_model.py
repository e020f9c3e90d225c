"""
Base pydantic model shared by every webhook schema.

Inputs are accepted with either the provider's snake_case keys or the internal
camelCase keys; output is always camelCase. Models are frozen once built.
"""

from typing import Any

from pydantic import AliasChoices, AliasGenerator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def _snake_or_camel(name: str) -> AliasChoices:
    return AliasChoices(name, to_camel(name))


class WebhookModel(BaseModel):
    """Immutable model accepting snake_case or camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
        alias_generator=AliasGenerator(
            validation_alias=_snake_or_camel,
            serialization_alias=to_camel,
        ),
    )

    def is_present(self, field_name: str) -> bool:
        """
        Check whether a field was supplied in the source payload.

        A field given as null counts as present; a field missing from the
        payload does not.
        """
        return field_name in self.model_fields_set

    def present_fields(self, *field_names: str) -> dict[str, Any]:
        """Return the named fields that were supplied, keyed by field name."""
        return {
            name: getattr(self, name)
            for name in field_names
            if name in self.model_fields_set
        }
