"""
Base classes for typed request and response models
"""

from typing import Annotated, Any, Dict

from pydantic import AfterValidator, BaseModel, ConfigDict, StringConstraints, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


# Required identifier-like string (type, host, digest): trimmed, must not be empty
NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


# Required record value (content, answer): sent exactly as given, must not be blank
RecordValue = Annotated[str, AfterValidator(_not_blank)]


class ResponseModel(BaseModel):
    """
    Immutable response payload.
    Fields use the registrar's camelCase names on the wire; fields the
    registrar adds later are ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore"
    )


class RequestModel(BaseModel):
    """
    Immutable operation request.
    Required fields must be present when the request is built; empty
    strings in optional fields are treated as "not given" so they are
    never sent as placeholders.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="forbid"
    )

    @field_validator("*", mode="before")
    @classmethod
    def _blank_optional_to_none(cls, value: Any, info: ValidationInfo) -> Any:
        if isinstance(value, str) and not value.strip():
            field_info = cls.model_fields.get(info.field_name)
            if field_info is not None and not field_info.is_required():
                return None
        return value

    def to_wire(self) -> Dict[str, Any]:
        """Wire-named fields, with absent optionals left out"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
