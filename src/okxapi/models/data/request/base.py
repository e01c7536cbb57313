from typing import Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator
from typing_extensions import Literal, get_args, get_origin

from okxapi.errors import RequestValidationError


Request = TypeVar("Request", bound="RequestModel")


def is_int_code(annotation) -> bool:
    """True for Literal[0, 1, ...] and Optional of it"""
    if get_origin(annotation) is Literal:
        return all(isinstance(arg, int) for arg in get_args(annotation))
    return any(is_int_code(arg) for arg in get_args(annotation))


class RequestModel(BaseModel):
    """Base model for endpoint parameters.

    Field order is the order parameters appear in the query string.
    Numeric codes (eg bill types) may be passed as strings, "1" is read as 1.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def int_code_from_str(cls, v, info: ValidationInfo):
        if isinstance(v, str) and v.lstrip("-").isdigit():
            if is_int_code(cls.model_fields[info.field_name].annotation):
                return int(v)
        return v

    def to_params(self, *fields: str) -> dict:
        """Query parameters, in field order, restricted to `fields` if given"""
        params = self.model_dump()
        if fields:
            return {k: v for k, v in params.items() if k in fields}
        return params


def exactly_one(model: BaseModel, first: str, second: str):
    """Either `first` or `second` must be set, not both"""
    first_value = getattr(model, first)
    second_value = getattr(model, second)
    if first_value is None and second_value is None:
        raise ValueError(f"Either {first} or {second} must be present")
    if first_value is not None and second_value is not None:
        raise ValueError(f"{first} and {second} are mutually exclusive")


def at_least_one(model: BaseModel, first: str, second: str):
    """Either `first` or `second` must be set, both are accepted"""
    if getattr(model, first) is None and getattr(model, second) is None:
        raise ValueError(f"Either {first} or {second} must be present")


def validate_request(model: Type[Request], endpoint: str, **kwargs) -> Request:
    """Instantiate request model, raise RequestValidationError if params are invalid.

    Args:
        model (RequestModel): request model class
        endpoint (str): operation name, for the error message
        kwargs: parameters as passed by the caller

    Returns:
        validated model instance
    """
    try:
        return model(**kwargs)
    except ValidationError as e:
        raise RequestValidationError(endpoint, e.errors(include_url=False)) from e
