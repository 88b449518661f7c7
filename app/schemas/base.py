# schemas/base.py
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    The web client speaks camelCase; Python code stays snake_case.
    Responses are serialized by alias, requests accept either form.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


RequiredStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1),
]

NameStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=2, max_length=100),
]

PhoneStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=10, max_length=50),
]

LongTextStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=10, max_length=5000),
]

OptStr500 = (
    Annotated[
        str,
        StringConstraints(strip_whitespace=True, max_length=500),
    ]
    | None
)
