from __future__ import annotations

from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, PrivateAttr, model_validator


class WireModel(BaseModel):
    """Base for request and response bodies.

    Unknown keys are ignored and null keys keep the field default, the same
    leniency the API relies on. A bare ``null`` body or list item decodes as
    an empty model. Numbers are never accepted where a string is expected.
    """

    model_config = ConfigDict(extra="ignore")

    _response: httpx.Response | None = PrivateAttr(default=None)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    @property
    def response(self) -> httpx.Response | None:
        """HTTP response this body was decoded from, if any."""
        return self._response

    def __eq__(self, other: object) -> bool:
        # the attached response is not part of the body
        if not isinstance(other, BaseModel):
            return NotImplemented
        return type(self) is type(other) and self.__dict__ == other.__dict__
