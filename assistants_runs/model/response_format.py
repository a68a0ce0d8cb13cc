from __future__ import annotations

import json
import pprint
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict

from assistants_runs.model.json_schema import JsonSchema

try:
    from typing import Self
except ImportError:
    from typing_extensions import Self


class ResponseFormat(str, Enum):
    AUTO = "auto"
    TEXT = "text"
    JSON_OBJECT = "json_object"
    JSON_SCHEMA = "json_schema"


DEFAULT_RESPONSE_FORMAT = ResponseFormat.TEXT


class AssistantsApiResponseFormatOption(BaseModel):
    """
    Specifies the format that the model must output: the `auto` literal, a
    `{"type": ...}` object, or a `json_schema` object carrying a JsonSchema.
    """
    actual_instance: Union[ResponseFormat, JsonSchema] = DEFAULT_RESPONSE_FORMAT

    model_config = ConfigDict(
        validate_assignment=True,
        frozen=True,
        protected_namespaces=(),
    )

    def __init__(self, *args, **kwargs) -> None:
        if args:
            if len(args) > 1:
                raise ValueError("If a position argument is used, only 1 is allowed to set `actual_instance`")
            if kwargs:
                raise ValueError("If a position argument is used, keyword arguments cannot be used.")
            super().__init__(actual_instance=args[0])
        else:
            super().__init__(**kwargs)

    @classmethod
    def resolve(cls, json_schema: Optional[JsonSchema] = None,
                response_format: Union[ResponseFormat, str] = DEFAULT_RESPONSE_FORMAT) -> Self:
        """A json_schema, when given, wins over the plain response_format."""
        if json_schema is not None:
            return cls(json_schema)
        return cls(ResponseFormat(response_format))

    @property
    def type(self) -> ResponseFormat:
        if isinstance(self.actual_instance, JsonSchema):
            return ResponseFormat.JSON_SCHEMA
        return self.actual_instance

    @property
    def json_schema(self) -> Optional[JsonSchema]:
        if isinstance(self.actual_instance, JsonSchema):
            return self.actual_instance
        return None

    def is_default(self) -> bool:
        return self.actual_instance == DEFAULT_RESPONSE_FORMAT

    def to_str(self) -> str:
        """Returns the string representation of the actual instance"""
        return pprint.pformat(self.to_dict())

    def to_json(self) -> str:
        """Returns the JSON representation of the actual instance"""
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, json_str: str) -> Self:
        """Returns the object represented by the json string"""
        return cls.from_dict(json.loads(json_str))

    def to_dict(self) -> Union[str, Dict[str, Any]]:
        """Returns the wire value of the actual instance"""
        if isinstance(self.actual_instance, JsonSchema):
            return {"type": ResponseFormat.JSON_SCHEMA.value, "json_schema": self.actual_instance.to_dict()}
        if self.actual_instance == ResponseFormat.AUTO:
            return ResponseFormat.AUTO.value
        return {"type": self.actual_instance.value}

    @classmethod
    def from_dict(cls, obj: Union[str, Dict[str, Any]]) -> Self:
        if isinstance(obj, str):
            return cls(ResponseFormat(obj))
        if not isinstance(obj, dict):
            raise ValueError(f"Invalid response format {obj!r}, expected a string or an object")
        format_type = ResponseFormat(obj.get("type"))
        if format_type == ResponseFormat.JSON_SCHEMA and obj.get("json_schema") is not None:
            return cls(JsonSchema.from_dict(obj["json_schema"]))
        return cls(format_type)
