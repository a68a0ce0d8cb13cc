from __future__ import annotations

import json
import pprint
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr

try:
    from typing import Self
except ImportError:
    from typing_extensions import Self


class JsonSchema(BaseModel):
    """
    A JSON schema the model's output must conform to (structured outputs).
    """
    name: StrictStr = Field(description="The name of the response format. Must be a-z, A-Z, 0-9, or contain underscores and dashes, with a maximum length of 64.")
    description: Optional[StrictStr] = Field(default=None, description="A description of what the response format is for, used by the model to determine how to respond in the format.")
    schema_: Dict[str, Any] = Field(alias="schema", description="The schema for the response format, described as a JSON Schema object.")
    strict: StrictBool = Field(default=True, description="Whether to enable strict schema adherence when generating the output.")

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        frozen=True,
        protected_namespaces=(),
    )

    @classmethod
    def from_model(cls, model_class: Type[BaseModel], name: Optional[str] = None, description: Optional[str] = None,
                   strict: bool = True) -> Self:
        if name is None:
            name = model_class.__name__
        return cls(name=name, description=description, schema=model_class.model_json_schema(), strict=strict)

    def to_str(self) -> str:
        """Returns the string representation of the model using alias"""
        return pprint.pformat(self.model_dump(by_alias=True))

    def to_json(self) -> str:
        """Returns the JSON representation of the model using alias"""
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, json_str: str) -> Optional[Self]:
        """Create an instance of JsonSchema from a JSON string"""
        return cls.from_dict(json.loads(json_str))

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, obj: Optional[Dict[str, Any]]) -> Optional[Self]:
        """Create an instance of JsonSchema from a dict"""
        if obj is None:
            return None

        if not isinstance(obj, dict):
            return cls.model_validate(obj)

        _obj = cls.model_validate({
            "name": obj.get("name"),
            "description": obj.get("description"),
            "schema": obj.get("schema"),
            "strict": obj.get("strict") if obj.get("strict") is not None else True
        })
        return _obj
