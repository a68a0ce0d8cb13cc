from __future__ import annotations

import json
import pprint
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator, model_validator

from assistants_runs.model.function_object import FunctionObject

try:
    from typing import Self
except ImportError:
    from typing_extensions import Self

TOOL_TYPES = ('function', 'code_interpreter', 'file_search')


class Tool(BaseModel):
    """
    A tool the assistant may invoke during a run.
    """
    type: StrictStr = Field(frozen=True, description="The type of tool being defined: `function`, `code_interpreter` or `file_search`")
    function: Optional[FunctionObject] = Field(default=None, frozen=True)

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        protected_namespaces=(),
    )

    @field_validator('type')
    def type_validate_enum(cls, value):
        """Validates the enum"""
        if value not in TOOL_TYPES:
            raise ValueError("must be one of enum values ('function', 'code_interpreter', 'file_search')")
        return value

    @model_validator(mode='after')
    def function_only_on_function_tools(self):
        if self.type == 'function' and self.function is None:
            raise ValueError("function tools must define `function`")
        if self.type != 'function' and self.function is not None:
            raise ValueError(f"{self.type} tools cannot define `function`")
        return self

    @classmethod
    def code_interpreter(cls) -> Self:
        return cls(type="code_interpreter")

    @classmethod
    def file_search(cls) -> Self:
        return cls(type="file_search")

    @classmethod
    def from_function(cls, name: str, description: Optional[str] = None,
                      parameters: Optional[Dict[str, Any]] = None, strict: Optional[bool] = None) -> Self:
        return cls(
            type="function",
            function=FunctionObject(name=name, description=description, parameters=parameters, strict=strict),
        )

    @classmethod
    def from_model(cls, model_class: Type[BaseModel], name: Optional[str] = None,
                   description: Optional[str] = None) -> Self:
        """Build a function tool whose parameters are the JSON schema of a pydantic model.

        The function is named after the model class unless ``name`` is given and the
        description falls back to the model's docstring.
        """
        if name is None:
            name = model_class.__name__
        if description is None and model_class.__doc__:
            description = model_class.__doc__.strip()
        return cls.from_function(name=name, description=description, parameters=model_class.model_json_schema())

    @property
    def function_name(self) -> Optional[str]:
        if self.function is None:
            return None
        return self.function.name

    def to_str(self) -> str:
        """Returns the string representation of the model using alias"""
        return pprint.pformat(self.model_dump(by_alias=True))

    def to_json(self) -> str:
        """Returns the JSON representation of the model using alias"""
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, json_str: str) -> Optional[Self]:
        """Create an instance of Tool from a JSON string"""
        return cls.from_dict(json.loads(json_str))

    def to_dict(self) -> Dict[str, Any]:
        excluded_fields = set(["function"])
        _dict = self.model_dump(by_alias=True, exclude=excluded_fields, exclude_none=True)
        # override the default output from pydantic by calling `to_dict()` of function
        if self.function:
            _dict['function'] = self.function.to_dict()
        return _dict

    @classmethod
    def from_dict(cls, obj: Optional[Dict[str, Any]]) -> Optional[Self]:
        """Create an instance of Tool from a dict"""
        if obj is None:
            return None

        if not isinstance(obj, dict):
            return cls.model_validate(obj)

        _obj = cls.model_validate({
            "type": obj.get("type"),
            "function": FunctionObject.from_dict(obj["function"]) if obj.get("function") is not None else None
        })
        return _obj
