from __future__ import annotations

import json
import logging
import pprint
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator, model_validator

from assistants_runs.errors import InvalidArgumentError
from assistants_runs.model.tool import TOOL_TYPES, Tool

try:
    from typing import Self
except ImportError:
    from typing_extensions import Self

logger = logging.getLogger(__name__)


class ToolChoiceMode(str, Enum):
    AUTO = "auto"
    NONE = "none"
    REQUIRED = "required"


TOOL_CHOICE_MODES = tuple(mode.value for mode in ToolChoiceMode)


class AssistantsNamedToolChoiceFunction(BaseModel):
    name: StrictStr = Field(description="The name of the function to call.")

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        frozen=True,
        protected_namespaces=(),
    )


class AssistantsNamedToolChoice(BaseModel):
    """
    Specifies a tool the model should use. Use to force the model to call a specific function.
    """
    type: StrictStr = Field(default="function", description="The type of the tool. If type is `function`, the function name must be set")
    function: Optional[AssistantsNamedToolChoiceFunction] = None

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        frozen=True,
        protected_namespaces=(),
    )

    @field_validator('type')
    def type_validate_enum(cls, value):
        """Validates the enum"""
        if value not in TOOL_TYPES:
            raise ValueError("must be one of enum values ('function', 'code_interpreter', 'file_search')")
        return value

    @model_validator(mode='after')
    def function_required_for_function_type(self):
        if self.type == 'function' and self.function is None:
            raise ValueError("a named `function` tool choice must set `function.name`")
        return self

    @classmethod
    def for_function(cls, name: str) -> Self:
        return cls(type="function", function=AssistantsNamedToolChoiceFunction(name=name))

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class AssistantsApiToolChoiceOption(BaseModel):
    """
    Controls which (if any) tool is called by the model. Either one of the
    `auto`, `none` or `required` literals or a reference to a named function.
    """
    actual_instance: Union[ToolChoiceMode, AssistantsNamedToolChoice]

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
    def resolve(cls, tool_choice: Optional[str], tools: Optional[Sequence[Tool]]) -> Optional[Self]:
        """Turn a user supplied tool choice string into its wire shape.

        Without tools there is nothing to choose and the result is None. With
        tools, a missing choice means `auto`, the reserved literals pass through
        and any other string selects the first function tool whose name contains it.
        """
        if not tools:
            return None

        if tool_choice is None or not tool_choice.strip():
            return cls(ToolChoiceMode.AUTO)

        if tool_choice in TOOL_CHOICE_MODES:
            return cls(ToolChoiceMode(tool_choice))

        for tool in tools:
            if tool.type == "function" and tool_choice in tool.function_name:
                logger.debug(f"tool choice {tool_choice!r} resolved to function {tool.function_name!r}")
                return cls(AssistantsNamedToolChoice.for_function(tool.function_name))

        logger.warning(f"tool choice {tool_choice!r} not found in tools {[tool.function_name for tool in tools]}")
        raise InvalidArgumentError(
            "tool_choice",
            tool_choice,
            f"The specified tool choice '{tool_choice}' was not found in the list of tools",
        )

    @property
    def function_name(self) -> Optional[str]:
        if isinstance(self.actual_instance, AssistantsNamedToolChoice) and self.actual_instance.function is not None:
            return self.actual_instance.function.name
        return None

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
        if isinstance(self.actual_instance, AssistantsNamedToolChoice):
            return self.actual_instance.to_dict()
        return self.actual_instance.value

    @classmethod
    def from_dict(cls, obj: Union[str, Dict[str, Any]]) -> Self:
        if isinstance(obj, str):
            return cls(ToolChoiceMode(obj))
        return cls(AssistantsNamedToolChoice.model_validate(obj))
