from __future__ import annotations

import json
import logging
import pprint
from types import MappingProxyType
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_serializer,
    field_validator,
)
from typing_extensions import Annotated

from assistants_runs.model.assistants_api_tool_choice_option import AssistantsApiToolChoiceOption
from assistants_runs.model.json_schema import JsonSchema
from assistants_runs.model.message import Message
from assistants_runs.model.response_format import (
    DEFAULT_RESPONSE_FORMAT,
    AssistantsApiResponseFormatOption,
    ResponseFormat,
)
from assistants_runs.model.tool import Tool
from assistants_runs.model.truncation_object import TruncationObject

try:
    from typing import Self
except ImportError:
    from typing_extensions import Self

logger = logging.getLogger(__name__)

# the only fields the transport may rebind after construction
TRANSPORT_FIELDS = frozenset(["assistant_id", "stream"])


def _as_model(value, model_class):
    # the request keeps its own copy so later changes by the caller don't leak in
    if value is None:
        return None
    if isinstance(value, model_class):
        return value.model_copy(deep=True)
    return model_class.from_dict(value)


def _clear_call_arguments(tools: Optional[Sequence[Tool]]) -> None:
    # never send the arguments of a previous call with a new run
    for tool in tools or ():
        if tool.function is not None and tool.function.arguments is not None:
            tool.function.arguments = None


class CreateRunRequest(BaseModel):
    """
    Create a run on a thread.
    """
    assistant_id: Annotated[StrictStr, Field(min_length=1)] = Field(description="The ID of the assistant to use to execute this run.")
    model: Optional[StrictStr] = Field(default=None, description="The ID of the Model to be used to execute this run. If a value is provided here, it will override the model associated with the assistant.")
    instructions: Optional[StrictStr] = Field(default=None, description="Overrides the instructions of the assistant. This is useful for modifying the behavior on a per-run basis.")
    additional_instructions: Optional[StrictStr] = Field(default=None, description="Appends additional instructions at the end of the instructions for the run. This is useful for modifying the behavior on a per-run basis without overriding other instructions.")
    additional_messages: Optional[Tuple[Message, ...]] = Field(default=None, description="Adds additional messages to the thread before creating the run.")
    tools: Optional[Tuple[Tool, ...]] = Field(default=None, description="Override the tools the assistant can use for this run. This is useful for modifying the behavior on a per-run basis.")
    metadata: Optional[Dict[str, StrictStr]] = Field(default=None, description="Set of 16 key-value pairs that can be attached to an object. Keys can be a maximum of 64 characters long and values can be a maxium of 512 characters long.")
    temperature: Optional[Union[StrictFloat, StrictInt]] = Field(default=None, description="What sampling temperature to use, between 0 and 2. Higher values like 0.8 will make the output more random, while lower values like 0.2 will make it more focused and deterministic.")
    top_p: Optional[Union[StrictFloat, StrictInt]] = Field(default=None, description="An alternative to sampling with temperature, called nucleus sampling, where the model considers the results of the tokens with top_p probability mass. So 0.1 means only the tokens comprising the top 10% probability mass are considered.")
    stream: StrictBool = Field(default=False, description="If `true`, returns a stream of events that happen during the Run as server-sent events, terminating when the Run enters a terminal state with a `data: [DONE]` message.")
    max_prompt_tokens: Optional[StrictInt] = Field(default=None, description="The maximum number of prompt tokens that may be used over the course of the run. If the run exceeds the number of prompt tokens specified, the run will end with status `incomplete`.")
    max_completion_tokens: Optional[StrictInt] = Field(default=None, description="The maximum number of completion tokens that may be used over the course of the run. If the run exceeds the number of completion tokens specified, the run will end with status `incomplete`.")
    truncation_strategy: Optional[TruncationObject] = None
    tool_choice: Optional[AssistantsApiToolChoiceOption] = None
    parallel_tool_calls: Optional[StrictBool] = Field(default=None, description="Whether to enable parallel function calling during tool use.")
    response_format: AssistantsApiResponseFormatOption = Field(default_factory=AssistantsApiResponseFormatOption)

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        protected_namespaces=(),
    )

    def __init__(self,
                 assistant_id: str,
                 model: Optional[str] = None,
                 instructions: Optional[str] = None,
                 additional_instructions: Optional[str] = None,
                 additional_messages: Optional[Iterable[Union[Message, Dict[str, Any]]]] = None,
                 tools: Optional[Iterable[Union[Tool, Dict[str, Any]]]] = None,
                 metadata: Optional[Dict[str, str]] = None,
                 temperature: Optional[float] = None,
                 top_p: Optional[float] = None,
                 max_prompt_tokens: Optional[int] = None,
                 max_completion_tokens: Optional[int] = None,
                 truncation_strategy: Optional[Union[TruncationObject, Dict[str, Any]]] = None,
                 tool_choice: Optional[str] = None,
                 parallel_tool_calls: Optional[bool] = None,
                 json_schema: Optional[Union[JsonSchema, Dict[str, Any]]] = None,
                 response_format: Union[ResponseFormat, str] = DEFAULT_RESPONSE_FORMAT) -> None:
        if additional_messages is not None:
            additional_messages = [_as_model(message, Message) for message in additional_messages]

        if tools is not None:
            tools = list(tools)
            # cleared on the caller's tools too, the request itself holds copies
            _clear_call_arguments([tool for tool in tools if isinstance(tool, Tool)])
            tools = [_as_model(tool, Tool) for tool in tools]
            _clear_call_arguments(tools)

        resolved_tool_choice = AssistantsApiToolChoiceOption.resolve(tool_choice, tools)

        super().__init__(
            assistant_id=assistant_id,
            model=model,
            instructions=instructions,
            additional_instructions=additional_instructions,
            additional_messages=additional_messages,
            tools=tools,
            metadata=metadata,
            temperature=temperature,
            top_p=top_p,
            max_prompt_tokens=max_prompt_tokens,
            max_completion_tokens=max_completion_tokens,
            truncation_strategy=_as_model(truncation_strategy, TruncationObject),
            tool_choice=resolved_tool_choice,
            parallel_tool_calls=parallel_tool_calls,
            response_format=AssistantsApiResponseFormatOption.resolve(
                json_schema=_as_model(json_schema, JsonSchema),
                response_format=response_format,
            ),
        )
        logger.debug(f"created run request for assistant {self.assistant_id}, tool_choice {self.tool_choice_value}, response_format {self.response_format.type.value}")

    @classmethod
    def _from_wire_fields(cls, **fields: Any) -> Self:
        # validates the fields without going through __init__, they are already resolved
        instance = cls.__new__(cls)
        BaseModel.__init__(instance, **fields)
        return instance

    @field_validator('metadata', mode='after')
    @classmethod
    def metadata_read_only(cls, value):
        if value is None:
            return None
        return MappingProxyType(dict(value))

    @field_serializer('metadata')
    def serialize_metadata(self, value):
        if value is None:
            return None
        return dict(value)

    def __setattr__(self, name: str, value: Any) -> None:
        if name not in TRANSPORT_FIELDS:
            raise AttributeError(f"{self.__class__.__name__} is immutable, cannot set `{name}`")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable, cannot delete `{name}`")

    @property
    def tool_choice_value(self) -> Optional[Union[str, Dict[str, Any]]]:
        """The wire value of tool_choice, None when unset"""
        if self.tool_choice is None:
            return None
        return self.tool_choice.to_dict()

    def to_str(self) -> str:
        """Returns the string representation of the model using alias"""
        return pprint.pformat(self.to_dict())

    def to_json(self) -> str:
        """Returns the JSON representation of the model using alias"""
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, json_str: str) -> Optional[Self]:
        """Create an instance of CreateRunRequest from a JSON string"""
        return cls.from_dict(json.loads(json_str))

    def to_dict(self) -> Dict[str, Any]:
        """Return the dictionary representation of the model using alias.

        This has the following differences from calling pydantic's
        `self.model_dump(by_alias=True)`:

        * `None` is only added to the output dict for nullable fields that
          were set at model initialization. Other fields with value `None`
          are ignored.
        * `response_format` is left out when it is the default format.
        * `tool_choice` is the bare literal or the named function object.
        """
        excluded_fields = set([
            "additional_messages",
            "tools",
            "truncation_strategy",
            "tool_choice",
            "response_format",
        ])
        _dict = self.model_dump(by_alias=True, exclude=excluded_fields, exclude_none=True)
        # override the default output from pydantic by calling `to_dict()` of each item in additional_messages (list)
        if self.additional_messages is not None:
            _dict['additional_messages'] = [_item.to_dict() for _item in self.additional_messages]
        # override the default output from pydantic by calling `to_dict()` of each item in tools (list)
        if self.tools is not None:
            _dict['tools'] = [_item.to_dict() for _item in self.tools]
        if self.truncation_strategy is not None:
            _dict['truncation_strategy'] = self.truncation_strategy.to_dict()
        if self.tool_choice is not None:
            _dict['tool_choice'] = self.tool_choice.to_dict()
        if not self.response_format.is_default():
            _dict['response_format'] = self.response_format.to_dict()
        return _dict

    @classmethod
    def from_dict(cls, obj: Optional[Dict[str, Any]]) -> Optional[Self]:
        """Create an instance of CreateRunRequest from a dict

        The wire form is already resolved so tool choice resolution is not run again.
        """
        if obj is None:
            return None

        if isinstance(obj, cls):
            return obj

        if not isinstance(obj, dict):
            raise ValueError(f"Invalid run request {obj!r}, expected an object")

        tools = [Tool.from_dict(_item) for _item in obj["tools"]] if obj.get("tools") is not None else None
        _clear_call_arguments(tools)

        _obj = cls._from_wire_fields(
            assistant_id=obj.get("assistant_id"),
            model=obj.get("model"),
            instructions=obj.get("instructions"),
            additional_instructions=obj.get("additional_instructions"),
            additional_messages=[Message.from_dict(_item) for _item in obj["additional_messages"]] if obj.get("additional_messages") is not None else None,
            tools=tools,
            metadata=obj.get("metadata"),
            temperature=obj.get("temperature"),
            top_p=obj.get("top_p"),
            stream=obj.get("stream") if obj.get("stream") is not None else False,
            max_prompt_tokens=obj.get("max_prompt_tokens"),
            max_completion_tokens=obj.get("max_completion_tokens"),
            truncation_strategy=TruncationObject.from_dict(obj["truncation_strategy"]) if obj.get("truncation_strategy") is not None else None,
            tool_choice=AssistantsApiToolChoiceOption.from_dict(obj["tool_choice"]) if obj.get("tool_choice") is not None else None,
            parallel_tool_calls=obj.get("parallel_tool_calls"),
            response_format=AssistantsApiResponseFormatOption.from_dict(obj["response_format"]) if obj.get("response_format") is not None else AssistantsApiResponseFormatOption(),
        )
        return _obj
