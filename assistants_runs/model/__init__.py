from .assistants_api_tool_choice_option import (
    AssistantsApiToolChoiceOption,
    AssistantsNamedToolChoice,
    AssistantsNamedToolChoiceFunction,
    ToolChoiceMode,
)
from .create_run_request import CreateRunRequest
from .function_object import FunctionObject
from .json_schema import JsonSchema
from .message import Message, MessageAttachment
from .response_format import AssistantsApiResponseFormatOption, ResponseFormat
from .tool import Tool
from .truncation_object import TruncationObject
