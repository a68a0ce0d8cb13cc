from .errors import InvalidArgumentError
from .model import (
    CreateRunRequest,
    FunctionObject,
    JsonSchema,
    Message,
    ResponseFormat,
    Tool,
    TruncationObject,
)
from .runs import create_run, create_run_async

__all__ = [
    "CreateRunRequest",
    "FunctionObject",
    "InvalidArgumentError",
    "JsonSchema",
    "Message",
    "ResponseFormat",
    "Tool",
    "TruncationObject",
    "create_run",
    "create_run_async",
]
