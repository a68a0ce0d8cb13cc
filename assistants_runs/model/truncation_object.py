from __future__ import annotations

import json
import pprint
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator, model_validator
from typing_extensions import Annotated

try:
    from typing import Self
except ImportError:
    from typing_extensions import Self


class TruncationObject(BaseModel):
    """
    Controls for how a thread will be truncated prior to the run. Use this to control the intial context window of the run.
    """
    type: StrictStr = Field(description="The truncation strategy to use for the thread. The default is `auto`. If set to `last_messages`, the thread will be truncated to the n most recent messages in the thread. When set to `auto`, messages in the middle of the thread will be dropped to fit the context length of the model, `max_prompt_tokens`.")
    last_messages: Optional[Annotated[int, Field(strict=True, ge=1)]] = Field(default=None, description="The number of most recent messages from the thread when constructing the context for the run.")

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        frozen=True,
        protected_namespaces=(),
    )

    @field_validator('type')
    def type_validate_enum(cls, value):
        """Validates the enum"""
        if value not in ('auto', 'last_messages'):
            raise ValueError("must be one of enum values ('auto', 'last_messages')")
        return value

    @model_validator(mode='after')
    def last_messages_required(self):
        if self.type == 'last_messages' and self.last_messages is None:
            raise ValueError("`last_messages` is required when type is 'last_messages'")
        return self

    @classmethod
    def auto(cls) -> Self:
        return cls(type="auto")

    @classmethod
    def from_last_messages(cls, last_messages: int) -> Self:
        return cls(type="last_messages", last_messages=last_messages)

    def to_str(self) -> str:
        """Returns the string representation of the model using alias"""
        return pprint.pformat(self.model_dump(by_alias=True))

    def to_json(self) -> str:
        """Returns the JSON representation of the model using alias"""
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, json_str: str) -> Optional[Self]:
        """Create an instance of TruncationObject from a JSON string"""
        return cls.from_dict(json.loads(json_str))

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, obj: Optional[Dict[str, Any]]) -> Optional[Self]:
        """Create an instance of TruncationObject from a dict"""
        if obj is None:
            return None

        if not isinstance(obj, dict):
            return cls.model_validate(obj)

        _obj = cls.model_validate({
            "type": obj.get("type"),
            "last_messages": obj.get("last_messages")
        })
        return _obj
