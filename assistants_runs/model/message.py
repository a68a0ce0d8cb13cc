from __future__ import annotations

import json
import pprint
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

try:
    from typing import Self
except ImportError:
    from typing_extensions import Self


class MessageAttachment(BaseModel):
    file_id: StrictStr = Field(description="The ID of the file to attach to the message.")
    tools: Optional[List[Dict[str, Any]]] = Field(default=None, description="The tools to add this file to.")

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        protected_namespaces=(),
    )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class Message(BaseModel):
    """
    A message added to the thread before the run is created.
    """
    role: StrictStr = Field(description="The role of the entity that is creating the message: `user` or `assistant`.")
    content: Union[StrictStr, List[Dict[str, Any]]] = Field(description="The text contents of the message, or an array of content parts.")
    attachments: Optional[List[MessageAttachment]] = Field(default=None, description="A list of files attached to the message, and the tools they should be added to.")
    metadata: Optional[Dict[str, StrictStr]] = Field(default=None, description="Set of 16 key-value pairs that can be attached to an object.")

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        protected_namespaces=(),
    )

    @field_validator('role')
    def role_validate_enum(cls, value):
        """Validates the enum"""
        if value not in ('user', 'assistant'):
            raise ValueError("must be one of enum values ('user', 'assistant')")
        return value

    def to_str(self) -> str:
        """Returns the string representation of the model using alias"""
        return pprint.pformat(self.model_dump(by_alias=True))

    def to_json(self) -> str:
        """Returns the JSON representation of the model using alias"""
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, json_str: str) -> Optional[Self]:
        """Create an instance of Message from a JSON string"""
        return cls.from_dict(json.loads(json_str))

    def to_dict(self) -> Dict[str, Any]:
        excluded_fields = set(["attachments"])
        _dict = self.model_dump(by_alias=True, exclude=excluded_fields, exclude_none=True)
        # override the default output from pydantic by calling `to_dict()` of each item in attachments (list)
        if self.attachments:
            _dict['attachments'] = [_item.to_dict() for _item in self.attachments if _item]
        return _dict

    @classmethod
    def from_dict(cls, obj: Optional[Dict[str, Any]]) -> Optional[Self]:
        """Create an instance of Message from a dict"""
        if obj is None:
            return None

        if not isinstance(obj, dict):
            return cls.model_validate(obj)

        _obj = cls.model_validate({
            "role": obj.get("role"),
            "content": obj.get("content"),
            "attachments": [MessageAttachment.model_validate(_item) for _item in obj["attachments"]] if obj.get("attachments") is not None else None,
            "metadata": obj.get("metadata")
        })
        return _obj
