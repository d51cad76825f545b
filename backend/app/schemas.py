"""Pydantic schemas for the script, version and element actions."""

# purpose: request/response contracts and partial-update payloads for script actions
# status: active

from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, model_validator
from uuid import UUID

from .errors import EMPTY_PATCH_MESSAGE

# Known values for the open string fields. Conventions only; any string is stored.
SCRIPT_TYPES = ("feature-film", "short-film", "tv-episode", "tv-pilot", "web-series")
FORMAT_STANDARDS = ("screenplay", "stageplay")
SCRIPT_STATUSES = ("idea", "draft", "polishing", "final")
ELEMENT_TYPES = (
    "scene-heading",
    "action",
    "character",
    "dialogue",
    "parenthetical",
    "transition",
    "shot",
)

# 32-bit INTEGER column range
ORDER_INDEX_MIN = -2**31
ORDER_INDEX_MAX = 2**31 - 1


class PatchModel(BaseModel):
    """Partial update payload.

    Only fields the caller explicitly supplied with a value end up in
    ``changes()``; everything else is left untouched in storage. A payload
    that supplies nothing is rejected.
    """

    def changes(self) -> Dict[str, Any]:
        supplied = self.model_dump(exclude_unset=True)
        return {key: value for key, value in supplied.items() if value is not None}

    @model_validator(mode="after")
    def _require_changes(self):
        if not self.changes():
            raise ValueError(EMPTY_PATCH_MESSAGE)
        return self


class ScriptCreate(BaseModel):
    title: str = Field(min_length=1)
    script_type: Optional[str] = None
    format_standard: Optional[str] = None
    logline: Optional[str] = None
    status: Optional[str] = None
    notes: Optional[str] = None


class ScriptUpdate(PatchModel):
    title: Optional[str] = Field(default=None, min_length=1)
    script_type: Optional[str] = None
    format_standard: Optional[str] = None
    logline: Optional[str] = None
    status: Optional[str] = None
    notes: Optional[str] = None


class ScriptOut(BaseModel):
    id: UUID
    owner_id: str
    title: str
    script_type: Optional[str] = None
    format_standard: Optional[str] = None
    logline: Optional[str] = None
    status: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class ScriptVersionCreate(BaseModel):
    version_label: Optional[str] = None
    is_preferred: StrictBool = False
    raw_content: str = Field(min_length=1)
    formatted_content: Optional[str] = None


class ScriptVersionUpdate(PatchModel):
    version_label: Optional[str] = None
    is_preferred: Optional[StrictBool] = None
    raw_content: Optional[str] = Field(default=None, min_length=1)
    formatted_content: Optional[str] = None


class ScriptVersionOut(BaseModel):
    id: UUID
    script_id: UUID
    version_label: Optional[str] = None
    is_preferred: bool
    raw_content: str
    formatted_content: Optional[str] = None
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class ScriptElementCreate(BaseModel):
    order_index: StrictInt = Field(ge=ORDER_INDEX_MIN, le=ORDER_INDEX_MAX)
    element_type: str = Field(min_length=1)
    character_name: Optional[str] = None
    content: str = Field(min_length=1)


class ScriptElementUpdate(PatchModel):
    order_index: Optional[StrictInt] = Field(default=None, ge=ORDER_INDEX_MIN, le=ORDER_INDEX_MAX)
    element_type: Optional[str] = Field(default=None, min_length=1)
    character_name: Optional[str] = None
    content: Optional[str] = Field(default=None, min_length=1)


class ScriptElementOut(BaseModel):
    id: UUID
    script_version_id: UUID
    order_index: int
    element_type: str
    character_name: Optional[str] = None
    content: str
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class ActionAck(BaseModel):
    success: bool = True


class ScriptData(BaseModel):
    script: ScriptOut


class ScriptResult(ActionAck):
    data: ScriptData


class ScriptListData(BaseModel):
    items: List[ScriptOut]
    total: int


class ScriptListResult(ActionAck):
    data: ScriptListData


class ScriptVersionData(BaseModel):
    version: ScriptVersionOut


class ScriptVersionResult(ActionAck):
    data: ScriptVersionData


class ScriptVersionListData(BaseModel):
    items: List[ScriptVersionOut]
    total: int


class ScriptVersionListResult(ActionAck):
    data: ScriptVersionListData


class ScriptElementData(BaseModel):
    element: ScriptElementOut


class ScriptElementResult(ActionAck):
    data: ScriptElementData


class ScriptElementListData(BaseModel):
    items: List[ScriptElementOut]
    total: int


class ScriptElementListResult(ActionAck):
    data: ScriptElementListData
