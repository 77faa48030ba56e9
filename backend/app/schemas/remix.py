"""
Pydantic schemas for the remix endpoints.
"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RemixRequest(BaseModel):
    """Schema for a remix request. Length and type rules live in RemixService."""
    text: Optional[str] = Field(None, description="Text to transform (1-10000 characters)")
    type: Optional[str] = Field(None, description="Remix type, defaults to 'improve'")


class RemixResponse(BaseModel):
    """Schema for a remix result."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    remixed_text: str
    original_length: int
    remixed_length: int
    type: str
    timestamp: str


class RemixTypeInfo(BaseModel):
    """A single supported remix type."""
    type: str
    description: str


class RemixTypesResponse(BaseModel):
    """Schema for the list of remix types."""
    types: List[RemixTypeInfo]
