"""Pydantic schemas for the advertorial generation API."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GenerateRequest(BaseModel):
    """Inbound payload interpolated into the draft prompt."""

    model_config = ConfigDict(populate_by_name=True)

    company_name: Optional[str] = Field(default=None, alias="companyName")
    product_service: Optional[str] = Field(default=None, alias="productService")
    key_points: Optional[str] = Field(default=None, alias="keyPoints")
    client_materials: Optional[str] = Field(default=None, alias="clientMaterials")
    brief: Optional[str] = Field(default=None)
    content_type: Optional[str] = Field(default=None, alias="contentType")
    word_count: Optional[str] = Field(
        default=None,
        alias="wordCount",
        description="Target length; numbers are accepted and kept as text.",
    )

    @field_validator("*", mode="before")
    @classmethod
    def stringify_numbers(cls, v):
        # Browser forms often send wordCount as a number.
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class ResearchRequest(BaseModel):
    """Topic to search for recent Australian news coverage."""

    topic: Optional[str] = Field(default="mining", description="Search query.")


class TweakRequest(BaseModel):
    """Existing text plus a free-form revision instruction.

    Both fields are checked by the handler so absence is reported as HTTP 400.
    """

    original: Optional[str] = None
    instruction: Optional[str] = None


class ContentResponse(BaseModel):
    """Single success shape shared by every content route."""

    content: str


class Article(BaseModel):
    """News article as returned by the search provider."""

    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    image: Optional[str] = None
