"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation.

HOW: Each endpoint has its own response model; /convert also has a
request model. FormatName is a str Enum so OpenAPI lists the accepted
format keys and pydantic rejects anything else with a 422.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- FormatName values match Format member values exactly
- Conversion failures use ConversionErrorResponse
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class FormatName(str, Enum):
    """Format keys accepted by the API (values of Format members)."""

    json = "json"
    yaml = "yaml"
    csv = "csv"
    toml = "toml"


class ConvertRequest(BaseModel):
    """Text to convert and the format pair.

    RULES:
    - text is the full document; blank text yields an empty_input error
    """

    text: str = Field(description="Input document text.")
    input_format: FormatName = Field(description="Format of the input text.")
    output_format: FormatName = Field(description="Format to produce.")

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "text": "id,name,value,active\n1,Alice,12.34,true\n",
                "input_format": "csv",
                "output_format": "json",
            }
        ]
    }}


class ConvertResponse(BaseModel):
    text: str = Field(description="Converted document text.")
    input_format: FormatName = Field(description="Format of the input text.")
    output_format: FormatName = Field(description="Format of the returned text.")
    record_count: int = Field(description="Number of records converted.")


class ConversionErrorResponse(BaseModel):
    """Body of a 422 response for a failed conversion.

    WHY: Clients need the machine-readable error kind, not just a message,
    to tell an empty upload from a malformed one.
    """

    detail: str = Field(description="Human-readable error message.")
    error: str = Field(description="Stable error kind, e.g. 'csv' or 'empty_input'.")
    format: Optional[FormatName] = Field(
        default=None,
        description="Format the error originated from, when known.",
    )


class FormatInfo(BaseModel):
    """Description of a supported format."""

    key: FormatName = Field(description="Format identifier used in API requests.")
    name: str = Field(description="Human-readable format name.")
    extension: str = Field(description="Preferred file extension, e.g. '.yaml'.")
    media_type: str = Field(description="MIME type of documents in this format.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
