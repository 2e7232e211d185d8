"""FastAPI application exposing record conversion over HTTP.

WHY: Tools that cannot shell out to the CLI (web front ends, workflow
runners, other services) need an HTTP endpoint that converts a posted
document and returns the result. FastAPI provides request validation
and OpenAPI documentation.

HOW: POST /convert runs the posted text through the same orchestrator
the CLI uses and also reports how many records it carried.
A ConversionError becomes a 422 response carrying the error kind.
GET /formats and GET /health describe the service.

RULES:
- The service holds no state between requests
- ConversionError → 422 with ConversionErrorResponse body
- Request validation errors keep FastAPI's default 422 body
- No file storage; request text in, response text out
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from record_converter import __version__
from record_converter.config import (
    API_HOST,
    API_PORT,
    FORMAT_EXTENSIONS,
    FORMAT_MEDIA_TYPES,
    configure_logging,
)
from record_converter.converter import run_conversion
from record_converter.core.errors import ConversionError
from record_converter.core.formats import Format
from record_converter.server.models import (
    ConversionErrorResponse,
    ConvertRequest,
    ConvertResponse,
    FormatInfo,
    FormatName,
    HealthResponse,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Record Converter API",
    description=(
        "Convert record collections between JSON, YAML, CSV and TOML. "
        "Every conversion goes through one canonical record list, so "
        "field values and ordering survive any format pair."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


@app.exception_handler(ConversionError)
async def conversion_error_handler(request: Request, exc: ConversionError) -> JSONResponse:
    body = ConversionErrorResponse(
        detail=exc.message,
        error=exc.kind,
        format=FormatName(exc.format.value) if exc.format is not None else None,
    )
    return JSONResponse(status_code=422, content=body.model_dump(mode="json"))


# ---------------------------------------------------------------------------
# Endpoints: Conversion
# ---------------------------------------------------------------------------


@app.post(
    "/convert",
    response_model=ConvertResponse,
    tags=["conversion"],
    summary="Convert a document between formats",
    responses={422: {"model": ConversionErrorResponse, "description": "Conversion failed."}},
)
def convert_document(request: ConvertRequest) -> ConvertResponse:
    input_format = Format(request.input_format.value)
    output_format = Format(request.output_format.value)
    records, text = run_conversion(request.text, input_format, output_format)
    logger.info(
        "Converted %d record(s) from %s to %s", len(records), input_format, output_format
    )
    return ConvertResponse(
        text=text,
        input_format=request.input_format,
        output_format=request.output_format,
        record_count=len(records),
    )


# ---------------------------------------------------------------------------
# Endpoints: Formats and health
# ---------------------------------------------------------------------------


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["formats"],
    summary="List supported formats",
)
def list_formats() -> List[FormatInfo]:
    return [
        FormatInfo(
            key=FormatName(fmt.value),
            name=fmt.display_name,
            extension=FORMAT_EXTENSIONS[fmt],
            media_type=FORMAT_MEDIA_TYPES[fmt],
        )
        for fmt in Format
    ]


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
)
def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the record-converter-api console script."""
    import uvicorn

    configure_logging()
    uvicorn.run(app, host=API_HOST, port=API_PORT)
