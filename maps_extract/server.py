"""
FastAPI Server for Google Maps Business Extractor

Provides API endpoints for:
- Extracting businesses for a search query into an .xlsx download
- Health checks
"""

import logging
from typing import Optional

import httpx
import pydantic
from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, ConfigDict, Field

from .config import API_HOST, API_PORT, XLSX_MEDIA_TYPE
from .config_manager import ExtractorConfig
from .exceptions import MapsExtractorError
from .extractor import MapsExtractor

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Unable to extract business data at this time."


# FastAPI app
app = FastAPI(title="Google Maps Business Extractor API")

# Enable CORS; the metadata headers must be readable by browser clients
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["x-record-count", "x-filename", "Content-Disposition"],
)


# Request Models
class ExtractRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: Optional[str] = None
    location_bias: Optional[str] = Field(default=None, alias="locationBias")
    radius: Optional[float] = None  # meters
    max_results: Optional[int] = Field(default=None, alias="maxResults")


# Helper Functions
def get_config() -> ExtractorConfig:
    """Build the configuration for one request from the environment."""
    return ExtractorConfig()


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


async def read_payload(request: Request) -> dict:
    """Read the JSON body, treating a missing or unparsable body as empty."""
    try:
        payload = await request.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


def run_extraction(config: ExtractorConfig, body: ExtractRequest):
    with MapsExtractor(config=config) as extractor:
        return extractor.extract(
            body.query,
            location_bias=body.location_bias,
            radius=body.radius,
            max_results=body.max_results,
        )


# API Endpoints
@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


@app.post("/api/extract")
async def extract(request: Request):
    """Search, enrich and return the results as an .xlsx download.

    Record count and filename are also sent as the x-record-count and
    x-filename headers so clients can show them without opening the file.
    """
    # Credentials are checked before the body is looked at
    try:
        config = get_config()
        config.require_api_key()
    except MapsExtractorError as e:
        logger.error("Extraction rejected: %s", e)
        return error_response(str(e), e.status_code)

    try:
        body = ExtractRequest.model_validate(await read_payload(request))
    except pydantic.ValidationError as e:
        logger.info("Rejected malformed request: %s", e.errors())
        return error_response("Invalid request body.", 400)

    try:
        result = await run_in_threadpool(run_extraction, config, body)
    except MapsExtractorError as e:
        logger.error("Extraction failed: %s", e)
        return error_response(str(e) or GENERIC_ERROR_MESSAGE, e.status_code)
    except httpx.TimeoutException:
        logger.error("Extraction timed out waiting for Google Maps")
        return error_response("Request timed out", 504)
    except httpx.HTTPError as e:
        logger.error("Extraction failed: %s", e)
        return error_response(str(e) or GENERIC_ERROR_MESSAGE, 500)
    except Exception:
        logger.exception("Unexpected error during extraction")
        return error_response(GENERIC_ERROR_MESSAGE, 500)

    return Response(
        content=result.workbook,
        media_type=XLSX_MEDIA_TYPE,
        headers={
            "Content-Disposition": f'attachment; filename="{result.filename}"',
            "x-record-count": str(result.record_count),
            "x-filename": result.filename,
        },
    )


def run_server(host: str = API_HOST, port: int = API_PORT):
    """Run the API server."""
    import uvicorn
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
