"""Extraction endpoint logic."""
import logging

from fastapi import HTTPException
from pydantic import BaseModel

from jsonsalvage.config import Settings
from jsonsalvage.core.pipeline import extract

logger = logging.getLogger("jsonsalvage.http.extract")


class ExtractRequest(BaseModel):
    """Request model for the extract endpoint.

    Attributes:
        text: Raw model output to recover JSON from.
    """
    text: str


class ExtractResponse(BaseModel):
    """Response model for the extract endpoint.

    Attributes:
        text: Canonical JSON when found, otherwise the original text.
        found: Whether a JSON value was recovered.
        stage: "strict" or "boundary" on success, None on failure.
    """
    text: str
    found: bool
    stage: str | None = None


def handle_extract(request: ExtractRequest, settings: Settings) -> ExtractResponse:
    """Run extraction on the text of an incoming request.

    Args:
        request: Request holding the text to process.
        settings: Server settings providing the input size limit.

    Returns:
        ExtractResponse describing the outcome.

    Raises:
        HTTPException: 413 error if the text exceeds settings.max_input_chars.
    """
    if len(request.text) > settings.max_input_chars:
        logger.warning(f"Rejected oversize input: {len(request.text)} > {settings.max_input_chars} chars")
        raise HTTPException(
            status_code=413,
            detail=f"Text too large: {len(request.text)} chars (limit {settings.max_input_chars})",
        )
    result = extract(request.text)
    logger.info(f"Extraction finished: found={result.found}, stage={result.stage}, length={len(request.text)}")
    return ExtractResponse(text=result.text, found=result.found, stage=result.stage)
