from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from ..errors import (
    CompletionConnectionError,
    CompletionError,
    CompletionRequestError,
    CompletionTransportError,
    ResponseParseError,
)
from ..models.schemas import AutoCompleteResponse, CompletionResponse
from ..services.container import ServiceContainer, get_container
from ..config.settings import settings

router = APIRouter()


def _http_error(e: CompletionError) -> HTTPException:
    if isinstance(e, CompletionRequestError):
        return HTTPException(status_code=400, detail=f"Invalid completion request: {str(e)}")
    if isinstance(e, ResponseParseError):
        return HTTPException(status_code=502, detail=f"Unexpected completion response: {str(e)}")
    if isinstance(e, (CompletionTransportError, CompletionConnectionError)):
        return HTTPException(status_code=503, detail=f"Elasticsearch unavailable: {str(e)}")
    return HTTPException(status_code=500, detail=f"Autocomplete error: {str(e)}")


@router.get("/auto_complete", response_model=AutoCompleteResponse)
def auto_complete(
    q: str = Query(..., description="Prefix to complete, sent verbatim"),
    size: int = Query(settings.max_autocomplete_results, description="Number of suggestions to return", ge=1, le=settings.max_autocomplete_results),
    index: Optional[str] = Query(None, description="Index holding the completion field"),
    field: Optional[str] = Query(None, description="Completion field name"),
    services: ServiceContainer = Depends(get_container)
):
    """
    Get autocomplete suggestions for a prefix.

    Returns the option texts of every entry in the order Elasticsearch ranked them.
    """
    try:
        return services.autocomplete_service.get_suggestions(
            index or settings.completion_index,
            field or settings.completion_field,
            q,
            size,
            settings.completion_skip_duplicates
        )
    except CompletionError as e:
        raise _http_error(e)


@router.get("/suggest", response_model=CompletionResponse, response_model_by_alias=False)
def suggest(
    q: str = Query(..., description="Prefix to complete, sent verbatim"),
    size: int = Query(settings.max_autocomplete_results, description="Maximum options per entry", ge=0),
    index: Optional[str] = Query(None, description="Index holding the completion field"),
    field: Optional[str] = Query(None, description="Completion field name"),
    skip_duplicates: bool = Query(True, description="Let Elasticsearch drop duplicate suggestions"),
    services: ServiceContainer = Depends(get_container)
):
    """Full completion response: entries, offsets, scores and source documents"""
    service = services.autocomplete_service
    try:
        request = service.build_request(
            index or settings.completion_index,
            field or settings.completion_field,
            q,
            skip_duplicates,
            size
        )
        return service.suggest(request)
    except CompletionError as e:
        raise _http_error(e)
