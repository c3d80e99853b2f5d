import logging
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError

from ..errors import CompletionRequestError, ResponseParseError
from ..models.schemas import AutoCompleteResponse, CompletionRequest, CompletionResponse
from .elasticsearch_service import ElasticsearchService

logger = logging.getLogger(__name__)


class AutoCompleteService:
    """Service class for completion suggester queries"""

    def __init__(self, es_service: ElasticsearchService):
        self.es_service = es_service

    def build_request(
        self,
        index: str,
        field: str,
        prefix: str,
        skip_duplicates: bool = True,
        max_results: int = 10,
        suggestion_name: Optional[str] = None
    ) -> CompletionRequest:
        """Validate the inputs into a CompletionRequest"""
        try:
            return CompletionRequest(
                index=index,
                field=field,
                prefix=prefix,
                skip_duplicates=skip_duplicates,
                max_results=max_results,
                suggestion_name=suggestion_name
            )
        except ValidationError as e:
            raise CompletionRequestError(f"Invalid completion request: {e}") from e

    def build_completion_query(self, request: CompletionRequest) -> Dict[str, Any]:
        """Build the search body carrying the completion suggester"""
        return {"suggest": request.to_suggest_body()}

    def parse_completion_response(self, payload: Mapping[str, Any], suggestion_name: str) -> CompletionResponse:
        """Decode the entries filed under `suggestion_name` in a search payload"""
        suggest = payload.get("suggest") if isinstance(payload, Mapping) else None
        if not isinstance(suggest, Mapping):
            raise ResponseParseError("Response has no 'suggest' section")
        if suggestion_name not in suggest:
            raise ResponseParseError(f"Suggestion '{suggestion_name}' missing from response")

        entries = suggest[suggestion_name]
        if not isinstance(entries, list):
            raise ResponseParseError(f"Suggestion '{suggestion_name}' is not a list of entries")
        try:
            return CompletionResponse.model_validate({"entries": entries})
        except ValidationError as e:
            raise ResponseParseError(f"Malformed suggestion '{suggestion_name}': {e}") from e

    def suggest(self, request: CompletionRequest) -> CompletionResponse:
        """Run one completion request/response exchange"""
        logger.debug("Completing %r on %s.%s", request.prefix, request.index, request.field)
        payload = self.es_service.search(request.index, self.build_completion_query(request))
        return self.parse_completion_response(payload, request.name)

    def get_suggestions(self, index: str, field: str, query: str, size: int = 10,
                        skip_duplicates: bool = True) -> AutoCompleteResponse:
        """Flattened suggestion texts for the given prefix"""
        request = self.build_request(index, field, query, skip_duplicates, size)
        suggestions = extract_texts(self.suggest(request))
        return AutoCompleteResponse(
            query=query,
            suggestions=suggestions,
            total=len(suggestions)
        )


def extract_texts(response: CompletionResponse) -> List[str]:
    """Option texts of every entry, in endpoint order"""
    return [option.suggested_text for entry in response.entries for option in entry.options]
