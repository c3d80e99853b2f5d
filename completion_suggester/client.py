"""Programmatic entry points: connect, suggest, disconnect.

    with connect("localhost", 9200, "http") as handle:
        response = suggest(handle, "test2", "title", "s")
        for line in render(response):
            print(line)
"""
from typing import Any, Dict, List

from .models.schemas import CompletionResponse
from .services.autocomplete_service import AutoCompleteService, extract_texts
from .services.elasticsearch_service import ElasticsearchService

SAMPLE_DOCUMENTS = (
    ["SK-II", "PITERA"],
    ["Sony", "WH-1000XM3"],
    ["Nintendo", "switch"],
)


def connect(host: str, port: int, scheme: str = "http", **kwargs: Any) -> ElasticsearchService:
    """Open a reusable connection handle; raises CompletionConnectionError"""
    return ElasticsearchService(host=host, port=port, scheme=scheme, **kwargs).connect()


def disconnect(handle: ElasticsearchService) -> None:
    handle.disconnect()


def suggest(
    handle: ElasticsearchService,
    index_name: str,
    field_name: str,
    prefix_text: str,
    skip_duplicates: bool = True,
    max_results: int = 10,
) -> CompletionResponse:
    """Send one completion request and block until the endpoint answers.

    Entries and their options keep the order the endpoint returned them in.
    Raises CompletionRequestError, CompletionTransportError or
    ResponseParseError; nothing is retried.
    """
    service = AutoCompleteService(handle)
    request = service.build_request(index_name, field_name, prefix_text, skip_duplicates, max_results)
    return service.suggest(request)


def suggestion_texts(response: CompletionResponse) -> List[str]:
    return extract_texts(response)


def render(response: CompletionResponse) -> List[str]:
    """Printable lines for one batch of suggestions"""
    lines = []
    for entry in response.entries:
        lines.append(f"completion prefix: {entry.matched_prefix}")
        lines.append("results:")
        for option in entry.options:
            lines.append(f"-->{option.suggested_text}")
    return lines


def seed_sample_index(handle: ElasticsearchService, index_name: str, field_name: str) -> int:
    """Create a completion index and load the sample product titles"""
    handle.create_completion_index(index_name, field_name)
    documents: List[Dict[str, Any]] = [{field_name: list(titles)} for titles in SAMPLE_DOCUMENTS]
    return handle.index_documents(index_name, documents)
