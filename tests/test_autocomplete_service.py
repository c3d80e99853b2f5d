import pytest

from completion_suggester.errors import CompletionRequestError, ResponseParseError
from completion_suggester.services.autocomplete_service import AutoCompleteService, extract_texts


@pytest.fixture
def service(connected_service):
    return AutoCompleteService(connected_service)


def test_build_completion_query_matches_wire_format(service):
    request = service.build_request("test2", "title", "s", True, 10)

    assert service.build_completion_query(request) == {
        "suggest": {
            "title_suggest": {
                "text": "s",
                "completion": {"field": "title", "skip_duplicates": True, "size": 10}
            }
        }
    }


def test_build_request_rejects_negative_size(service):
    with pytest.raises(CompletionRequestError):
        service.build_request("test2", "title", "s", max_results=-3)


def test_suggest_sends_request_and_decodes(service, fake_client):
    response = service.suggest(service.build_request("test2", "title", "s"))

    fake_client.search.assert_called_once_with(
        index="test2",
        suggest={
            "title_suggest": {
                "text": "s",
                "completion": {"field": "title", "skip_duplicates": True, "size": 10}
            }
        }
    )
    assert len(response.entries) == 1
    entry = response.entries[0]
    assert entry.matched_prefix == "s"
    assert (entry.offset, entry.length) == (0, 1)
    assert [o.suggested_text for o in entry.options] == ["SK-II", "Sony", "switch"]
    assert entry.options[2].source_document == {"title": ["Nintendo", "switch"]}


def test_options_keep_descending_score_order(service, fake_client, sample_payload):
    options = sample_payload["suggest"]["title_suggest"][0]["options"]
    for option, score in zip(options, (3.0, 2.0, 1.0)):
        option["_score"] = score
    fake_client.search.return_value = sample_payload

    entry = service.suggest(service.build_request("test2", "title", "s")).entries[0]

    scores = [o.score for o in entry.options]
    assert scores == sorted(scores, reverse=True)


def test_empty_options_decode(service, fake_client):
    fake_client.search.return_value = {
        "suggest": {"title_suggest": [{"text": "zzz", "offset": 0, "length": 3, "options": []}]}
    }

    response = service.suggest(service.build_request("test2", "title", "zzz"))

    assert response.entries[0].options == []
    assert extract_texts(response) == []


def test_missing_suggestion_name_raises(service, sample_payload):
    with pytest.raises(ResponseParseError):
        service.parse_completion_response(sample_payload, "name_suggest")


def test_missing_suggest_section_raises(service):
    with pytest.raises(ResponseParseError):
        service.parse_completion_response({"hits": {"hits": []}}, "title_suggest")


def test_malformed_option_raises(service):
    payload = {"suggest": {"title_suggest": [{"text": "s", "offset": 0, "length": 1, "options": [{"_score": 1.0}]}]}}

    with pytest.raises(ResponseParseError):
        service.parse_completion_response(payload, "title_suggest")


def test_entries_not_a_list_raises(service):
    with pytest.raises(ResponseParseError):
        service.parse_completion_response({"suggest": {"title_suggest": {"text": "s"}}}, "title_suggest")


def test_get_suggestions_flattens_texts(service):
    result = service.get_suggestions("test2", "title", "s", size=10)

    assert result.query == "s"
    assert result.suggestions == ["SK-II", "Sony", "switch"]
    assert result.total == 3
