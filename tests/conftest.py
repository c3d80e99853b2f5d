import copy
from unittest.mock import MagicMock

import pytest

from completion_suggester.services.elasticsearch_service import ElasticsearchService

# Payload Elasticsearch returns for prefix "s" against the sample titles
SAMPLE_PAYLOAD = {
    "took": 1,
    "timed_out": False,
    "_shards": {"total": 1, "successful": 1, "skipped": 0, "failed": 0},
    "hits": {"total": {"value": 0, "relation": "eq"}, "max_score": None, "hits": []},
    "suggest": {
        "title_suggest": [
            {
                "text": "s",
                "offset": 0,
                "length": 1,
                "options": [
                    {
                        "text": "SK-II",
                        "_index": "test2",
                        "_id": "nVUsH4EBfwatmgrgIAsV",
                        "_score": 1.0,
                        "_source": {"title": ["SK-II", "PITERA"]}
                    },
                    {
                        "text": "Sony",
                        "_index": "test2",
                        "_id": "nFUsH4EBfwatmgrgFgu5",
                        "_score": 1.0,
                        "_source": {"title": ["Sony", "WH-1000XM3"]}
                    },
                    {
                        "text": "switch",
                        "_index": "test2",
                        "_id": "nlUsH4EBfwatmgrgKAsR",
                        "_score": 1.0,
                        "_source": {"title": ["Nintendo", "switch"]}
                    }
                ]
            }
        ]
    }
}

EMPTY_PAYLOAD = {
    "suggest": {
        "title_suggest": [{"text": "zzz", "offset": 0, "length": 3, "options": []}]
    }
}


@pytest.fixture
def sample_payload():
    return copy.deepcopy(SAMPLE_PAYLOAD)


@pytest.fixture
def fake_client(sample_payload):
    client = MagicMock(name="Elasticsearch")
    client.ping.return_value = True
    client.search.return_value = sample_payload
    return client


@pytest.fixture
def client_factory(fake_client):
    factory = MagicMock(name="client_factory", return_value=fake_client)
    return factory


@pytest.fixture
def es_service(client_factory):
    return ElasticsearchService("localhost", 9200, "http", client_factory=client_factory)


@pytest.fixture
def connected_service(es_service):
    es_service.connect()
    yield es_service
    if es_service.is_connected:
        es_service.disconnect()
