import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

from elasticsearch import ApiError, BadRequestError, Elasticsearch
from elasticsearch import TransportError as ElasticsearchTransportError

from ..config.settings import settings
from ..errors import (
    CompletionConnectionError,
    CompletionRequestError,
    CompletionTransportError,
)

logger = logging.getLogger(__name__)


class ElasticsearchService:
    """Service class for Elasticsearch operations.

    Owns one reusable connection handle. `connect` must be paired with exactly
    one `disconnect`; using the service as a context manager guarantees that
    on every exit path.
    """

    def __init__(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        scheme: Optional[str] = None,
        client_factory: Callable[..., Elasticsearch] = Elasticsearch,
    ):
        self.host = host or settings.elasticsearch_host
        self.port = port or settings.elasticsearch_port
        self.scheme = scheme or settings.elasticsearch_scheme
        self.client: Optional[Elasticsearch] = None
        self._client_factory = client_factory
        self._closed = False

    @property
    def url(self) -> str:
        return f"{self.scheme}://{self.host}:{self.port}"

    @property
    def is_connected(self) -> bool:
        return self.client is not None and not self._closed

    def connect(self) -> "ElasticsearchService":
        """Build the client and verify the endpoint answers the handshake"""
        if self.is_connected:
            return self
        if self._closed:
            raise CompletionConnectionError(f"Connection to {self.url} was already released")

        options: Dict[str, Any] = {
            "hosts": [{"host": self.host, "port": self.port, "scheme": self.scheme}],
            "basic_auth": settings.elasticsearch_auth,
        }
        if settings.elasticsearch_timeout is not None:
            options["request_timeout"] = settings.elasticsearch_timeout

        try:
            client = self._client_factory(**options)
        except (ValueError, ElasticsearchTransportError) as e:
            raise CompletionConnectionError(f"Invalid Elasticsearch endpoint {self.url}: {e}") from e

        try:
            reachable = client.ping()
        except (ApiError, ElasticsearchTransportError) as e:
            client.close()
            raise CompletionConnectionError(f"Elasticsearch handshake failed at {self.url}: {e}") from e
        if not reachable:
            client.close()
            raise CompletionConnectionError(f"Elasticsearch is not reachable at {self.url}")

        self.client = client
        logger.info("Connected to Elasticsearch at %s", self.url)
        return self

    def disconnect(self) -> None:
        """Release the connection; a second call fails"""
        if self.client is None or self._closed:
            raise CompletionConnectionError(f"No open connection to {self.url}")
        self._closed = True
        try:
            self.client.close()
        except ElasticsearchTransportError as e:
            raise CompletionConnectionError(f"Error closing connection to {self.url}: {e}") from e
        logger.info("Disconnected from Elasticsearch at %s", self.url)

    def __enter__(self) -> "ElasticsearchService":
        return self.connect()

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.is_connected:
            self.disconnect()

    def _require_client(self) -> Elasticsearch:
        if not self.is_connected:
            raise CompletionConnectionError(f"Not connected to {self.url}")
        return self.client

    def ping(self) -> bool:
        """Whether the endpoint still answers on the open connection"""
        client = self._require_client()
        try:
            return bool(client.ping())
        except (ApiError, ElasticsearchTransportError) as e:
            logger.warning("Ping to %s failed: %s", self.url, e)
            return False

    def search(self, index: str, body: Dict[str, Any]) -> Dict[str, Any]:
        """Execute a search request and return the decoded JSON payload"""
        client = self._require_client()
        logger.debug("Search on %s: %s", index, body)
        try:
            response = client.search(index=index, **body)
        except BadRequestError as e:
            raise CompletionRequestError(f"Elasticsearch rejected the request: {e}") from e
        except ApiError as e:
            raise CompletionTransportError(f"Elasticsearch search error: {e}") from e
        except ElasticsearchTransportError as e:
            raise CompletionTransportError(f"Elasticsearch transport error: {e}") from e
        # ObjectApiResponse wraps the payload; plain dicts pass through
        return getattr(response, "body", response)

    def check_index_health(self, indexes: Iterable[str]) -> List[str]:
        """Check which indexes are available"""
        client = self._require_client()
        available_indexes = []
        for index in indexes:
            try:
                if client.indices.exists(index=index):
                    available_indexes.append(index)
            except (ApiError, ElasticsearchTransportError) as e:
                logger.warning("Could not check index %s: %s", index, e)
        return available_indexes

    def create_completion_index(self, index: str, field: str) -> bool:
        """Create `index` with `field` mapped for completion; False if it already exists"""
        client = self._require_client()
        try:
            if client.indices.exists(index=index):
                return False
            client.indices.create(
                index=index,
                mappings={"properties": {field: {"type": "completion"}}}
            )
        except BadRequestError as e:
            raise CompletionRequestError(f"Could not create index {index}: {e}") from e
        except (ApiError, ElasticsearchTransportError) as e:
            raise CompletionTransportError(f"Could not create index {index}: {e}") from e
        logger.info("Created completion index %s (field %s)", index, field)
        return True

    def index_documents(self, index: str, documents: Iterable[Dict[str, Any]], refresh: bool = True) -> int:
        """Index plain documents, refreshing so they are searchable right away"""
        client = self._require_client()
        count = 0
        try:
            for document in documents:
                client.index(index=index, document=document)
                count += 1
            if refresh:
                client.indices.refresh(index=index)
        except BadRequestError as e:
            raise CompletionRequestError(f"Could not index into {index}: {e}") from e
        except (ApiError, ElasticsearchTransportError) as e:
            raise CompletionTransportError(f"Could not index into {index}: {e}") from e
        logger.info("Indexed %d documents into %s", count, index)
        return count
