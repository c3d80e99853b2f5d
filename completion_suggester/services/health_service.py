import logging
from datetime import datetime

from ..config.settings import settings
from ..errors import CompletionError
from ..models.schemas import HealthResponse
from .elasticsearch_service import ElasticsearchService

logger = logging.getLogger(__name__)


class HealthService:
    """Service class for health checks and system status"""

    def __init__(self, es_service: ElasticsearchService):
        self.es_service = es_service

    def get_health_status(self) -> HealthResponse:
        """Report whether the endpoint is connected and the completion index exists"""
        if not self.es_service.is_connected:
            return HealthResponse(
                status="DISCONNECTED",
                timestamp=datetime.now().isoformat(),
                elasticsearch_reachable=False,
                indexes_available=[]
            )
        try:
            if not self.es_service.ping():
                return HealthResponse(
                    status="UNREACHABLE",
                    timestamp=datetime.now().isoformat(),
                    elasticsearch_reachable=False,
                    indexes_available=[]
                )
            available_indexes = self.es_service.check_index_health([settings.completion_index])
            return HealthResponse(
                status="OK",
                timestamp=datetime.now().isoformat(),
                elasticsearch_reachable=True,
                indexes_available=available_indexes
            )
        except CompletionError as e:
            logger.error("Health check failed: %s", e)
            return HealthResponse(
                status=f"ERROR: {str(e)}",
                timestamp=datetime.now().isoformat(),
                elasticsearch_reachable=False,
                indexes_available=[]
            )
