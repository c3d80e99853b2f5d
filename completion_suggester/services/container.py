from typing import Optional

from .elasticsearch_service import ElasticsearchService
from .autocomplete_service import AutoCompleteService
from .health_service import HealthService


class ServiceContainer:
    """Dependency injection container for managing service instances"""

    def __init__(self, es_service: Optional[ElasticsearchService] = None):
        # Initialize services; nothing connects until start()
        self._elasticsearch_service = es_service or ElasticsearchService()
        self._autocomplete_service = AutoCompleteService(self._elasticsearch_service)
        self._health_service = HealthService(self._elasticsearch_service)

    def start(self) -> None:
        self._elasticsearch_service.connect()

    def shutdown(self) -> None:
        if self._elasticsearch_service.is_connected:
            self._elasticsearch_service.disconnect()

    @property
    def elasticsearch_service(self) -> ElasticsearchService:
        return self._elasticsearch_service

    @property
    def autocomplete_service(self) -> AutoCompleteService:
        return self._autocomplete_service

    @property
    def health_service(self) -> HealthService:
        return self._health_service


# Global container instance
container = ServiceContainer()


def get_container() -> ServiceContainer:
    return container
