from fastapi import APIRouter, Depends
from ..models.schemas import HealthResponse
from ..services.container import ServiceContainer, get_container

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check(services: ServiceContainer = Depends(get_container)):
    """
    Health check endpoint to verify system status.

    Returns:
    - Status of the application
    - Timestamp
    - Whether Elasticsearch is connected
    - Whether the completion index exists
    """
    return services.health_service.get_health_status()
