"""
Health check API
"""
from fastapi import APIRouter

from deployment_dashboard.core.config import settings
from deployment_dashboard.core.kubernetes import describe_connection, get_k8s_clients

router = APIRouter(tags=["health"])


@router.get("/api/health")
async def health_check():
    """API health check"""
    return {"status": "healthy", "service": settings.SERVICE_NAME}


@router.get("/api/k8s/health")
async def k8s_health_check():
    """Kubernetes connection health check"""
    try:
        core_v1, _ = get_k8s_clients()
        core_v1.list_namespace(limit=1)
        return {"status": "connected", **describe_connection()}
    except Exception as e:
        return {"status": "disconnected", "error": str(e)}
