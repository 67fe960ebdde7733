"""
API Routers

- deployments : deployment list (pods, warnings, container images)
- health      : API and Kubernetes health checks
"""

from .deployments import router as deployments_router
from .health import router as health_router

__all__ = [
    'deployments_router',
    'health_router',
]
