"""
Deployment dashboard backend API

API layout:
- /api/deployments/*   - deployment list with pods, warnings and images
- /api/health          - API health check
- /api/k8s/health      - Kubernetes connection check
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from deployment_dashboard.core.config import settings
from deployment_dashboard.routers import deployments_router, health_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_CREDENTIALS,
    allow_methods=settings.CORS_METHODS,
    allow_headers=settings.CORS_HEADERS,
)

app.include_router(health_router)
app.include_router(deployments_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
