"""
Deployments API Router
- Deployment list with pods, warnings and container images
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query
from kubernetes.client.rest import ApiException
from pydantic import ValidationError

from deployment_dashboard.core.config import settings
from deployment_dashboard.core.kubernetes import get_k8s_clients
from deployment_dashboard.models.dataselect import DataSelectQuery, NamespaceQuery, build_data_select_query
from deployment_dashboard.models.deployment import DeploymentList
from deployment_dashboard.services.deployment import get_deployment_list

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/deployments", tags=["deployments"])


def _data_select_query(
    filter_text: Optional[str],
    filter_by: Optional[str],
    sort_by: Optional[str],
    sort_field: Optional[str],
    sort_ascending: bool,
    page_number: Optional[int],
    page_size: Optional[int],
) -> DataSelectQuery:
    try:
        return build_data_select_query(
            filter_text=filter_text,
            filter_by=filter_by,
            sort_by=sort_by,
            sort_field=sort_field,
            sort_ascending=sort_ascending,
            page_number=page_number,
            page_size=page_size,
            default_page_size=settings.DEFAULT_PAGE_SIZE,
        )
    except (ValueError, ValidationError) as e:
        raise HTTPException(status_code=400, detail=str(e))


async def _list_deployments(ns_query: NamespaceQuery, ds_query: DataSelectQuery) -> DeploymentList:
    try:
        core_v1, apps_v1 = get_k8s_clients()
        return await get_deployment_list(core_v1, apps_v1, ns_query, ds_query)
    except ApiException as e:
        logger.error(f"Failed to list deployments: {e}")
        raise HTTPException(status_code=e.status or 500, detail=str(e))
    except Exception as e:
        logger.exception("Unexpected error while listing deployments")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("", response_model=DeploymentList)
async def list_deployments(
    namespace: List[str] = Query(default=[]),
    filter_by: Optional[str] = Query(default=None, alias="filterBy"),
    filter_text: Optional[str] = Query(default=None, alias="filterText"),
    sort_by: Optional[str] = Query(default=None, alias="sortBy"),
    sort_field: Optional[str] = Query(default=None, alias="sortField"),
    sort_ascending: bool = Query(default=True, alias="sortAscending"),
    page_number: Optional[int] = Query(default=None, ge=0, alias="pageNumber"),
    page_size: Optional[int] = Query(default=None, ge=1, alias="pageSize"),
):
    """Deployments of all namespaces, or of the namespaces given as ?namespace="""
    ds_query = _data_select_query(
        filter_text, filter_by, sort_by, sort_field, sort_ascending, page_number, page_size
    )
    return await _list_deployments(NamespaceQuery(namespaces=namespace), ds_query)


@router.get("/{namespace}", response_model=DeploymentList)
async def list_namespace_deployments(
    namespace: str,
    filter_by: Optional[str] = Query(default=None, alias="filterBy"),
    filter_text: Optional[str] = Query(default=None, alias="filterText"),
    sort_by: Optional[str] = Query(default=None, alias="sortBy"),
    sort_field: Optional[str] = Query(default=None, alias="sortField"),
    sort_ascending: bool = Query(default=True, alias="sortAscending"),
    page_number: Optional[int] = Query(default=None, ge=0, alias="pageNumber"),
    page_size: Optional[int] = Query(default=None, ge=1, alias="pageSize"),
):
    """Deployments of one namespace"""
    ds_query = _data_select_query(
        filter_text, filter_by, sort_by, sort_field, sort_ascending, page_number, page_size
    )
    return await _list_deployments(NamespaceQuery(namespaces=[namespace]), ds_query)
