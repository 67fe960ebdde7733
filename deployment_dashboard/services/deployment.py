"""
Deployment list business logic
Join deployments with their pods and warning events into the list view model
"""

import logging
from typing import List, Optional

from kubernetes import client

from deployment_dashboard.core.kubernetes import is_not_found
from deployment_dashboard.models.dataselect import (
    CREATION_TIMESTAMP_PROPERTY,
    NAME_PROPERTY,
    NAMESPACE_PROPERTY,
    REPLICAS_PROPERTY,
    DataSelectQuery,
    NamespaceQuery,
)
from deployment_dashboard.models.deployment import (
    RESOURCE_KIND_DEPLOYMENT,
    Deployment,
    DeploymentList,
    ListMeta,
    ObjectMeta,
    TypeMeta,
)
from deployment_dashboard.services.channels import ResourceChannels, get_deployment_list_channels
from deployment_dashboard.services.dataselect import (
    ComparableValue,
    DataCell,
    StdComparableInt,
    StdComparableString,
    StdComparableTime,
    generic_data_select,
)
from deployment_dashboard.services.event import get_pods_event_warnings
from deployment_dashboard.services.pod import filter_namespaced_pods_by_selector, get_pod_info

logger = logging.getLogger(__name__)


class DeploymentCell(DataCell):
    """Selector view of a V1Deployment"""

    def __init__(self, deployment: client.V1Deployment):
        self.deployment = deployment

    def get_property(self, name: str) -> Optional[ComparableValue]:
        meta = self.deployment.metadata
        if name == NAME_PROPERTY:
            return StdComparableString(meta.name or "")
        if name == NAMESPACE_PROPERTY:
            return StdComparableString(meta.namespace or "")
        if name == CREATION_TIMESTAMP_PROPERTY:
            if meta.creation_timestamp is None:
                return None
            return StdComparableTime(meta.creation_timestamp)
        if name == REPLICAS_PROPERTY:
            spec = self.deployment.spec
            return StdComparableInt((spec.replicas or 0) if spec else 0)
        return None


def get_container_images(pod_spec: Optional[client.V1PodSpec]) -> List[str]:
    """Distinct container images of a pod spec in first-seen order"""
    images: List[str] = []
    if pod_spec is None:
        return images
    for container in pod_spec.containers or []:
        if container.image and container.image not in images:
            images.append(container.image)
    return images


def to_object_meta(meta: client.V1ObjectMeta) -> ObjectMeta:
    return ObjectMeta(
        name=meta.name,
        namespace=meta.namespace,
        labels=meta.labels or {},
        annotations=meta.annotations or {},
        creation_timestamp=meta.creation_timestamp.isoformat() if meta.creation_timestamp else None,
    )


def to_deployment(
    deployment: client.V1Deployment,
    pods: List[client.V1Pod],
    events: List[client.CoreV1Event],
) -> Deployment:
    """Build the view model of one deployment from the fetched pods and events"""
    spec = deployment.spec
    status = deployment.status
    selector = spec.selector.match_labels if spec.selector else None

    matching_pods = filter_namespaced_pods_by_selector(pods, deployment.metadata.namespace, selector)
    pod_info = get_pod_info(
        status.replicas if status else None,
        spec.replicas,
        matching_pods,
    )
    pod_info.warnings = get_pods_event_warnings(events, matching_pods)

    return Deployment(
        object_meta=to_object_meta(deployment.metadata),
        type_meta=TypeMeta(kind=RESOURCE_KIND_DEPLOYMENT),
        pods=pod_info,
        container_images=get_container_images(spec.template.spec if spec.template else None),
    )


def create_deployment_list(
    deployments: List[client.V1Deployment],
    pods: List[client.V1Pod],
    events: List[client.CoreV1Event],
    ds_query: Optional[DataSelectQuery],
) -> DeploymentList:
    """Deployment list view of every deployment selected by the query

    Args:
        deployments: raw deployments in source order
        pods: raw pods of the same namespaces
        events: raw events of the same namespaces
        ds_query: filter/sort/pagination query, None selects everything

    Returns:
        DeploymentList: selected deployments, total counted after filtering
    """
    deployment_list = DeploymentList(list_meta=ListMeta(total_items=len(deployments)))

    cells, filtered_total = generic_data_select([DeploymentCell(d) for d in deployments], ds_query)
    deployment_list.list_meta.total_items = filtered_total

    for cell in cells:
        deployment_list.deployments.append(to_deployment(cell.deployment, pods, events))

    return deployment_list


async def get_deployment_list_from_channels(
    channels: ResourceChannels,
    ds_query: Optional[DataSelectQuery],
) -> DeploymentList:
    """Read each channel once and build the deployment list

    Errors are checked deployments first, then pods, then events. A 404 on
    the deployment list means the server does not serve Deployments, which
    gives an empty list. Every other error is raised as is.
    """
    deployments = await channels.deployment_list.get()
    if deployments.error is not None:
        if is_not_found(deployments.error):
            logger.info("Deployments are not supported by the server, returning an empty list")
            return DeploymentList(list_meta=ListMeta(total_items=0))
        raise deployments.error

    pods = await channels.pod_list.get()
    if pods.error is not None:
        raise pods.error

    events = await channels.event_list.get()
    if events.error is not None:
        raise events.error

    return create_deployment_list(deployments.items, pods.items, events.items, ds_query)


async def get_deployment_list(
    core_v1: client.CoreV1Api,
    apps_v1: client.AppsV1Api,
    ns_query: NamespaceQuery,
    ds_query: Optional[DataSelectQuery],
) -> DeploymentList:
    """List deployments of the queried namespaces

    Raises:
        ApiException: the deployment (other than 404), pod or event list failed
    """
    logger.info("Getting list of all deployments in the cluster")

    channels = get_deployment_list_channels(core_v1, apps_v1, ns_query)
    return await get_deployment_list_from_channels(channels, ds_query)


__all__ = [
    "DeploymentCell",
    "get_container_images",
    "to_deployment",
    "create_deployment_list",
    "get_deployment_list_from_channels",
    "get_deployment_list",
]
