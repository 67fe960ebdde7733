"""
Resource channels
Concurrent fan-in of the deployment, pod and event lists.

Every list call runs in a worker thread because the kubernetes client is
synchronous. Each call owns a ResourceChannel holding either the items or the
error, so readers decide in which order errors are checked.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from kubernetes import client

from deployment_dashboard.models.dataselect import NamespaceQuery

logger = logging.getLogger(__name__)


@dataclass
class ChannelResult:
    """Result slot of one list call"""
    items: Optional[List[Any]] = None
    error: Optional[BaseException] = None


class ResourceChannel:
    """Single-value future over one list call with a paired error slot"""

    def __init__(self, name: str, task: "asyncio.Task[ChannelResult]"):
        self.name = name
        self._task = task

    async def get(self) -> ChannelResult:
        return await self._task

    def done(self) -> bool:
        return self._task.done()


@dataclass
class ResourceChannels:
    """Channels needed to build a deployment list"""
    deployment_list: ResourceChannel
    pod_list: ResourceChannel
    event_list: ResourceChannel


async def _list_resource(
    name: str,
    list_all: Callable[..., Any],
    list_namespaced: Callable[..., Any],
    namespace_query: NamespaceQuery,
) -> ChannelResult:
    namespace = namespace_query.to_request_param()
    try:
        if namespace is not None:
            response = await asyncio.to_thread(list_namespaced, namespace)
        else:
            response = await asyncio.to_thread(list_all)
    except Exception as e:
        logger.error(f"Failed to list {name}: {e}")
        return ChannelResult(error=e)

    items = [item for item in (response.items or []) if namespace_query.matches(item.metadata.namespace)]
    logger.debug(f"Listed {len(items)} {name}")
    return ChannelResult(items=items)


def get_deployment_list_channel(apps_v1: client.AppsV1Api, namespace_query: NamespaceQuery) -> ResourceChannel:
    """Start listing deployments and return the channel for the result"""
    task = asyncio.create_task(_list_resource(
        "deployments",
        apps_v1.list_deployment_for_all_namespaces,
        apps_v1.list_namespaced_deployment,
        namespace_query,
    ))
    return ResourceChannel("deployments", task)


def get_pod_list_channel(core_v1: client.CoreV1Api, namespace_query: NamespaceQuery) -> ResourceChannel:
    """Start listing pods and return the channel for the result"""
    task = asyncio.create_task(_list_resource(
        "pods",
        core_v1.list_pod_for_all_namespaces,
        core_v1.list_namespaced_pod,
        namespace_query,
    ))
    return ResourceChannel("pods", task)


def get_event_list_channel(core_v1: client.CoreV1Api, namespace_query: NamespaceQuery) -> ResourceChannel:
    """Start listing events and return the channel for the result"""
    task = asyncio.create_task(_list_resource(
        "events",
        core_v1.list_event_for_all_namespaces,
        core_v1.list_namespaced_event,
        namespace_query,
    ))
    return ResourceChannel("events", task)


def get_deployment_list_channels(
    core_v1: client.CoreV1Api,
    apps_v1: client.AppsV1Api,
    namespace_query: NamespaceQuery,
) -> ResourceChannels:
    """Start the three list calls concurrently

    Must be called from a running event loop.
    """
    return ResourceChannels(
        deployment_list=get_deployment_list_channel(apps_v1, namespace_query),
        pod_list=get_pod_list_channel(core_v1, namespace_query),
        event_list=get_event_list_channel(core_v1, namespace_query),
    )


__all__ = [
    "ChannelResult",
    "ResourceChannel",
    "ResourceChannels",
    "get_deployment_list_channel",
    "get_pod_list_channel",
    "get_event_list_channel",
    "get_deployment_list_channels",
]
