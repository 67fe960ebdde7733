"""
Pod business logic
Match pods to the workload that owns them and summarize their state
"""

from typing import Dict, List, Optional

from kubernetes import client

from deployment_dashboard.models.deployment import PodInfo


def pod_matches_selector(pod: client.V1Pod, selector: Optional[Dict[str, str]]) -> bool:
    """True when every selector key/value pair is present in the pod labels

    Extra pod labels are ignored. An empty selector matches every pod.
    """
    labels = pod.metadata.labels or {}
    for key, value in (selector or {}).items():
        if labels.get(key) != value:
            return False
    return True


def filter_namespaced_pods_by_selector(
    pods: List[client.V1Pod], namespace: str, selector: Optional[Dict[str, str]]
) -> List[client.V1Pod]:
    """Pods of one namespace matched by a label selector

    Args:
        pods: pods from every fetched namespace
        namespace: namespace of the owning workload
        selector: the workload's matchLabels

    Returns:
        list: matching pods in input order
    """
    return [
        pod for pod in pods
        if pod.metadata.namespace == namespace and pod_matches_selector(pod, selector)
    ]


def get_pod_info(current: Optional[int], desired: Optional[int], pods: List[client.V1Pod]) -> PodInfo:
    """Build the PodInfo aggregate of a workload

    Replica counts come from the workload itself; the matched pods only give
    the phase breakdown.

    Args:
        current: observed replicas (status.replicas)
        desired: desired replicas (spec.replicas)
        pods: pods matched to the workload
    """
    result = PodInfo(current=current or 0, desired=desired or 0)

    for pod in pods:
        phase = pod.status.phase if pod.status else None
        if phase == "Running":
            result.running += 1
        elif phase == "Pending":
            result.pending += 1
        elif phase == "Failed":
            result.failed += 1

    return result


__all__ = [
    "pod_matches_selector",
    "filter_namespaced_pods_by_selector",
    "get_pod_info",
]
