"""
Event business logic
Warning events of a set of pods
"""

from typing import List

from kubernetes import client

EVENT_TYPE_WARNING = "Warning"


def is_warning_event(event: client.CoreV1Event) -> bool:
    return event.type == EVENT_TYPE_WARNING


def get_pods_event_warnings(events: List[client.CoreV1Event], pods: List[client.V1Pod]) -> List[str]:
    """Messages of warning events that concern one of the given pods

    Pods are identified by namespace and name. Messages keep the input event
    order and repeats are kept.
    """
    pod_keys = {(pod.metadata.namespace, pod.metadata.name) for pod in pods}
    if not pod_keys:
        return []

    warnings = []
    for event in events:
        if not is_warning_event(event):
            continue
        ref = event.involved_object
        if ref is None or (ref.namespace, ref.name) not in pod_keys:
            continue
        warnings.append(event.message or "")

    return warnings


__all__ = ["EVENT_TYPE_WARNING", "is_warning_event", "get_pods_event_warnings"]
