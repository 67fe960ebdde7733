"""
Kubernetes client initialization and utilities

The deployment list only needs read access to Deployments, Pods and Events.
Inside a Pod the ServiceAccount token is used; anywhere else, or when the
token cannot be read, the local kubeconfig is.
"""
import logging
import os
from functools import lru_cache
from typing import Dict, Optional, Tuple

from kubernetes import client, config
from kubernetes.client.rest import ApiException

logger = logging.getLogger(__name__)

CONFIG_SOURCE_IN_CLUSTER = "in-cluster"
CONFIG_SOURCE_KUBECONFIG = "kubeconfig"


def in_cluster_host() -> Optional[str]:
    """API server host injected into every Pod, None outside a cluster"""
    return os.getenv("KUBERNETES_SERVICE_HOST")


@lru_cache(maxsize=None)
def load_cluster_config() -> str:
    """Load the client configuration once and return where it came from

    Raises:
        RuntimeError: neither the in-cluster nor the kubeconfig source works
    """
    if in_cluster_host():
        try:
            config.load_incluster_config()
            logger.info("Deployments will be listed with the Pod ServiceAccount")
            return CONFIG_SOURCE_IN_CLUSTER
        except config.ConfigException as e:
            logger.warning(f"ServiceAccount config unusable ({e}), trying kubeconfig")

    try:
        config.load_kube_config()
    except config.ConfigException as e:
        logger.error(f"No usable cluster config: {e}")
        raise RuntimeError(f"Cannot reach a cluster to list deployments: {e}") from e

    logger.info("Deployments will be listed with the local kubeconfig")
    return CONFIG_SOURCE_KUBECONFIG


def get_k8s_clients() -> Tuple[client.CoreV1Api, client.AppsV1Api]:
    """Initialize and return the Kubernetes API clients

    Returns:
        tuple: (CoreV1Api, AppsV1Api)
        - CoreV1Api: Pods, Events
        - AppsV1Api: Deployments
    """
    load_cluster_config()

    return client.CoreV1Api(), client.AppsV1Api()


def describe_connection() -> Dict[str, str]:
    """Where the API server is reached from, for the health endpoint"""
    host = in_cluster_host()
    if host is None:
        return {"environment": "local", "config_source": CONFIG_SOURCE_KUBECONFIG}
    return {
        "environment": "in-cluster",
        "config_source": CONFIG_SOURCE_IN_CLUSTER,
        "kubernetes_host": host,
        "kubernetes_port": os.getenv("KUBERNETES_SERVICE_PORT", "443"),
    }


def is_not_found(error: BaseException) -> bool:
    """True when the API server answered 404 for the request"""
    return isinstance(error, ApiException) and error.status == 404


__all__ = [
    'CONFIG_SOURCE_IN_CLUSTER',
    'CONFIG_SOURCE_KUBECONFIG',
    'load_cluster_config',
    'get_k8s_clients',
    'describe_connection',
    'is_not_found',
    'ApiException',
]
