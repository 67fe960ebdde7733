# Core module - configuration, kubernetes clients
from .config import settings
from .kubernetes import get_k8s_clients, describe_connection, is_not_found

__all__ = [
    'settings',
    'get_k8s_clients',
    'describe_connection',
    'is_not_found',
]
