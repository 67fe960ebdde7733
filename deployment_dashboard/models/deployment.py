"""
Deployment list Pydantic models
Presentation view of a Deployment plus the pods and warnings correlated to it
"""

from typing import Optional, List, Dict
from pydantic import BaseModel


RESOURCE_KIND_DEPLOYMENT = "deployment"


class ObjectMeta(BaseModel):
    """Identity metadata of a resource"""
    name: str
    namespace: Optional[str] = None
    labels: Dict[str, str] = {}
    annotations: Dict[str, str] = {}
    creation_timestamp: Optional[str] = None  # ISO 8601


class TypeMeta(BaseModel):
    """Resource kind"""
    kind: str


class PodInfo(BaseModel):
    """Aggregate information about the pods of one workload"""
    current: int = 0  # observed replicas reported by the workload
    desired: int = 0  # desired replicas from the workload spec
    running: int = 0
    pending: int = 0
    failed: int = 0
    warnings: List[str] = []


class Deployment(BaseModel):
    """Deployment view model"""
    object_meta: ObjectMeta
    type_meta: TypeMeta
    pods: PodInfo
    container_images: List[str] = []


class ListMeta(BaseModel):
    """List metadata for client-side pagination"""
    total_items: int = 0


class DeploymentList(BaseModel):
    """Deployment list response"""
    list_meta: ListMeta
    deployments: List[Deployment] = []


__all__ = [
    "RESOURCE_KIND_DEPLOYMENT",
    "ObjectMeta",
    "TypeMeta",
    "PodInfo",
    "Deployment",
    "ListMeta",
    "DeploymentList",
]
