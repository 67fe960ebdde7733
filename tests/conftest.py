"""
Pytest configuration and fixtures
"""
from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator, Dict, Generator, List, Optional
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from httpx import AsyncClient, ASGITransport
from kubernetes import client as k8s


BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


# ============================================
# App Fixtures
# ============================================

@pytest.fixture(scope="session")
def app():
    """Create FastAPI app for testing"""
    from deployment_dashboard.main import app as fastapi_app
    return fastapi_app


@pytest.fixture
def client(app) -> Generator:
    """Synchronous test client"""
    with TestClient(app) as c:
        yield c


@pytest.fixture
async def async_client(app) -> AsyncGenerator:
    """Asynchronous test client"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ============================================
# Mock Fixtures
# ============================================

@pytest.fixture
def mock_k8s_clients():
    """Mock Kubernetes clients seen by the routers"""
    core_v1 = MagicMock()
    apps_v1 = MagicMock()
    with patch("deployment_dashboard.routers.deployments.get_k8s_clients") as deployments_mock, \
            patch("deployment_dashboard.routers.health.get_k8s_clients") as health_mock:
        deployments_mock.return_value = (core_v1, apps_v1)
        health_mock.return_value = (core_v1, apps_v1)
        yield {
            "core_v1": core_v1,
            "apps_v1": apps_v1,
            "mock": deployments_mock,
        }


# ============================================
# Data Fixtures
# ============================================

def _make_deployment(
    name: str,
    namespace: str = "default",
    selector: Optional[Dict[str, str]] = None,
    desired: Optional[int] = 1,
    observed: Optional[int] = 1,
    images: Optional[List[str]] = None,
    created_minutes: int = 0,
) -> k8s.V1Deployment:
    selector = {"app": name} if selector is None else selector
    images = images if images is not None else [f"registry.local/{name}:latest"]
    return k8s.V1Deployment(
        metadata=k8s.V1ObjectMeta(
            name=name,
            namespace=namespace,
            labels={"app": name},
            creation_timestamp=BASE_TIME + timedelta(minutes=created_minutes),
        ),
        spec=k8s.V1DeploymentSpec(
            replicas=desired,
            selector=k8s.V1LabelSelector(match_labels=selector),
            template=k8s.V1PodTemplateSpec(
                metadata=k8s.V1ObjectMeta(labels=selector),
                spec=k8s.V1PodSpec(containers=[
                    k8s.V1Container(name=f"c{i}", image=image) for i, image in enumerate(images)
                ]),
            ),
        ),
        status=k8s.V1DeploymentStatus(replicas=observed),
    )


def _make_pod(
    name: str,
    namespace: str = "default",
    labels: Optional[Dict[str, str]] = None,
    phase: str = "Running",
) -> k8s.V1Pod:
    return k8s.V1Pod(
        metadata=k8s.V1ObjectMeta(name=name, namespace=namespace, labels=labels or {}),
        status=k8s.V1PodStatus(phase=phase),
    )


def _make_event(
    pod_name: str,
    namespace: str = "default",
    event_type: str = "Warning",
    message: str = "Back-off restarting failed container",
) -> k8s.CoreV1Event:
    return k8s.CoreV1Event(
        metadata=k8s.V1ObjectMeta(name=f"{pod_name}.event", namespace=namespace),
        involved_object=k8s.V1ObjectReference(kind="Pod", name=pod_name, namespace=namespace),
        type=event_type,
        message=message,
    )


@pytest.fixture
def make_deployment():
    """Factory for V1Deployment objects"""
    return _make_deployment


@pytest.fixture
def make_pod():
    """Factory for V1Pod objects"""
    return _make_pod


@pytest.fixture
def make_event():
    """Factory for CoreV1Event objects"""
    return _make_event


@pytest.fixture
def sample_cluster():
    """One deployment with two owned pods, one unrelated pod and their events"""
    deployments = [
        _make_deployment("web", namespace="ns", selector={"app": "x"}, desired=3, observed=2,
                         images=["nginx:1.25", "sidecar:1.0", "nginx:1.25"]),
    ]
    pods = [
        _make_pod("p1", namespace="ns", labels={"app": "x"}, phase="Running"),
        _make_pod("p2", namespace="ns", labels={"app": "x"}, phase="Pending"),
        _make_pod("p3", namespace="ns", labels={"app": "y"}, phase="Running"),
    ]
    events = [
        _make_event("p2", namespace="ns", message="0/3 nodes are available"),
        _make_event("p3", namespace="ns", message="unrelated warning"),
        _make_event("p1", namespace="ns", event_type="Normal", message="Started container"),
    ]
    return {"deployments": deployments, "pods": pods, "events": events}


def list_of(kind, items):
    """Wrap items the way the list_* API calls return them"""
    return kind(items=items)


@pytest.fixture
def k8s_lists():
    """Set list_* return values on mocked Kubernetes APIs"""
    def _apply(core_v1, apps_v1, deployments=(), pods=(), events=()):
        deployment_list = list_of(k8s.V1DeploymentList, list(deployments))
        pod_list = list_of(k8s.V1PodList, list(pods))
        event_list = list_of(k8s.CoreV1EventList, list(events))

        apps_v1.list_deployment_for_all_namespaces.return_value = deployment_list
        apps_v1.list_namespaced_deployment.return_value = deployment_list
        core_v1.list_pod_for_all_namespaces.return_value = pod_list
        core_v1.list_namespaced_pod.return_value = pod_list
        core_v1.list_event_for_all_namespaces.return_value = event_list
        core_v1.list_namespaced_event.return_value = event_list

    return _apply
