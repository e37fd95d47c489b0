"""
Shared pytest fixtures for the Windows Containers preparation tool.

The tool fixture replaces the Kubernetes API objects with MagicMocks that
answer like a healthy disconnected cluster; tests override single calls.
"""

import os
import sys
from unittest.mock import MagicMock

import pytest
from kubernetes import client
from kubernetes.client.rest import ApiException

# Add the module directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "python"))

from winc_disconnected_prepare import WincDisconnectedPrepareTool  # noqa: E402
from winc_prepare_config import Config  # noqa: E402

CONFIG_ENV_VARS = [
    "NAMESPACE", "REGISTRY_HOST", "INTERNAL_REGISTRY", "WINDOWS_SOURCE_IMAGE",
    "PRIMARY_WINDOWS_IMAGE", "IMAGE_PULL_SECRET", "WINDOWS_REPLICAS", "LINUX_REPLICAS",
    "POLL_MAX_ATTEMPTS", "POLL_INTERVAL", "NODE_READY_TIMEOUT", "NODE_POLL_INTERVAL",
    "NAMESPACE_READY_TIMEOUT", "SKIP_NODE_CHECK", "LOG_FILE", "LOG_LEVEL",
    "K8S_VERIFY", "OCP_API_VERIFY", "VERIFY_SSL", "KUBECONFIG", "K8S_CA_CERT", "REQUESTS_CA_BUNDLE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test from an empty configuration environment"""
    for var in CONFIG_ENV_VARS:
        # setenv first so monkeypatch restores the variable even if a .env file sets it
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)


def api_error(status: int, reason: str = "") -> ApiException:
    return ApiException(status=status, reason=reason or str(status))


def make_node(name: str, ready: str = "True") -> client.V1Node:
    return client.V1Node(
        metadata=client.V1ObjectMeta(name=name),
        status=client.V1NodeStatus(conditions=[
            client.V1NodeCondition(type="MemoryPressure", status="False"),
            client.V1NodeCondition(type="Ready", status=ready),
        ])
    )


def make_deployment(name: str, ready_replicas) -> client.V1Deployment:
    return client.V1Deployment(
        metadata=client.V1ObjectMeta(name=name),
        status=client.V1DeploymentStatus(ready_replicas=ready_replicas)
    )


def windows_machinesets(replicas: int = 2) -> dict:
    return {"items": [{
        "metadata": {"name": "winworker-abc12"},
        "spec": {"replicas": replicas},
    }]}


def imagestream_import_result(status: str = "Success", message: str = "") -> dict:
    return {"status": {"images": [{"status": {"status": status, "message": message}}]}}


def imagestream_with_tags() -> dict:
    return {
        "metadata": {"name": "powershell"},
        "status": {"tags": [{
            "tag": "latest",
            "items": [{"dockerImageReference": "mcr.microsoft.com/powershell@sha256:abc"}],
        }]},
    }


@pytest.fixture
def config(tmp_path):
    cfg = Config()
    cfg.log_file = str(tmp_path / "winc_test.log")
    cfg.poll_interval = 0
    cfg.node_poll_interval = 0
    cfg.node_ready_timeout = 60
    cfg.namespace_ready_timeout = 5
    return cfg


@pytest.fixture
def tool(config, monkeypatch):
    """Tool wired to a healthy mocked cluster"""
    def fake_setup(self):
        self.api_client = client.ApiClient()
        self.core_v1 = MagicMock()
        self.apps_v1 = MagicMock()
        self.custom_objects = MagicMock()

    monkeypatch.setattr(WincDisconnectedPrepareTool, "setup_kubernetes_clients", fake_setup)
    instance = WincDisconnectedPrepareTool(config)
    instance.oc = MagicMock()
    instance.oc.get_nodes_wide.return_value = "NAME  STATUS\nwinworker-1  Ready\n"

    core = instance.core_v1
    core.read_namespace.return_value = client.V1Namespace(
        metadata=client.V1ObjectMeta(name=config.namespace),
        status=client.V1NamespaceStatus(phase="Active")
    )
    core.read_namespaced_config_map.side_effect = api_error(404, "Not Found")
    core.create_namespaced_config_map.side_effect = lambda namespace, body: body
    core.replace_namespaced_config_map.side_effect = lambda name, namespace, body: body
    core.list_node.return_value = client.V1NodeList(items=[make_node("winworker-1"), make_node("winworker-2")])

    def create_custom(group, version, namespace, plural, body):
        if plural == "imagestreamimports":
            return imagestream_import_result()
        return body

    objects = instance.custom_objects
    objects.list_namespaced_custom_object.return_value = windows_machinesets()
    objects.create_namespaced_custom_object.side_effect = create_custom
    objects.get_namespaced_custom_object.return_value = imagestream_with_tags()

    expected = {"win-webserver": config.windows_replicas, "linux-webserver": config.linux_replicas}
    instance.apps_v1.read_namespaced_deployment.side_effect = (
        lambda name, namespace: make_deployment(name, expected[name])
    )
    return instance
