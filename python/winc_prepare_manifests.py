#!/usr/bin/env python3
"""
Manifest builders for the Windows Containers disconnected preparation tool
Core resources are built as kubernetes client models, OpenShift image resources as dicts
"""

from typing import Any, Dict

from kubernetes import client

from winc_prepare_config import (
    CONFIGMAP_NAME,
    IMAGESTREAM_NAME,
    IMAGESTREAM_TAG,
    LINUX_DEPLOYMENT_NAME,
    WINDOWS_DEPLOYMENT_NAME,
    Config,
)

NAMESPACE_LABELS = {
    'security.openshift.io/scc.podSecurityLabelSync': 'false',
    'pod-security.kubernetes.io/enforce': 'privileged',
}

WINDOWS_SCRIPT = (
    "while($true) {\n"
    "  Write-Host \"Windows container is running...\"\n"
    "  Start-Sleep -Seconds 30\n"
    "}\n"
)

WINDOWS_COMMAND = ["pwsh.exe"]
WINDOWS_ARGS = [
    "-Command",
    "while($true) { Write-Host 'Windows container is running...'; Start-Sleep -Seconds 30 }",
]


def build_namespace(name: str) -> client.V1Namespace:
    return client.V1Namespace(
        metadata=client.V1ObjectMeta(name=name, labels=dict(NAMESPACE_LABELS))
    )


def build_namespace_label_patch() -> Dict[str, Any]:
    """Merge patch that overwrites the pod security labels"""
    return {"metadata": {"labels": dict(NAMESPACE_LABELS)}}


def build_winc_test_configmap(cfg: Config) -> client.V1ConfigMap:
    """ConfigMap consumed by the Windows Containers e2e suite"""
    return client.V1ConfigMap(
        metadata=client.V1ObjectMeta(name=CONFIGMAP_NAME, namespace=cfg.namespace),
        data={
            "linux_container_disconnected_image": cfg.linux_container_image,
            "primary_windows_container_disconnected_image": cfg.primary_windows_container_disconnected_image,
            "primary_windows_container_image": cfg.windows_source_image,
            "primary_windows_image": cfg.primary_windows_image,
            "windows.ps1": WINDOWS_SCRIPT,
        }
    )


def build_imagestream(namespace: str) -> Dict[str, Any]:
    return {
        "apiVersion": "image.openshift.io/v1",
        "kind": "ImageStream",
        "metadata": {
            "name": IMAGESTREAM_NAME,
            "namespace": namespace
        }
    }


def build_imagestream_import(namespace: str, source_image: str) -> Dict[str, Any]:
    """Equivalent of ``oc import-image powershell:latest --from=<source> --confirm``"""
    return {
        "apiVersion": "image.openshift.io/v1",
        "kind": "ImageStreamImport",
        "metadata": {
            "name": IMAGESTREAM_NAME,
            "namespace": namespace
        },
        "spec": {
            "import": True,
            "images": [
                {
                    "from": {"kind": "DockerImage", "name": source_image},
                    "to": {"name": IMAGESTREAM_TAG},
                    "referencePolicy": {"type": "Source"}
                }
            ]
        }
    }


def _workload(name: str, namespace: str, replicas: int, os_name: str,
              container: client.V1Container, pull_secret: str,
              tolerations=None, volumes=None) -> client.V1Deployment:
    return client.V1Deployment(
        api_version="apps/v1",
        kind="Deployment",
        metadata=client.V1ObjectMeta(name=name, namespace=namespace),
        spec=client.V1DeploymentSpec(
            replicas=replicas,
            selector=client.V1LabelSelector(match_labels={'app': name}),
            template=client.V1PodTemplateSpec(
                metadata=client.V1ObjectMeta(labels={'app': name}),
                spec=client.V1PodSpec(
                    node_selector={'kubernetes.io/os': os_name},
                    tolerations=tolerations,
                    image_pull_secrets=[client.V1LocalObjectReference(name=pull_secret)],
                    containers=[container],
                    volumes=volumes
                )
            )
        )
    )


def build_windows_deployment(cfg: Config) -> client.V1Deployment:
    container = client.V1Container(
        name=WINDOWS_DEPLOYMENT_NAME,
        image=cfg.windows_workload_image,
        command=list(WINDOWS_COMMAND),
        args=list(WINDOWS_ARGS),
        ports=[client.V1ContainerPort(container_port=80)],
        volume_mounts=[client.V1VolumeMount(name="config-volume", mount_path="/config")]
    )
    return _workload(
        WINDOWS_DEPLOYMENT_NAME,
        cfg.namespace,
        cfg.windows_replicas,
        'windows',
        container,
        cfg.image_pull_secret,
        tolerations=[client.V1Toleration(key="os", value="Windows", effect="NoSchedule")],
        volumes=[client.V1Volume(
            name="config-volume",
            config_map=client.V1ConfigMapVolumeSource(name=CONFIGMAP_NAME)
        )]
    )


def build_linux_deployment(cfg: Config) -> client.V1Deployment:
    container = client.V1Container(
        name=LINUX_DEPLOYMENT_NAME,
        image=cfg.linux_container_image,
        ports=[client.V1ContainerPort(container_port=8080)]
    )
    return _workload(
        LINUX_DEPLOYMENT_NAME,
        cfg.namespace,
        cfg.linux_replicas,
        'linux',
        container,
        cfg.image_pull_secret
    )
