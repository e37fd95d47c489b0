#!/usr/bin/env python3
"""
Configuration for the Windows Containers disconnected preparation tool
Values come from the environment (optionally a .env file) and are overridden by CLI flags
"""

import os
from typing import Optional

from dotenv import load_dotenv

DEFAULT_REGISTRY_HOST = 'bastion.mirror-registry.qe.devcluster.openshift.com:5000'
DEFAULT_INTERNAL_REGISTRY = 'image-registry.openshift-image-registry.svc:5000'
DEFAULT_WINDOWS_SOURCE_IMAGE = 'mcr.microsoft.com/powershell:lts-nanoserver-ltsc2022'
DEFAULT_PRIMARY_WINDOWS_IMAGE = 'windows-golden-images/windows-server-2022-template-qe'

CONFIGMAP_NAME = 'winc-test-config'
IMAGESTREAM_NAME = 'powershell'
IMAGESTREAM_TAG = 'latest'
WINDOWS_DEPLOYMENT_NAME = 'win-webserver'
LINUX_DEPLOYMENT_NAME = 'linux-webserver'


def _env_bool(name: str, default: str = 'false') -> bool:
    return os.getenv(name, default).strip().lower() in ('true', '1', 'yes')


class Config:
    """Configuration class"""
    def __init__(self, env_file: Optional[str] = None):
        if env_file:
            load_dotenv(env_file, override=False)

        self.namespace = os.getenv('NAMESPACE', 'winc-test')
        self.registry_host = os.getenv('REGISTRY_HOST', DEFAULT_REGISTRY_HOST)
        # Set when --registry-host is given; skips lookup in the existing ConfigMap
        self.registry_host_pinned = False
        self.internal_registry = os.getenv('INTERNAL_REGISTRY', DEFAULT_INTERNAL_REGISTRY)
        self.windows_source_image = os.getenv('WINDOWS_SOURCE_IMAGE', DEFAULT_WINDOWS_SOURCE_IMAGE)
        self.primary_windows_image = os.getenv('PRIMARY_WINDOWS_IMAGE', DEFAULT_PRIMARY_WINDOWS_IMAGE)
        self.image_pull_secret = os.getenv('IMAGE_PULL_SECRET', 'local-registry-secret')

        # Workloads
        self.windows_replicas = int(os.getenv('WINDOWS_REPLICAS', '5'))
        self.linux_replicas = int(os.getenv('LINUX_REPLICAS', '1'))

        # Fixed-interval polling
        self.poll_max_attempts = int(os.getenv('POLL_MAX_ATTEMPTS', '15'))
        self.poll_interval = float(os.getenv('POLL_INTERVAL', '20'))
        self.node_ready_timeout = int(os.getenv('NODE_READY_TIMEOUT', str(515 * 60)))
        self.node_poll_interval = float(os.getenv('NODE_POLL_INTERVAL', '30'))
        self.namespace_ready_timeout = int(os.getenv('NAMESPACE_READY_TIMEOUT', '60'))
        self.skip_node_check = _env_bool('SKIP_NODE_CHECK')

        # Logging
        self.log_file = os.getenv('LOG_FILE', 'winc_disconnected_prepare.log')
        self.log_level = os.getenv('LOG_LEVEL', 'INFO')

        # Cluster access
        self.k8s_verify_ssl: Optional[bool] = self._get_verify_ssl_setting()
        self.kubeconfig_path: Optional[str] = os.getenv('KUBECONFIG')
        self.k8s_ca_cert_path: Optional[str] = None

    def _get_verify_ssl_setting(self) -> Optional[bool]:
        """Get SSL verification setting from environment"""
        for env_var in ['K8S_VERIFY', 'OCP_API_VERIFY', 'VERIFY_SSL']:
            val = os.getenv(env_var)
            if val is not None:
                val_lower = val.strip().lower()
                if val_lower in ('true', '1', 'yes'):
                    return True
                if val_lower in ('false', '0', 'no'):
                    return False
        return None  # Not set, will auto-detect

    @property
    def linux_container_image(self) -> str:
        return f"{self.registry_host}/hello-openshift:multiarch-winc"

    @property
    def primary_windows_container_disconnected_image(self) -> str:
        return f"{self.registry_host}/powershell:lts-nanoserver-ltsc2022"

    @property
    def windows_workload_image(self) -> str:
        """Image pulled by the Windows workload from the in-cluster registry"""
        return f"{self.internal_registry}/{self.namespace}/{IMAGESTREAM_NAME}:{IMAGESTREAM_TAG}"
