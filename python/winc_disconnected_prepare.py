#!/usr/bin/env python3
"""
Windows Containers Disconnected Cluster Preparation Tool
Smoke-tests a disconnected OpenShift cluster with Windows and Linux workers:
checks Windows node readiness, prepares the test namespace, ConfigMap and
PowerShell ImageStream, then deploys and validates one Windows and one Linux workload

SSL/TLS Handling:
- Clears REQUESTS_CA_BUNDLE while the tool runs to prevent PEM lib errors
- Validates CA certificate files before using them
- Falls back to unverified TLS when the API probe fails with an SSL error
- Supports environment variable overrides: K8S_VERIFY, OCP_API_VERIFY, K8S_CA_CERT
"""

import argparse
import asyncio
import logging
import os
import ssl
import subprocess
import sys
import time
from datetime import datetime
from typing import Any, Dict, List, Optional

import urllib3
import yaml
from kubernetes import client, config
from kubernetes.client.rest import ApiException

import winc_prepare_manifests as manifests
from winc_prepare_config import (
    CONFIGMAP_NAME,
    IMAGESTREAM_NAME,
    LINUX_DEPLOYMENT_NAME,
    WINDOWS_DEPLOYMENT_NAME,
    Config,
)
from winc_prepare_utils import (
    ClusterStepError,
    Colors,
    OcCommandRunner,
    poll_until,
)

urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

MACHINE_API_NAMESPACE = 'openshift-machine-api'
WINDOWS_MACHINESET_SELECTOR = 'machine.openshift.io/os-id=Windows'
WINDOWS_NODE_SELECTOR = 'kubernetes.io/os=windows'


class WincDisconnectedPrepareTool:
    """Sequential preparation and smoke test of a disconnected Windows cluster"""

    def __init__(self, config: Config):
        self.config = config
        self.setup_logging()
        self.original_ca_bundle: Optional[str] = None
        self.oc = OcCommandRunner(kubeconfig=config.kubeconfig_path)
        self.setup_kubernetes_clients()

    def setup_logging(self):
        """Setup logging configuration"""
        log_level = getattr(logging, self.config.log_level.upper(), logging.INFO)
        logging.basicConfig(
            level=log_level,
            format='%(asctime)s - %(levelname)s - [%(funcName)s] - %(message)s',
            handlers=[
                logging.FileHandler(self.config.log_file),
                logging.StreamHandler(sys.stdout)
            ]
        )
        self.logger = logging.getLogger(__name__)

    def setup_kubernetes_clients(self):
        """Setup Kubernetes client configuration with SSL fallback"""
        self.original_ca_bundle = os.environ.pop('REQUESTS_CA_BUNDLE', None)
        if self.original_ca_bundle:
            self.log_info(f"Temporarily cleared REQUESTS_CA_BUNDLE: {self.original_ca_bundle}", "CONFIG")

        try:
            self._configure_kubernetes_clients()
        except Exception:
            self.restore_environment()
            raise

    def _load_kube_config(self):
        """Explicit kubeconfig, else in-cluster config, else the default kubeconfig"""
        try:
            if self.config.kubeconfig_path:
                self.log_info(f"Loading kubeconfig from: {self.config.kubeconfig_path}", "CONFIG")
                config.load_kube_config(config_file=self.config.kubeconfig_path)
            else:
                config.load_incluster_config()
                self.log_info("Using in-cluster Kubernetes configuration", "CONFIG")
        except config.ConfigException:
            try:
                config.load_kube_config()
                self.log_info("Using default kubeconfig file", "CONFIG")
            except config.ConfigException as e:
                raise ClusterStepError(f"Failed to load Kubernetes configuration: {e}") from e

    def _configure_kubernetes_clients(self):
        self._load_kube_config()
        k8s_conf = client.Configuration.get_default_copy()

        if self.config.k8s_verify_ssl is not None:
            k8s_conf.verify_ssl = self.config.k8s_verify_ssl
            if not self.config.k8s_verify_ssl:
                self._disable_tls_verification(k8s_conf)
            self.log_info(f"SSL verification set via environment: {self.config.k8s_verify_ssl}", "CONFIG")

        ca_path = getattr(k8s_conf, 'ssl_ca_cert', None)
        if ca_path:
            if self._is_ca_file_valid(ca_path):
                self.config.k8s_ca_cert_path = ca_path
                self.log_info(f"Using valid CA cert from config: {ca_path}", "CONFIG")
            elif self.config.k8s_verify_ssl is not True:
                self.log_warn(f"CA cert {ca_path} is invalid, disabling SSL verification", "CONFIG")
                self._disable_tls_verification(k8s_conf)
                self.config.k8s_verify_ssl = False

        env_ca = os.getenv('K8S_CA_CERT')
        if env_ca and self._is_ca_file_valid(env_ca):
            self.config.k8s_ca_cert_path = env_ca
            k8s_conf.ssl_ca_cert = env_ca
            self.log_info(f"Using CA cert from K8S_CA_CERT env: {env_ca}", "CONFIG")

        self._build_api_clients(k8s_conf)
        self._ensure_k8s_api_connectivity()
        self.log_info("Kubernetes API connectivity verified successfully", "CONFIG")

    def _build_api_clients(self, k8s_conf: client.Configuration):
        self.api_client = client.ApiClient(configuration=k8s_conf)
        self.core_v1 = client.CoreV1Api(self.api_client)
        self.apps_v1 = client.AppsV1Api(self.api_client)
        self.custom_objects = client.CustomObjectsApi(self.api_client)

    @staticmethod
    def _disable_tls_verification(k8s_conf: client.Configuration):
        k8s_conf.verify_ssl = False
        k8s_conf.assert_hostname = False
        k8s_conf.ssl_ca_cert = None

    def _is_ca_file_valid(self, ca_path: str) -> bool:
        """Validate a CA bundle by attempting to load it with ssl"""
        if not os.path.isfile(ca_path):
            return False
        try:
            ctx = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
            ctx.load_verify_locations(cafile=ca_path)
            return True
        except (ssl.SSLError, OSError) as e:
            self.logger.debug(f"CA validation failed for {ca_path}: {e}")
            return False

    def _ensure_k8s_api_connectivity(self) -> None:
        """Probe the API; on SSL errors retry once with TLS verification disabled.

        The fallback is skipped when verification was explicitly forced.
        """
        try:
            client.VersionApi(self.api_client).get_code()
            return
        except Exception as probe_err:
            err_text = str(probe_err)
            ssl_error_indicators = (
                "PEM lib",
                "CERTIFICATE_VERIFY_FAILED",
                "SSLError",
                "certificate verify failed",
                "[X509]",
            )
            if self.config.k8s_verify_ssl is True or not any(ind in err_text for ind in ssl_error_indicators):
                self.log_error(f"Kubernetes API connectivity check failed: {err_text}", "CONFIG")
                raise

            self.log_warn(
                f"Kubernetes API SSL verification failed: {err_text[:200]}... "
                "Disabling TLS verification as fallback (set K8S_VERIFY=true to force verification)",
                "CONFIG"
            )

        k8s_conf_fallback = client.Configuration.get_default_copy()
        self._disable_tls_verification(k8s_conf_fallback)
        self._build_api_clients(k8s_conf_fallback)
        self.config.k8s_verify_ssl = False
        client.VersionApi(self.api_client).get_code()

    def restore_environment(self):
        """Restore REQUESTS_CA_BUNDLE if it was cleared"""
        if self.original_ca_bundle:
            os.environ['REQUESTS_CA_BUNDLE'] = self.original_ca_bundle
            self.original_ca_bundle = None

    def log_info(self, message: str, component: str = "MAIN"):
        """Enhanced logging"""
        timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        print(f"{Colors.GREEN}[{component}]{Colors.NC} {timestamp} - {message}")
        self.logger.info(f"[{component}] {message}")

    def log_warn(self, message: str, component: str = "MAIN"):
        """Warning logging"""
        timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        print(f"{Colors.YELLOW}[{component}]{Colors.NC} {timestamp} - {message}")
        self.logger.warning(f"[{component}] {message}")

    def log_error(self, message: str, component: str = "MAIN"):
        """Error logging"""
        timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        print(f"{Colors.RED}[{component}]{Colors.NC} {timestamp} - {message}")
        self.logger.error(f"[{component}] {message}")

    # 0. Registry
    async def resolve_disconnected_registry(self) -> str:
        """Pick the mirror registry host, preferring the one recorded in an existing ConfigMap"""
        if self.config.registry_host_pinned:
            return self.config.registry_host

        try:
            existing = await asyncio.to_thread(
                self.core_v1.read_namespaced_config_map,
                name=CONFIGMAP_NAME,
                namespace=self.config.namespace
            )
        except ApiException as e:
            if e.status == 404:
                return self.config.registry_host
            raise

        image = (existing.data or {}).get('primary_windows_container_disconnected_image')
        if image:
            host = image.split('/')[0]
            if host != self.config.registry_host:
                self.log_info(f"Using registry {host} recorded in ConfigMap {CONFIGMAP_NAME}", "REGISTRY")
            self.config.registry_host = host
        return self.config.registry_host

    # 1. Windows nodes
    async def check_windows_nodes(self):
        """Require a scaled Windows machineset and wait for its nodes to be Ready"""
        machinesets = await asyncio.to_thread(
            self.custom_objects.list_namespaced_custom_object,
            group="machine.openshift.io",
            version="v1beta1",
            namespace=MACHINE_API_NAMESPACE,
            plural="machinesets",
            label_selector=WINDOWS_MACHINESET_SELECTOR
        )
        items = machinesets.get('items') or []
        replicas = items[0].get('spec', {}).get('replicas', 0) if items else 0
        if not replicas or replicas < 1:
            raise ClusterStepError("Error: Windows machineset must have at least 1 replica")
        self.log_info(f"Windows machineset {items[0]['metadata']['name']} has {replicas} replicas", "NODES")

        self.log_info("Waiting for Windows nodes to be in Ready state...", "NODES")
        if not await self.wait_for_windows_nodes_ready():
            self.show_windows_nodes()
            raise ClusterStepError("Error: Timeout waiting for Windows nodes to be ready")

    async def wait_for_windows_nodes_ready(self) -> bool:
        deadline = time.time() + self.config.node_ready_timeout

        while True:
            nodes = await asyncio.to_thread(self.core_v1.list_node, label_selector=WINDOWS_NODE_SELECTOR)
            not_ready = [node.metadata.name for node in nodes.items if not self._node_is_ready(node)]
            if nodes.items and not not_ready:
                self.log_info(f"{len(nodes.items)} Windows nodes are Ready", "NODES")
                return True

            if time.time() >= deadline:
                return False
            if nodes.items:
                self.log_info(f"Windows nodes not Ready yet: {', '.join(not_ready)}", "NODES")
            else:
                self.log_info("No Windows nodes registered yet", "NODES")
            await asyncio.sleep(self.config.node_poll_interval)

    @staticmethod
    def _node_is_ready(node) -> bool:
        conditions = node.status.conditions if node.status else None
        for condition in conditions or []:
            if condition.type == 'Ready':
                return condition.status == 'True'
        return False

    def show_windows_nodes(self):
        """Print the wide Windows node listing; failures are only logged"""
        try:
            print(self.oc.get_nodes_wide(WINDOWS_NODE_SELECTOR))
        except (ClusterStepError, OSError, subprocess.SubprocessError) as e:
            self.log_warn(f"Could not list Windows nodes: {e}", "NODES")

    # 2. Namespace
    async def ensure_namespace(self):
        """Create the namespace if needed and overwrite its pod security labels"""
        namespace = self.config.namespace
        self.log_info(f"Ensuring the {namespace} namespace exists...", "NAMESPACE")
        try:
            await asyncio.to_thread(self.core_v1.read_namespace, name=namespace)
            self.log_info(f"Namespace {namespace} already exists", "NAMESPACE")
        except ApiException as e:
            if e.status != 404:
                raise
            self.log_info(f"Namespace {namespace} does not exist. Creating it...", "NAMESPACE")
            try:
                await asyncio.to_thread(
                    self.core_v1.create_namespace,
                    body=manifests.build_namespace(namespace)
                )
            except ApiException as create_e:
                if create_e.status != 409:
                    raise ClusterStepError(f"Failed to create the {namespace} namespace: {create_e.reason}") from create_e

        if not await self.wait_until_namespace_ready(namespace):
            raise ClusterStepError(f"Namespace {namespace} did not become Active")

        await asyncio.to_thread(
            self.core_v1.patch_namespace,
            name=namespace,
            body=manifests.build_namespace_label_patch()
        )
        self.log_info(f"Namespace {namespace} is ready.", "NAMESPACE")

    async def wait_until_namespace_ready(self, namespace_name: str) -> bool:
        """Wait until namespace is Active"""
        deadline = time.time() + self.config.namespace_ready_timeout

        while True:
            try:
                ns = await asyncio.to_thread(self.core_v1.read_namespace, name=namespace_name)
                phase = getattr(getattr(ns, 'status', None), 'phase', None)
                if phase == 'Active':
                    return True
            except ApiException as e:
                if e.status != 404:
                    raise

            if time.time() >= deadline:
                self.log_warn(f"Timeout waiting for namespace {namespace_name}", "NAMESPACE")
                return False
            await asyncio.sleep(0.5)

    async def apply_namespaced(self, create, replace, name: str, body) -> Any:
        """Create the object, replacing it when it already exists"""
        namespace = self.config.namespace
        try:
            return await asyncio.to_thread(create, namespace=namespace, body=body)
        except ApiException as e:
            if e.status != 409:
                raise
        return await asyncio.to_thread(replace, name=name, namespace=namespace, body=body)

    # 3. ConfigMap
    async def create_winc_test_configmap(self):
        self.log_info(f"Creating {CONFIGMAP_NAME} ConfigMap...", "CONFIGMAP")
        await self.ensure_namespace()

        stored = await self.apply_namespaced(
            self.core_v1.create_namespaced_config_map,
            self.core_v1.replace_namespaced_config_map,
            CONFIGMAP_NAME,
            manifests.build_winc_test_configmap(self.config)
        )
        self.log_info("ConfigMap created successfully:", "CONFIGMAP")
        print(self.to_yaml(stored))

    def to_yaml(self, obj) -> str:
        return yaml.safe_dump(self.api_client.sanitize_for_serialization(obj), default_flow_style=False)

    # 4. ImageStream
    async def create_and_import_imagestream(self):
        """Create the PowerShell ImageStream and import the Windows image into it"""
        namespace = self.config.namespace
        self.log_info("Creating and importing ImageStream...", "IMAGESTREAM")

        try:
            await asyncio.to_thread(
                self.custom_objects.create_namespaced_custom_object,
                group="image.openshift.io",
                version="v1",
                namespace=namespace,
                plural="imagestreams",
                body=manifests.build_imagestream(namespace)
            )
        except ApiException as e:
            if e.status != 409:
                raise
            self.log_info(f"ImageStream {IMAGESTREAM_NAME} already exists", "IMAGESTREAM")

        result = await asyncio.to_thread(
            self.custom_objects.create_namespaced_custom_object,
            group="image.openshift.io",
            version="v1",
            namespace=namespace,
            plural="imagestreamimports",
            body=manifests.build_imagestream_import(namespace, self.config.windows_source_image)
        )
        self._check_import_status(result)

        stream = await asyncio.to_thread(
            self.custom_objects.get_namespaced_custom_object,
            group="image.openshift.io",
            version="v1",
            namespace=namespace,
            plural="imagestreams",
            name=IMAGESTREAM_NAME
        )
        for line in self.describe_imagestream_tags(stream):
            self.log_info(line, "IMAGESTREAM")

    def _check_import_status(self, result: Dict[str, Any]):
        images = (result.get('status') or {}).get('images') or []
        if not images:
            raise ClusterStepError(f"Import into ImageStream {IMAGESTREAM_NAME} returned no image status")
        for image in images:
            status = image.get('status') or {}
            if status.get('status') != 'Success':
                raise ClusterStepError(
                    f"Failed to import {self.config.windows_source_image} into "
                    f"{IMAGESTREAM_NAME}: {status.get('message', 'unknown error')}"
                )

    @staticmethod
    def describe_imagestream_tags(stream: Dict[str, Any]) -> List[str]:
        lines = []
        for tag in (stream.get('status') or {}).get('tags') or []:
            items = tag.get('items') or []
            reference = items[0].get('dockerImageReference', '') if items else '<none>'
            lines.append(f"{stream['metadata']['name']}:{tag.get('tag')} -> {reference}")
        return lines

    # 5. Workloads
    async def deployment_ready(self, name: str, expected_replicas: int) -> bool:
        try:
            deployment = await asyncio.to_thread(
                self.apps_v1.read_namespaced_deployment,
                name=name,
                namespace=self.config.namespace
            )
        except ApiException as e:
            if e.status == 404:
                return False
            raise
        status = deployment.status
        ready_replicas = status.ready_replicas if status else None
        if ready_replicas is None:
            return False
        return ready_replicas == expected_replicas

    async def create_windows_workloads(self):
        self.log_info("Creating Windows workloads...", "WINDOWS")
        await self.ensure_namespace()
        await self.apply_namespaced(
            self.apps_v1.create_namespaced_deployment,
            self.apps_v1.replace_namespaced_deployment,
            WINDOWS_DEPLOYMENT_NAME,
            manifests.build_windows_deployment(self.config)
        )

        def progress(attempt: int, max_attempts: int):
            self.log_info(f"Waiting for Windows workload to be ready... ({attempt}/{max_attempts})", "WINDOWS")

        await poll_until(
            lambda: self.deployment_ready(WINDOWS_DEPLOYMENT_NAME, self.config.windows_replicas),
            self.config.poll_max_attempts,
            self.config.poll_interval,
            timeout_message="Timeout: Windows workload is not READY",
            on_retry=progress
        )
        self.log_info("Windows workload is READY", "WINDOWS")

    async def create_linux_workloads(self):
        self.log_info("Creating Linux workloads...", "LINUX")
        await self.ensure_namespace()
        await self.apply_namespaced(
            self.apps_v1.create_namespaced_deployment,
            self.apps_v1.replace_namespaced_deployment,
            LINUX_DEPLOYMENT_NAME,
            manifests.build_linux_deployment(self.config)
        )

        def progress(attempt: int, max_attempts: int):
            self.log_info(f"Linux workload is not READY yet, wait {self.config.poll_interval:g} seconds", "LINUX")

        await poll_until(
            lambda: self.deployment_ready(LINUX_DEPLOYMENT_NAME, self.config.linux_replicas),
            self.config.poll_max_attempts,
            self.config.poll_interval,
            timeout_message="Timeout: Linux workload is not READY",
            on_retry=progress
        )
        self.log_info("Linux workload is READY", "LINUX")

    async def run(self):
        """Run every preparation step in order, stopping at the first failure"""
        start_time = time.time()
        self.log_info("Starting deployment in disconnected environment...", "MAIN")
        registry = await self.resolve_disconnected_registry()
        self.log_info(f"Using disconnected registry: {registry}", "MAIN")

        if self.config.skip_node_check:
            self.log_warn("Skipping Windows node check", "NODES")
        else:
            await self.check_windows_nodes()

        await self.create_winc_test_configmap()
        await self.create_and_import_imagestream()
        await self.create_windows_workloads()
        await self.create_linux_workloads()

        self.log_info(f"Deployment completed successfully in {time.time() - start_time:.2f} seconds.", "MAIN")
        self.show_windows_nodes()


def create_argument_parser():
    """Create argument parser"""
    parser = argparse.ArgumentParser(
        description='Prepare and smoke-test a disconnected OpenShift cluster with Windows workers',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Steps:
  0. Check the Windows machineset and wait for Windows nodes to be Ready
  1. Create the winc-test-config ConfigMap (namespace is created on demand)
  2. Create the powershell ImageStream and import the Windows image
  3. Deploy win-webserver and wait for all replicas to be ready
  4. Deploy linux-webserver and wait for it to be ready

Environment Variables:
  NAMESPACE (default: winc-test)
  REGISTRY_HOST (default: bastion.mirror-registry.qe.devcluster.openshift.com:5000)
  INTERNAL_REGISTRY, WINDOWS_SOURCE_IMAGE, PRIMARY_WINDOWS_IMAGE, IMAGE_PULL_SECRET
  WINDOWS_REPLICAS (default: 5), LINUX_REPLICAS (default: 1)
  POLL_MAX_ATTEMPTS (default: 15), POLL_INTERVAL (default: 20)
  NODE_READY_TIMEOUT (default: 30900), NODE_POLL_INTERVAL (default: 30)
  NAMESPACE_READY_TIMEOUT (default: 60), SKIP_NODE_CHECK (default: false)
  LOG_FILE, LOG_LEVEL
  K8S_VERIFY, OCP_API_VERIFY, K8S_CA_CERT, KUBECONFIG

Examples:
  %(prog)s --registry-host mirror.example.com:5000
  %(prog)s --poll-attempts 30 --poll-interval 10
  %(prog)s --skip-node-check --env-file cluster.env
        """
    )

    parser.add_argument('--env-file',
                       help='Load environment variables from this .env file')
    parser.add_argument('--namespace',
                       help='Namespace for the test workloads')
    parser.add_argument('--registry-host',
                       help='Disconnected registry host, overrides the one stored in the ConfigMap')
    parser.add_argument('--windows-replicas', type=int,
                       help='Replicas of the Windows workload')
    parser.add_argument('--linux-replicas', type=int,
                       help='Replicas of the Linux workload')
    parser.add_argument('--poll-attempts', type=int,
                       help='Maximum number of workload readiness retries')
    parser.add_argument('--poll-interval', type=float,
                       help='Seconds between workload readiness checks')
    parser.add_argument('--node-timeout', type=int,
                       help='Seconds to wait for Windows nodes to be Ready')
    parser.add_argument('--node-poll-interval', type=float,
                       help='Seconds between Windows node checks')
    parser.add_argument('--namespace-timeout', type=int,
                       help='Timeout for namespace readiness in seconds')
    parser.add_argument('--skip-node-check', action='store_true',
                       help='Do not check Windows machinesets and nodes')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                       help='Set logging level')
    parser.add_argument('--log-file',
                       help='Log file path')
    parser.add_argument('--verify-ssl', action='store_true',
                       help='Force SSL certificate verification')
    return parser


def build_config(args: argparse.Namespace) -> Config:
    """Environment defaults overridden by command line arguments"""
    config = Config(env_file=args.env_file)

    if args.namespace is not None:
        config.namespace = args.namespace
    if args.registry_host is not None:
        config.registry_host = args.registry_host
        config.registry_host_pinned = True
    if args.windows_replicas is not None:
        config.windows_replicas = args.windows_replicas
    if args.linux_replicas is not None:
        config.linux_replicas = args.linux_replicas
    if args.poll_attempts is not None:
        config.poll_max_attempts = args.poll_attempts
    if args.poll_interval is not None:
        config.poll_interval = args.poll_interval
    if args.node_timeout is not None:
        config.node_ready_timeout = args.node_timeout
    if args.node_poll_interval is not None:
        config.node_poll_interval = args.node_poll_interval
    if args.namespace_timeout is not None:
        config.namespace_ready_timeout = args.namespace_timeout
    if args.skip_node_check:
        config.skip_node_check = True
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.log_file is not None:
        config.log_file = args.log_file
    if args.verify_ssl:
        config.k8s_verify_ssl = True
    return config


async def main(argv: Optional[List[str]] = None):
    """Main execution function"""
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    config = build_config(args)

    try:
        tool = WincDisconnectedPrepareTool(config)
    except Exception as e:
        logging.getLogger(__name__).error(f"[CONFIG] Failed to setup Kubernetes clients: {e}")
        sys.exit(1)

    try:
        await tool.run()
    except Exception as e:
        tool.log_error(f"Run failed: {e}", "MAIN")
        sys.exit(1)
    finally:
        tool.restore_environment()


def run_cli():
    """Console entry point"""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        # asyncio.run cancels main() on SIGINT and re-raises here
        timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        print(f"{Colors.YELLOW}[MAIN]{Colors.NC} {timestamp} - Run interrupted by user")
        logging.getLogger(__name__).warning("[MAIN] Run interrupted by user")
        sys.exit(1)


if __name__ == '__main__':
    run_cli()
