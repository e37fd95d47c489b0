"""Tests for kubeconfig loading and the TLS handling of the Kubernetes clients."""

import os
from unittest.mock import patch

import pytest
from kubernetes import client

import winc_disconnected_prepare as prepare
from winc_prepare_utils import ClusterStepError

SSL_FAILURE = "HTTPSConnectionPool: Max retries exceeded (Caused by SSLError(CERTIFICATE_VERIFY_FAILED))"


@pytest.fixture
def kube_config():
    """Patch config loaders, default configuration and the version probe"""
    state = {"ca_cert": None}

    def default_copy():
        conf = client.Configuration()
        conf.host = "https://api.cluster.example.com:6443"
        conf.ssl_ca_cert = state["ca_cert"]
        return conf

    with patch.object(prepare.config, "load_incluster_config") as load_incluster, \
            patch.object(prepare.config, "load_kube_config") as load_kube, \
            patch.object(prepare.client.Configuration, "get_default_copy", side_effect=default_copy), \
            patch.object(prepare.client, "VersionApi") as version_api:
        yield {
            "state": state,
            "load_incluster": load_incluster,
            "load_kube": load_kube,
            "get_code": version_api.return_value.get_code,
        }


@pytest.fixture
def bad_ca_file(tmp_path):
    path = tmp_path / "ca.crt"
    path.write_text("-----BEGIN CERTIFICATE-----\nnot a certificate\n-----END CERTIFICATE-----\n")
    return str(path)


class TestKubeconfigLoading:
    def test_in_cluster_config(self, config, kube_config):
        tool = prepare.WincDisconnectedPrepareTool(config)
        kube_config["load_incluster"].assert_called_once_with()
        kube_config["load_kube"].assert_not_called()
        assert isinstance(tool.core_v1, client.CoreV1Api)
        assert isinstance(tool.custom_objects, client.CustomObjectsApi)

    def test_explicit_kubeconfig(self, config, kube_config):
        config.kubeconfig_path = "/tmp/kubeconfig"
        prepare.WincDisconnectedPrepareTool(config)
        kube_config["load_kube"].assert_called_once_with(config_file="/tmp/kubeconfig")
        kube_config["load_incluster"].assert_not_called()

    def test_falls_back_to_default_kubeconfig(self, config, kube_config):
        kube_config["load_incluster"].side_effect = prepare.config.ConfigException("not in cluster")
        prepare.WincDisconnectedPrepareTool(config)
        kube_config["load_kube"].assert_called_once_with()

    def test_no_configuration_available(self, config, kube_config):
        kube_config["load_incluster"].side_effect = prepare.config.ConfigException("not in cluster")
        kube_config["load_kube"].side_effect = prepare.config.ConfigException("no kubeconfig")
        with pytest.raises(ClusterStepError, match="no kubeconfig"):
            prepare.WincDisconnectedPrepareTool(config)
        kube_config["get_code"].assert_not_called()


class TestCaCertificates:
    def test_invalid_ca_disables_verification(self, config, kube_config, bad_ca_file):
        kube_config["state"]["ca_cert"] = bad_ca_file
        tool = prepare.WincDisconnectedPrepareTool(config)
        assert config.k8s_verify_ssl is False
        assert tool.api_client.configuration.verify_ssl is False
        assert tool.api_client.configuration.ssl_ca_cert is None

    def test_invalid_ca_kept_when_verification_forced(self, config, kube_config, bad_ca_file):
        kube_config["state"]["ca_cert"] = bad_ca_file
        config.k8s_verify_ssl = True
        tool = prepare.WincDisconnectedPrepareTool(config)
        assert config.k8s_verify_ssl is True
        assert tool.api_client.configuration.verify_ssl is True
        assert tool.api_client.configuration.ssl_ca_cert == bad_ca_file

    def test_ca_from_environment(self, config, kube_config, monkeypatch, tmp_path):
        env_ca = str(tmp_path / "env-ca.crt")
        monkeypatch.setenv("K8S_CA_CERT", env_ca)
        with patch.object(prepare.WincDisconnectedPrepareTool, "_is_ca_file_valid", return_value=True):
            tool = prepare.WincDisconnectedPrepareTool(config)
        assert config.k8s_ca_cert_path == env_ca
        assert tool.api_client.configuration.ssl_ca_cert == env_ca

    def test_ca_validation(self, config, kube_config, bad_ca_file, tmp_path):
        tool = prepare.WincDisconnectedPrepareTool(config)
        assert tool._is_ca_file_valid(str(tmp_path / "missing.crt")) is False
        assert tool._is_ca_file_valid(bad_ca_file) is False

    def test_verification_disabled_from_environment(self, config, kube_config):
        config.k8s_verify_ssl = False
        tool = prepare.WincDisconnectedPrepareTool(config)
        assert tool.api_client.configuration.verify_ssl is False
        assert tool.api_client.configuration.assert_hostname is False


class TestConnectivityProbe:
    def test_ssl_failure_falls_back_to_unverified(self, config, kube_config):
        kube_config["get_code"].side_effect = [Exception(SSL_FAILURE), {"gitVersion": "v1.31.0"}]
        tool = prepare.WincDisconnectedPrepareTool(config)
        assert kube_config["get_code"].call_count == 2
        assert config.k8s_verify_ssl is False
        assert tool.api_client.configuration.verify_ssl is False

    def test_no_fallback_when_verification_forced(self, config, kube_config):
        config.k8s_verify_ssl = True
        kube_config["get_code"].side_effect = Exception(SSL_FAILURE)
        with pytest.raises(Exception, match="CERTIFICATE_VERIFY_FAILED"):
            prepare.WincDisconnectedPrepareTool(config)
        assert kube_config["get_code"].call_count == 1

    def test_non_ssl_failure_is_raised(self, config, kube_config):
        kube_config["get_code"].side_effect = Exception("Connection refused")
        with pytest.raises(Exception, match="Connection refused"):
            prepare.WincDisconnectedPrepareTool(config)
        assert kube_config["get_code"].call_count == 1


class TestRequestsCaBundle:
    def test_cleared_while_running_and_restored(self, config, kube_config, monkeypatch):
        monkeypatch.setenv("REQUESTS_CA_BUNDLE", "/etc/pki/broken-bundle.pem")
        tool = prepare.WincDisconnectedPrepareTool(config)
        assert "REQUESTS_CA_BUNDLE" not in os.environ
        tool.restore_environment()
        assert os.environ["REQUESTS_CA_BUNDLE"] == "/etc/pki/broken-bundle.pem"

    def test_restored_when_setup_fails(self, config, kube_config, monkeypatch):
        monkeypatch.setenv("REQUESTS_CA_BUNDLE", "/etc/pki/broken-bundle.pem")
        kube_config["get_code"].side_effect = Exception("Connection refused")
        with pytest.raises(Exception):
            prepare.WincDisconnectedPrepareTool(config)
        assert os.environ["REQUESTS_CA_BUNDLE"] == "/etc/pki/broken-bundle.pem"
