"""Tests for the per-resource operations: which method and URL each tool hits."""

import json

import httpx
import pytest

from core import endpoints, network_volumes, pods, registry_auths, templates
from core.models import (
    CreateEndpointInput,
    CreateNetworkVolumeInput,
    CreatePodInput,
    CreateRegistryAuthInput,
    CreateTemplateInput,
    EndpointIdInput,
    GetEndpointInput,
    GetPodInput,
    ListEndpointsInput,
    ListNetworkVolumesInput,
    ListPodsInput,
    ListRegistryAuthsInput,
    ListTemplatesInput,
    NetworkVolumeIdInput,
    PodIdInput,
    RegistryAuthIdInput,
    TemplateIdInput,
    UpdateEndpointInput,
    UpdateNetworkVolumeInput,
    UpdatePodInput,
    UpdateTemplateInput,
)

BASE = "https://rest.runpod.io/v1"


@pytest.mark.parametrize(
    "operation, inputs, collection",
    [
        (pods.list_pods, ListPodsInput(), "/pods"),
        (endpoints.list_endpoints, ListEndpointsInput(), "/endpoints"),
        (templates.list_templates, ListTemplatesInput(), "/templates"),
        (network_volumes.list_network_volumes, ListNetworkVolumesInput(), "/networkvolumes"),
        (registry_auths.list_registry_auths, ListRegistryAuthsInput(), "/containerregistryauth"),
    ],
)
def test_unfiltered_list_has_no_query_string(client, fake_api, operation, inputs, collection) -> None:
    operation(client, inputs)

    request = fake_api.last
    assert request.method == "GET"
    assert str(request.url) == BASE + collection
    assert request.url.query == b""


@pytest.mark.parametrize(
    "operation, inputs, method, path",
    [
        (pods.get_pod, GetPodInput(pod_id="p1"), "GET", "/pods/p1"),
        (pods.start_pod, PodIdInput(pod_id="p1"), "POST", "/pods/p1/start"),
        (pods.stop_pod, PodIdInput(pod_id="p1"), "POST", "/pods/p1/stop"),
        (pods.delete_pod, PodIdInput(pod_id="p1"), "DELETE", "/pods/p1"),
        (endpoints.get_endpoint, GetEndpointInput(endpoint_id="e1"), "GET", "/endpoints/e1"),
        (endpoints.delete_endpoint, EndpointIdInput(endpoint_id="e1"), "DELETE", "/endpoints/e1"),
        (templates.get_template, TemplateIdInput(template_id="t1"), "GET", "/templates/t1"),
        (templates.delete_template, TemplateIdInput(template_id="t1"), "DELETE", "/templates/t1"),
        (
            network_volumes.get_network_volume,
            NetworkVolumeIdInput(network_volume_id="v1"),
            "GET",
            "/networkvolumes/v1",
        ),
        (
            network_volumes.delete_network_volume,
            NetworkVolumeIdInput(network_volume_id="v1"),
            "DELETE",
            "/networkvolumes/v1",
        ),
        (
            registry_auths.get_registry_auth,
            RegistryAuthIdInput(container_registry_auth_id="r1"),
            "GET",
            "/containerregistryauth/r1",
        ),
        (
            registry_auths.delete_registry_auth,
            RegistryAuthIdInput(container_registry_auth_id="r1"),
            "DELETE",
            "/containerregistryauth/r1",
        ),
    ],
)
def test_identifier_operations_send_no_body(client, fake_api, operation, inputs, method, path) -> None:
    operation(client, inputs)

    request = fake_api.last
    assert request.method == method
    assert str(request.url) == BASE + path
    assert request.content == b""


class TestPods:
    def test_list_pods_by_compute_type(self, client, fake_api) -> None:
        listing = [{"id": "p1", "name": "trainer", "desiredStatus": "RUNNING"}]
        fake_api.respond_with(httpx.Response(200, json=listing))

        result = pods.list_pods(client, ListPodsInput(compute_type="GPU"))

        assert str(fake_api.last.url) == f"{BASE}/pods?computeType=GPU"
        assert result.payload == listing

    def test_list_pods_repeats_multi_valued_filters(self, client, fake_api) -> None:
        pods.list_pods(
            client,
            ListPodsInput(
                gpu_type_id=["NVIDIA A40", "NVIDIA L4", "NVIDIA H100 80GB HBM3"],
                data_center_id=["EU-RO-1"],
                include_machine=True,
            ),
        )

        params = fake_api.last.url.params
        assert params.get_list("gpuTypeId") == ["NVIDIA A40", "NVIDIA L4", "NVIDIA H100 80GB HBM3"]
        assert params.get_list("dataCenterId") == ["EU-RO-1"]
        assert params["includeMachine"] == "true"
        assert "name" not in params

    def test_get_pod_passes_include_flags(self, client, fake_api) -> None:
        pods.get_pod(client, GetPodInput(pod_id="p1", include_network_volume=True))

        assert str(fake_api.last.url) == f"{BASE}/pods/p1?includeNetworkVolume=true"

    def test_create_pod_posts_supplied_fields(self, client, fake_api) -> None:
        pods.create_pod(
            client,
            CreatePodInput(
                image_name="runpod/pytorch:2.1.0-py3.10-cuda11.8.0-devel-ubuntu22.04",
                name="trainer",
                gpu_type_ids=["NVIDIA A40"],
                gpu_count=1,
                ports=["8888/http", "22/tcp"],
            ),
        )

        assert fake_api.last.method == "POST"
        assert str(fake_api.last.url) == f"{BASE}/pods"
        assert json.loads(fake_api.last.content) == {
            "imageName": "runpod/pytorch:2.1.0-py3.10-cuda11.8.0-devel-ubuntu22.04",
            "name": "trainer",
            "gpuTypeIds": ["NVIDIA A40"],
            "gpuCount": 1,
            "ports": ["8888/http", "22/tcp"],
        }

    def test_update_pod_patches_without_identifier_in_body(self, client, fake_api) -> None:
        pods.update_pod(client, UpdatePodInput(pod_id="p1", volume_in_gb=50))

        assert fake_api.last.method == "PATCH"
        assert str(fake_api.last.url) == f"{BASE}/pods/p1"
        assert json.loads(fake_api.last.content) == {"volumeInGb": 50}


class TestEndpoints:
    def test_list_endpoints_with_flags(self, client, fake_api) -> None:
        endpoints.list_endpoints(client, ListEndpointsInput(include_template=True, include_workers=False))

        assert str(fake_api.last.url) == f"{BASE}/endpoints?includeTemplate=true&includeWorkers=false"

    def test_create_endpoint(self, client, fake_api) -> None:
        endpoints.create_endpoint(
            client, CreateEndpointInput(template_id="t1", workers_min=0, workers_max=3)
        )

        assert fake_api.last.method == "POST"
        assert json.loads(fake_api.last.content) == {"templateId": "t1", "workersMin": 0, "workersMax": 3}

    def test_update_endpoint(self, client, fake_api) -> None:
        endpoints.update_endpoint(
            client, UpdateEndpointInput(endpoint_id="e1", scaler_type="REQUEST_COUNT", scaler_value=4)
        )

        assert fake_api.last.method == "PATCH"
        assert str(fake_api.last.url) == f"{BASE}/endpoints/e1"
        assert json.loads(fake_api.last.content) == {"scalerType": "REQUEST_COUNT", "scalerValue": 4}


class TestTemplates:
    def test_create_template(self, client, fake_api) -> None:
        templates.create_template(
            client,
            CreateTemplateInput(
                name="worker",
                image_name="me/worker:1",
                is_serverless=True,
                docker_start_cmd=["python", "handler.py"],
            ),
        )

        assert json.loads(fake_api.last.content) == {
            "name": "worker",
            "imageName": "me/worker:1",
            "isServerless": True,
            "dockerStartCmd": ["python", "handler.py"],
        }

    def test_update_template(self, client, fake_api) -> None:
        templates.update_template(client, UpdateTemplateInput(template_id="t1", readme="# hi"))

        assert fake_api.last.method == "PATCH"
        assert str(fake_api.last.url) == f"{BASE}/templates/t1"
        assert json.loads(fake_api.last.content) == {"readme": "# hi"}


class TestNetworkVolumes:
    def test_create_network_volume(self, client, fake_api) -> None:
        network_volumes.create_network_volume(
            client, CreateNetworkVolumeInput(name="datasets", size=100, data_center_id="EU-RO-1")
        )

        assert fake_api.last.method == "POST"
        assert str(fake_api.last.url) == f"{BASE}/networkvolumes"
        assert json.loads(fake_api.last.content) == {
            "name": "datasets",
            "size": 100,
            "dataCenterId": "EU-RO-1",
        }

    def test_update_network_volume(self, client, fake_api) -> None:
        network_volumes.update_network_volume(
            client, UpdateNetworkVolumeInput(network_volume_id="v1", size=200)
        )

        assert fake_api.last.method == "PATCH"
        assert json.loads(fake_api.last.content) == {"size": 200}


class TestRegistryAuths:
    def test_create_registry_auth(self, client, fake_api) -> None:
        registry_auths.create_registry_auth(
            client, CreateRegistryAuthInput(name="ghcr", username="me", password="tok")
        )

        assert fake_api.last.method == "POST"
        assert str(fake_api.last.url) == f"{BASE}/containerregistryauth"
        assert json.loads(fake_api.last.content) == {"name": "ghcr", "username": "me", "password": "tok"}
