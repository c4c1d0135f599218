"""Tests for the RunPod request helper (core/client.py)."""

import json

import httpx
import pytest

from core.client import RunPodClient
from core.config import Settings


class TestRequestShape:
    """What goes over the wire."""

    def test_bearer_token_on_every_request(self, client, fake_api, settings) -> None:
        client.request("/pods")
        client.request("/pods/abc", method="DELETE")

        assert all(r.headers["authorization"] == f"Bearer {settings.api_key}" for r in fake_api.requests)

    def test_path_is_joined_onto_versioned_base_url(self, client, fake_api) -> None:
        client.request("/networkvolumes")

        assert str(fake_api.last.url) == "https://rest.runpod.io/v1/networkvolumes"

    def test_read_has_no_body_and_no_content_type(self, client, fake_api) -> None:
        client.request("/pods")

        assert fake_api.last.method == "GET"
        assert fake_api.last.content == b""
        assert "content-type" not in fake_api.last.headers

    def test_body_is_sent_as_json(self, client, fake_api) -> None:
        client.request("/pods", method="POST", body={"imageName": "runpod/pytorch", "gpuCount": 1})

        assert fake_api.last.method == "POST"
        assert fake_api.last.headers["content-type"] == "application/json"
        assert json.loads(fake_api.last.content) == {"imageName": "runpod/pytorch", "gpuCount": 1}

    def test_empty_body_is_still_sent(self, client, fake_api) -> None:
        client.request("/pods/abc", method="PATCH", body={})

        assert json.loads(fake_api.last.content) == {}

    def test_repeated_query_keys_keep_order(self, client, fake_api) -> None:
        client.request("/pods", params=[("gpuTypeId", "B"), ("gpuTypeId", "A")])

        assert fake_api.last.url.params.get_list("gpuTypeId") == ["B", "A"]

    def test_absolute_path_is_refused(self, client) -> None:
        with pytest.raises(ValueError):
            client.request("https://example.com/pods")


class TestResponseNormalization:
    """How RunPod's answers become ApiResults."""

    def test_json_is_passed_through_unchanged(self, client, fake_api) -> None:
        payload = [{"id": "pod1", "desiredStatus": "RUNNING", "gpu": {"count": 1}}]
        fake_api.respond_with(httpx.Response(200, json=payload))

        result = client.request("/pods")

        assert result.ok
        assert result.status == 200
        assert result.payload == payload

    def test_non_json_success_becomes_status_object(self, client, fake_api) -> None:
        fake_api.respond_with(httpx.Response(200, text="OK"))

        result = client.request("/pods/abc/stop", method="POST")

        assert result.ok
        assert result.payload == {"success": True, "status": 200}

    def test_empty_json_response_becomes_status_object(self, client, fake_api) -> None:
        fake_api.respond_with(
            httpx.Response(204, headers={"content-type": "application/json"})
        )

        result = client.request("/pods/abc", method="DELETE")

        assert result.ok
        assert result.payload == {"success": True, "status": 204}

    @pytest.mark.parametrize("status", [400, 401, 404, 500, 503])
    def test_error_status_carries_code_and_raw_body(self, client, fake_api, status) -> None:
        fake_api.respond_with(httpx.Response(status, text="pod not found: abc"))

        result = client.request("/pods/abc")

        assert not result.ok
        assert result.status == status
        assert str(status) in result.error
        assert "pod not found: abc" in result.error

    def test_error_with_json_body_still_reports_raw_text(self, client, fake_api) -> None:
        fake_api.respond_with(httpx.Response(422, json={"error": "bad gpuCount"}))

        result = client.request("/pods", method="POST", body={"gpuCount": -1})

        assert result.error.startswith("RunPod API error: 422 - ")
        assert "bad gpuCount" in result.error

    def test_invalid_json_is_a_failure_not_an_exception(self, client, fake_api) -> None:
        fake_api.respond_with(
            httpx.Response(200, headers={"content-type": "application/json"}, content=b"{nope")
        )

        result = client.request("/pods")

        assert not result.ok
        assert "invalid JSON" in result.error

    def test_transport_error_is_a_failure_not_an_exception(self, settings) -> None:
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        with RunPodClient(settings, transport=httpx.MockTransport(refuse)) as client:
            result = client.request("/pods")

        assert not result.ok
        assert result.status is None
        assert "GET /pods" in result.error
        assert "connection refused" in result.error

    def test_redirect_is_followed_to_the_final_answer(self, client, fake_api) -> None:
        def moved(request):
            if request.url.path == "/v1/pods/old":
                return httpx.Response(301, headers={"location": "https://rest.runpod.io/v1/pods/new"})
            return httpx.Response(200, json={"id": "new"})

        fake_api.respond_with(moved)

        result = client.request("/pods/old")

        assert result.ok
        assert result.status == 200
        assert result.payload == {"id": "new"}
        assert [r.url.path for r in fake_api.requests] == ["/v1/pods/old", "/v1/pods/new"]


class TestSettings:
    def test_repr_hides_api_key(self) -> None:
        assert "secret" not in repr(Settings(api_key="secret"))
