# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines every MCP tool the assistant can call.  Each tool is a thin
#   wrapper around a core/ operation: it validates arguments, issues exactly
#   one RunPod REST call, and renders the result as text content.
#
# HOW IT WORKS (the flow):
#   1. The assistant calls a tool by name via MCP (e.g., "list-pods")
#   2. FastMCP checks argument types against the function signature
#   3. invoke() re-validates into a typed core/models.py input
#        → invalid input becomes a ToolError, no network call is made
#   4. The core/ operation builds path, query and body and calls RunPod
#   5. The ApiResult is rendered:
#        success → pretty-printed JSON of the RunPod payload, unchanged
#        failure → the error string ("RunPod API error: 404 - ...")
#
#   A failed RunPod call is returned as ordinary tool content, so one bad
#   call never takes the server down.
#
# TOOL NAMING CONVENTIONS:
#   <verb>-<resource>, kebab-case: list-*, get-*, create-*, update-*,
#   delete-*, start-pod, stop-pod.  list-* and get-* are read-only; the rest
#   change real, billable infrastructure.
#
# RUNNING THIS SERVER:
#   main.py resolves the API key, builds a RunPodClient and calls
#   create_server(client).run(), which speaks MCP over stdio.
# =============================================================================

import json
import logging
import sys
from typing import Annotated, Any, Callable, Literal, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from core import endpoints, network_volumes, pods, registry_auths, templates
from core.client import RunPodClient
from core.models import (
    ApiResult,
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
    ResourceId,
    TemplateIdInput,
    UpdateEndpointInput,
    UpdateNetworkVolumeInput,
    UpdatePodInput,
    UpdateTemplateInput,
)
from core.validation import ValidationError, validate_input

# =============================================================================
# Logging Setup
# =============================================================================
# STDOUT carries the MCP protocol stream, so every log line goes to STDERR.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for response payloads
#     - YELLOW for intermediate status (HTTP status, rejections)
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses (JSON output)
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)

# Argument names whose values never reach the log.
_SECRET_PARAMS = {"password"}

SERVER_NAME = "runpod"


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its supplied parameters in CYAN."""
    param_str = ", ".join(
        f"{k}={'***' if k in _SECRET_PARAMS else repr(v)}"
        for k, v in params.items()
        if v is not None
    )
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    """Log the rendered tool response in GREEN, then return it."""
    logging.info(f"{_GREEN}  ← {tool_name} response: {' '.join(text.split())}{_RESET}")
    return text


def render_result(result: ApiResult) -> str:
    """Render an ApiResult as MCP text content."""
    if result.ok:
        return json.dumps(result.payload, indent=2)
    return result.error or "RunPod request failed"


# =============================================================================
# Shared parameter descriptions
# =============================================================================
# FastMCP turns these Annotated hints into the JSON schema the assistant
# sees, so each description is written for the assistant, not for us.
# =============================================================================
PodId = Annotated[ResourceId, Field(description="ID of the pod")]
EndpointId = Annotated[ResourceId, Field(description="ID of the serverless endpoint")]
TemplateId = Annotated[ResourceId, Field(description="ID of the template")]
NetworkVolumeId = Annotated[ResourceId, Field(description="ID of the network volume")]
RegistryAuthId = Annotated[ResourceId, Field(description="ID of the container registry credential")]

OptComputeType = Annotated[
    Optional[Literal["GPU", "CPU"]], Field(description="Compute type: GPU or CPU")
]
OptGpuTypeIds = Annotated[
    Optional[list[str]],
    Field(description='GPU type IDs, e.g. ["NVIDIA GeForce RTX 4090"]'),
]
OptDataCenterIds = Annotated[
    Optional[list[str]], Field(description='Data center IDs, e.g. ["EU-RO-1", "US-TX-3"]')
]
OptPorts = Annotated[
    Optional[list[str]], Field(description='Exposed ports as "port/protocol", e.g. ["8888/http", "22/tcp"]')
]
OptEnv = Annotated[
    Optional[dict[str, str]], Field(description="Environment variables as a name → value object")
]
OptContainerDisk = Annotated[Optional[int], Field(description="Container disk size in GB")]
OptVolumeSize = Annotated[Optional[int], Field(description="Persistent volume size in GB")]
OptMountPath = Annotated[Optional[str], Field(description="Where to mount the volume, e.g. /workspace")]
OptIncludeMachine = Annotated[
    Optional[bool], Field(description="Include information about the host machine")
]
OptIncludeNetworkVolume = Annotated[
    Optional[bool], Field(description="Include information about the attached network volume")
]
OptIncludeTemplate = Annotated[
    Optional[bool], Field(description="Include the endpoint's template in the response")
]
OptIncludeWorkers = Annotated[
    Optional[bool], Field(description="Include the endpoint's current workers in the response")
]


# =============================================================================
# Server factory
# =============================================================================
# The client (and with it the API key) is passed in once and captured by
# every tool below.  No tool reads configuration on its own.
# =============================================================================
def create_server(client: RunPodClient) -> FastMCP:
    """Create the FastMCP server with every RunPod tool registered."""
    mcp = FastMCP(SERVER_NAME)

    def invoke(
        tool_name: str,
        model: type,
        operation: Callable[[RunPodClient, Any], ApiResult],
        arguments: dict[str, Any],
    ) -> str:
        """Validate, call RunPod once, and render the outcome as text."""
        _log_request(tool_name, **arguments)

        supplied = {k: v for k, v in arguments.items() if v is not None}
        try:
            inputs = validate_input(model, supplied)
        except ValidationError as exc:
            _log_status(f"Rejected before any request: {exc}")
            raise ToolError(str(exc)) from exc

        result = operation(client, inputs)
        if result.ok:
            _log_status(f"RunPod answered HTTP {result.status}")
        else:
            _log_status(f"RunPod call failed (status={result.status})")
        return _log_response(tool_name, render_result(result))

    # =========================================================================
    # PODS
    # =========================================================================
    @mcp.tool(name="list-pods")
    def list_pods(
        compute_type: OptComputeType = None,
        gpu_type_id: OptGpuTypeIds = None,
        data_center_id: OptDataCenterIds = None,
        name: Annotated[Optional[str], Field(description="Only pods with this name")] = None,
        include_machine: OptIncludeMachine = None,
        include_network_volume: OptIncludeNetworkVolume = None,
    ) -> str:
        """List your RunPod pods, optionally filtered.

        Every filter is optional; omitted filters are simply not applied.
        Multiple GPU type or data center IDs match any of the given values.
        """
        return invoke("list-pods", ListPodsInput, pods.list_pods, dict(
            compute_type=compute_type,
            gpu_type_id=gpu_type_id,
            data_center_id=data_center_id,
            name=name,
            include_machine=include_machine,
            include_network_volume=include_network_volume,
        ))

    @mcp.tool(name="get-pod")
    def get_pod(
        pod_id: PodId,
        include_machine: OptIncludeMachine = None,
        include_network_volume: OptIncludeNetworkVolume = None,
    ) -> str:
        """Get details (image, GPU, status, ports) of a single pod."""
        return invoke("get-pod", GetPodInput, pods.get_pod, dict(
            pod_id=pod_id,
            include_machine=include_machine,
            include_network_volume=include_network_volume,
        ))

    @mcp.tool(name="create-pod")
    def create_pod(
        image_name: Annotated[str, Field(description="Docker image to run, e.g. runpod/pytorch:latest")],
        name: Annotated[Optional[str], Field(description="Name for the pod")] = None,
        cloud_type: Annotated[
            Optional[Literal["SECURE", "COMMUNITY"]], Field(description="SECURE or COMMUNITY cloud")
        ] = None,
        gpu_type_ids: OptGpuTypeIds = None,
        gpu_count: Annotated[Optional[int], Field(description="Number of GPUs to attach")] = None,
        container_disk_in_gb: OptContainerDisk = None,
        volume_in_gb: OptVolumeSize = None,
        volume_mount_path: OptMountPath = None,
        ports: OptPorts = None,
        env: OptEnv = None,
        data_center_ids: OptDataCenterIds = None,
    ) -> str:
        """Create (rent) a new pod.  This starts billing on your RunPod account.

        Only image_name is required; RunPod picks defaults for the rest.
        """
        return invoke("create-pod", CreatePodInput, pods.create_pod, dict(
            image_name=image_name,
            name=name,
            cloud_type=cloud_type,
            gpu_type_ids=gpu_type_ids,
            gpu_count=gpu_count,
            container_disk_in_gb=container_disk_in_gb,
            volume_in_gb=volume_in_gb,
            volume_mount_path=volume_mount_path,
            ports=ports,
            env=env,
            data_center_ids=data_center_ids,
        ))

    @mcp.tool(name="update-pod")
    def update_pod(
        pod_id: PodId,
        name: Annotated[Optional[str], Field(description="New name for the pod")] = None,
        image_name: Annotated[Optional[str], Field(description="New Docker image")] = None,
        container_disk_in_gb: OptContainerDisk = None,
        volume_in_gb: OptVolumeSize = None,
        volume_mount_path: OptMountPath = None,
        ports: OptPorts = None,
        env: OptEnv = None,
    ) -> str:
        """Update an existing pod.  Only the fields you pass are changed.

        Changing the image or disk sizes resets the pod's container.
        """
        return invoke("update-pod", UpdatePodInput, pods.update_pod, dict(
            pod_id=pod_id,
            name=name,
            image_name=image_name,
            container_disk_in_gb=container_disk_in_gb,
            volume_in_gb=volume_in_gb,
            volume_mount_path=volume_mount_path,
            ports=ports,
            env=env,
        ))

    @mcp.tool(name="start-pod")
    def start_pod(pod_id: PodId) -> str:
        """Start (resume) a stopped pod."""
        return invoke("start-pod", PodIdInput, pods.start_pod, dict(pod_id=pod_id))

    @mcp.tool(name="stop-pod")
    def stop_pod(pod_id: PodId) -> str:
        """Stop a running pod.  Container disk is wiped; the volume is kept."""
        return invoke("stop-pod", PodIdInput, pods.stop_pod, dict(pod_id=pod_id))

    @mcp.tool(name="delete-pod")
    def delete_pod(pod_id: PodId) -> str:
        """Permanently delete (terminate) a pod.  This cannot be undone."""
        return invoke("delete-pod", PodIdInput, pods.delete_pod, dict(pod_id=pod_id))

    # =========================================================================
    # SERVERLESS ENDPOINTS
    # =========================================================================
    @mcp.tool(name="list-endpoints")
    def list_endpoints(
        include_template: OptIncludeTemplate = None,
        include_workers: OptIncludeWorkers = None,
    ) -> str:
        """List your serverless endpoints."""
        return invoke("list-endpoints", ListEndpointsInput, endpoints.list_endpoints, dict(
            include_template=include_template,
            include_workers=include_workers,
        ))

    @mcp.tool(name="get-endpoint")
    def get_endpoint(
        endpoint_id: EndpointId,
        include_template: OptIncludeTemplate = None,
        include_workers: OptIncludeWorkers = None,
    ) -> str:
        """Get details of a single serverless endpoint."""
        return invoke("get-endpoint", GetEndpointInput, endpoints.get_endpoint, dict(
            endpoint_id=endpoint_id,
            include_template=include_template,
            include_workers=include_workers,
        ))

    @mcp.tool(name="create-endpoint")
    def create_endpoint(
        template_id: Annotated[str, Field(description="Template the workers will run")],
        name: Annotated[Optional[str], Field(description="Name for the endpoint")] = None,
        compute_type: OptComputeType = None,
        gpu_type_ids: OptGpuTypeIds = None,
        gpu_count: Annotated[Optional[int], Field(description="GPUs per worker")] = None,
        workers_min: Annotated[Optional[int], Field(description="Minimum number of workers")] = None,
        workers_max: Annotated[Optional[int], Field(description="Maximum number of workers")] = None,
        data_center_ids: OptDataCenterIds = None,
    ) -> str:
        """Create a new serverless endpoint from an existing template.

        WHEN TO CALL THIS: after create-template (with is_serverless=true) or
        once you know the ID of a serverless template from list-templates.
        """
        return invoke("create-endpoint", CreateEndpointInput, endpoints.create_endpoint, dict(
            template_id=template_id,
            name=name,
            compute_type=compute_type,
            gpu_type_ids=gpu_type_ids,
            gpu_count=gpu_count,
            workers_min=workers_min,
            workers_max=workers_max,
            data_center_ids=data_center_ids,
        ))

    @mcp.tool(name="update-endpoint")
    def update_endpoint(
        endpoint_id: EndpointId,
        name: Annotated[Optional[str], Field(description="New name for the endpoint")] = None,
        workers_min: Annotated[Optional[int], Field(description="Minimum number of workers")] = None,
        workers_max: Annotated[Optional[int], Field(description="Maximum number of workers")] = None,
        idle_timeout: Annotated[
            Optional[int], Field(description="Seconds an idle worker is kept before scaling down")
        ] = None,
        scaler_type: Annotated[
            Optional[Literal["QUEUE_DELAY", "REQUEST_COUNT"]],
            Field(description="Autoscaling strategy"),
        ] = None,
        scaler_value: Annotated[
            Optional[int], Field(description="Threshold for the chosen scaler type")
        ] = None,
    ) -> str:
        """Update scaling settings or the name of a serverless endpoint."""
        return invoke("update-endpoint", UpdateEndpointInput, endpoints.update_endpoint, dict(
            endpoint_id=endpoint_id,
            name=name,
            workers_min=workers_min,
            workers_max=workers_max,
            idle_timeout=idle_timeout,
            scaler_type=scaler_type,
            scaler_value=scaler_value,
        ))

    @mcp.tool(name="delete-endpoint")
    def delete_endpoint(endpoint_id: EndpointId) -> str:
        """Delete a serverless endpoint and stop all of its workers."""
        return invoke("delete-endpoint", EndpointIdInput, endpoints.delete_endpoint, dict(
            endpoint_id=endpoint_id,
        ))

    # =========================================================================
    # TEMPLATES
    # =========================================================================
    @mcp.tool(name="list-templates")
    def list_templates() -> str:
        """List your pod and serverless templates."""
        return invoke("list-templates", ListTemplatesInput, templates.list_templates, {})

    @mcp.tool(name="get-template")
    def get_template(template_id: TemplateId) -> str:
        """Get details of a single template."""
        return invoke("get-template", TemplateIdInput, templates.get_template, dict(
            template_id=template_id,
        ))

    @mcp.tool(name="create-template")
    def create_template(
        name: Annotated[str, Field(description="Name for the template")],
        image_name: Annotated[str, Field(description="Docker image the template runs")],
        is_serverless: Annotated[
            Optional[bool], Field(description="True for a serverless (endpoint) template")
        ] = None,
        ports: OptPorts = None,
        docker_entrypoint: Annotated[
            Optional[list[str]], Field(description="Override for the image ENTRYPOINT")
        ] = None,
        docker_start_cmd: Annotated[
            Optional[list[str]], Field(description="Override for the image CMD")
        ] = None,
        env: OptEnv = None,
        container_disk_in_gb: OptContainerDisk = None,
        volume_in_gb: OptVolumeSize = None,
        volume_mount_path: OptMountPath = None,
        readme: Annotated[Optional[str], Field(description="Markdown description")] = None,
    ) -> str:
        """Create a reusable container template for pods or serverless endpoints."""
        return invoke("create-template", CreateTemplateInput, templates.create_template, dict(
            name=name,
            image_name=image_name,
            is_serverless=is_serverless,
            ports=ports,
            docker_entrypoint=docker_entrypoint,
            docker_start_cmd=docker_start_cmd,
            env=env,
            container_disk_in_gb=container_disk_in_gb,
            volume_in_gb=volume_in_gb,
            volume_mount_path=volume_mount_path,
            readme=readme,
        ))

    @mcp.tool(name="update-template")
    def update_template(
        template_id: TemplateId,
        name: Annotated[Optional[str], Field(description="New name for the template")] = None,
        image_name: Annotated[Optional[str], Field(description="New Docker image")] = None,
        ports: OptPorts = None,
        env: OptEnv = None,
        readme: Annotated[Optional[str], Field(description="Markdown description")] = None,
    ) -> str:
        """Update an existing template.  Only the fields you pass are changed."""
        return invoke("update-template", UpdateTemplateInput, templates.update_template, dict(
            template_id=template_id,
            name=name,
            image_name=image_name,
            ports=ports,
            env=env,
            readme=readme,
        ))

    @mcp.tool(name="delete-template")
    def delete_template(template_id: TemplateId) -> str:
        """Delete a template.  RunPod refuses if pods or endpoints still use it."""
        return invoke("delete-template", TemplateIdInput, templates.delete_template, dict(
            template_id=template_id,
        ))

    # =========================================================================
    # NETWORK VOLUMES
    # =========================================================================
    @mcp.tool(name="list-network-volumes")
    def list_network_volumes() -> str:
        """List your network volumes."""
        return invoke(
            "list-network-volumes", ListNetworkVolumesInput, network_volumes.list_network_volumes, {}
        )

    @mcp.tool(name="get-network-volume")
    def get_network_volume(network_volume_id: NetworkVolumeId) -> str:
        """Get details of a single network volume."""
        return invoke(
            "get-network-volume",
            NetworkVolumeIdInput,
            network_volumes.get_network_volume,
            dict(network_volume_id=network_volume_id),
        )

    @mcp.tool(name="create-network-volume")
    def create_network_volume(
        name: Annotated[str, Field(description="Name for the network volume")],
        size: Annotated[int, Field(description="Size in GB (1-4000)")],
        data_center_id: Annotated[str, Field(description="Data center to create the volume in")],
    ) -> str:
        """Create persistent network storage that pods in the same data center can mount."""
        return invoke(
            "create-network-volume",
            CreateNetworkVolumeInput,
            network_volumes.create_network_volume,
            dict(name=name, size=size, data_center_id=data_center_id),
        )

    @mcp.tool(name="update-network-volume")
    def update_network_volume(
        network_volume_id: NetworkVolumeId,
        name: Annotated[Optional[str], Field(description="New name for the volume")] = None,
        size: Annotated[
            Optional[int], Field(description="New size in GB; must be larger than the current size")
        ] = None,
    ) -> str:
        """Rename or grow a network volume."""
        return invoke(
            "update-network-volume",
            UpdateNetworkVolumeInput,
            network_volumes.update_network_volume,
            dict(network_volume_id=network_volume_id, name=name, size=size),
        )

    @mcp.tool(name="delete-network-volume")
    def delete_network_volume(network_volume_id: NetworkVolumeId) -> str:
        """Delete a network volume and all data on it."""
        return invoke(
            "delete-network-volume",
            NetworkVolumeIdInput,
            network_volumes.delete_network_volume,
            dict(network_volume_id=network_volume_id),
        )

    # =========================================================================
    # CONTAINER REGISTRY CREDENTIALS
    # =========================================================================
    @mcp.tool(name="list-container-registry-auths")
    def list_container_registry_auths() -> str:
        """List stored credentials for private container registries."""
        return invoke(
            "list-container-registry-auths",
            ListRegistryAuthsInput,
            registry_auths.list_registry_auths,
            {},
        )

    @mcp.tool(name="get-container-registry-auth")
    def get_container_registry_auth(container_registry_auth_id: RegistryAuthId) -> str:
        """Get details of a stored registry credential (the password is never returned)."""
        return invoke(
            "get-container-registry-auth",
            RegistryAuthIdInput,
            registry_auths.get_registry_auth,
            dict(container_registry_auth_id=container_registry_auth_id),
        )

    @mcp.tool(name="create-container-registry-auth")
    def create_container_registry_auth(
        name: Annotated[str, Field(description="Name for the credential")],
        username: Annotated[str, Field(description="Registry username")],
        password: Annotated[str, Field(description="Registry password or access token")],
    ) -> str:
        """Store credentials so pods and templates can pull private images."""
        return invoke(
            "create-container-registry-auth",
            CreateRegistryAuthInput,
            registry_auths.create_registry_auth,
            dict(name=name, username=username, password=password),
        )

    @mcp.tool(name="delete-container-registry-auth")
    def delete_container_registry_auth(container_registry_auth_id: RegistryAuthId) -> str:
        """Delete a stored registry credential."""
        return invoke(
            "delete-container-registry-auth",
            RegistryAuthIdInput,
            registry_auths.delete_registry_auth,
            dict(container_registry_auth_id=container_registry_auth_id),
        )

    return mcp
