# =============================================================================
# core/models.py  —  Data Models (tool inputs and the request result)
# =============================================================================
#
# These dataclasses define the *shape* of every tool call the server accepts
# and of the single result type the request helper produces.  Input models
# are pydantic dataclasses: field types, enum values, non-blank identifiers
# and unknown-argument rejection are declared here and enforced by
# core/validation.py.  Wire encoding lives in core/payloads.py.
#
# NAMING:
#   Field names are snake_case Python names.  core/payloads.py converts them
#   to the camelCase keys the RunPod REST API expects (gpu_type_ids →
#   gpuTypeIds).
#
# PATH IDENTIFIERS:
#   The resource id of a get/update/delete/start/stop call is declared with
#   path_id() and typed ResourceId.  It is interpolated into the URL and
#   never sent in a body, so it must be non-blank and cannot be "." or "..".
#
# OPTIONAL FIELDS:
#   Every optional field defaults to None, meaning "not supplied".  None
#   fields are omitted from query strings and request bodies entirely.
# =============================================================================

import dataclasses
from dataclasses import field
from typing import Annotated, Any, Literal, Optional

from pydantic import AfterValidator, ConfigDict, StringConstraints
from pydantic.dataclasses import dataclass

ComputeType = Literal["GPU", "CPU"]
CloudType = Literal["SECURE", "COMMUNITY"]
ScalerType = Literal["QUEUE_DELAY", "REQUEST_COUNT"]

PATH_ID = "path_id"

# Unknown argument names are an error, not silently dropped.
INPUT_CONFIG = ConfigDict(extra="forbid")


def _not_dot_segment(value: str) -> str:
    # "." and ".." would be collapsed out of the URL path by the HTTP client.
    if value in (".", ".."):
        raise ValueError("must not be '.' or '..'")
    return value


ResourceId = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1),
    AfterValidator(_not_dot_segment),
]


def path_id() -> Any:
    """Declare a required resource identifier that belongs in the URL path."""
    return field(metadata={PATH_ID: True})


# -----------------------------------------------------------------------------
# ApiResult — the outcome of one HTTP exchange
# -----------------------------------------------------------------------------
# Success and failure are distinguished by `ok`, so callers branch on a flag
# rather than sniffing error text.  The tool layer renders either side into
# the MCP response envelope.
# -----------------------------------------------------------------------------
@dataclasses.dataclass(frozen=True)
class ApiResult:
    """Result of a RunPod API call: a decoded payload or an error description."""

    ok: bool
    status: Optional[int] = None       # HTTP status, None if no response arrived
    payload: Any = None                # Decoded JSON (or status stub) on success
    error: Optional[str] = None        # Human-readable description on failure

    @classmethod
    def success(cls, status: int, payload: Any) -> "ApiResult":
        return cls(ok=True, status=status, payload=payload)

    @classmethod
    def failure(cls, error: str, status: Optional[int] = None) -> "ApiResult":
        return cls(ok=False, status=status, error=error)


# =============================================================================
# Pods
# =============================================================================
@dataclass(frozen=True, config=INPUT_CONFIG)
class ListPodsInput:
    """Filters for listing pods.  List filters become repeated query keys."""

    compute_type: Optional[ComputeType] = None
    gpu_type_id: Optional[list[str]] = None
    data_center_id: Optional[list[str]] = None
    name: Optional[str] = None
    include_machine: Optional[bool] = None
    include_network_volume: Optional[bool] = None


@dataclass(frozen=True, config=INPUT_CONFIG)
class GetPodInput:
    pod_id: ResourceId = path_id()
    include_machine: Optional[bool] = None
    include_network_volume: Optional[bool] = None


@dataclass(frozen=True, config=INPUT_CONFIG)
class CreatePodInput:
    """Everything needed to rent a new pod.  Only image_name is mandatory."""

    image_name: str
    name: Optional[str] = None
    cloud_type: Optional[CloudType] = None
    gpu_type_ids: Optional[list[str]] = None
    gpu_count: Optional[int] = None
    container_disk_in_gb: Optional[int] = None
    volume_in_gb: Optional[int] = None
    volume_mount_path: Optional[str] = None
    ports: Optional[list[str]] = None          # e.g. ["8888/http", "22/tcp"]
    env: Optional[dict[str, str]] = None
    data_center_ids: Optional[list[str]] = None


@dataclass(frozen=True, config=INPUT_CONFIG)
class UpdatePodInput:
    pod_id: ResourceId = path_id()
    name: Optional[str] = None
    image_name: Optional[str] = None
    container_disk_in_gb: Optional[int] = None
    volume_in_gb: Optional[int] = None
    volume_mount_path: Optional[str] = None
    ports: Optional[list[str]] = None
    env: Optional[dict[str, str]] = None


@dataclass(frozen=True, config=INPUT_CONFIG)
class PodIdInput:
    """Shared by start-pod, stop-pod and delete-pod."""

    pod_id: ResourceId = path_id()


# =============================================================================
# Serverless endpoints
# =============================================================================
@dataclass(frozen=True, config=INPUT_CONFIG)
class ListEndpointsInput:
    include_template: Optional[bool] = None
    include_workers: Optional[bool] = None


@dataclass(frozen=True, config=INPUT_CONFIG)
class GetEndpointInput:
    endpoint_id: ResourceId = path_id()
    include_template: Optional[bool] = None
    include_workers: Optional[bool] = None


@dataclass(frozen=True, config=INPUT_CONFIG)
class CreateEndpointInput:
    """A serverless deployment.  The template must already exist remotely."""

    template_id: str
    name: Optional[str] = None
    compute_type: Optional[ComputeType] = None
    gpu_type_ids: Optional[list[str]] = None
    gpu_count: Optional[int] = None
    workers_min: Optional[int] = None
    workers_max: Optional[int] = None
    data_center_ids: Optional[list[str]] = None


@dataclass(frozen=True, config=INPUT_CONFIG)
class UpdateEndpointInput:
    endpoint_id: ResourceId = path_id()
    name: Optional[str] = None
    workers_min: Optional[int] = None
    workers_max: Optional[int] = None
    idle_timeout: Optional[int] = None         # Seconds before an idle worker scales down
    scaler_type: Optional[ScalerType] = None
    scaler_value: Optional[int] = None


@dataclass(frozen=True, config=INPUT_CONFIG)
class EndpointIdInput:
    endpoint_id: ResourceId = path_id()


# =============================================================================
# Templates
# =============================================================================
@dataclass(frozen=True, config=INPUT_CONFIG)
class ListTemplatesInput:
    pass


@dataclass(frozen=True, config=INPUT_CONFIG)
class TemplateIdInput:
    """Shared by get-template and delete-template."""

    template_id: ResourceId = path_id()


@dataclass(frozen=True, config=INPUT_CONFIG)
class CreateTemplateInput:
    name: str
    image_name: str
    is_serverless: Optional[bool] = None
    ports: Optional[list[str]] = None
    docker_entrypoint: Optional[list[str]] = None
    docker_start_cmd: Optional[list[str]] = None
    env: Optional[dict[str, str]] = None
    container_disk_in_gb: Optional[int] = None
    volume_in_gb: Optional[int] = None
    volume_mount_path: Optional[str] = None
    readme: Optional[str] = None               # Markdown shown in the RunPod console


@dataclass(frozen=True, config=INPUT_CONFIG)
class UpdateTemplateInput:
    template_id: ResourceId = path_id()
    name: Optional[str] = None
    image_name: Optional[str] = None
    ports: Optional[list[str]] = None
    env: Optional[dict[str, str]] = None
    readme: Optional[str] = None


# =============================================================================
# Network volumes
# =============================================================================
@dataclass(frozen=True, config=INPUT_CONFIG)
class ListNetworkVolumesInput:
    pass


@dataclass(frozen=True, config=INPUT_CONFIG)
class NetworkVolumeIdInput:
    network_volume_id: ResourceId = path_id()


@dataclass(frozen=True, config=INPUT_CONFIG)
class CreateNetworkVolumeInput:
    name: str
    size: int                                  # GB
    data_center_id: str


@dataclass(frozen=True, config=INPUT_CONFIG)
class UpdateNetworkVolumeInput:
    network_volume_id: ResourceId = path_id()
    name: Optional[str] = None
    size: Optional[int] = None                 # GB; RunPod only allows growing a volume


# =============================================================================
# Container registry credentials
# =============================================================================
@dataclass(frozen=True, config=INPUT_CONFIG)
class ListRegistryAuthsInput:
    pass


@dataclass(frozen=True, config=INPUT_CONFIG)
class RegistryAuthIdInput:
    container_registry_auth_id: ResourceId = path_id()


@dataclass(frozen=True, config=INPUT_CONFIG)
class CreateRegistryAuthInput:
    name: str
    username: str
    password: str = field(repr=False)
