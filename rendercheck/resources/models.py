"""Typed Kubernetes resource structures decoded from rendered manifests.

Only the fields that test assertions inspect are modelled; anything else in a
rendered document is ignored during decoding. Field names are snake_case in
Python and camelCase on the wire (``image_pull_policy`` <-> ``imagePullPolicy``).
"""

from __future__ import annotations

import msgspec


class ObjectMeta(msgspec.Struct, kw_only=True, rename="camel"):
    """Identifying metadata shared by every resource."""

    name: str | None = None
    namespace: str | None = None
    labels: dict[str, str] = msgspec.field(default_factory=dict)
    annotations: dict[str, str] = msgspec.field(default_factory=dict)


class Resource(msgspec.Struct, kw_only=True, rename="camel"):
    """Kind-tagged resource base.

    Attributes
    ----------
    api_version : str
        Group/version the kind belongs to, e.g. ``apps/v1``.
    kind : str
        Resource kind, e.g. ``Deployment``.
    metadata : ObjectMeta
        Name, namespace, labels and annotations.

    """

    api_version: str
    kind: str
    metadata: ObjectMeta = msgspec.field(default_factory=ObjectMeta)


class EnvVar(msgspec.Struct, kw_only=True, rename="camel"):
    """Environment variable set on a container."""

    name: str
    value: str | None = None


class ContainerPort(msgspec.Struct, kw_only=True, rename="camel"):
    """Port exposed by a container."""

    container_port: int
    name: str | None = None
    protocol: str = "TCP"


class Container(msgspec.Struct, kw_only=True, rename="camel"):
    """A named unit of a pod template.

    Attributes
    ----------
    name : str
        Container name, unique within a well-formed pod template.
    image : str, optional
        Image reference the container runs.
    command : list[str]
        Entrypoint override.
    args : list[str]
        Arguments passed to the entrypoint.
    env : list[EnvVar]
        Literal environment variables.
    ports : list[ContainerPort]
        Ports the container exposes.
    image_pull_policy : str, optional
        ``Always``, ``IfNotPresent`` or ``Never``.

    """

    name: str
    image: str | None = None
    command: list[str] = msgspec.field(default_factory=list)
    args: list[str] = msgspec.field(default_factory=list)
    env: list[EnvVar] = msgspec.field(default_factory=list)
    ports: list[ContainerPort] = msgspec.field(default_factory=list)
    image_pull_policy: str | None = None


class PodSpec(msgspec.Struct, kw_only=True, rename="camel"):
    """Containers and pod-level settings.

    A ``null`` container list decodes as an empty list, as it does in
    Kubernetes.
    """

    containers: list[Container] | None = msgspec.field(default_factory=list)
    init_containers: list[Container] | None = msgspec.field(default_factory=list)
    service_account_name: str | None = None

    def __post_init__(self) -> None:
        """Replace null container lists with empty ones."""
        if self.containers is None:
            self.containers = []
        if self.init_containers is None:
            self.init_containers = []


class PodTemplateSpec(msgspec.Struct, kw_only=True, rename="camel"):
    """Template that workload controllers stamp pods from."""

    metadata: ObjectMeta = msgspec.field(default_factory=ObjectMeta)
    spec: PodSpec = msgspec.field(default_factory=PodSpec)


class LabelSelector(msgspec.Struct, kw_only=True, rename="camel"):
    """Equality-based label selector."""

    match_labels: dict[str, str] = msgspec.field(default_factory=dict)


class DeploymentSpec(msgspec.Struct, kw_only=True, rename="camel"):
    """Desired state of a Deployment."""

    replicas: int | None = None
    selector: LabelSelector | None = None
    template: PodTemplateSpec = msgspec.field(default_factory=PodTemplateSpec)


class Deployment(Resource, kw_only=True, rename="camel"):
    """apps/v1 Deployment."""

    spec: DeploymentSpec = msgspec.field(default_factory=DeploymentSpec)


class StatefulSetSpec(msgspec.Struct, kw_only=True, rename="camel"):
    """Desired state of a StatefulSet."""

    replicas: int | None = None
    service_name: str | None = None
    selector: LabelSelector | None = None
    template: PodTemplateSpec = msgspec.field(default_factory=PodTemplateSpec)


class StatefulSet(Resource, kw_only=True, rename="camel"):
    """apps/v1 StatefulSet."""

    spec: StatefulSetSpec = msgspec.field(default_factory=StatefulSetSpec)


class DaemonSetSpec(msgspec.Struct, kw_only=True, rename="camel"):
    """Desired state of a DaemonSet."""

    selector: LabelSelector | None = None
    template: PodTemplateSpec = msgspec.field(default_factory=PodTemplateSpec)


class DaemonSet(Resource, kw_only=True, rename="camel"):
    """apps/v1 DaemonSet."""

    spec: DaemonSetSpec = msgspec.field(default_factory=DaemonSetSpec)


class Pod(Resource, kw_only=True, rename="camel"):
    """v1 Pod."""

    spec: PodSpec = msgspec.field(default_factory=PodSpec)


class ServicePort(msgspec.Struct, kw_only=True, rename="camel"):
    """Port published by a Service."""

    port: int
    target_port: int | str | None = None
    name: str | None = None
    protocol: str = "TCP"


class ServiceSpec(msgspec.Struct, kw_only=True, rename="camel"):
    """Desired state of a Service."""

    type: str = "ClusterIP"
    selector: dict[str, str] = msgspec.field(default_factory=dict)
    ports: list[ServicePort] = msgspec.field(default_factory=list)


class Service(Resource, kw_only=True, rename="camel"):
    """v1 Service."""

    spec: ServiceSpec = msgspec.field(default_factory=ServiceSpec)


class ConfigMap(Resource, kw_only=True, rename="camel"):
    """v1 ConfigMap."""

    data: dict[str, str] = msgspec.field(default_factory=dict)


__all__ = [
    "ConfigMap",
    "Container",
    "ContainerPort",
    "DaemonSet",
    "Deployment",
    "DeploymentSpec",
    "EnvVar",
    "LabelSelector",
    "ObjectMeta",
    "Pod",
    "PodSpec",
    "PodTemplateSpec",
    "Resource",
    "Service",
    "ServicePort",
    "ServiceSpec",
    "StatefulSet",
    "StatefulSetSpec",
]
