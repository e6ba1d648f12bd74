"""Resource models, kind registry and decoder for rendered manifests."""

from __future__ import annotations

from .decoder import decode, decode_all
from .models import (
    ConfigMap,
    Container,
    ContainerPort,
    DaemonSet,
    Deployment,
    EnvVar,
    ObjectMeta,
    Pod,
    PodSpec,
    Resource,
    Service,
    StatefulSet,
)
from .registry import SchemaRegistry, default_registry

__all__ = [
    "ConfigMap",
    "Container",
    "ContainerPort",
    "DaemonSet",
    "Deployment",
    "EnvVar",
    "ObjectMeta",
    "Pod",
    "PodSpec",
    "Resource",
    "SchemaRegistry",
    "Service",
    "StatefulSet",
    "decode",
    "decode_all",
    "default_registry",
]
