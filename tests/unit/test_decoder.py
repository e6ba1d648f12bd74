"""Unit tests for decoding rendered manifests."""

from __future__ import annotations

import msgspec
import pytest

from rendercheck.errors import DecodeError, UnknownKindError
from rendercheck.resources import (
    ConfigMap,
    Deployment,
    Resource,
    SchemaRegistry,
    Service,
    decode,
    decode_all,
    default_registry,
)

DEPLOYMENT_YAML = b"""\
apiVersion: apps/v1
kind: Deployment
metadata:
  name: web
  namespace: shop
spec:
  replicas: 3
  selector:
    matchLabels:
      app: web
  template:
    metadata:
      labels:
        app: web
    spec:
      serviceAccountName: web
      containers:
      - name: web
        image: nginx:1.25
        imagePullPolicy: IfNotPresent
        args: ["--port", "8080"]
        ports:
        - containerPort: 8080
        env:
        - name: LOG_LEVEL
          value: debug
"""


class Widget(Resource, kw_only=True, rename="camel"):
    """Custom resource used to exercise pluggable registries."""

    size: int = 0


class TestDecode:
    """Tests for decode()."""

    def test_decodes_deployment(self) -> None:
        """A Deployment document decodes into the typed struct."""
        resource = decode(DEPLOYMENT_YAML)

        assert isinstance(resource, Deployment)
        assert resource.metadata.name == "web"
        assert resource.metadata.namespace == "shop"
        assert resource.spec.replicas == 3
        assert resource.spec.selector is not None
        assert resource.spec.selector.match_labels == {"app": "web"}

        pod_spec = resource.spec.template.spec
        assert pod_spec.service_account_name == "web"
        [container] = pod_spec.containers
        assert container.name == "web"
        assert container.image == "nginx:1.25"
        assert container.image_pull_policy == "IfNotPresent"
        assert container.args == ["--port", "8080"]
        assert container.ports[0].container_port == 8080
        assert container.ports[0].protocol == "TCP"
        assert [(e.name, e.value) for e in container.env] == [("LOG_LEVEL", "debug")]

    def test_accepts_text(self) -> None:
        """Text input decodes the same as bytes."""
        assert decode(DEPLOYMENT_YAML.decode()) == decode(DEPLOYMENT_YAML)

    def test_skips_empty_documents(self) -> None:
        """Separators and empty documents around the resource are ignored."""
        data = b"---\n" + DEPLOYMENT_YAML + b"---\n"

        assert isinstance(decode(data), Deployment)

    def test_ignores_unknown_fields(self) -> None:
        """Fields outside the modelled subset do not fail decoding."""
        data = b"""\
apiVersion: v1
kind: ConfigMap
metadata:
  name: settings
  uid: 1234
immutable: true
data:
  mode: fast
"""
        resource = decode(data)

        assert resource == ConfigMap(
            api_version="v1",
            kind="ConfigMap",
            metadata=resource.metadata,
            data={"mode": "fast"},
        )
        assert resource.metadata.name == "settings"

    def test_decodes_service_defaults(self) -> None:
        """Omitted fields take their Kubernetes defaults."""
        data = b"""\
apiVersion: v1
kind: Service
metadata:
  name: web
spec:
  ports:
  - port: 80
    targetPort: http
"""
        resource = decode(data)

        assert isinstance(resource, Service)
        assert resource.spec.type == "ClusterIP"
        assert resource.spec.ports[0].target_port == "http"

    def test_unknown_kind_is_a_decode_error(self) -> None:
        """An unregistered apiVersion/kind raises UnknownKindError."""
        data = b"apiVersion: example.com/v1\nkind: Widget\n"

        with pytest.raises(UnknownKindError) as excinfo:
            decode(data)

        assert isinstance(excinfo.value, DecodeError)
        assert excinfo.value.api_version == "example.com/v1"
        assert excinfo.value.kind == "Widget"

    def test_kind_is_resolved_per_api_version(self) -> None:
        """A known kind under an unknown version is not decoded."""
        with pytest.raises(UnknownKindError):
            decode(b"apiVersion: extensions/v1beta1\nkind: Deployment\n")

    @pytest.mark.parametrize(
        ("data", "error_match"),
        [
            pytest.param(b"", "no YAML document", id="empty"),
            pytest.param(b"---\n---\n", "no YAML document", id="only_separators"),
            pytest.param(b"- a\n- b\n", "expected a mapping", id="sequence"),
            pytest.param(b"kind: Pod\n", "apiVersion and kind", id="no_api_version"),
            pytest.param(b"apiVersion: v1\n", "apiVersion and kind", id="no_kind"),
            pytest.param(
                b"apiVersion: v1\nkind: 7\n", "apiVersion and kind", id="int_kind"
            ),
            pytest.param(b"key: [unclosed\n", "failed to parse YAML", id="syntax"),
            pytest.param(b"\xff\xfe\x00", "not valid UTF-8", id="bad_utf8"),
        ],
    )
    def test_malformed_input_raises_decode_error(
        self, data: bytes, error_match: str
    ) -> None:
        """Malformed input raises DecodeError rather than a partial object."""
        with pytest.raises(DecodeError, match=error_match):
            decode(data)

    def test_schema_violation_raises_decode_error(self) -> None:
        """A document that does not fit its kind's schema is rejected."""
        data = b"""\
apiVersion: apps/v1
kind: Deployment
spec:
  template:
    spec:
      containers: not-a-list
"""
        with pytest.raises(DecodeError, match="failed schema validation"):
            decode(data)

    def test_first_of_several_documents_wins(self) -> None:
        """decode() returns the first resource of a multi-document stream."""
        data = b"---\n" + DEPLOYMENT_YAML + b"---\napiVersion: v1\nkind: Service\n"

        resource = decode(data)

        assert isinstance(resource, Deployment)
        assert resource.metadata.name == "web"

    def test_documents_after_the_first_are_not_validated(self) -> None:
        """Later documents never fail decoding of the first."""
        data = DEPLOYMENT_YAML + b"---\napiVersion: example.com/v1\nkind: Widget\n"

        assert isinstance(decode(data), Deployment)

    @pytest.mark.parametrize(
        "containers",
        [pytest.param("", id="empty_value"), pytest.param(" null", id="null")],
    )
    def test_null_containers_decode_as_empty(self, containers: str) -> None:
        """A null container list is treated as an empty one."""
        data = (
            "apiVersion: apps/v1\nkind: Deployment\nspec:\n  template:\n"
            f"    spec:\n      containers:{containers}\n      initContainers:\n"
        )

        resource = decode(data)

        assert isinstance(resource, Deployment)
        assert resource.spec.template.spec.containers == []
        assert resource.spec.template.spec.init_containers == []

    def test_decode_all_returns_every_document(self) -> None:
        """decode_all() decodes each non-empty document in order."""
        data = DEPLOYMENT_YAML + b"---\napiVersion: v1\nkind: ConfigMap\n---\n"

        resources = decode_all(data)

        assert [type(r) for r in resources] == [Deployment, ConfigMap]

    def test_custom_registry_decodes_custom_kind(self) -> None:
        """Kinds resolve through the supplied registry."""
        registry = default_registry()
        registry.register("example.com/v1", "Widget", Widget)

        resource = decode(
            b"apiVersion: example.com/v1\nkind: Widget\nsize: 4\n",
            registry=registry,
        )

        assert resource == Widget(api_version="example.com/v1", kind="Widget", size=4)

    def test_empty_registry_is_not_replaced_by_defaults(self) -> None:
        """An explicitly empty registry knows no kinds at all."""
        with pytest.raises(UnknownKindError):
            decode(DEPLOYMENT_YAML, registry=SchemaRegistry())

    def test_decoded_resource_encodes_back_to_camel_case(self) -> None:
        """Wire names are camelCase when the resource is serialized."""
        encoded = msgspec.json.decode(msgspec.json.encode(decode(DEPLOYMENT_YAML)))

        assert encoded["apiVersion"] == "apps/v1"
        container = encoded["spec"]["template"]["spec"]["containers"][0]
        assert container["imagePullPolicy"] == "IfNotPresent"


class TestSchemaRegistry:
    """Tests for SchemaRegistry and the default kinds."""

    @pytest.mark.parametrize(
        ("api_version", "kind"),
        [
            ("apps/v1", "Deployment"),
            ("apps/v1", "StatefulSet"),
            ("apps/v1", "DaemonSet"),
            ("v1", "Pod"),
            ("v1", "Service"),
            ("v1", "ConfigMap"),
        ],
    )
    def test_default_kinds_registered(self, api_version: str, kind: str) -> None:
        """The default registry knows the core workload and config kinds."""
        assert (api_version, kind) in default_registry()

    def test_resolve_unknown_returns_none(self) -> None:
        """Unknown pairs resolve to None."""
        assert SchemaRegistry().resolve("v1", "Pod") is None

    def test_duplicate_registration_rejected(self) -> None:
        """A pair can only be registered once."""
        registry = SchemaRegistry()
        registry.register("example.com/v1", "Widget", Widget)

        with pytest.raises(ValueError, match="already registered"):
            registry.register("example.com/v1", "Widget", Widget)

    def test_default_registry_is_fresh_each_call(self) -> None:
        """Extending one default registry does not affect another."""
        extended = default_registry()
        extended.register("example.com/v1", "Widget", Widget)

        assert ("example.com/v1", "Widget") in extended
        assert ("example.com/v1", "Widget") not in default_registry()
        assert len(extended) == len(default_registry()) + 1

    def test_kinds_in_registration_order(self) -> None:
        """kinds() lists pairs in the order they were registered."""
        registry = SchemaRegistry()
        registry.register("v1", "B", Widget)
        registry.register("v1", "A", Widget)

        assert registry.kinds() == [("v1", "B"), ("v1", "A")]
