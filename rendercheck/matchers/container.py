"""Matcher for a named container within a decoded Deployment.

Expectations are chained with builder methods; each call returns a new
matcher, leaving the original untouched:

    matcher = (
        having_container("web")
        .running_image("nginx:1.25")
        .with_env("LOG_LEVEL", "debug")
    )

When matched, the pod template's containers are scanned for ``name``. If the
template lists the name more than once, the last occurrence is the one
evaluated. Expectations then run in the order they were added and the first
failure is raised as ``ExpectationFailedError``.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from rendercheck.errors import (
    ContainerNotFoundError,
    ExpectationFailedError,
    TypeMismatchError,
)
from rendercheck.logging import get_logger, log_debug
from rendercheck.resources.models import Container, Deployment

if typ.TYPE_CHECKING:
    from collections import abc as cabc

logger = get_logger(__name__)


@dc.dataclass(frozen=True, slots=True)
class ContainerExpectation:
    """A single named predicate over one container.

    Attributes
    ----------
    description
        What the expectation requires, phrased to follow "Expected container
        <name> to", e.g. ``run image nginx:1.25``.
    predicate
        Returns True when the container satisfies the expectation.
    observed
        Describes what the container actually has, used in the failure message.

    """

    description: str
    predicate: cabc.Callable[[Container], bool]
    observed: cabc.Callable[[Container], str]

    def verify(self, container: Container) -> None:
        """Raise ``ExpectationFailedError`` unless ``container`` satisfies this."""
        if not self.predicate(container):
            raise ExpectationFailedError(
                container.name, self.description, self.observed(container)
            )


def _env_value(container: Container, name: str) -> str | None:
    for var in container.env:
        if var.name == name:
            return var.value
    return None


def _describe_ports(container: Container) -> str:
    if not container.ports:
        return "it exposes no ports"
    ports = ", ".join(f"{p.container_port}/{p.protocol}" for p in container.ports)
    return f"it exposes {ports}"


@dc.dataclass(frozen=True, slots=True)
class HavingContainerMatcher:
    """Match a Deployment whose pod template has a container named ``name``.

    Attributes
    ----------
    name
        Container name to look up.
    expectations
        Ordered expectations evaluated against the selected container.

    """

    name: str
    expectations: tuple[ContainerExpectation, ...] = ()

    def satisfying(
        self,
        description: str,
        predicate: cabc.Callable[[Container], bool],
        observed: cabc.Callable[[Container], str] = repr,
    ) -> HavingContainerMatcher:
        """Return a matcher with an extra ad-hoc expectation appended."""
        expectation = ContainerExpectation(description, predicate, observed)
        return dc.replace(self, expectations=(*self.expectations, expectation))

    def running_image(self, image: str) -> HavingContainerMatcher:
        """Expect the container to run ``image``."""
        return self.satisfying(
            f"run image {image}",
            lambda container: container.image == image,
            lambda container: f"instead it will run {container.image}",
        )

    def with_command(self, *command: str) -> HavingContainerMatcher:
        """Expect the container entrypoint to be exactly ``command``."""
        expected = list(command)
        return self.satisfying(
            f"have command {expected}",
            lambda container: container.command == expected,
            lambda container: f"its command is {container.command}",
        )

    def with_args(self, *args: str) -> HavingContainerMatcher:
        """Expect the container arguments to be exactly ``args``."""
        expected = list(args)
        return self.satisfying(
            f"have args {expected}",
            lambda container: container.args == expected,
            lambda container: f"its args are {container.args}",
        )

    def with_env(self, name: str, value: str) -> HavingContainerMatcher:
        """Expect environment variable ``name`` to be set to ``value``."""

        def observed(container: Container) -> str:
            actual = _env_value(container, name)
            if actual is None:
                return f"{name} is not set"
            return f"{name} is {actual!r}"

        return self.satisfying(
            f"set {name}={value!r}",
            lambda container: _env_value(container, name) == value,
            observed,
        )

    def exposing_port(self, port: int, protocol: str = "TCP") -> HavingContainerMatcher:
        """Expect the container to expose ``port`` over ``protocol``."""
        return self.satisfying(
            f"expose port {port}/{protocol}",
            lambda container: any(
                p.container_port == port and p.protocol == protocol
                for p in container.ports
            ),
            _describe_ports,
        )

    def with_image_pull_policy(self, policy: str) -> HavingContainerMatcher:
        """Expect the container's image pull policy to be ``policy``."""
        return self.satisfying(
            f"use image pull policy {policy}",
            lambda container: container.image_pull_policy == policy,
            lambda container: f"it uses {container.image_pull_policy}",
        )

    def _select(self, deployment: Deployment) -> Container:
        selected: Container | None = None
        for container in deployment.spec.template.spec.containers or ():
            if container.name == self.name:
                selected = container
        if selected is None:
            raise ContainerNotFoundError(self.name)
        return selected

    def match(self, actual: object) -> bool:
        """Evaluate every expectation against the named container."""
        if not isinstance(actual, Deployment):
            raise TypeMismatchError("HavingContainer", "a Deployment", actual)

        container = self._select(actual)
        log_debug(
            logger,
            "Checking %d expectation(s) against container %s",
            len(self.expectations),
            self.name,
        )
        for expectation in self.expectations:
            expectation.verify(container)
        return True

    def _summary(self) -> str:
        if not self.expectations:
            return self.name
        wanted = "; ".join(e.description for e in self.expectations)
        return f"{self.name} ({wanted})"

    def failure_message(self, actual: object) -> str:
        """Describe a positive mismatch."""
        return f"Expected deployment to have container {self._summary()}"

    def negated_failure_message(self, actual: object) -> str:
        """Describe a negated mismatch."""
        return f"Expected deployment not to have container {self._summary()}"


def having_container(name: str) -> HavingContainerMatcher:
    """Build a matcher for the container called ``name``."""
    return HavingContainerMatcher(name)
