"""Errors raised while rendering, decoding and matching manifests."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from collections import abc as cabc


class RenderCheckError(Exception):
    """Base class for rendercheck errors."""


class TypeMismatchError(RenderCheckError, TypeError):
    """A matcher received a value of the wrong shape."""

    def __init__(self, matcher: str, expected: str, actual: object) -> None:
        """Describe the expected shape and the value actually received."""
        self.matcher = matcher
        self.expected = expected
        self.actual = actual
        msg = (
            f"{matcher} must be passed {expected}. "
            f"Got\n    <{type(actual).__name__}>: {actual!r}"
        )
        super().__init__(msg)


class RenderError(RenderCheckError):
    """Base class for failures of the external renderer."""


class RenderSpawnError(RenderError):
    """The renderer executable could not be started."""

    def __init__(self, executable: str, reason: str) -> None:
        """Record the executable that failed to start."""
        self.executable = executable
        super().__init__(f"failed to start renderer {executable!r}: {reason}")


class RenderTimeoutError(RenderError):
    """The renderer did not finish within the configured timeout."""

    def __init__(self, executable: str, timeout: float) -> None:
        """Record the executable and the timeout that elapsed."""
        self.executable = executable
        self.timeout = timeout
        super().__init__(f"renderer {executable!r} timed out after {timeout}s")


class RenderExitError(RenderError):
    """The renderer ran but exited with a non-zero status.

    The string form is the renderer's captured error output, verbatim, so the
    harness reports the renderer's own diagnostic.

    Attributes
    ----------
    exit_code
        Exit status reported by the renderer.
    stderr
        Captured error output as text.
    command
        Command line that produced the failure.

    """

    def __init__(
        self, stderr: str, *, exit_code: int, command: cabc.Sequence[str] = ()
    ) -> None:
        """Store the diagnostic text and exit status."""
        self.stderr = stderr
        self.exit_code = exit_code
        self.command = tuple(command)
        super().__init__(stderr)

    def __str__(self) -> str:
        """Return the captured error output unchanged."""
        return self.stderr


class DecodeError(RenderCheckError):
    """Rendered bytes could not be parsed into a structured resource."""


class UnknownKindError(DecodeError):
    """The document's apiVersion/kind pair is not registered."""

    def __init__(self, api_version: str, kind: str) -> None:
        """Record the unresolved kind."""
        self.api_version = api_version
        self.kind = kind
        super().__init__(f"no kind {kind!r} is registered in version {api_version!r}")


class ContainerNotFoundError(RenderCheckError):
    """The named container is absent from the pod template."""

    def __init__(self, name: str) -> None:
        """Record the container name that was looked up."""
        self.name = name
        super().__init__(f"Expected container named {name}, but did not find one")


class ExpectationFailedError(RenderCheckError):
    """A container expectation did not hold.

    Attributes
    ----------
    container
        Name of the container the expectation was evaluated against.
    description
        What the expectation required, e.g. ``run image nginx:1.25``.
    observed
        Description of what the container actually had.

    """

    def __init__(self, container: str, description: str, observed: str) -> None:
        """Build an expected-vs-actual message."""
        self.container = container
        self.description = description
        self.observed = observed
        super().__init__(
            f"Expected container {container} to {description}, but {observed}"
        )


__all__ = [
    "ContainerNotFoundError",
    "DecodeError",
    "ExpectationFailedError",
    "RenderCheckError",
    "RenderError",
    "RenderExitError",
    "RenderSpawnError",
    "RenderTimeoutError",
    "TypeMismatchError",
    "UnknownKindError",
]
