"""Assertions for verifying rendered Kubernetes manifest templates.

rendercheck renders templates through an external renderer (``ytt`` by
default), decodes the output into typed resources and evaluates composable
matchers over the result:

>>> from rendercheck import RenderingContext, assert_that, having_container
>>> from rendercheck import produce_object
>>> context = RenderingContext.of("config/").with_data({"image": "nginx:1.25"})
>>> assert_that(  # doctest: +SKIP
...     context, produce_object(having_container("web").running_image("nginx:1.25"))
... )

"""

from __future__ import annotations

from rendercheck.config import RendererConfig
from rendercheck.context import RenderingContext, new_rendering_context
from rendercheck.errors import (
    ContainerNotFoundError,
    DecodeError,
    ExpectationFailedError,
    RenderCheckError,
    RenderError,
    RenderExitError,
    RenderSpawnError,
    RenderTimeoutError,
    TypeMismatchError,
    UnknownKindError,
)
from rendercheck.matchers import (
    ContainerExpectation,
    HavingContainerMatcher,
    Matcher,
    ProduceObjectMatcher,
    SatisfyOverlayMatcher,
    assert_that,
    assert_that_not,
    having_container,
    produce_object,
    produce_yaml,
    satisfy_overlay,
)
from rendercheck.renderer import RenderResult, build_render_args, render
from rendercheck.resources import SchemaRegistry, decode, decode_all, default_registry

__all__ = [
    "ContainerExpectation",
    "ContainerNotFoundError",
    "DecodeError",
    "ExpectationFailedError",
    "HavingContainerMatcher",
    "Matcher",
    "ProduceObjectMatcher",
    "RenderCheckError",
    "RenderError",
    "RenderExitError",
    "RenderResult",
    "RenderSpawnError",
    "RenderTimeoutError",
    "RendererConfig",
    "RenderingContext",
    "SatisfyOverlayMatcher",
    "SchemaRegistry",
    "TypeMismatchError",
    "UnknownKindError",
    "assert_that",
    "assert_that_not",
    "build_render_args",
    "decode",
    "decode_all",
    "default_registry",
    "having_container",
    "new_rendering_context",
    "produce_object",
    "produce_yaml",
    "render",
    "satisfy_overlay",
]
