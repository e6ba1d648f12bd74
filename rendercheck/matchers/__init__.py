"""Composable matchers over rendering contexts and decoded resources."""

from __future__ import annotations

from .assertions import assert_that, assert_that_not
from .container import ContainerExpectation, HavingContainerMatcher, having_container
from .overlay import SatisfyOverlayMatcher, satisfy_overlay
from .produce import ProduceObjectMatcher, produce_object, produce_yaml
from .protocol import Matcher

__all__ = [
    "ContainerExpectation",
    "HavingContainerMatcher",
    "Matcher",
    "ProduceObjectMatcher",
    "SatisfyOverlayMatcher",
    "assert_that",
    "assert_that_not",
    "having_container",
    "produce_object",
    "produce_yaml",
    "satisfy_overlay",
]
