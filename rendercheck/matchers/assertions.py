"""pytest-facing assertion helpers for rendercheck matchers."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from .protocol import Matcher


def assert_that(actual: object, matcher: Matcher) -> None:
    """Assert that ``actual`` satisfies ``matcher``.

    Parameters
    ----------
    actual : object
        Value under test, typically a ``RenderingContext``.
    matcher : Matcher
        Matcher to evaluate.

    Raises
    ------
    AssertionError
        If the matcher reports a mismatch.
    RenderCheckError
        Propagated unchanged when the matcher could not evaluate ``actual``.

    """
    if not matcher.match(actual):
        raise AssertionError(matcher.failure_message(actual))


def assert_that_not(actual: object, matcher: Matcher) -> None:
    """Assert that ``actual`` does not satisfy ``matcher``.

    Errors raised while matching propagate unchanged rather than counting as
    a mismatch.
    """
    if matcher.match(actual):
        raise AssertionError(matcher.negated_failure_message(actual))
