"""Matcher protocol shared by every rendercheck matcher."""

from __future__ import annotations

import typing as typ


@typ.runtime_checkable
class Matcher(typ.Protocol):
    """Protocol for composable predicates evaluated by a test harness.

    ``match`` answers whether ``actual`` satisfies the matcher. It raises a
    ``RenderCheckError`` instead of returning ``False`` when evaluation could
    not be completed (the renderer failed, the value had the wrong shape, a
    named container was missing), so the harness reports the originating
    diagnostic rather than a bare mismatch.

    Implementations never mutate ``actual`` and hold no per-call state that
    changes the outcome of later calls.

    Examples
    --------
    >>> from rendercheck.matchers import having_container
    >>> isinstance(having_container("web"), Matcher)
    True

    """

    def match(self, actual: object) -> bool:
        """Return True when ``actual`` satisfies the matcher."""
        ...

    def failure_message(self, actual: object) -> str:
        """Describe why ``actual`` failed a positive assertion."""
        ...

    def negated_failure_message(self, actual: object) -> str:
        """Describe why ``actual`` failed a negated assertion."""
        ...
