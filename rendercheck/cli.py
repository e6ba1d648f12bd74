"""Render templates, decode the result and summarise the resource."""

from __future__ import annotations

import argparse
import os
import sys
import typing as typ
from pathlib import Path

import msgspec

from rendercheck.config import RendererConfig
from rendercheck.context import RenderingContext
from rendercheck.errors import RenderCheckError
from rendercheck.logging import (
    configure_logging,
    get_logger,
    log_info,
    log_warning,
)
from rendercheck.renderer import render
from rendercheck.resources.decoder import decode

if typ.TYPE_CHECKING:
    from collections import abc as cabc

logger = get_logger(__name__)


def _parse_binding(raw: str) -> tuple[str, str]:
    key, sep, value = raw.partition("=")
    if not sep or not key:
        msg = f"expected KEY=VALUE, got {raw!r}"
        raise argparse.ArgumentTypeError(msg)
    return key, value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rendercheck", description=__doc__)
    parser.add_argument(
        "-f",
        "--template",
        dest="templates",
        action="append",
        required=True,
        help="Template to render; repeat to layer templates in order",
    )
    parser.add_argument(
        "-v",
        "--value",
        dest="values",
        action="append",
        default=[],
        type=_parse_binding,
        help="Data binding as KEY=VALUE; repeatable",
    )
    parser.add_argument(
        "--json-out",
        type=Path,
        default=None,
        help="Optional path to write the decoded resource as JSON",
    )
    return parser


def main(argv: cabc.Sequence[str] | None = None) -> int:
    """Render and decode templates given on the command line.

    Parameters
    ----------
    argv : Sequence[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.

    Returns
    -------
    int
        Exit code: 0 on success, 1 when rendering or decoding fails.

    """
    log_level = os.environ.get("RENDERCHECK_LOG_LEVEL", "WARNING")
    normalized_level, invalid_level = configure_logging(log_level)
    if invalid_level:
        log_warning(
            logger,
            "Invalid RENDERCHECK_LOG_LEVEL %r, falling back to %s",
            log_level,
            normalized_level,
        )

    args = _build_parser().parse_args(argv)
    context = RenderingContext.of(*args.templates).with_data(dict(args.values))

    try:
        config = RendererConfig.from_env()
        result = render(context.templates, context.data, config=config)
        result.raise_for_status()
        resource = decode(result.stdout)
        if args.json_out:
            args.json_out.write_bytes(msgspec.json.encode(resource))
    except (RenderCheckError, ValueError, OSError) as exc:
        print(f"render failed: {exc}", file=sys.stderr)
        return 1

    log_info(
        logger,
        "Rendered %s/%s from %d template(s)",
        resource.api_version,
        resource.kind,
        len(context.templates),
    )
    print(f"{resource.api_version}/{resource.kind} {resource.metadata.name or '-'}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
