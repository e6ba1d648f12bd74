"""Decode rendered YAML into typed resource structures."""

from __future__ import annotations

import functools
import typing as typ

import msgspec
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from rendercheck.errors import DecodeError, UnknownKindError

from .registry import SchemaRegistry, default_registry

if typ.TYPE_CHECKING:
    from collections import abc as cabc

    from .models import Resource

YAML_VERSION = (1, 2)


def decode(data: bytes | str, *, registry: SchemaRegistry | None = None) -> Resource:
    """Decode the first rendered document into its registered resource type.

    Renderers commonly emit several resources in one stream, for example a
    Deployment followed by its Service. Only the first non-empty document is
    decoded; later documents are neither parsed nor validated. Use
    :func:`decode_all` to decode the whole stream.

    Parameters
    ----------
    data : bytes | str
        Rendered output. Empty documents before the resource are ignored.
    registry : SchemaRegistry | None, optional
        Kinds that may be decoded. Defaults to the core Kubernetes kinds.

    Returns
    -------
    Resource
        The decoded resource, e.g. a ``Deployment``.

    Raises
    ------
    DecodeError
        If the input is not valid UTF-8 or YAML, holds no document, or the
        document does not match its kind's schema.
    UnknownKindError
        If the document's apiVersion/kind pair is not registered.

    """
    document = next(_iter_documents(data), None)
    if document is None:
        msg = "rendered output contains no YAML document"
        raise DecodeError(msg)
    resolved = _shared_registry() if registry is None else registry
    return _convert(document, resolved)


def decode_all(
    data: bytes | str, *, registry: SchemaRegistry | None = None
) -> list[Resource]:
    """Decode every non-empty document in a multi-document stream."""
    resolved = _shared_registry() if registry is None else registry
    return [_convert(document, resolved) for document in _iter_documents(data)]


def _iter_documents(data: bytes | str) -> cabc.Iterator[object]:
    try:
        text = data.decode("utf-8") if isinstance(data, bytes) else data
    except UnicodeDecodeError as exc:
        msg = f"rendered output is not valid UTF-8: {exc}"
        raise DecodeError(msg) from exc

    documents = iter(_yaml().load_all(text))
    while True:
        try:
            document = next(documents)
        except StopIteration:
            return
        except YAMLError as exc:
            msg = f"failed to parse YAML: {exc}"
            raise DecodeError(msg) from exc
        if document is not None:
            yield document


def _convert(document: object, registry: SchemaRegistry) -> Resource:
    if not isinstance(document, dict):
        msg = f"expected a mapping, got {type(document).__name__}"
        raise DecodeError(msg)

    api_version = document.get("apiVersion")
    kind = document.get("kind")
    if not isinstance(api_version, str) or not isinstance(kind, str):
        msg = "document is missing a string apiVersion and kind"
        raise DecodeError(msg)

    type_ = registry.resolve(api_version, kind)
    if type_ is None:
        raise UnknownKindError(api_version, kind)

    try:
        return msgspec.convert(document, type=type_)
    except msgspec.ValidationError as exc:
        msg = f"{api_version}/{kind} failed schema validation: {exc}"
        raise DecodeError(msg) from exc


@functools.cache
def _shared_registry() -> SchemaRegistry:
    return default_registry()


def _yaml() -> YAML:
    yaml = YAML(typ="safe")
    yaml.version = YAML_VERSION
    yaml.allow_duplicate_keys = False
    return yaml


__all__ = ["YAML_VERSION", "decode", "decode_all"]
