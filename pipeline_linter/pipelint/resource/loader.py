"""Manifest loading using ruamel.yaml."""

from __future__ import annotations

from io import StringIO
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML, YAMLError

from pipelint.resource.models import Manifest, Pipeline, Resource, Secret, Signature

RESOURCE_KINDS: dict[str, type[Resource]] = {
    "pipeline": Pipeline,
    "secret": Secret,
    "signature": Signature,
}


class ParseError(Exception):
    """Raised when a document cannot be turned into manifest resources."""

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.line = line


def _to_plain(node: Any, parents: frozenset[int] = frozenset()) -> Any:
    """Convert ruamel container types to plain dicts and lists.

    An alias that refers back to one of its own ancestors raises ParseError.
    """
    if not (hasattr(node, "items") or isinstance(node, list)):
        return node
    if id(node) in parents:
        raise ParseError("yaml: recursive alias")
    parents = parents | {id(node)}
    if hasattr(node, "items"):
        return {str(k): _to_plain(v, parents) for k, v in node.items()}
    return [_to_plain(v, parents) for v in node]


def parse_resource(raw: Any) -> Resource:
    """Build a typed resource from one parsed YAML document."""
    if not isinstance(raw, dict):
        raise ParseError("yaml: resource must be a mapping")

    kind = raw.get("kind") or "pipeline"
    model = RESOURCE_KINDS.get(kind) if isinstance(kind, str) else None
    if model is None:
        raise ParseError(f"yaml: unknown resource kind: {kind}")

    try:
        return model.model_validate({**raw, "kind": kind})
    except ValidationError as e:
        raise ParseError(f"yaml: invalid {kind}: {e}") from e


def parse_string(text: str) -> Manifest:
    """Parse every document in a YAML string into a Manifest.

    Empty documents (e.g. a leading ``---``) are skipped.
    """
    yaml = YAML(typ="safe")

    try:
        documents = list(yaml.load_all(StringIO(text)))
    except YAMLError as e:
        line = None
        if getattr(e, "problem_mark", None) is not None:
            line = e.problem_mark.line + 1  # 0-indexed to 1-indexed
        raise ParseError(str(e), line=line) from e

    resources = [
        parse_resource(_to_plain(doc)) for doc in documents if doc is not None
    ]
    return Manifest(resources=resources)


def parse_file(path: str | Path) -> Manifest:
    """Read and parse a manifest file."""
    return parse_string(Path(path).read_text())
