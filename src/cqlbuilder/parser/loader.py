"""YAML loader for query documents, with DoS safeguards."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from cqlbuilder.errors import QueryDocumentError, YAMLSafetyError

# ---------------------------------------------------------------------------
# Safety limits
# ---------------------------------------------------------------------------

DEFAULT_MAX_DOCUMENT_SIZE = 1_000_000  # characters
_MAX_NODE_COUNT = 10_000
_MAX_DEPTH = 20

# Anchor definitions (&name) at line start or after whitespace, sequence or
# mapping indicators. Quoted strings can trigger false positives.
_ANCHOR_RE = re.compile(r"(?:^|[\s\-:\[,])&(\w+)", re.MULTILINE)


class QueryLoader:
    """Loads query documents from YAML (JSON is accepted as a YAML subset).

    Uses ruamel.yaml's safe loader, so only plain mappings, sequences and
    scalars are ever constructed.
    """

    def __init__(self, max_document_size: int = DEFAULT_MAX_DOCUMENT_SIZE) -> None:
        self._yaml = YAML(typ="safe", pure=True)
        self._yaml.max_depth = _MAX_DEPTH
        self._max_document_size = max_document_size

    # -- safety checks -------------------------------------------------------

    def _check_yaml_safety(self, content: str) -> None:
        """Reject oversized documents and anchors/aliases before parsing."""
        if len(content) > self._max_document_size:
            raise YAMLSafetyError(
                f"YAML document exceeds maximum size "
                f"({len(content):,} chars > {self._max_document_size:,} limit)"
            )
        if _ANCHOR_RE.search(content):
            raise YAMLSafetyError("YAML anchors/aliases are not supported in query documents")

    @staticmethod
    def _check_node_count(
        data: Any, limit: int = _MAX_NODE_COUNT, max_depth: int = _MAX_DEPTH
    ) -> None:
        """Reject documents with too many nodes or nested deeper than ``max_depth``."""
        count = 0
        stack: list[tuple[Any, int]] = [(data, 1)]
        while stack:
            node, depth = stack.pop()
            count += 1
            if count > limit:
                raise YAMLSafetyError(f"YAML document exceeds maximum node count ({limit:,})")
            if depth > max_depth:
                raise YAMLSafetyError(f"YAML document exceeds maximum depth ({max_depth})")
            if isinstance(node, dict):
                stack.extend((child, depth + 1) for child in node.values())
            elif isinstance(node, list):
                stack.extend((child, depth + 1) for child in node)

    # -- public loading API --------------------------------------------------

    def load(self, path: Path) -> dict[str, Any]:
        """Load a query document from a file."""
        try:
            with path.open("r", encoding="utf-8") as handle:
                content = handle.read()
        except UnicodeDecodeError as exc:
            raise QueryDocumentError(f"{path}: not valid UTF-8", errors=[str(exc)]) from exc
        return self.load_string(content, filename=str(path))

    def load_string(self, content: str, filename: str = "<string>") -> dict[str, Any]:
        """Load a query document from a string."""
        self._check_yaml_safety(content)
        try:
            data = self._yaml.load(content)
        except YAMLError as exc:
            raise QueryDocumentError(f"{filename}: invalid YAML", errors=[str(exc)]) from exc
        except RecursionError as exc:
            raise YAMLSafetyError(
                f"{filename}: YAML document exceeds maximum depth ({_MAX_DEPTH})"
            ) from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise QueryDocumentError(
                f"{filename}: a query document must be a mapping, got {type(data).__name__}"
            )
        self._check_node_count(data)
        return {str(k): v for k, v in data.items()}
