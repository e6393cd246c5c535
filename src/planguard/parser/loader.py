"""YAML loader with position tracking for data object sources."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq

from planguard.models.errors import SourceSpan

# ---------------------------------------------------------------------------
# Safety limits
# ---------------------------------------------------------------------------

_MAX_DOCUMENT_SIZE = 1_000_000  # 1M characters
_MAX_NODE_COUNT = 10_000
_MAX_DEPTH = 12
_MAX_INDENT = _MAX_DEPTH * 8  # columns of leading whitespace

# & at line start or after whitespace/sequence/mapping indicators, followed by
# an anchor name. Searched after single-line quoted scalars and comments are
# blanked out; an unquoted value such as "R &D" is still rejected.
_ANCHOR_RE = re.compile(r"(?:^|[\s\-:])&(\w+)", re.MULTILINE)
_QUOTED_RE = re.compile(r"\"(?:[^\"\\\n]|\\.)*\"|'(?:[^'\n]|'')*'")
_COMMENT_RE = re.compile(r"(^|\s)#.*$", re.MULTILINE)


def _strip_scalars(content: str) -> str:
    """Blank out single-line quoted scalars and comments."""
    return _COMMENT_RE.sub(r"\1", _QUOTED_RE.sub('""', content))


class YAMLSafetyError(Exception):
    """Raised when a data object source violates safety constraints.

    Distinct from YAML syntax errors: these reject anchors/aliases, excessive
    nesting and oversized documents before or right after parsing.
    """


@dataclass
class SourceMap:
    """Maps dotted key paths to their source positions."""

    _positions: dict[str, SourceSpan] = field(default_factory=dict)

    def add(self, path: str, span: SourceSpan) -> None:
        self._positions[path] = span

    def get(self, path: str) -> SourceSpan | None:
        return self._positions.get(path)

    @property
    def paths(self) -> list[str]:
        return list(self._positions.keys())


class TrackedLoader:
    """Loads data object YAML and records where every key came from."""

    def __init__(self) -> None:
        self._yaml = YAML()
        self._yaml.preserve_quotes = True

    # -- safety checks -------------------------------------------------------

    @staticmethod
    def _check_yaml_safety(content: str) -> None:
        if len(content) > _MAX_DOCUMENT_SIZE:
            raise YAMLSafetyError(
                f"Source exceeds maximum size "
                f"({len(content):,} chars > {_MAX_DOCUMENT_SIZE:,} limit)"
            )
        bare = _strip_scalars(content)
        if _ANCHOR_RE.search(bare):
            raise YAMLSafetyError("YAML anchors/aliases are not supported in data object sources")

        # ruamel.yaml recurses once per nesting level while parsing.
        depth = 0
        for char in bare:
            if char in "[{":
                depth += 1
                if depth > _MAX_DEPTH:
                    raise YAMLSafetyError(
                        f"Source exceeds maximum nesting depth ({_MAX_DEPTH})"
                    )
            elif char in "]}":
                depth = max(depth - 1, 0)
        for line in bare.splitlines():
            if line.strip() and len(line) - len(line.lstrip()) > _MAX_INDENT:
                raise YAMLSafetyError(
                    f"Source exceeds maximum nesting depth (indentation over {_MAX_INDENT})"
                )

    @staticmethod
    def _check_structure(
        data: Any, limit: int = _MAX_NODE_COUNT, max_depth: int = _MAX_DEPTH
    ) -> None:
        count = 0
        stack: list[tuple[Any, int]] = [(data, 1)]
        while stack:
            node, depth = stack.pop()
            count += 1
            if count > limit:
                raise YAMLSafetyError(f"Source exceeds maximum node count ({limit:,})")
            if depth > max_depth:
                raise YAMLSafetyError(f"Source exceeds maximum nesting depth ({max_depth})")
            if isinstance(node, dict):
                stack.extend((child, depth + 1) for child in node.values())
            elif isinstance(node, list):
                stack.extend((child, depth + 1) for child in node)

    # -- public loading API --------------------------------------------------

    def load_string(
        self, content: str, filename: str = "<string>"
    ) -> tuple[Any, SourceMap]:
        """Parse YAML text into plain Python values plus a source position map.

        The top-level value is returned as-is (it is not forced to a mapping)
        so callers can report a wrongly shaped document themselves. An empty
        document yields ``None``.

        Raises ``YAMLSafetyError`` for rejected input and ruamel.yaml's own
        errors for malformed YAML.
        """
        self._check_yaml_safety(content)
        try:
            data = self._yaml.load(content)
        except RecursionError:
            raise YAMLSafetyError(
                f"Source exceeds maximum nesting depth ({_MAX_DEPTH})"
            ) from None
        source_map = SourceMap()
        if data is None:
            return None, source_map
        self._check_structure(data)
        self._extract_positions(data, filename, "", source_map)
        return self._to_plain_value(data), source_map

    def _extract_positions(
        self,
        data: Any,
        filename: str,
        prefix: str,
        source_map: SourceMap,
    ) -> None:
        if isinstance(data, CommentedMap):
            for key in data:
                key_path = f"{prefix}.{key}" if prefix else str(key)
                try:
                    line, col = data.lc.key(key)
                except (AttributeError, KeyError, TypeError):
                    line, col = data.lc.line, data.lc.col
                source_map.add(key_path, SourceSpan(file=filename, line=line + 1, column=col + 1))
                self._extract_positions(data[key], filename, key_path, source_map)
        elif isinstance(data, CommentedSeq):
            for i, item in enumerate(data):
                item_path = f"{prefix}[{i}]"
                try:
                    line, col = data.lc.item(i)
                except (AttributeError, KeyError, TypeError):
                    pass
                else:
                    source_map.add(
                        item_path, SourceSpan(file=filename, line=line + 1, column=col + 1)
                    )
                self._extract_positions(item, filename, item_path, source_map)

    def _to_plain_value(self, data: Any) -> Any:
        """Convert ruamel.yaml CommentedMap/Seq to plain Python dict/list."""
        if isinstance(data, dict):
            return {str(k): self._to_plain_value(v) for k, v in data.items()}
        if isinstance(data, list):
            return [self._to_plain_value(item) for item in data]
        return data
