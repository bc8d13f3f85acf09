"""
sprout.sourcemap.generator - Version 3 source maps

SourceMapGenerator.encode() turns position mappings into the "mappings"
field of a version 3 source map: one ';' per generated line, ',' between
segments on a line, and four VLQ fields per segment:

    [generated column, source index, original line, original column]

Each field is a delta against the previous segment (the generated column
restarts at 0 on every line). A compile produces one generated file from
one source, so the source index delta is always 0, and identifier names
are not tracked, so segments never carry a fifth field.
"""

import json
import logging
from typing import Any, Iterable, NamedTuple, Optional, Sequence

from sprout.sourcemap.vlq import decode_integers, encode_integers

logger = logging.getLogger(__name__)

SOURCE_MAP_VERSION = 3


class Mapping(NamedTuple):
    """A generated position and the original position it came from (0-based)."""

    generated_line: int
    generated_column: int
    original_line: int
    original_column: int

    @classmethod
    def from_record(cls, record: dict[str, Any], line_base: int = 0) -> "Mapping":
        """
        Build a Mapping from an emitter record:

            {"generated": {"line": 1, "column": 4},
             "original": {"line": 3, "column": 0}}

        Lines are shifted by `line_base` (1 for records with 1-based lines);
        columns are always 0-based.
        """
        generated = record["generated"]
        original = record["original"]
        return cls(
            int(generated["line"]) - line_base,
            int(generated["column"]),
            int(original["line"]) - line_base,
            int(original["column"]),
        )


def sort_mappings(mappings: Iterable[Mapping]) -> list[Mapping]:
    """Order mappings by generated position, as encode() requires."""
    return sorted(mappings, key=lambda m: (m.generated_line, m.generated_column))


class SourceMapGenerator:
    """Encodes mapping sets for a single generated file."""

    def encode(self, mappings: Sequence[Mapping]) -> str:
        """
        Encode mappings, sorted by generated position, into a mappings string.

        A mapping equal in all four fields to the one before it on the same
        generated line is dropped. Unsorted input produces an incorrect
        string rather than an error.
        """
        mappings = [Mapping(*m) for m in mappings]
        previous_generated_line = 0
        previous_generated_column = 0
        previous_original_line = 0
        previous_original_column = 0
        result = []

        for i, mapping in enumerate(mappings):
            if mapping.generated_line > previous_generated_line:
                previous_generated_column = 0
                result.append(";" * (mapping.generated_line - previous_generated_line))
                previous_generated_line = mapping.generated_line
            elif i > 0:
                if mapping == mappings[i - 1]:
                    continue
                result.append(",")

            result.append(
                encode_integers(
                    [
                        mapping.generated_column - previous_generated_column,
                        0,
                        mapping.original_line - previous_original_line,
                        mapping.original_column - previous_original_column,
                    ]
                )
            )

            previous_generated_column = mapping.generated_column
            previous_original_line = mapping.original_line
            previous_original_column = mapping.original_column

        return "".join(result)

    def generate(
        self,
        mappings: Sequence[Mapping],
        file: str,
        sources: Sequence[str],
        sources_content: Optional[Sequence[Optional[str]]] = None,
        source_root: str = "",
    ) -> dict[str, Any]:
        """Build a complete version 3 source map document."""
        source_map: dict[str, Any] = {
            "version": SOURCE_MAP_VERSION,
            "file": file,
            "sourceRoot": source_root,
            "sources": list(sources),
            "names": [],
            "mappings": self.encode(mappings),
        }
        if sources_content is not None:
            source_map["sourcesContent"] = list(sources_content)
        logger.debug(
            "generated source map for %s with %d mappings", file, len(mappings)
        )
        return source_map

    def to_json(self, *args, indent: Optional[int] = None, **kwargs) -> str:
        """generate() serialized as JSON."""
        return json.dumps(self.generate(*args, **kwargs), indent=indent)


def encode_mappings(mappings: Sequence[Mapping]) -> str:
    """Convenience wrapper around SourceMapGenerator().encode()."""
    return SourceMapGenerator().encode(mappings)


def decode_mappings(text: str) -> list[Mapping]:
    """
    Decode a mappings string back into absolute Mappings.

    Segments without an original position (a single field) are skipped and
    a fifth name-index field is ignored.
    """
    mappings = []
    original_line = 0
    original_column = 0
    for generated_line, line in enumerate(text.split(";")):
        generated_column = 0
        if not line:
            continue
        for segment in line.split(","):
            fields = decode_integers(segment)
            if not fields:
                continue
            generated_column += fields[0]
            if len(fields) < 4:
                continue
            original_line += fields[2]
            original_column += fields[3]
            mappings.append(
                Mapping(generated_line, generated_column, original_line, original_column)
            )
    return mappings
