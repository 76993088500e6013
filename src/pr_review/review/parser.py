# src/pr_review/review/parser.py
import logging
from dataclasses import dataclass, field
from unidiff import PatchSet
from unidiff.errors import UnidiffParseError


logger = logging.getLogger(__name__)


@dataclass
class DiffFile:
    path: str
    is_new: bool
    is_deleted: bool
    added_lines: list[int] = field(default_factory=list)


def parse_diff(diff_text: str) -> list[DiffFile]:
    """Summarize a unified diff per file. Text that isn't a diff yields []."""
    try:
        patch = PatchSet(diff_text)
    except UnidiffParseError as e:
        logger.warning(f"Could not summarize diff: {e}")
        return []

    files = []
    for patched_file in patch:
        added_lines = []

        for hunk in patched_file:
            for line in hunk:
                if line.is_added and line.target_line_no is not None:
                    added_lines.append(line.target_line_no)

        files.append(DiffFile(
            path=patched_file.path,
            is_new=patched_file.is_added_file,
            is_deleted=patched_file.is_removed_file,
            added_lines=added_lines,
        ))

    return files


def format_summary(files: list[DiffFile]) -> str:
    """One line per changed file, e.g. ``M src/app.ts (+3)``."""
    lines = []
    for f in files:
        status = "A" if f.is_new else "D" if f.is_deleted else "M"
        lines.append(f"{status} {f.path} (+{len(f.added_lines)})")
    return "\n".join(lines)
