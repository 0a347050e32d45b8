"""
Surfacing module for Acronify.

Search, ordering and terminal rendering of saved records.
"""

import os
from collections import Counter
from typing import Any

from acronify.models import Record
from acronify.store import RecordStore


# ANSI color codes
class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    # Foreground colors
    BLUE = "\033[34m"

    # Bright foreground colors
    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_MAGENTA = "\033[95m"
    BRIGHT_CYAN = "\033[96m"

    @classmethod
    def enabled(cls) -> bool:
        """Check if colors should be enabled."""
        # Disable if NO_COLOR is set
        if os.environ.get("NO_COLOR"):
            return False
        return True


def c(text: str, *codes: str) -> str:
    """Apply color codes to text if colors are enabled."""
    if not Colors.enabled():
        return text
    return "".join(codes) + text + Colors.RESET


KIND_COLORS = {
    "acronym": Colors.BRIGHT_CYAN,
    "summary": Colors.BRIGHT_MAGENTA,
}

FAVORITE_MARK = "★"


def matches(record: Record, query: str) -> bool:
    """Case-insensitive substring match on acronym, summary or original text."""
    needle = query.strip().lower()
    if not needle:
        return True
    haystacks = (record.acronym, record.summary, record.original_text)
    return any(needle in text.lower() for text in haystacks if text)


def filter_records(
    records: list[Record],
    query: str = "",
    favorites_only: bool = False,
    category: str | None = None,
    kind: str | None = None,
) -> list[Record]:
    """Filter records; a blank query keeps everything."""
    result = []
    for record in records:
        if favorites_only and not record.is_favorite:
            continue
        if category and record.category.lower() != category.lower():
            continue
        if kind and record.kind != kind:
            continue
        if matches(record, query):
            result.append(record)
    return result


def sort_for_display(records: list[Record]) -> list[Record]:
    """Favorites first, then newest first."""
    newest_first = sorted(records, key=lambda r: r.created_at, reverse=True)
    return sorted(newest_first, key=lambda r: not r.is_favorite)


async def toggle_favorite(store: RecordStore, record_id: Any) -> Record:
    """Flip a record's favorite flag."""
    record = await store.get_by_id(record_id)
    record.is_favorite = not record.is_favorite
    return await store.update(record.id, record)


def format_record(record: Record) -> str:
    """Render one record as a card."""
    kind_color = KIND_COLORS.get(record.kind, "")
    star = c(f" {FAVORITE_MARK}", Colors.BRIGHT_YELLOW) if record.is_favorite else ""
    created = record.created_at.date().isoformat()

    lines = []
    if record.kind == "acronym":
        title = c(record.acronym or "", Colors.BOLD, kind_color)
    else:
        title = c("Summary", Colors.BOLD, kind_color)
    lines.append(f"{c(f'#{record.id}', Colors.DIM)}  {title}{star}")

    if record.kind == "acronym":
        for item in record.breakdown or []:
            lines.append(f"    {c(item.letter, Colors.BOLD, kind_color)}  {item.word}")
    else:
        lines.append(f"    {record.summary}")

    lines.append(c(f"    {record.category} · {created}", Colors.DIM))
    return "\n".join(lines)


def format_records(records: list[Record], header: str = "RECORDS") -> str:
    """Render records as a list of cards."""
    if not records:
        return c("No records found.", Colors.DIM)

    lines = [c(f"━━━ {header} ━━━", Colors.BOLD, Colors.BLUE), ""]
    for record in sort_for_display(records):
        lines.append(format_record(record))
        lines.append("")

    return "\n".join(lines).rstrip()


def get_stats(records: list[Record]) -> dict[str, Any]:
    """Collection statistics."""
    by_kind = Counter(record.kind for record in records)
    by_category = Counter(record.category for record in records)
    return {
        "total_records": len(records),
        "by_kind": dict(by_kind),
        "favorites": sum(1 for record in records if record.is_favorite),
        "by_category": dict(by_category.most_common()),
    }
