"""
CLI for Acronify.

Minimal CLI using stdlib for fast startup.
Subcommands are imported lazily to avoid startup overhead.

Usage:
    acronify "your text here"       # Generate and save an acronym
    acronify summarize "long text"  # Generate and save a summary
    acronify --help                 # Show help
"""

import asyncio
import logging
import os
import sys

MAX_TEXT_CHARS = 500


def print_help() -> None:
    """Print help message."""
    print("""acronify - turn text into things you can remember

Usage:
    acronify "your text here"     Generate an acronym and save it

Commands:
    acronify summarize <text>     Generate a summary and save it
    acronify list [options]       List records (--favorites, --category, --kind)
    acronify find <query>         Search acronyms, summaries and original text
    acronify show <id>            Show one record
    acronify fav <id>             Toggle favorite
    acronify delete <id>          Delete a record
    acronify stats                Show collection statistics
    acronify health               Run health checks

Options:
    --category, -c <name>         Category for new records (default: General)
    acronify --help, -h           Show this help
    acronify --version, -v        Show version

Examples:
    acronify "Achieve great results through consistent daily effort and focus"
    acronify summarize --category Reading < chapter.txt
    acronify list --favorites
    acronify fav 3

Text can also be piped on stdin.""")


def print_version() -> None:
    """Print version."""
    from acronify import __version__
    print(f"acronify {__version__}")


def setup_logging() -> None:
    """Warnings by default, everything with ACRONIFY_DEBUG set."""
    level = logging.DEBUG if os.environ.get("ACRONIFY_DEBUG") else logging.WARNING
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=level,
    )


def open_store():
    """Record store on the configured slot database."""
    from acronify.store import open_store as _open_store
    return _open_store()


def _pop_option(args: list[str], *names: str) -> str | None:
    """Remove `--name value` from args and return the value."""
    for i, arg in enumerate(args):
        if arg in names and i + 1 < len(args):
            value = args[i + 1]
            del args[i:i + 2]
            return value
    return None


def _read_text(args: list[str]) -> str:
    """Text from arguments, or stdin if none were given."""
    text = " ".join(args)
    if not text.strip() and not sys.stdin.isatty():
        text = sys.stdin.read()
    return text.strip()


async def _create(text: str, category: str, kind: str):
    from acronify.generator import Generator

    generator = Generator()
    if kind == "summary":
        result = await generator.summarize_text(text)
    else:
        result = await generator.generate_acronym(text)

    store = open_store()
    return await store.create({
        **result.model_dump(),
        "originalText": text,
        "category": category,
        "isFavorite": False,
    })


def cmd_create(args: list[str], kind: str) -> int:
    """Generate an acronym or summary and save it."""
    from acronify.errors import AcronifyError
    from acronify.surfacing import format_record

    args = list(args)
    category = (_pop_option(args, "--category", "-c") or "").strip() or "General"
    text = _read_text(args)

    if not text:
        print("Error: Please enter some text to convert", file=sys.stderr)
        return 1
    if kind == "acronym" and len(text) > MAX_TEXT_CHARS:
        print(f"Error: Text should be less than {MAX_TEXT_CHARS} characters", file=sys.stderr)
        return 1

    try:
        record = asyncio.run(_create(text, category, kind))
    except AcronifyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_record(record))
    return 0


def cmd_list(args: list[str]) -> int:
    """List records with optional filters."""
    from acronify.surfacing import filter_records, format_records

    favorites_only = False
    category = None
    kind = None

    # Parse arguments
    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ("--category", "-c") and i + 1 < len(args):
            category = args[i + 1]
            i += 2
        elif arg in ("--kind", "-k") and i + 1 < len(args):
            kind = args[i + 1]
            i += 2
        elif arg in ("--favorites", "-f"):
            favorites_only = True
            i += 1
        else:
            i += 1

    try:
        records = asyncio.run(open_store().get_all())
        records = filter_records(
            records, favorites_only=favorites_only, category=category, kind=kind
        )
        print(format_records(records, header="FAVORITES" if favorites_only else "RECORDS"))
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_find(args: list[str]) -> int:
    """Search records."""
    from acronify.surfacing import filter_records, format_records

    if not args:
        print("Usage: acronify find <query>", file=sys.stderr)
        return 1

    query = " ".join(args)

    try:
        records = filter_records(asyncio.run(open_store().get_all()), query)
        if not records:
            print(f"No records matching '{query}'.")
            return 0
        print(format_records(records, header=f"SEARCH: {query}"))
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _with_id(args: list[str], usage: str, action) -> int:
    """Run an async store action on the id in args[0]."""
    from acronify.errors import NotFoundError
    from acronify.surfacing import format_record

    if not args:
        print(f"Usage: acronify {usage} <id>", file=sys.stderr)
        return 1

    try:
        record = asyncio.run(action(open_store(), args[0]))
    except NotFoundError as e:
        print(f"Not found: {e.identifier}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_record(record))
    return 0


def cmd_show(args: list[str]) -> int:
    """Show one record."""
    return _with_id(args, "show", lambda store, record_id: store.get_by_id(record_id))


def cmd_fav(args: list[str]) -> int:
    """Toggle a record's favorite flag."""
    from acronify.surfacing import toggle_favorite

    return _with_id(args, "fav", toggle_favorite)


def cmd_delete(args: list[str]) -> int:
    """Delete a record."""
    code = _with_id(args, "delete", lambda store, record_id: store.delete(record_id))
    if code == 0:
        print(f"Deleted: {args[0]}")
    return code


def cmd_stats() -> int:
    """Show collection statistics."""
    from acronify.surfacing import get_stats

    try:
        stats = get_stats(asyncio.run(open_store().get_all()))

        print("Acronify Statistics")
        print("-" * 30)
        print(f"Total records: {stats['total_records']}")
        print(f"Favorites: {stats['favorites']}")
        print("\nBy kind:")
        for kind, count in stats["by_kind"].items():
            print(f"  {kind}: {count}")
        print("\nBy category:")
        for category, count in stats["by_category"].items():
            print(f"  {category}: {count}")

        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_health() -> int:
    """Run health checks."""
    from acronify.health import format_health_report, run_health_check

    checks = run_health_check()
    print(format_health_report(checks))
    return 1 if any(status == "✗" for status, _ in checks.values()) else 0


def main() -> int:
    """Main entry point."""
    args = sys.argv[1:]
    setup_logging()

    # No args - check for piped input
    if not args:
        if not sys.stdin.isatty():
            return cmd_create([], "acronym")
        print_help()
        return 0

    # Handle flags and commands
    first_arg = args[0]

    if first_arg in ("--help", "-h", "help"):
        print_help()
        return 0

    if first_arg in ("--version", "-v", "version"):
        print_version()
        return 0

    # Subcommands (lazy import to keep startup fast)
    if first_arg == "summarize":
        return cmd_create(args[1:], "summary")

    if first_arg == "list":
        return cmd_list(args[1:])

    if first_arg == "find":
        return cmd_find(args[1:])

    if first_arg == "show":
        return cmd_show(args[1:])

    if first_arg == "fav":
        return cmd_fav(args[1:])

    if first_arg == "delete":
        return cmd_delete(args[1:])

    if first_arg == "stats":
        return cmd_stats()

    if first_arg == "health":
        return cmd_health()

    # Everything else is text to turn into an acronym
    return cmd_create(args, "acronym")


if __name__ == "__main__":
    sys.exit(main())
