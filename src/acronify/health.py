"""
Health check module for Acronify.

Reports system status across all components.
"""

from acronify.config import DEFAULT_SLOT, get_config_path, get_db_path, load_config
from acronify.errors import ConfigError


def check_config() -> tuple[str, str]:
    """Check config file status."""
    config_path = get_config_path()
    if not config_path.exists():
        return "-", "Defaults (no config.toml)"

    try:
        load_config(config_path)
        return "✓", f"OK ({config_path})"
    except ConfigError as e:
        return "✗", f"Error: {e}"


def check_database() -> tuple[str, str]:
    """Check slot database status."""
    db_path = get_db_path()
    if not db_path.exists():
        return "-", "Not created yet"

    try:
        from acronify.db import Database
        db = Database(db_path)
        stats = db.get_stats()
        return "✓", f"OK ({stats['total_slots']} slots)"
    except Exception as e:
        return "✗", f"Error: {e}"


def check_records() -> tuple[str, str]:
    """Check that the stored collection parses."""
    try:
        from acronify.db import Database
        from acronify.store import parse_records

        config = load_config()
        slot = config.get("store", {}).get("slot", DEFAULT_SLOT)
        db_path = get_db_path()
        if not db_path.exists():
            return "-", "No records yet"

        stored = Database(db_path).get_item(slot)
        if stored is None:
            return "-", "No records yet"
        records = parse_records(stored)
        return "✓", f"OK ({len(records)} records)"
    except Exception as e:
        return "✗", f"Error: {e}"


def check_lexicon() -> tuple[str, str]:
    """Check the word tables."""
    try:
        from acronify.lexicon import get_lexicon

        config = load_config()
        lexicon = get_lexicon(config)
        source = config.get("lexicon", {}).get("path") or "built-in"
        return "✓", (
            f"OK ({source}: {len(lexicon.stop_words)} stop words, "
            f"{len(lexicon.synonyms)} synonyms)"
        )
    except ConfigError as e:
        return "✗", f"Error: {e}"


def run_health_check() -> dict[str, tuple[str, str]]:
    """Run all health checks."""
    return {
        "Config": check_config(),
        "Database": check_database(),
        "Records": check_records(),
        "Lexicon": check_lexicon(),
    }


def format_health_report(checks: dict[str, tuple[str, str]]) -> str:
    """Format health check results."""
    lines = ["Acronify Health Check", "-" * 40]

    for name, (status, message) in checks.items():
        lines.append(f"{status} {name}: {message}")

    return "\n".join(lines)
