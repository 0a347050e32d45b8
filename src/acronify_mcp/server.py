"""
MCP Server for Acronify.

Exposes acronym and summary generation plus the saved collection as tools.
"""

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from acronify.errors import NotFoundError
from acronify.generator import Generator
from acronify.store import open_store
from acronify.surfacing import filter_records, format_record, format_records, toggle_favorite

# Create MCP server
server = Server("acronify")

_ID_SCHEMA = {
    "type": "object",
    "properties": {
        "record_id": {
            "type": "integer",
            "description": "Record Id",
        },
    },
    "required": ["record_id"],
}


def _text_schema(description: str) -> dict:
    return {
        "type": "object",
        "properties": {
            "text": {
                "type": "string",
                "description": description,
            },
            "category": {
                "type": "string",
                "description": "Category for the saved record (default: General)",
            },
            "save": {
                "type": "boolean",
                "description": "Save the result to the collection (default: true)",
                "default": True,
            },
        },
        "required": ["text"],
    }


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="acronify_acronym",
            description="Turn text into a mnemonic acronym with a letter-by-letter breakdown.",
            inputSchema=_text_schema("Text to turn into an acronym (at least 10 characters)"),
        ),
        Tool(
            name="acronify_summarize",
            description="Summarize text into a short digest of roughly 150 words.",
            inputSchema=_text_schema("Text to summarize (at least 50 characters)"),
        ),
        Tool(
            name="acronify_search",
            description="Search saved acronyms and summaries by text.",
            inputSchema={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": "Search query",
                    },
                },
                "required": ["query"],
            },
        ),
        Tool(
            name="acronify_list",
            description="List saved records, favorites first.",
            inputSchema={
                "type": "object",
                "properties": {
                    "favorites_only": {
                        "type": "boolean",
                        "description": "Only favorites (default: false)",
                    },
                    "category": {
                        "type": "string",
                        "description": "Filter by category (optional)",
                    },
                },
            },
        ),
        Tool(
            name="acronify_favorite",
            description="Toggle the favorite flag on a saved record.",
            inputSchema=_ID_SCHEMA,
        ),
        Tool(
            name="acronify_delete",
            description="Delete a saved record.",
            inputSchema=_ID_SCHEMA,
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "acronify_acronym":
            return await tool_generate(arguments, "acronym")
        elif name == "acronify_summarize":
            return await tool_generate(arguments, "summary")
        elif name == "acronify_search":
            return await tool_search(arguments)
        elif name == "acronify_list":
            return await tool_list(arguments)
        elif name == "acronify_favorite":
            return await tool_favorite(arguments)
        elif name == "acronify_delete":
            return await tool_delete(arguments)
        else:
            return [TextContent(type="text", text=f"Unknown tool: {name}")]
    except NotFoundError as e:
        return [TextContent(type="text", text=f"Not found: {e.identifier}")]
    except Exception as e:
        return [TextContent(type="text", text=f"Error: {e}")]


async def tool_generate(args: dict, kind: str) -> list[TextContent]:
    """Generate an acronym or summary, saving it unless told not to."""
    text = args.get("text", "").strip()
    if not text:
        return [TextContent(type="text", text="Error: Empty text")]

    generator = Generator()
    if kind == "summary":
        result = await generator.summarize_text(text)
    else:
        result = await generator.generate_acronym(text)

    if not args.get("save", True):
        if kind == "summary":
            return [TextContent(type="text", text=result.summary)]
        lines = [result.acronym] + [f"  {b.letter}  {b.word}" for b in result.breakdown]
        return [TextContent(type="text", text="\n".join(lines))]

    record = await open_store().create({
        **result.model_dump(),
        "originalText": text,
        "category": args.get("category", "").strip() or "General",
        "isFavorite": False,
    })
    return [TextContent(type="text", text=format_record(record))]


async def tool_search(args: dict) -> list[TextContent]:
    """Search records."""
    query = args.get("query", "").strip()
    if not query:
        return [TextContent(type="text", text="Error: Empty query")]

    records = filter_records(await open_store().get_all(), query)
    if not records:
        return [TextContent(type="text", text=f"No records matching '{query}'.")]
    return [TextContent(type="text", text=format_records(records, header=f"SEARCH: {query}"))]


async def tool_list(args: dict) -> list[TextContent]:
    """List records."""
    records = filter_records(
        await open_store().get_all(),
        favorites_only=args.get("favorites_only", False),
        category=args.get("category"),
    )
    return [TextContent(type="text", text=format_records(records))]


async def tool_favorite(args: dict) -> list[TextContent]:
    """Toggle favorite."""
    record = await toggle_favorite(open_store(), args.get("record_id"))
    state = "Favorited" if record.is_favorite else "Unfavorited"
    return [TextContent(type="text", text=f"{state}: {record.id}")]


async def tool_delete(args: dict) -> list[TextContent]:
    """Delete a record."""
    record = await open_store().delete(args.get("record_id"))
    return [TextContent(type="text", text=f"Deleted: {record.id}")]


async def main():
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def run() -> None:
    """Console script entry point."""
    import asyncio
    asyncio.run(main())


if __name__ == "__main__":
    run()
