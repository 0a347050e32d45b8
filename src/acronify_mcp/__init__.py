"""MCP tool server for Acronify."""
