"""MCP (Model Context Protocol) service exposing cineai as agent tools."""

from cineai.mcp.server import create_mcp_server, run_mcp_http_server, run_mcp_server

__all__ = ["create_mcp_server", "run_mcp_http_server", "run_mcp_server"]
