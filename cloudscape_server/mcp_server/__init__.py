"""MCP Server for the AWS Cloudscape Design System.

This module provides a Model Context Protocol (MCP) server that exposes the
Cloudscape component catalog as resources, search and recommendation tools,
and best-practice prompts.
"""

__version__ = "0.1.0"
