#!/usr/bin/env python3
"""Startup script for the Cloudscape MCP server."""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from cloudscape_server.mcp_server.main import cli_main

if __name__ == "__main__":
    cli_main()
