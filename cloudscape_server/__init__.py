"""
Cloudscape Server: AWS Cloudscape Design System knowledge over MCP.

A read-only catalog of Cloudscape component documentation, design patterns
and category groupings, exposed to MCP clients as resources, tools and prompts.
"""

__version__ = "0.1.0"
