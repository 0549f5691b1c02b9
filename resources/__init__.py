"""
MCP resources — documentation generated from tool handler docstrings.
"""
