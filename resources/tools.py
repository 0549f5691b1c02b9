"""
Tool Documentation Resources

Generates gwreader://tools/* resources from tool handler docstrings.
Single source of truth: docstrings ARE the documentation, and the same
docstrings are what MCP clients see as tool descriptions.
"""

from typing import Any, Callable

from logging_config import logger

URI_PREFIX = "gwreader://tools/"


def docstring_to_markdown(tool_name: str, docstring: str) -> str:
    """
    Convert a tool's docstring to clean markdown.

    We just add a title and strip the common indentation.
    """
    if not docstring:
        return f"# {tool_name}()\n\nNo documentation available."

    # Clean up indentation
    lines = docstring.strip().split('\n')
    if len(lines) > 1:
        # Find minimum indentation (excluding empty lines and first line)
        indents = [len(line) - len(line.lstrip())
                   for line in lines[1:] if line.strip()]
        min_indent = min(indents) if indents else 0
        lines = [lines[0]] + [line[min_indent:] if len(line) > min_indent else line
                              for line in lines[1:]]

    cleaned = '\n'.join(lines)

    return f"# {tool_name}()\n\n{cleaned}"


class ToolResourceRegistry:
    """
    Registry for auto-generated tool documentation resources.

    Generates gwreader://tools/* resources from handler docstrings.
    """

    def __init__(self) -> None:
        self._tools: dict[str, Callable[..., Any]] = {}
        self._cache: dict[str, dict[str, str]] = {}

    def register_tool(self, name: str, func: Callable[..., Any]) -> None:
        """Register a tool for documentation generation."""
        self._tools[name] = func
        self._cache.pop(f"{URI_PREFIX}{name}", None)

    def register_all(self, tools: dict[str, Callable[..., Any]]) -> None:
        """Register every handler in a name -> function mapping."""
        for name, func in tools.items():
            self.register_tool(name, func)

        undocumented = sorted(
            name for name, func in self._tools.items()
            if not (func.__doc__ or "").strip()
        )
        if undocumented:
            logger.warning(
                f"Tools with empty docstrings ({len(undocumented)}): "
                f"{', '.join(undocumented)}. "
                f"These will show 'No documentation available' in {URI_PREFIX}* resources."
            )

    def get_resource(self, uri: str) -> dict[str, str]:
        """
        Get resource by URI.

        Args:
            uri: Resource URI (e.g., "gwreader://tools/get_email")

        Returns:
            Resource dict with uri, mimeType, text

        Raises:
            KeyError: If tool not found
        """
        if uri in self._cache:
            return self._cache[uri]

        if not uri.startswith(URI_PREFIX):
            raise KeyError(f"Not a tool resource: {uri}")

        tool_name = uri[len(URI_PREFIX):]
        if tool_name not in self._tools:
            raise KeyError(f"Tool not found: {tool_name}")

        markdown = docstring_to_markdown(tool_name, self._tools[tool_name].__doc__ or "")
        resource = {
            "uri": uri,
            "mimeType": "text/markdown",
            "text": markdown,
        }
        self._cache[uri] = resource
        return resource

    def list_resources(self) -> list[dict[str, str]]:
        """List all available tool resources."""
        resources: list[dict[str, str]] = []
        for name in sorted(self._tools.keys()):
            docstring = self._tools[name].__doc__ or ""
            # First line of docstring as description
            first_line = docstring.strip().split('\n')[0] if docstring else "No description"
            resources.append({
                "uri": f"{URI_PREFIX}{name}",
                "name": name,
                "description": first_line[:100],
            })
        return resources


# Global registry instance
_registry = ToolResourceRegistry()


def get_tool_registry() -> ToolResourceRegistry:
    """Get the global tool resource registry."""
    return _registry
