"""MCP server binding for documentation servers.

This module wires a loaded catalog to the MCP protocol: it configures
logging, registers the resources/prompts/tools handlers on a low-level
``mcp`` server and runs it over stdio.
"""

import json
import logging
import sys
import time
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from .catalog import ServerCatalog, load_catalog
from .config import load_server_config
from .constants import PROTOCOL_VERSION
from .exceptions import NotFoundError
from .requests import CallTool, GetPrompt, ListPrompts, ListResources, ReadResource
from .tools import TOOL_SCHEMAS

logger = logging.getLogger(__name__)

# JSON-RPC error code for unknown resources, as used by MCP servers
RESOURCE_NOT_FOUND_CODE = -32002


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": time.time(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def _not_found_to_mcp(error: NotFoundError) -> McpError:
    code = RESOURCE_NOT_FOUND_CODE if error.kind == "Resource" else types.INVALID_PARAMS
    return McpError(types.ErrorData(code=code, message=error.message))


class DocServer:
    """MCP server for one documentation catalog.

    The catalog is loaded once at construction; every request is answered
    from its read-only registries.
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        catalog: Optional[ServerCatalog] = None,
    ):
        """Initialize documentation server.

        Args:
            config: Server configuration dictionary. May contain:
                - catalog: bundled catalog name or path (default: "agency")
                - name / version / description: override the catalog's
                - transport: {"type": "stdio"}
                - logging: {"level", "format", "file"}
            catalog: Already loaded catalog; skips loading ``config["catalog"]``
        """
        self.config = config or {}

        transport_config = self.config.get("transport") or {}
        self.transport_type = transport_config.get("type", "stdio")

        logging_config = self.config.get("logging") or {}
        self.log_level = logging_config.get("level", "INFO")
        self.log_format = logging_config.get("format", "json")
        self.log_file = logging_config.get("file")

        self._setup_logging()

        self.catalog = catalog or load_catalog(self.config.get("catalog", "agency"))
        self.name = self.config.get("name", self.catalog.info.name)
        self.version = str(self.config.get("version", self.catalog.info.version))
        self.description = self.config.get("description", self.catalog.info.description)

        self.dispatcher = self.catalog.create_dispatcher()
        self.server: Server = Server(self.name, version=self.version)
        self._register_handlers()

        logger.info(f"Initialized {self.name} documentation server v{self.version}")
        logger.info(f"Transport: {self.transport_type}")

    def _setup_logging(self) -> None:
        """Setup logging for the server."""
        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, str(self.log_level).upper(), logging.INFO))

        root_logger.handlers.clear()

        if self.log_format == "json":
            formatter: logging.Formatter = JSONFormatter()
        else:
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )

        # stdout carries the protocol, logs go to stderr
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

        if self.log_file:
            file_handler = logging.FileHandler(self.log_file)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            logger.info(f"Logging to file: {self.log_file}")

    def _register_handlers(self) -> None:
        """Register resources, prompts and tools handlers on the MCP server."""
        server = self.server
        dispatcher = self.dispatcher

        @server.list_resources()
        async def list_resources() -> List[types.Resource]:
            envelope = dispatcher.dispatch(ListResources())
            return [types.Resource.model_validate(r) for r in envelope["resources"]]

        @server.read_resource()
        async def read_resource(uri: Any) -> Iterable[ReadResourceContents]:
            try:
                envelope = dispatcher.dispatch(ReadResource(str(uri)))
            except NotFoundError as e:
                logger.warning(e.message)
                raise _not_found_to_mcp(e) from e
            return [
                ReadResourceContents(content=c["text"], mime_type=c["mimeType"])
                for c in envelope["contents"]
            ]

        @server.list_prompts()
        async def list_prompts() -> List[types.Prompt]:
            envelope = dispatcher.dispatch(ListPrompts())
            return [types.Prompt.model_validate(p) for p in envelope["prompts"]]

        @server.get_prompt()
        async def get_prompt(
            name: str, arguments: Optional[Dict[str, str]]
        ) -> types.GetPromptResult:
            try:
                envelope = dispatcher.dispatch(GetPrompt(name, arguments))
            except NotFoundError as e:
                logger.warning(e.message)
                raise _not_found_to_mcp(e) from e
            return types.GetPromptResult.model_validate(envelope)

        @server.list_tools()
        async def list_tools() -> List[types.Tool]:
            return [types.Tool.model_validate(schema) for schema in TOOL_SCHEMAS.values()]

        # Tool arguments are validated by the dispatcher, not the SDK
        @server.call_tool(validate_input=False)
        async def call_tool(
            name: str, arguments: Optional[Dict[str, Any]]
        ) -> types.CallToolResult:
            envelope = dispatcher.handle(CallTool(name, arguments))
            return types.CallToolResult(
                content=[types.TextContent(type="text", text=json.dumps(envelope, indent=2))],
                isError="status" in envelope,
            )

        logger.info(
            f"✓ Registered {len(self.catalog.resources.manifest)} resources, "
            f"{len(self.catalog.prompts.catalog)} prompts, {len(TOOL_SCHEMAS)} tools"
        )

    async def start(self) -> None:
        """Start the server on stdio and serve until the client disconnects."""
        logger.info("Starting documentation server...")

        if self.transport_type != "stdio":
            raise ValueError(
                f"Transport type '{self.transport_type}' not supported. "
                "Only 'stdio' is currently supported."
            )

        try:
            async with stdio_server() as (read_stream, write_stream):
                logger.info("✓ stdio transport initialized")
                logger.info("Server ready. Waiting for requests...")
                await self.server.run(
                    read_stream,
                    write_stream,
                    self.server.create_initialization_options(),
                )
        except KeyboardInterrupt:
            logger.info("Received interrupt signal. Shutting down...")
        except Exception as e:
            logger.error(f"Server error: {e}", exc_info=True)
            raise
        finally:
            await self.stop()

    async def stop(self) -> None:
        """Stop the server."""
        logger.info(f"{self.name} documentation server stopped")

    def get_capabilities(self) -> Dict[str, Any]:
        """Get server capabilities declaration.

        Returns:
            Dictionary containing server capabilities information
        """
        return {
            "server": {
                "name": self.name,
                "version": self.version,
                "description": self.description,
            },
            "protocol": {
                "version": PROTOCOL_VERSION,
            },
            "capabilities": {
                "tools": {"listChanged": False},
                "resources": {"subscribe": False, "listChanged": False},
                "prompts": {"listChanged": False},
            },
        }


def create_server(
    config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> DocServer:
    """Factory function to create a documentation server.

    Args:
        config: Server configuration dictionary. If None, it is loaded from
            ``config_file`` (default: config/server.yaml) and the
            environment
        config_file: Alternative YAML config file

    Returns:
        DocServer instance
    """
    if config is None:
        config = load_server_config(config_file)
    return DocServer(config)

