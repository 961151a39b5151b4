"""
MCP server for Copilot Money expense reports.

Exposes ledger spending summaries through the Model Context Protocol.
"""

import json
import logging
from pathlib import Path
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from copilot_expenses.core.exceptions import ExpenseReportError
from copilot_expenses.core.ledger import TransactionLedger
from copilot_expenses.tools.tools import ExpenseReportTools, create_tool_schemas

logger = logging.getLogger(__name__)


class ExpenseReportServer:
    """MCP server for a Copilot Money transaction export."""

    def __init__(self, ledger_path: Path):
        """
        Initialize the MCP server.

        Args:
            ledger_path: Path to the exported transactions CSV
        """
        self.ledger = TransactionLedger(ledger_path)
        self.tools = ExpenseReportTools(self.ledger)
        self.server = Server("copilot-expenses")

        self._register_handlers()

    def _register_handlers(self) -> None:
        """Register MCP protocol handlers."""

        @self.server.list_tools()
        async def list_tools() -> list[Tool]:
            return [
                Tool(
                    name=schema["name"],
                    description=schema["description"],
                    inputSchema=schema["inputSchema"],
                )
                for schema in create_tool_schemas()
            ]

        @self.server.call_tool()
        async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
            return self.handle_tool_call(name, arguments)

    def handle_tool_call(self, name: str, arguments: dict[str, Any]) -> list[TextContent]:
        """Route a tool call and format the result as JSON text."""
        if not self.ledger.is_available():
            error_msg = (
                f"Ledger not available at {self.ledger.csv_path}. Export your "
                "transactions from Copilot Money as CSV and pass its path."
            )
            return [TextContent(type="text", text=error_msg)]

        try:
            if name == "get_expense_summary":
                result = self.tools.get_expense_summary(**arguments)
            elif name == "get_parent_category":
                result = self.tools.get_parent_category(**arguments)
            else:
                return [TextContent(type="text", text=f"Unknown tool: {name}")]
        except (ValueError, ExpenseReportError) as e:
            # Bad dates, unknown categories and override collisions
            return [TextContent(type="text", text=f"Error: {e}")]
        except Exception as e:
            logger.exception(f"Error executing tool {name}")
            return [TextContent(type="text", text=f"Error executing tool: {e}")]

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    async def run(self) -> None:  # pragma: no cover
        """Run the MCP server using stdio transport."""
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )


async def run_server(ledger_path: Path) -> None:  # pragma: no cover
    """
    Run the expense report MCP server.

    Args:
        ledger_path: Path to the exported transactions CSV
    """
    server = ExpenseReportServer(ledger_path)
    await server.run()
