"""
conductor.py
Central dispatcher that executes tool calls requested by the host.

A tool call is a dict like:
    { "tool": "exampleTool", "input": "hello" }

Each tool lives in tools/<module>.py and exposes:

    NAME: str                          # name the host invokes it by
    DESCRIPTION: str                   # shown in discovery
    def run(message: str) -> str       # returns plain-text result

Tools are registered explicitly in TOOLS below; nothing is discovered by
importing modules on demand.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, NamedTuple

from tools import echo, family_lookup

logger = logging.getLogger(__name__)


class ToolError(RuntimeError):
    """Raised on any tool-dispatch failure."""


class Tool(NamedTuple):
    name: str
    description: str
    func: Callable[[str], str]


def _register(*modules) -> Dict[str, Tool]:
    table: Dict[str, Tool] = {}
    for mod in modules:
        if mod.NAME in table:
            raise ToolError(f"Duplicate tool name: {mod.NAME}")
        table[mod.NAME] = Tool(mod.NAME, mod.DESCRIPTION, mod.run)
    return table


TOOLS: Dict[str, Tool] = _register(echo, family_lookup)


def list_tools() -> List[Dict[str, str]]:
    """Discovery payload, in registration order."""
    return [{"name": t.name, "description": t.description} for t in TOOLS.values()]


def invoke(name: str, arg: Any) -> str:
    tool = TOOLS.get(name)
    if tool is None:
        logger.warning("Unknown tool requested: %s", name)
        raise ToolError(f"No such tool: {name}")

    logger.info("Invoking tool %s", name)
    return str(tool.func(str(arg)))


def run_tool_call(call: Dict[str, Any]) -> str:
    if "tool" not in call:
        raise ToolError("Missing 'tool' key")
    tool_name = str(call["tool"])

    arg = call.get("input")
    return invoke(tool_name, "" if arg is None else arg)
