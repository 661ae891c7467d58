"""
tools/echo.py
Diagnostic tool: hands the message straight back.
"""

NAME = "exampleTool"
DESCRIPTION = "Example tool that echoes the input message"


def run(message: str) -> str:
    return "Echo: " + message
