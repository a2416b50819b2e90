"""
Tool handlers for Linear MCP.

Each public coroutine whose first parameter is ``client`` is a handler for the
tool ``linear_<function name>``; its schema lives in ``core.tool_schemas``.
"""
