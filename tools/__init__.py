# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool wrappers.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between MCP and core/.  For each tool
#   it:
#     1. Declares typed, described parameters (the schema the assistant sees)
#     2. Validates them into a core/models.py input
#     3. Calls the matching core/ operation
#     4. Renders the ApiResult as text content
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT build URLs or bodies (that's core/payloads.py)
#   - They do NOT read configuration (the client is handed to them)
#   - They do NOT raise on RunPod errors (those come back as content)
# =============================================================================
