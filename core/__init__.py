# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains everything that talks to RunPod.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or knows about the MCP protocol.
#   Each module is plain Python over httpx: give it a RunPodClient and a
#   validated input model, get back an ApiResult.
#
# LAYOUT:
#   config.py        → Settings (API key), resolved once at startup
#   models.py        → tool input dataclasses + ApiResult
#   validation.py    → raw arguments → typed input, or ValidationError
#   payloads.py      → typed input → path id / query params / JSON body
#   client.py        → the single request helper
#   pods.py, endpoints.py, templates.py, network_volumes.py,
#   registry_auths.py → one function per tool
# =============================================================================
