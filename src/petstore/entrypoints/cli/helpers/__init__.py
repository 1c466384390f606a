"""CLI helpers for PETSTORE.

Utilities used by the command-line interface: URL sanitization for safe
display, JSON output on stdout, and message emitters that write to stderr
with emoji→ASCII fallbacks.
"""

from .db_url import sanitize_url
from .messages import error, success, warn
from .output import echo_json

__all__ = ["sanitize_url", "warn", "success", "error", "echo_json"]
