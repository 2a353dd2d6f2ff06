"""Module entrypoint.

Allows:
    python -m mcp_statsd_server
"""

from __future__ import annotations

from mcp_statsd_server.server.statsd_server import main

if __name__ == "__main__":
    main()
