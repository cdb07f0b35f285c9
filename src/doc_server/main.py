"""Main entry point for the documentation server.

Used by the ``doc-server`` console script and ``python -m doc_server.main``.
The catalog to serve is chosen in config/server.yaml or with the
DOC_SERVER_CATALOG environment variable.
"""

import asyncio
import sys

from .server import create_server


async def _serve() -> None:
    try:
        server = create_server()
    except Exception as e:
        print(f"Failed to start server: {e}", file=sys.stderr)
        sys.exit(1)
    await server.start()


def main() -> None:
    """Run the documentation server until interrupted."""
    try:
        asyncio.run(_serve())
    except KeyboardInterrupt:
        print("\nServer interrupted by user", file=sys.stderr)
        sys.exit(0)


if __name__ == "__main__":
    main()
