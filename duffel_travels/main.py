import sys
import asyncio
import logging

from duffel_travels.config import Config, setup_logging
from duffel_travels.api.client import DuffelClient
from duffel_travels.mcp.transport import serve
from duffel_travels.tools import build_server

logger = logging.getLogger(__name__)


def main():
    setup_logging(Config.LOG_LEVEL)

    # 1. Validate Config (a missing key is reported per tool call, not fatal)
    Config.validate()

    # 2. Setup provider client and register tools
    client = None
    if Config.DUFFEL_API_KEY:
        client = DuffelClient(
            Config.DUFFEL_API_KEY,
            base_url=Config.DUFFEL_API_BASE_URL,
            timeout=Config.DUFFEL_API_TIMEOUT,
        )
    server = build_server(Config.DUFFEL_API_KEY, client)

    # 3. Serve over stdio
    try:
        asyncio.run(serve(server))
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main()
