#!/usr/bin/env python3
"""Start the API server."""
import logging

import uvicorn

from config import Config


APP_TARGET = "api.app:app"


def main():
    config = Config.from_env()
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    uvicorn.run(
        APP_TARGET,
        host=config.api_host,
        port=config.api_port,
        reload=False,
        log_level=config.log_level
    )


if __name__ == "__main__":
    main()
