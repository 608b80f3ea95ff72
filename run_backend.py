#!/usr/bin/env python3
"""Start the Dreamhouse geometry API server."""

import uvicorn

from dreamhouse import config

if __name__ == "__main__":
    uvicorn.run(
        "dreamhouse.api.main:app",
        host=config.API_HOST,
        port=config.API_PORT,
        log_level=config.LOG_LEVEL.lower(),
        reload=config.API_RELOAD,
        reload_dirs=["dreamhouse"],
    )
