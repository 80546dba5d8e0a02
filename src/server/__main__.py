"""Server module entry point for running with python -m server."""

import uvicorn

# Import logging configuration first to intercept all logging
from lensfront.utils.logging_config import get_logger
from server.server_config import HOST, PORT, RELOAD

logger = get_logger(__name__)

if __name__ == "__main__":
    logger.info(
        "Starting lensfront server",
        extra={
            "host": HOST,
            "port": PORT,
        },
    )

    uvicorn.run(
        "server.main:app",
        host=HOST,
        port=PORT,
        reload=RELOAD,
        log_config=None,  # Disable uvicorn's default logging config
    )
