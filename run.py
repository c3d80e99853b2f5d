#!/usr/bin/env python3
"""
Completion Suggester API
Run script for the FastAPI application
"""

import logging
import os
import uvicorn
from completion_suggester.config.settings import settings

if __name__ == "__main__":
    port = int(os.getenv("PORT", 8000))
    host = os.getenv("HOST", "0.0.0.0")

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    logger = logging.getLogger("run")
    logger.info("Starting %s on http://%s:%s", settings.api_title, host, port)
    logger.info("Elasticsearch endpoint: %s", settings.elasticsearch_url)

    uvicorn.run(
        "completion_suggester.main:app",
        host=host,
        port=port,
        reload=os.getenv("RELOAD", "").lower() in ("1", "true"),
        access_log=True
    )
