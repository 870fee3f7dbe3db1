#!/usr/bin/env python3
"""Run script for gymtracker."""

import uvicorn

from gymtracker.config import configure_logging, get_settings

if __name__ == "__main__":
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "gymtracker.api.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )
