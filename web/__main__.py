"""
Web entry point

Run:
    python -m web
"""

import uvicorn

from core.config.loader import get_settings
from core.logging import setup_logging

if __name__ == "__main__":
    setup_logging("web")
    settings = get_settings()

    uvicorn.run(
        "web.app:app",
        host=settings.config.web_host,
        port=settings.web_port,
        reload=False,
        log_config=None,
    )
