"""
Entry point for running the application with `python -m backend`.
"""
import logging
import sys

import uvicorn

from backend.settings import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    if not settings.store_configured:
        logging.basicConfig(level=logging.INFO)
        logger.critical(
            "Store backend 'supabase' requires SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY "
            "(or SUPABASE_ANON_KEY); set them or use STORE_BACKEND=memory"
        )
        sys.exit(1)

    uvicorn.run(
        "backend.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    main()
