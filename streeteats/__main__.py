"""Run the API with uvicorn: ``python -m streeteats``."""

import uvicorn

from streeteats.core.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "streeteats.main:app",
        host="0.0.0.0",
        port=settings.app_port,
        reload=settings.app_env == "development",
    )
