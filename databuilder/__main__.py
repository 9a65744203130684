from typing import Optional

import uvicorn

from databuilder.core.config import settings
from databuilder.main import app


def serve(host: Optional[str] = None, port: Optional[int] = None):
    """Run the API with uvicorn on the configured host and port."""
    uvicorn.run(
        app,
        host=host or settings.api_host,
        port=port or settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    serve()
