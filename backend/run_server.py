"""Run the API with uvicorn on the configured host and port."""
from pathlib import Path
import sys

BASE = Path(__file__).parent
if str(BASE) not in sys.path:
    sys.path.insert(0, str(BASE))

import uvicorn
from wordly.config import settings


def run():
    """Serve `wordly.main:app` on `HOST`/`PORT` from the environment.

    Intended for local development; deployments may point any ASGI
    server at `wordly.main:app` instead.
    """
    print(f"Server is running on port {settings.PORT}")
    uvicorn.run("wordly.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())

if __name__ == '__main__':
    run()
