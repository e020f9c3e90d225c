"""
Entry point: ``python -m waba_webhooks.main`` or ``uvicorn waba_webhooks.main:app``.
"""

import uvicorn

from waba_webhooks.app import create_app
from waba_webhooks.core.config.settings import settings

app = create_app()


def run() -> None:
    uvicorn.run(
        "waba_webhooks.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
