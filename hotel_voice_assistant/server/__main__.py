"""Run the API server with ``python -m hotel_voice_assistant.server``."""

import uvicorn

from hotel_voice_assistant.server.core.config import settings


def main() -> None:
    uvicorn.run(
        "hotel_voice_assistant.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
