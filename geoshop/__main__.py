"""python -m geoshop"""
import uvicorn

from geoshop.core.config import settings


def main() -> None:
    uvicorn.run(
        "geoshop.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
