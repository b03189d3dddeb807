"""
ⒸAngelaMos | 2025
__main__.py
"""
import uvicorn

from socialhub.config import settings


def main() -> None:
    uvicorn.run(
        "socialhub.main:app",
        host = settings.HOST,
        port = settings.PORT,
        reload = settings.RELOAD,
        log_config = None,
    )


if __name__ == "__main__":
    main()
