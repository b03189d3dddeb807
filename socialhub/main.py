"""
ⒸAngelaMos | 2025
main.py
"""
import uvicorn

from socialhub.config import settings
from socialhub.factory import create_app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "socialhub.main:app",
        host = settings.HOST,
        port = settings.PORT,
        reload = settings.RELOAD,
    )
