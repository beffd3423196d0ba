import uvicorn

from books_api.core.config import get_settings


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "books_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
    )
