import uvicorn

from .core.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run("task_api.main:app", host=settings.host, port=settings.port)
