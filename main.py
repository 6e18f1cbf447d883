import uvicorn

from nexora.application import create_app
from nexora.settings import Settings

settings = Settings.from_env()
app = create_app(settings)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
