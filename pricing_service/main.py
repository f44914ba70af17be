"""FastAPI application entrypoint."""

from dotenv import load_dotenv
from fastapi import FastAPI

# Load environment variables from .env file before settings are read
load_dotenv()

from pricing_service.adapters.inbound.http.routes import router  # noqa: E402

app = FastAPI(
    title="Pricing Service",
    description="Stores and serves vehicle prices.",
    version="1.0",
)

app.include_router(router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("pricing_service.main:app", host="0.0.0.0", port=8082, log_level="info")
