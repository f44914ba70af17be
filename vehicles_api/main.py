"""FastAPI application entrypoint."""

from dotenv import load_dotenv
from fastapi import FastAPI

# Load environment variables from .env file before settings are read
load_dotenv()

from vehicles_api.adapters.inbound.http.routes import router  # noqa: E402

app = FastAPI(
    title="Vehicles API",
    description="This API returns a list of vehicles and related information.",
    version="1.0",
)

app.include_router(router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("vehicles_api.main:app", host="0.0.0.0", port=8080, log_level="info")
