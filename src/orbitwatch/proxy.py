"""Feed proxy — forwards the public catalog so the app has a same-origin, CORS-open source."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

import httpx
from dotenv import load_dotenv
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from orbitwatch.config import Settings, configure_logging, load_settings

logger = logging.getLogger(__name__)


def get_settings() -> Settings:
    return load_settings()


async def get_http_client(
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(
        timeout=settings.http_timeout, follow_redirects=True
    ) as client:
        yield client


app = FastAPI(
    title="OrbitWatch feed proxy",
    description="Forwards the public GP catalog as a JSON array",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.get("/debris")
async def get_debris(
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """Return the upstream JSON array unchanged, or 500 on any upstream failure."""
    try:
        resp = await client.get(settings.upstream_url)
        resp.raise_for_status()
        data = resp.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.error("Upstream fetch from %s failed: %s", settings.upstream_url, e)
        return JSONResponse(status_code=500, content={"error": "Failed to fetch data"})
    logger.info("Forwarded %d objects", len(data) if isinstance(data, list) else 0)
    return data


@app.get("/health")
async def health_check():
    return {"status": "ok"}


def main() -> None:
    import uvicorn

    load_dotenv()
    settings = load_settings()
    configure_logging(settings)
    logger.info(
        "Proxy running on http://%s:%d", settings.proxy_host, settings.proxy_port
    )
    uvicorn.run(app, host=settings.proxy_host, port=settings.proxy_port)


if __name__ == "__main__":
    main()
