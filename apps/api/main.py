from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import HTMLResponse

from src.config import UPCOMING_URL
from src.dom import LaunchPage
from src.fetch_upcoming import Fetcher, LaunchFetchError, fetch_upcoming
from src.models import LaunchSummary, summarize
from src.populate_dropdown import populate_rocket_dropdown
from src.render_launches import render_filtered_launches
from src.utils import setup_logging


def create_app(fetch: Fetcher = fetch_upcoming) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging()
        # Page load: the rocket list is filled exactly once per process
        page = LaunchPage()
        populate_rocket_dropdown(page.select, fetch=fetch)
        app.state.page = page
        yield

    app = FastAPI(title="Upcoming Launch Finder", version="1.0.0", lifespan=lifespan)
    app.state.fetch = fetch

    @app.get("/health")
    def health(request: Request):
        page: LaunchPage = request.app.state.page
        return {
            "status": "ok",
            "rockets_loaded": len(page.select.options) - 1,
            "upstream_url": UPCOMING_URL,
        }

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request):
        return request.app.state.page.to_html()

    @app.get("/launches", response_class=HTMLResponse)
    def launches(request: Request, rocket: str = ""):
        # The populated select is shared; value and results belong to this request
        shared: LaunchPage = request.app.state.page
        page = LaunchPage(select=shared.select.with_value(rocket))
        render_filtered_launches(page.select, page.container, fetch=request.app.state.fetch)
        return page.to_html()

    @app.get("/api/rockets")
    def rockets(request: Request):
        page: LaunchPage = request.app.state.page
        return {"rockets": [value for value, _ in page.select.options if value]}

    @app.get("/api/launches", response_model=List[LaunchSummary])
    def launches_json(request: Request, rocket: Optional[str] = Query(None)):
        try:
            upcoming = request.app.state.fetch((rocket or "").strip() or None)
        except LaunchFetchError as e:
            raise HTTPException(status_code=502, detail=f"upstream_error: {e}")
        return [summarize(launch) for launch in upcoming.results or []]

    return app


app = create_app()
