"""
Surface renderer web service.

Routes:
  GET  /            Browser front end (settings form + live preview)
  GET  /static/...  Front end assets
  GET|POST /draw    Render parameters → streamed image/svg+xml
  GET  /health      Liveness + function catalog
"""

from __future__ import annotations

from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, StreamingResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from config import settings
from surface.functions import SurfaceFunction, names
from surface.params import RenderParameterError, parse_render_params
from surface.renderer import SVG_MEDIA_TYPE, iter_svg
from surface.state import RenderConfig

app = FastAPI(title="Surface Renderer", version="0.1.0")
app.mount("/static", StaticFiles(directory=str(settings.STATIC_DIR)), name="static")

templates = Jinja2Templates(directory=str(Path(__file__).parent / "surface" / "templates"))


# ── Request parameters ───────────────────────────────────────────────

async def collect_params(request: Request) -> dict[str, list[str]]:
    """Merge query string and form body; body values win per key."""
    params: dict[str, list[str]] = {
        key: request.query_params.getlist(key) for key in request.query_params.keys()
    }
    if request.method == "POST":
        form = await request.form()
        for key in form.keys():
            params[key] = [v for v in form.getlist(key) if isinstance(v, str)]
    return params


@app.exception_handler(RenderParameterError)
async def parameter_error_handler(request: Request, exc: RenderParameterError) -> PlainTextResponse:
    print(f"[draw] rejected request: {exc}")
    return PlainTextResponse(str(exc), status_code=400)


# ── Routes ───────────────────────────────────────────────────────────

@app.api_route("/draw", methods=["GET", "POST"])
async def draw(request: Request) -> StreamingResponse:
    """Render the requested surface as an SVG document."""
    params = await collect_params(request)
    config = parse_render_params(params, base=RenderConfig.from_settings(settings))
    # Starlette stops pulling from the generator once the client disconnects.
    return StreamingResponse(iter_svg(config), media_type=SVG_MEDIA_TYPE)


@app.get("/")
async def index(request: Request):
    """Serve the settings form."""
    return templates.TemplateResponse(
        request,
        "index.html.j2",
        {
            "functions": list(SurfaceFunction),
            "defaults": settings,
        },
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok", "functions": names()}


def main() -> None:
    print(f"[server] Starting server at http://{settings.HOST}:{settings.PORT}, enjoy!")
    print("[server] Press Ctrl+C for shut down")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
