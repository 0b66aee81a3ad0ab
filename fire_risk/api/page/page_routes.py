from importlib import resources

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["Page"])

# Read once; every response carries the same bytes for the process lifetime
INDEX_HTML = resources.files("fire_risk").joinpath("static/index.html").read_bytes()


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def get_index():
    """Serve the map page used to draw an area of interest and request a prediction."""
    return HTMLResponse(content=INDEX_HTML)
