"""Index Route — GET / redirects to the project documentation page.

Invariants:
    - Always 302 to settings.docs_url; no database access
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse

router = APIRouter(tags=["index"])


@router.get("/")
async def index(request: Request) -> RedirectResponse:
    return RedirectResponse(
        request.app.state.settings.docs_url,
        status_code=status.HTTP_302_FOUND,
    )
