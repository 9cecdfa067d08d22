"""Quote Routes — random quote and per-author quote endpoints.

Invariants:
    - Handlers only orchestrate: store injected, assembly in services/assemble_quotes.py
    - Responses go through render_payload (JSON or JSONP)
    - Any NotFoundError / InternalFailure propagates to the global error handlers
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from wisdom.api.jsonp import render_payload
from wisdom.core.repository_protocols import QuoteRepository
from wisdom.infrastructure.database import get_quote_store
from wisdom.services.assemble_quotes import (
    quotes_by_author, random_quote, random_quote_by_author,
)

router = APIRouter(prefix="/v1", tags=["quotes"])


@router.get("/random")
async def get_random_quote(
    request: Request, store: QuoteRepository = Depends(get_quote_store),
) -> Response:
    """One random quote, fully resolved."""
    return render_payload(await random_quote(store), request)


@router.get("/author/{handle}")
async def get_author_quotes(
    handle: str,
    request: Request,
    store: QuoteRepository = Depends(get_quote_store),
) -> Response:
    """Every quote of the author with this twitter handle."""
    return render_payload(await quotes_by_author(store, handle), request)


@router.get("/author/{handle}/random")
async def get_author_random_quote(
    handle: str,
    request: Request,
    store: QuoteRepository = Depends(get_quote_store),
) -> Response:
    """One random quote of the author with this twitter handle."""
    return render_payload(
        await random_quote_by_author(store, handle), request,
    )
