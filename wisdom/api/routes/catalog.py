"""Catalog Routes — full author and tag listings.

Invariants:
    - Always a JSON array; [] when the table is empty
    - Author optional columns rendered as "" when NULL
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from wisdom.api.jsonp import render_payload
from wisdom.core.repository_protocols import QuoteRepository
from wisdom.infrastructure.database import get_quote_store
from wisdom.services.assemble_quotes import list_authors, list_tags

router = APIRouter(prefix="/v1", tags=["catalog"])


@router.get("/authors")
async def get_authors(
    request: Request, store: QuoteRepository = Depends(get_quote_store),
) -> Response:
    return render_payload(await list_authors(store), request)


@router.get("/tags")
async def get_tags(
    request: Request, store: QuoteRepository = Depends(get_quote_store),
) -> Response:
    return render_payload(await list_tags(store), request)
