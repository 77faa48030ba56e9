"""
Remix API routes for transforming text with AI.
"""
from fastapi import APIRouter, Depends

from app.api.dependencies.services import get_remix_service
from app.schemas.remix import RemixRequest, RemixResponse, RemixTypesResponse
from app.services.remix_service import RemixService


router = APIRouter(prefix="/api", tags=["remix"])


@router.get("/remix-types", response_model=RemixTypesResponse)
async def list_remix_types() -> RemixTypesResponse:
    """
    List the supported remix types with a short description of each.
    """
    return RemixTypesResponse(types=RemixService.list_types())


@router.post("/remix", response_model=RemixResponse)
def remix_text(
    request: RemixRequest,
    service: RemixService = Depends(get_remix_service)
) -> RemixResponse:
    """
    Rewrite text using AI with a specific remix type.

    Supported types:
    - improve: Improve clarity and flow (default)
    - summarize: Condense into a concise summary
    - expand: Add detail and examples
    - casual: Conversational tone
    - formal: Professional tone
    - thread: Numbered Twitter/X thread with hashtags
    - unique: 5-8 standalone tweets without hashtags

    Errors: 400 invalid input, 401 rejected API key, 429 rate limited,
    500 missing configuration or upstream failure.
    """
    result = service.remix(request.text, request.type)
    return RemixResponse(**result)
