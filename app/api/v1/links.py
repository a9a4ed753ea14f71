from fastapi import APIRouter, Depends, HTTPException, Request, status

from app.dependencies.store import get_shortener
from app.schemas.common import APIResponse, ErrorResponse
from app.schemas.links import LinkCreateRequest, LinkResponse
from app.services.exceptions import InvalidUrlError, NonUniqueShortError, UrlNotFoundError
from app.services.shortener import Shortener
from app.store.base import Mapping

router = APIRouter(prefix="/links", tags=["links"])


def _to_response(request: Request, mapping: Mapping) -> LinkResponse:
    return LinkResponse(
        long_url=mapping.long_url,
        short_token=mapping.short_token,
        short_url=f"{str(request.base_url).rstrip('/')}/{mapping.short_token}",
    )


@router.post(
    "",
    response_model=APIResponse[LinkResponse],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def create_link(
        body: LinkCreateRequest,
        request: Request,
        shortener: Shortener = Depends(get_shortener),
):
    try:
        mapping = shortener.shorten(body.url)
    except InvalidUrlError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except NonUniqueShortError:
        # Rare and transient, the client may retry the whole call later
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Unable to get short url for [ {body.url} ]",
        )

    return APIResponse(success=True, data=_to_response(request, mapping))


@router.get(
    "/{short_token}",
    response_model=APIResponse[LinkResponse],
    status_code=status.HTTP_200_OK,
    responses={404: {"model": ErrorResponse}},
)
def get_link(
        short_token: str,
        request: Request,
        shortener: Shortener = Depends(get_shortener),
):
    try:
        mapping = shortener.lookup(short_token)
    except UrlNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )

    return APIResponse(success=True, data=_to_response(request, mapping))
