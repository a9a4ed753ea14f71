"""
Plain-text shortener interface.

POST /set takes a long URL as a text/plain body and answers with the bare
token; GET /<token> redirects. Kept wire-compatible with existing clients.
"""
from fastapi import APIRouter, Depends, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse, RedirectResponse, Response

from app.dependencies.store import get_shortener
from app.logging_config import setup_logging
from app.services.exceptions import InvalidUrlError, NonUniqueShortError, UrlNotFoundError
from app.services.shortener import Shortener
from app.utils.validators import MAX_URL_LENGTH

logger = setup_logging()

router = APIRouter(tags=["plain"])

CACHE_CONTROL = "public, max-age=31536000"
SET_ALLOW = "OPTIONS, POST"
LOOKUP_ALLOW = "OPTIONS, GET"


def _options_response(allow: str) -> Response:
    return Response(
        status_code=status.HTTP_200_OK,
        headers={
            "Accept": "text/plain",
            "Allow": allow,
            "Cache-Control": CACHE_CONTROL,
        },
    )


def _method_not_allowed(allow: str) -> Response:
    return Response(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        headers={"Allow": allow, "Cache-Control": CACHE_CONTROL},
    )


@router.options("/set")
def set_options():
    return _options_response(SET_ALLOW)


@router.post("/set")
async def set_url(request: Request, shortener: Shortener = Depends(get_shortener)):
    content_type = request.headers.get("content-type", "")
    if content_type.split(";")[0].strip().lower() != "text/plain":
        return Response(status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE)

    content_length = request.headers.get("content-length")
    if not content_length:
        return PlainTextResponse(
            "Content-Length wasn't specified", status_code=status.HTTP_400_BAD_REQUEST
        )
    if not content_length.isdigit():
        return PlainTextResponse(
            "Content-Length must be a number", status_code=status.HTTP_400_BAD_REQUEST
        )
    if int(content_length) > MAX_URL_LENGTH:
        return PlainTextResponse(
            "Max request content length is 4KB", status_code=status.HTTP_400_BAD_REQUEST
        )

    body = await request.body()
    try:
        long_url = body.decode("utf-8").strip()
    except UnicodeDecodeError:
        return PlainTextResponse(
            "Request body must be UTF-8 text", status_code=status.HTTP_400_BAD_REQUEST
        )

    # Refuse to shorten our own links, a redirect would point back at us
    host = request.headers.get("host")
    if host and host in long_url:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    try:
        mapping = await run_in_threadpool(shortener.shorten, long_url)
    except InvalidUrlError as e:
        return PlainTextResponse(
            f"Given url wasn't properly formatted: {e.reason}",
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    except NonUniqueShortError:
        return PlainTextResponse(
            f"Unable to get short url for [ {long_url} ]",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return PlainTextResponse(mapping.short_token)


@router.api_route("/set", methods=["GET", "PUT", "PATCH", "DELETE", "HEAD"])
def set_method_not_allowed():
    return _method_not_allowed(SET_ALLOW)


@router.options("/{short_token}")
def lookup_options(short_token: str):
    return _options_response(LOOKUP_ALLOW)


@router.get("/{short_token}")
def redirect_to_long_url(short_token: str, shortener: Shortener = Depends(get_shortener)):
    try:
        mapping = shortener.lookup(short_token)
    except UrlNotFoundError as e:
        logger.info(f"Result was [{e}]")
        return PlainTextResponse(str(e), status_code=status.HTTP_404_NOT_FOUND)

    logger.info(f"Result was [{mapping.short_token} -> {mapping.long_url}]")
    return RedirectResponse(mapping.long_url, status_code=status.HTTP_301_MOVED_PERMANENTLY)


@router.api_route("/{short_token}", methods=["POST", "PUT", "PATCH", "DELETE", "HEAD"])
def lookup_method_not_allowed(short_token: str):
    return _method_not_allowed(LOOKUP_ALLOW)
