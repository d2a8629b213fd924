"""
Thoughts API — API Index Route
================================

GET / greets the client and lists every mounted endpoint with its methods,
so the API is self-describing without opening /docs.

The list is read from the app's OpenAPI document rather than `app.routes`:
recent FastAPI releases keep included routers nested instead of copying
their routes onto the app, while the OpenAPI paths are always flattened.
"""

from typing import List

from fastapi import APIRouter, Request

from thoughts_api import __version__
from thoughts_api.schemas.common import ApiIndexResponse, EndpointInfo

router = APIRouter(tags=["Index"])


def list_endpoints(request: Request) -> List[EndpointInfo]:
    """Collect (path, methods) for every documented route on the running app."""
    paths = request.app.openapi().get("paths", {})
    return [
        EndpointInfo(path=path, methods=sorted(method.upper() for method in operations))
        for path, operations in paths.items()
    ]


@router.get("/", response_model=ApiIndexResponse, summary="Service info and route list")
async def index(request: Request) -> ApiIndexResponse:
    return ApiIndexResponse(
        message="Welcome to the Thoughts API!",
        version=__version__,
        endpoints=list_endpoints(request),
    )
