"""GET /{cep}: temperature lookup endpoint of the resolution service."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from resolver.src.services import ResolutionService
from shared.models import ErrorResponse, TemperatureResult
from shared.tracing import Tracing

router = APIRouter(tags=["Temperature"])


def get_resolution_service(request: Request) -> ResolutionService:
    return request.app.state.resolution_service


def get_tracing(request: Request) -> Tracing:
    return request.app.state.tracing


@router.get(
    "/{cep}",
    response_model=TemperatureResult,
    responses={
        404: {"model": ErrorResponse, "description": "Zipcode could not be resolved"},
        422: {"model": ErrorResponse, "description": "Zipcode is not 8 digits"},
    },
)
async def get_temperature(
    cep: str,
    request: Request,
    service: ResolutionService = Depends(get_resolution_service),
    tracing: Tracing = Depends(get_tracing),
) -> JSONResponse:
    """
    Current temperature for the city of a CEP.

    Failures raise ``OutwardError`` and are rendered by the app's
    exception handlers as ``{"error": ...}``.
    """
    parent_context = tracing.extract(request.headers)
    result = await service.resolve(cep, parent_context=parent_context)
    return JSONResponse(status_code=200, content=result.to_response())
