"""POST /: inbound endpoint of the edge gateway."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from gateway.src.services import CepGateway
from shared.models import CepRequest, ErrorResponse, TemperatureResult
from shared.tracing import Tracing

router = APIRouter(tags=["Temperature"])


def get_cep_gateway(request: Request) -> CepGateway:
    return request.app.state.cep_gateway


def get_tracing(request: Request) -> Tracing:
    return request.app.state.tracing


@router.post(
    "/",
    response_model=TemperatureResult,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": CepRequest.model_json_schema()}},
        }
    },
    responses={
        404: {"model": ErrorResponse, "description": "Zipcode could not be resolved"},
        422: {"model": ErrorResponse, "description": "Zipcode is not 8 digits"},
        500: {"model": ErrorResponse, "description": "Resolution service unreachable"},
    },
)
async def process_cep(
    request: Request,
    gateway: CepGateway = Depends(get_cep_gateway),
    tracing: Tracing = Depends(get_tracing),
) -> JSONResponse:
    """
    Temperature for the CEP in the request body.

    The body is decoded by the gateway itself; any decode failure is
    reported as ``invalid zipcode``.
    """
    parent_context = tracing.extract(request.headers)
    body = await request.body()
    result = await gateway.process(body, parent_context=parent_context)
    return JSONResponse(status_code=200, content=result.to_response())
