from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wave_adapter import __version__
from wave_adapter.api.dependencies import (
    HandlerDep,
    RequestIdDep,
    SettingsDep,
    lifespan,
    require_internal_secret,
)
from wave_adapter.config import settings
from wave_adapter.dto import (
    AccountsResponse,
    BusinessesResponse,
    CreateExpenseRequest,
    CreateExpenseResponse,
    CustomerResponse,
    EnvCheckResponse,
    ErrorResponse,
    FindOrCreateCustomerRequest,
    FindOrCreateProductRequest,
    HealthCheckResponse,
    ProductResponse,
    SchemaResponse,
    SuggestExpenseAccountsRequest,
    SuggestionsResponse,
)
from wave_adapter.errors import AdapterError
from wave_adapter.log_config import configure_logging

configure_logging(settings.log_level)
logger = structlog.get_logger()

SERVICE_NAME = "wave-expense-adapter"

SELECTION_RESPONSES = {300: {"model": ErrorResponse, "description": "Selection required"}}

app = FastAPI(
    title="Wave Expense Adapter",
    description="Resolves businesses and ledger accounts and books expenses in Wave",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AdapterError)
async def adapter_error_handler(request: Request, exc: AdapterError) -> JSONResponse:
    """Render adapter failures as ``{ok: false, message, details, code}``."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log("request_failed", path=request.url.path, status=exc.status_code, message=exc.message, code=exc.code)
    body = ErrorResponse(message=exc.message, details=exc.details, code=exc.code)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(by_alias=True))


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render anything else as a generic 500 in the same envelope."""
    logger.exception("request_crashed", path=request.url.path, error=str(exc))
    body = ErrorResponse(message="Unexpected error")
    return JSONResponse(status_code=500, content=body.model_dump(by_alias=True))


@app.get("/health", response_model=HealthCheckResponse)
async def health() -> HealthCheckResponse:
    """Health check endpoint."""
    return HealthCheckResponse(service=SERVICE_NAME, version=__version__)


router = APIRouter(dependencies=[Depends(require_internal_secret)])


@router.get("/debug/env", response_model=EnvCheckResponse)
async def debug_env(current: SettingsDep) -> EnvCheckResponse:
    """Report which credentials are configured, without revealing them."""
    return EnvCheckResponse(
        has_wave_token=current.has_wave_token,
        has_internal_secret=current.has_internal_secret,
    )


@router.get("/wave/businesses", response_model=BusinessesResponse)
async def list_businesses(handler: HandlerDep, request_id: RequestIdDep):
    return await handler.list_businesses(request_id=request_id)


@router.get("/wave/accounts", response_model=AccountsResponse, responses=SELECTION_RESPONSES)
async def list_accounts(
    handler: HandlerDep,
    request_id: RequestIdDep,
    business_id: Annotated[str | None, Query(alias="businessId")] = None,
    business_name: Annotated[str | None, Query(alias="businessName")] = None,
    types: Annotated[str | None, Query(description="Comma-separated account types")] = None,
):
    return await handler.list_accounts(
        business_id=business_id,
        business_name=business_name,
        types=types,
        request_id=request_id,
    )


@router.post("/wave/expenses/suggest", response_model=SuggestionsResponse, responses=SELECTION_RESPONSES)
async def suggest_expense_accounts(
    request: SuggestExpenseAccountsRequest,
    handler: HandlerDep,
    request_id: RequestIdDep,
):
    """Rank the business's expense accounts for free text, vendor and category hint."""
    return await handler.suggest_expense_accounts(request, request_id=request_id)


@router.post("/wave/expenses/create", response_model=CreateExpenseResponse, responses=SELECTION_RESPONSES)
async def create_expense(
    request: CreateExpenseRequest,
    handler: HandlerDep,
    request_id: RequestIdDep,
):
    """Create an expense, auto-selecting accounts when the match is confident.

    Returns 300 with ranked options when an account (or the business) has to
    be chosen explicitly.
    """
    return await handler.create_expense(request, request_id=request_id)


@router.post("/wave/customers/find-or-create", response_model=CustomerResponse, responses=SELECTION_RESPONSES)
async def find_or_create_customer(
    request: FindOrCreateCustomerRequest,
    handler: HandlerDep,
    request_id: RequestIdDep,
):
    return await handler.find_or_create_customer(request, request_id=request_id)


@router.post("/wave/products/find-or-create", response_model=ProductResponse, responses=SELECTION_RESPONSES)
async def find_or_create_product(
    request: FindOrCreateProductRequest,
    handler: HandlerDep,
    request_id: RequestIdDep,
):
    return await handler.find_or_create_product(request, request_id=request_id)


@router.get("/wave/schema", response_model=SchemaResponse)
async def fetch_schema(handler: HandlerDep, request_id: RequestIdDep):
    """Introspect the Wave GraphQL schema."""
    return await handler.fetch_schema(request_id=request_id)


app.include_router(router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "wave_adapter.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
