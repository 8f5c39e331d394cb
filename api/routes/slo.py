from fastapi import APIRouter

from api.requests import SloSuggestRequest
from api.responses import SloSuggestResponse
from api.routes.exception import handle_exceptions
from engine.durations import hours
from services.suggest_service import suggest_service

router = APIRouter(tags=["SLO"])


@router.post("/slo/suggest", summary="SLO burn-rate alert windows", response_model=SloSuggestResponse)
@handle_exceptions
async def slo_suggest(req: SloSuggestRequest) -> SloSuggestResponse:
    suggestion = suggest_service(req.throughput, req.slo, hours(req.duration_hours))
    return suggestion.to_response()
