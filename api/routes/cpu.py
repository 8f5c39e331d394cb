from fastapi import APIRouter

from api.requests import CpuSuggestRequest
from api.responses import CpuSuggestResponse, InstancesResponse
from api.routes.common import get_catalog
from api.routes.exception import handle_exceptions
from engine.durations import hours
from services.suggest_service import suggest_cpu

router = APIRouter(tags=["CPU"])


@router.post("/cpu/suggest", summary="Burst credit depletion alert windows", response_model=CpuSuggestResponse)
@handle_exceptions
async def cpu_suggest(req: CpuSuggestRequest) -> CpuSuggestResponse:
    duration = None if req.duration_hours is None else hours(req.duration_hours)
    suggestion = suggest_cpu(get_catalog(), req.instance, req.utilization, duration)
    return suggestion.to_response()


@router.get("/cpu/instances", summary="Known burstable instance types", response_model=InstancesResponse)
@handle_exceptions
async def cpu_instances() -> InstancesResponse:
    return InstancesResponse(instances=list(get_catalog()))
