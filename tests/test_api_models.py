import pytest

from api.requests import CpuSuggestRequest, SloSuggestRequest
from pydantic import ValidationError


def test_slo_request_bounds():
    req = SloSuggestRequest(throughput=1000, slo=99.9, duration_hours=24)
    assert req.duration_hours == 24
    with pytest.raises(ValidationError):
        SloSuggestRequest(throughput=0, slo=99.9, duration_hours=24)
    with pytest.raises(ValidationError):
        SloSuggestRequest(throughput=1000, slo=100, duration_hours=24)
    with pytest.raises(ValidationError):
        SloSuggestRequest(throughput=1000, slo=99.9, duration_hours=721)


def test_cpu_request_requires_instance():
    req = CpuSuggestRequest(instance="t3.micro", utilization=100)
    assert req.duration_hours is None
    with pytest.raises(ValidationError):
        CpuSuggestRequest(utilization=10)
    with pytest.raises(ValidationError):
        CpuSuggestRequest(instance="t3.micro", utilization=0)
