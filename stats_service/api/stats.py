from typing import Callable, Sequence

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from stats_service.api.formatting import respond
from stats_service.api.schemas import AggregateResult, ErrorOut, StatResult
from stats_service.observability.metrics import (
    MISSING_INPUT,
    compute_timer,
    observe_computation,
    observe_rejection,
)
from stats_service.observability.recorder import Recorder, get_recorder
from stats_service.services import numeric
from stats_service.services.parsing import require_numbers

# Handlers are plain `def` so FastAPI runs them in its threadpool; a FileRecorder
# write must not block the event loop.
router = APIRouter()

MISSING_NUMS = "nums are required."
ERROR_RESPONSES = {400: {"model": ErrorOut}}


def _missing_nums(request: Request, operation: str) -> Response:
    # Missing input is answered here; parse errors go to the app's exception handler.
    observe_rejection(operation, MISSING_INPUT)
    return respond(request, ErrorOut(error=MISSING_NUMS), status_code=400)


def _single(
    request: Request,
    recorder: Recorder,
    operation: str,
    compute: Callable[[Sequence[float]], float],
    nums: str | None,
) -> Response:
    if not nums:
        return _missing_nums(request, operation)
    values = require_numbers(nums)
    with compute_timer(operation):
        result = StatResult(operation=operation, value=compute(values))
    observe_computation(operation, len(values))
    recorder.record(result.model_dump_json())
    return respond(request, result)


@router.get("/mean", response_model=StatResult, responses=ERROR_RESPONSES)
def get_mean(request: Request, nums: str | None = None, recorder: Recorder = Depends(get_recorder)):
    """Arithmetic mean of the comma-separated ``nums``."""
    return _single(request, recorder, "mean", numeric.mean, nums)


@router.get("/median", response_model=StatResult, responses=ERROR_RESPONSES)
def get_median(request: Request, nums: str | None = None, recorder: Recorder = Depends(get_recorder)):
    """Median of the comma-separated ``nums``."""
    return _single(request, recorder, "median", numeric.median, nums)


@router.get("/mode", response_model=StatResult, responses=ERROR_RESPONSES)
def get_mode(request: Request, nums: str | None = None, recorder: Recorder = Depends(get_recorder)):
    """
    Most frequent value of the comma-separated ``nums``.
    On ties, the value that reaches the top count first wins.
    """
    return _single(request, recorder, "mode", numeric.mode, nums)


@router.get("/all", response_model=AggregateResult, responses=ERROR_RESPONSES)
def get_all(request: Request, nums: str | None = None, recorder: Recorder = Depends(get_recorder)):
    """Mean, median and mode of the same ``nums`` in one response."""
    if not nums:
        return _missing_nums(request, "all")
    values = require_numbers(nums)
    with compute_timer("all"):
        result = AggregateResult(**numeric.summary(values))
    observe_computation("all", len(values))
    recorder.record(result.model_dump_json())
    return respond(request, result)
