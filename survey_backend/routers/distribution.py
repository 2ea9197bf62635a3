# survey_backend/routers/distribution.py

import math

from fastapi import APIRouter, Query

from survey_backend.models.distribution_models import DistributionCurve
from survey_backend.models.response_models import ErrorBody
from survey_backend.services.errors import InvalidParameter
from survey_backend.services.statistics import normal_distribution

router = APIRouter(prefix="/api/distribution", tags=["Distribution"])

MAX_POINTS = 10_000


@router.get("", response_model=DistributionCurve, responses={400: {"model": ErrorBody}})
def distribution(
    mean: float = Query(50.0),
    std_dev: float = Query(10.0),
    num_points: int = Query(101, ge=2, le=MAX_POINTS),
):
    """
    Chart-ready normal curve over x in [0, 100].
    JSON has no nan/inf, so inputs that would produce them are rejected here.
    """
    if not (math.isfinite(mean) and math.isfinite(std_dev)):
        raise InvalidParameter("mean and std_dev must be finite numbers")
    if std_dev == 0:
        raise InvalidParameter("std_dev must be non-zero")

    points = normal_distribution(mean, std_dev, num_points)

    if not all(math.isfinite(p["x"]) and math.isfinite(p["y"]) for p in points):
        raise InvalidParameter("Distribution is not finite for these parameters")

    return DistributionCurve(mean=mean, std_dev=std_dev, num_points=num_points, points=points)
