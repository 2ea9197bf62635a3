from pydantic import BaseModel
from typing import List


class Point(BaseModel):
    x: float
    y: float


class DistributionCurve(BaseModel):
    mean: float
    std_dev: float
    num_points: int
    points: List[Point]
