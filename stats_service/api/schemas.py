from typing import Literal, Union
from pydantic import BaseModel, field_serializer

# Largest magnitude still written out as plain integer digits (beyond it, 1e+21 style)
INTEGRAL_LIMIT = 1e21

def compact_number(value: float) -> Union[int, float]:
    """Render whole floats as ints so 4.0 serializes as 4; 2.5 is unchanged."""
    if value.is_integer() and abs(value) < INTEGRAL_LIMIT:
        return int(value)
    return value

# Output schema for /mean, /median and /mode
class StatResult(BaseModel):
    operation: Literal["mean", "median", "mode"]  # Statistic that produced the value
    value: float

    @field_serializer("value")
    def serialize_value(self, value: float):
        return compact_number(value)

# Output schema for /all
class AggregateResult(BaseModel):
    operation: Literal["all"] = "all"
    mean: float     # Arithmetic mean
    median: float   # Median value
    mode: float     # Most frequent value (first to reach the top count wins)

    @field_serializer("mean", "median", "mode")
    def serialize_stats(self, value: float):
        return compact_number(value)

# Body of every 400 response
class ErrorOut(BaseModel):
    error: str  # Human-readable message
