"""Roster statistics models."""

from pydantic import BaseModel, Field


class StatisticsResult(BaseModel):
    """Aggregate statistics over the whole roster."""

    best_country: str = Field(..., alias="bestCountry", description="Country code with the best win ratio")
    average_bmi: float = Field(..., alias="averageBmi", description="Mean BMI, two decimals")
    median_height: float = Field(..., alias="medianHeight", description="Median height in centimeters")

    class Config:
        """Pydantic configuration."""

        populate_by_name = True
