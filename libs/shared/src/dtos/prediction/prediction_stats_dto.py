"""Prediction Stats DTO"""

from typing import TypedDict


class PredictionStatsDTO(TypedDict):
    """Prediction store statistics"""

    total: int  # Number of stored predictions
    recent: int  # Created within the trailing window
