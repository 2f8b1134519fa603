"""Prediction Factory

Pure functions building and transforming GridPredictionDTO records.
Timestamps are ISO-8601 UTC strings; callers pass `now` explicitly.
"""

import copy
import uuid
from datetime import datetime, timedelta, timezone

from libs.shared.src.constants.prediction_settings import (
    COPY_NAME_SUFFIX,
    RECENT_WINDOW_DAYS,
)
from libs.shared.src.dtos.grid.grid_parameters_dto import GridParametersDTO
from libs.shared.src.dtos.grid.grid_result_dto import GridResultDTO
from libs.shared.src.dtos.prediction.grid_prediction_dto import GridPredictionDTO
from libs.shared.src.dtos.prediction.prediction_update_dto import PredictionUpdateDTO

UPDATABLE_FIELDS = ("name", "description", "parameters", "results")


def new_prediction_id() -> str:
    """Opaque unique id (uuid4, backed by os.urandom)"""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_timestamp(moment: datetime) -> str:
    """datetime → ISO-8601 string, naive values are taken as UTC"""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat()


def parse_timestamp(value: str) -> datetime:
    """ISO-8601 string → aware datetime (accepts a trailing Z)"""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    moment = datetime.fromisoformat(value)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def build_prediction(
    name: str,
    parameters: GridParametersDTO,
    now: datetime,
    description: str | None = None,
    results: GridResultDTO | None = None,
    prediction_id: str | None = None,
) -> GridPredictionDTO:
    """
    Build a new prediction record

    Args:
        name: Display name
        parameters: Calculator parameters, copied by value
        now: Creation time, used for both timestamps
        description: Optional free text
        results: Optional cached calculation result
        prediction_id: Explicit id, a fresh uuid4 when omitted

    Returns:
        GridPredictionDTO: The new record
    """
    timestamp = to_timestamp(now)
    prediction: GridPredictionDTO = {
        "id": prediction_id or new_prediction_id(),
        "name": name,
        "description": description,
        "parameters": copy.deepcopy(parameters),
        "created_at": timestamp,
        "updated_at": timestamp,
    }
    if results is not None:
        prediction["results"] = copy.deepcopy(results)
    return prediction


def merge_prediction_update(
    existing: GridPredictionDTO,
    updates: PredictionUpdateDTO,
    now: datetime,
) -> GridPredictionDTO:
    """
    Apply a partial update

    Fields missing from `updates` or set to None keep their stored value.
    id and created_at are always carried over; updated_at becomes `now`.
    """
    merged = copy.deepcopy(existing)
    for field in UPDATABLE_FIELDS:
        value = updates.get(field)
        if value is not None:
            merged[field] = copy.deepcopy(value)  # type: ignore[literal-required]

    merged["id"] = existing["id"]
    merged["created_at"] = existing["created_at"]
    merged["updated_at"] = to_timestamp(now)
    return merged


def copy_prediction(
    original: GridPredictionDTO,
    now: datetime,
    prediction_id: str | None = None,
) -> GridPredictionDTO:
    """
    Duplicate a prediction

    Every field is copied, the name gets COPY_NAME_SUFFIX, the id and both
    timestamps are new.
    """
    duplicate = copy.deepcopy(original)
    timestamp = to_timestamp(now)
    duplicate["id"] = prediction_id or new_prediction_id()
    duplicate["name"] = f"{original['name']}{COPY_NAME_SUFFIX}"
    duplicate["created_at"] = timestamp
    duplicate["updated_at"] = timestamp
    return duplicate


def count_recent_predictions(
    predictions: list[GridPredictionDTO],
    now: datetime,
    window_days: int = RECENT_WINDOW_DAYS,
) -> int:
    """Number of predictions created strictly after now - window_days"""
    cutoff = now - timedelta(days=window_days)
    if cutoff.tzinfo is None:
        cutoff = cutoff.replace(tzinfo=timezone.utc)
    return sum(1 for p in predictions if parse_timestamp(p["created_at"]) > cutoff)
