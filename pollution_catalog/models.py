from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import PollutionCategory

CategoryCounts = Dict[PollutionCategory, int]


def _normalize_count_keys(value: Any) -> Any:
    if not isinstance(value, dict):
        return value
    normalized: Dict[Any, Any] = {}
    for key, count in value.items():
        if isinstance(key, str):
            key = PollutionCategory(key) if key == "fishingGear" else key
        # "fishingGear" and "fishing_gear" name the same category
        if key in normalized:
            raise ValueError(f"duplicate count for {getattr(key, 'value', key)}")
        normalized[key] = count
    return normalized


def _check_non_negative(counts: Dict[Any, int]) -> Dict[Any, int]:
    for key, count in counts.items():
        if count < 0:
            raise ValueError(f"count for {key} must be >= 0")
    return counts


# -------------------------
# Detection (upstream detector output)
# -------------------------

class DetectionInput(BaseModel):
    """
    Opaque detector output: raw COCO-style labels with counts, people in
    frame and scene labels. Labels are mapped by pollution_catalog.mapping.
    """
    model_config = ConfigDict(extra="forbid")

    raw_label_counts: Dict[str, int] = Field(default_factory=dict)
    people_count: int = 0
    scene_labels: List[str] = Field(default_factory=list)

    @field_validator("raw_label_counts")
    @classmethod
    def validate_raw_counts(cls, v: Dict[str, int]) -> Dict[str, int]:
        return _check_non_negative(v)

    @field_validator("people_count")
    @classmethod
    def validate_people_count(cls, v: int) -> int:
        if v < 0:
            raise ValueError("people_count must be >= 0")
        return v


# -------------------------
# Score Request (user submission)
# -------------------------

class ScoreRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    user_counts: CategoryCounts
    ai_baseline: Optional[CategoryCounts] = None
    detections: Optional[DetectionInput] = None
    severity: int
    has_location: bool = False
    has_photo: bool = False
    scene_labels: List[str] = Field(default_factory=list)

    @field_validator("user_counts", "ai_baseline", mode="before")
    @classmethod
    def normalize_keys(cls, v: Any) -> Any:
        return _normalize_count_keys(v)

    @field_validator("user_counts", "ai_baseline")
    @classmethod
    def validate_counts(cls, v: Optional[CategoryCounts]) -> Optional[CategoryCounts]:
        if v is None:
            return v
        return _check_non_negative(v)

    @field_validator("severity")
    @classmethod
    def validate_severity(cls, v: int) -> int:
        if not 1 <= v <= 5:
            raise ValueError("severity must be an integer between 1 and 5")
        return v


class FraudRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    user_counts: CategoryCounts
    ai_baseline: CategoryCounts = Field(default_factory=dict)
    severity: int

    @field_validator("user_counts", "ai_baseline", mode="before")
    @classmethod
    def normalize_keys(cls, v: Any) -> Any:
        return _normalize_count_keys(v)

    @field_validator("user_counts", "ai_baseline")
    @classmethod
    def validate_counts(cls, v: CategoryCounts) -> CategoryCounts:
        return _check_non_negative(v)


# -------------------------
# Client Submission (server-side re-verification)
# -------------------------

class ClientSubmission(BaseModel):
    """
    A report as submitted by a client, carrying the client's own estimate of
    weight and XP. has_photo is not part of the payload: submissions require
    a photo, so the server always scores with the photo bonus.
    """
    model_config = ConfigDict(extra="forbid")

    pollution_counts: CategoryCounts
    ai_baseline: CategoryCounts = Field(default_factory=dict)
    scene_labels: List[str] = Field(default_factory=list)
    severity: int
    has_location: bool = False
    client_xp: int = 0
    client_weight_kg: Optional[float] = None

    @field_validator("pollution_counts", "ai_baseline", mode="before")
    @classmethod
    def normalize_keys(cls, v: Any) -> Any:
        return _normalize_count_keys(v)

    @field_validator("pollution_counts", "ai_baseline")
    @classmethod
    def validate_counts(cls, v: CategoryCounts) -> CategoryCounts:
        return _check_non_negative(v)

    @field_validator("severity")
    @classmethod
    def validate_severity(cls, v: int) -> int:
        if not 1 <= v <= 5:
            raise ValueError("severity must be an integer between 1 and 5")
        return v


def counts_to_dict(counts: CategoryCounts) -> Dict[str, int]:
    return {category.value: count for category, count in counts.items()}
