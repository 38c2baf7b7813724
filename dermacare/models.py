from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Category = Literal["healthy", "minor", "moderate", "serious"]
Severity = Literal["low", "medium", "high"]
Prevalence = Literal["very_common", "common", "uncommon", "rare"]
IngredientSeverity = Literal["safe", "caution", "harmful"]
SkinType = Literal["dry", "oily", "combination", "sensitive", "normal"]
RoutineTime = Literal["morning", "evening", "both"]


class HealthCheckResponse(BaseModel):
    status: str
    storage_available: bool
    conditions_loaded: int


# --- Classifier data ---

class FeatureVector(BaseModel):
    """Synthetic image measurements, every field in [0, 1]."""
    model_config = ConfigDict(frozen=True)

    # Color
    brightness: float = Field(ge=0.0, le=1.0)
    redness: float = Field(ge=0.0, le=1.0)
    color_variation: float = Field(ge=0.0, le=1.0)
    saturation: float = Field(ge=0.0, le=1.0)
    # Texture
    texture: float = Field(ge=0.0, le=1.0)
    edge_sharpness: float = Field(ge=0.0, le=1.0)
    contrast: float = Field(ge=0.0, le=1.0)
    granularity: float = Field(ge=0.0, le=1.0)
    # Pattern
    uniformity: float = Field(ge=0.0, le=1.0)
    symmetry: float = Field(ge=0.0, le=1.0)
    distribution: float = Field(ge=0.0, le=1.0)
    density: float = Field(ge=0.0, le=1.0)
    # Clinical
    inflammation: float = Field(ge=0.0, le=1.0)
    asymmetry: float = Field(ge=0.0, le=1.0)
    border: float = Field(ge=0.0, le=1.0)
    diameter: float = Field(ge=0.0, le=1.0)


class DiagnosticRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: float
    max: float


class HomeRemedy(BaseModel):
    step: str
    duration: Optional[str] = None
    frequency: Optional[str] = None
    notes: Optional[str] = None


class Treatment(BaseModel):
    type: Literal["otc", "prescription", "lifestyle", "home"]
    name: str
    instructions: str
    duration: Optional[str] = None
    notes: Optional[str] = None


class DoAndDont(BaseModel):
    do: List[str] = []
    dont: List[str] = []


class ConditionRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    condition: str
    medical_name: str
    category: Category
    severity: Severity
    base_confidence: float
    description: str
    recommendation: str
    icd_code: str
    prevalence: Prevalence
    affected_area: int
    diagnostic_profile: Dict[str, DiagnosticRange]
    # Care plan (optional)
    home_remedies: List[HomeRemedy] = []
    otc_treatments: List[Treatment] = []
    lifestyle_changes: List[str] = []
    prevention_tips: List[str] = []
    when_to_see_doctor: Optional[str] = None
    expected_recovery: Optional[str] = None
    do_and_dont: Optional[DoAndDont] = None


class AnalysisResult(BaseModel):
    condition_key: str
    condition: str
    medical_name: str
    severity: Severity
    confidence: float
    description: str
    recommendation: str
    affected_area: int


class HistoryEntry(BaseModel):
    id: str
    image_uri: str
    result: AnalysisResult
    timestamp: datetime
    notes: Optional[str] = None


# --- Ingredients ---

class IngredientRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    ingredient: str
    safe: bool
    severity: IngredientSeverity
    rationale: str


class IngredientResult(BaseModel):
    ingredient: str
    safe: bool
    severity: IngredientSeverity
    rationale: str


class IngredientSummary(BaseModel):
    safe_count: int
    caution_count: int
    harmful_count: int
    overall_safety: IngredientSeverity
    summary: str


# --- User state ---

class UserProfile(BaseModel):
    id: str
    name: str
    skin_type: SkinType = "normal"
    allergies: List[str] = []


class RoutineStep(BaseModel):
    id: str
    title: str
    description: str
    time: RoutineTime
    completed: bool = False
    icon: str
    importance: Literal["essential", "recommended", "optional"]


class ProgressPoint(BaseModel):
    month: str  # YYYY-MM
    healthy: int
    issues: int
    total: int
    healthy_percentage: float


class ProgressReport(BaseModel):
    months: List[ProgressPoint]
    latest_healthy_percentage: float
    trend: float


# --- Requests / responses ---

class ScanRequest(BaseModel):
    image_uri: str
    notes: Optional[str] = None


class ScanResponse(BaseModel):
    entry: HistoryEntry
    accuracy: dict
    presentation: dict


class IngredientAnalysisRequest(BaseModel):
    text: str


class IngredientAnalysisResponse(BaseModel):
    results: List[IngredientResult]
    summary: IngredientSummary
    presentation: dict


class AppStateResponse(BaseModel):
    user_profile: Optional[UserProfile] = None
    is_detailed_mode: bool
    is_first_time: bool
    history_count: int


class FirstTimeRequest(BaseModel):
    is_first_time: bool


class RoutineResponse(BaseModel):
    time: Literal["morning", "evening"]
    steps: List[RoutineStep]
    completed: int
    total: int
    completion_percentage: float
