from pydantic import BaseModel
from typing import Dict, List

class QuestionItem(BaseModel):
    number: int
    id: str
    text: str
    dimension: str
    reverse: bool

class OptionItem(BaseModel):
    value: int
    label: str

class QuestionnaireResponse(BaseModel):
    questions: List[QuestionItem]
    options: List[OptionItem]

class RiskResponse(BaseModel):
    level: str
    label: str
    color: str
    description: str

class AssessmentResponse(BaseModel):
    normalized_score: float
    percentage: int
    risk: RiskResponse
    dimension_scores: Dict[str, float]
    dimension_percentages: Dict[str, int]
    advice: List[str]

class IncompleteResponse(BaseModel):
    detail: str
    missing: List[str]
