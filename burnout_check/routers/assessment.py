from fastapi import APIRouter
from burnout_check.models.request_models import AssessmentRequest
from burnout_check.models.response_models import AssessmentResponse, IncompleteResponse, RiskResponse
from burnout_check.services.assessment_service import assess
from burnout_check.utils.scoring import as_percent

router = APIRouter()

@router.post("/", response_model=AssessmentResponse, responses={422: {"model": IncompleteResponse}})
def submit_assessment(payload: AssessmentRequest):
    result = assess(payload.answers)
    return AssessmentResponse(
        normalized_score=result.normalized_score,
        percentage=as_percent(result.normalized_score),
        risk=RiskResponse(**result.risk.model_dump()),
        dimension_scores={d.value: v for d, v in result.dimension_scores.items()},
        dimension_percentages={d.value: as_percent(v) for d, v in result.dimension_scores.items()},
        advice=result.advice,
    )
