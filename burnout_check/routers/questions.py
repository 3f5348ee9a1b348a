from fastapi import APIRouter
from burnout_check.models.response_models import OptionItem, QuestionItem, QuestionnaireResponse
from burnout_check.utils.questions import OPTIONS, QUESTIONS

router = APIRouter()

@router.get("/", response_model=QuestionnaireResponse)
def list_questions():
    return QuestionnaireResponse(
        questions=[
            QuestionItem(number=i, id=q.id, text=q.text, dimension=q.dimension.value, reverse=q.reverse)
            for i, q in enumerate(QUESTIONS, start=1)
        ],
        options=[OptionItem(value=opt.value, label=opt.label) for opt in OPTIONS],
    )
