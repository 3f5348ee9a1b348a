from pydantic import BaseModel, Field
from typing import Annotated, Dict

LikertValue = Annotated[int, Field(ge=1, le=5)]

class AssessmentRequest(BaseModel):
    answers: Dict[str, LikertValue]
