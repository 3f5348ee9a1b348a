import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from burnout_check.services.assessment_service import IncompleteSubmission
from burnout_check.utils.config import APP_TITLE, CORS_ORIGINS, LOG_LEVEL

# Routers
from burnout_check.routers import assessment, questions

logging.basicConfig(level=LOG_LEVEL)

app = FastAPI(title=APP_TITLE, version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(IncompleteSubmission)
async def incomplete_submission_handler(request: Request, exc: IncompleteSubmission):
    return JSONResponse(status_code=422, content={"detail": str(exc), "missing": exc.missing})

# Register routers
app.include_router(questions.router, prefix="/questions", tags=["Questions"])
app.include_router(assessment.router, prefix="/assessment", tags=["Assessment"])

@app.get("/")
def root():
    return {"message": f"{APP_TITLE} backend running successfully!"}
