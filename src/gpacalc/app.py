from typing import Dict, List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from gpacalc.config.settings import configure_logging, settings
from gpacalc.core.grades import COURSE_COUNT
from gpacalc.services.calculator_service import GPACalculatorService
from gpacalc.state.form_state import FormState


configure_logging()

app = FastAPI(title="GPA Calculator API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allowed_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class GPAPayload(BaseModel):
    credits: List[str] = Field(min_length=COURSE_COUNT, max_length=COURSE_COUNT)
    grades: List[str] = Field(min_length=COURSE_COUNT, max_length=COURSE_COUNT)


class FormPayload(BaseModel):
    credits: List[str]
    grades: List[str]
    output: str


def _form_from_payload(payload: GPAPayload) -> FormState:
    form = FormState()
    calculator = GPACalculatorService(form, notify=lambda _: None)
    calculator.install_input_sanitizers()
    for position, (credit, grade) in enumerate(zip(payload.credits, payload.grades), start=1):
        form.type_credit(position, credit)
        form.type_grade(position, grade)
    return form


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.post("/gpa")
def calculate(payload: GPAPayload) -> Dict:
    form = _form_from_payload(payload)
    messages: List[str] = []
    calculator = GPACalculatorService(form, notify=messages.append)

    result = calculator.calculate_gpa()
    if result is None:
        raise HTTPException(
            status_code=422,
            detail=messages[0] if messages else "Insufficient data",
        )

    return {
        "gpa": form.output,
        "value": result.value,
        "total_credits": result.aggregate.total_credits,
        "weighted_points": result.aggregate.weighted_points,
        "contributing_count": result.aggregate.contributing_count,
    }


@app.post("/gpa/reset", response_model=FormPayload)
def reset() -> FormPayload:
    form = FormState()
    GPACalculatorService(form, notify=lambda _: None).reset_gpa()
    return FormPayload(credits=form.credits, grades=form.grades, output=form.output)
