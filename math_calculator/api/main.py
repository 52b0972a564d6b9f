from pathlib import Path
from typing import List, Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import FileResponse, HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..config import get_settings
from ..models import (CalculationRequest, CalculationResponse, InvalidInput,
                      OperationInfo)
from ..service import calculate, list_operations
from ..utils.logger import get_logger

settings = get_settings()
app = FastAPI(title=settings.APP_NAME, version="1.0.0")
logger = get_logger()

BASE_DIR = Path(__file__).resolve().parent.parent  # ajunge în .../math_calculator
FRONTEND_DIR = BASE_DIR / "frontend"
TEMPLATES_DIR = FRONTEND_DIR / "templates"

app.mount("/frontend", StaticFiles(directory=str(FRONTEND_DIR)), name="frontend")
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


# Rută principală - servește index.html
@app.get("/")
def serve_index():
    index_path = FRONTEND_DIR / "index.html"
    if index_path.exists():
        return FileResponse(str(index_path))
    return {"detail": "Frontend not found"}


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/calculate", response_class=HTMLResponse)
def calculate_page(
    request: Request,
    number: Optional[str] = Form(None),
    operations: Optional[List[str]] = Form(None),
):
    try:
        outcome = calculate(number, operations)
    except Exception as e:
        logger.exception(f"Eroare la /calculate: {e}")
        raise HTTPException(status_code=500, detail="Internal error")

    if isinstance(outcome, InvalidInput):
        logger.info(f"Input respins în /calculate: {outcome.reason}")
        return templates.TemplateResponse(
            request, "error.html", {"message": outcome.reason}, status_code=400
        )

    return templates.TemplateResponse(
        request,
        "results.html",
        {"number": outcome.number, "results": outcome.results},
    )


@app.get("/api/operations", response_model=List[OperationInfo])
def get_operations():
    return list_operations()


@app.post("/api/calculate", response_model=CalculationResponse)
def calculate_api(data: CalculationRequest):
    number_text = None if data.number is None else str(data.number)
    try:
        outcome = calculate(number_text, data.operations)
    except Exception as e:
        logger.exception(f"Eroare la /api/calculate: {e}")
        raise HTTPException(status_code=500, detail="Internal error")

    if isinstance(outcome, InvalidInput):
        logger.info(f"Input respins în /api/calculate: {outcome.reason}")
        raise HTTPException(status_code=400, detail=outcome.reason)

    logger.info(f"Calcul complet /api/calculate pentru {outcome.number}")
    return outcome
