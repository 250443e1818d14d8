"""
Wellness Correlation API - FastAPI Application

Main application entry point with API endpoints for:
- Full correlation of vision analyses
- Individual correlation components (posture chain, inflammation, compensation)
- Health checks
"""
from contextlib import asynccontextmanager
from datetime import datetime
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wellness_correlation.config import settings
from wellness_correlation.core.correlation import CorrelationEngine
from wellness_correlation.models import (
    AnalysisResponse,
    CorrelationResponse,
    ErrorResponse,
    FullAnalysis,
    HealthResponse,
)
from wellness_correlation.utils import (
    CorrelationError,
    InputValidationError,
    WellnessCorrelationError,
    setup_logging,
)

setup_logging(settings.log_level, settings.log_file)
logger = logging.getLogger(__name__)


# ---- Application Lifespan ----

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"{settings.app_name} v{settings.app_version} ready to accept requests")
    yield
    logger.info(f"{settings.app_name} shut down.")


# ---- FastAPI Application ----

app = FastAPI(
    title=settings.app_name,
    description="Fuses posture, hands and facial vision analyses into aggregate wellness risk assessments",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

START_TIME = datetime.now()

# ---- Engine ----
_engine = CorrelationEngine()

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Malformed analysis payload"},
    500: {"model": ErrorResponse, "description": "Correlation failed"},
}


# ---- Exception Handlers ----

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are client errors, reported in the common error envelope."""
    error = InputValidationError(errors=jsonable_encoder(exc.errors()))
    logger.warning(
        f"Rejected request: {len(error.errors)} validation error(s)",
        extra={"path": request.url.path},
    )
    return JSONResponse(
        status_code=error.status_code,
        content={
            "success": False,
            "error": error.message,
            "code": error.code,
            "details": error.errors,
        },
    )


@app.exception_handler(WellnessCorrelationError)
async def correlation_exception_handler(request: Request, exc: WellnessCorrelationError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def _run(component: str, fn, analysis: FullAnalysis):
    """Call one engine operation, converting unexpected failures to CorrelationError."""
    try:
        return fn(analysis)
    except WellnessCorrelationError:
        raise
    except Exception as e:
        logger.error(f"Correlation failed: {e}", exc_info=True, extra={"component": component})
        raise CorrelationError("Failed to generate correlations", component=component) from e


def _health() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=datetime.now().isoformat(),
        uptime_seconds=(datetime.now() - START_TIME).total_seconds(),
    )


# ---- API Endpoints ----

@app.get("/", response_model=HealthResponse, tags=["Health"])
async def root():
    """API root - health check."""
    return _health()


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return _health()


@app.post(
    "/api/v1/vision/correlations",
    response_model=CorrelationResponse,
    responses=_ERROR_RESPONSES,
    tags=["Correlations"],
)
async def generate_correlations(analysis: FullAnalysis):
    """
    Correlate any subset of vision analyses.

    Accepts optional keys: posture, facial, iridology, sideProfile,
    backView, seatedPosture, hands, forwardBend.
    """
    results = _run("correlations", _engine.generate_correlations, analysis)
    return CorrelationResponse(
        correlations=results.to_dict(),
        summary=_engine.summarise(results),
    )


@app.post(
    "/api/v1/vision/correlations/posture-chain",
    response_model=AnalysisResponse,
    responses=_ERROR_RESPONSES,
    tags=["Correlations"],
)
async def posture_chain(analysis: FullAnalysis):
    """Postural chain analysis only (posture, sideProfile, backView, seatedPosture, forwardBend)."""
    result = _run("posture_chain", _engine.analyze_posture_chain, analysis)
    return AnalysisResponse(analysis=result.to_dict())


@app.post(
    "/api/v1/vision/correlations/inflammation",
    response_model=AnalysisResponse,
    responses=_ERROR_RESPONSES,
    tags=["Correlations"],
)
async def inflammation(analysis: FullAnalysis):
    """Inflammation tracking only (facial, hands)."""
    result = _run("inflammation", _engine.analyze_inflammation, analysis)
    return AnalysisResponse(analysis=result.to_dict())


@app.post(
    "/api/v1/vision/correlations/compensation-map",
    response_model=AnalysisResponse,
    responses=_ERROR_RESPONSES,
    tags=["Correlations"],
)
async def compensation_map(analysis: FullAnalysis):
    """Compensation map only (posture, sideProfile, backView, seatedPosture, forwardBend)."""
    result = _run("compensation_map", _engine.build_compensation_map, analysis)
    return AnalysisResponse(analysis=result.to_dict())


# ---- Run with uvicorn ----
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
