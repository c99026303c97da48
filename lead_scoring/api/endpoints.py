"""
FastAPI Endpoints for the Lead Intent Scoring Engine
====================================================
RESTful API for offer setup, lead upload and intent scoring.

Base URL: http://localhost:8000

Endpoints:
- GET  /                - API info
- GET  /api/health      - Health check
- POST /offer           - Store the product/offer
- GET  /offer           - Get the stored offer
- POST /leads/upload    - Upload a CSV of leads
- POST /score           - Run the scoring pipeline
- GET  /results         - Scored leads as JSON
- GET  /results/csv     - Scored leads as CSV
- GET  /api/stats       - Engine statistics
"""

import logging
from datetime import datetime

from dotenv import load_dotenv
from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

# Load environment variables
load_dotenv()

from ..models.schemas import Offer
from ..engine import LeadScoringEngine
from ..session import ScoringSession
from ..ingest import parse_leads_csv
from ..export import batch_to_dict, results_to_csv, scored_lead_to_dict
from ..exceptions import PreconditionError
from ..logger import setup_logging
from ..config.settings import SCORING_CONFIG

setup_logging()
logger = logging.getLogger(__name__)


# =============================================================================
# FastAPI App Initialization
# =============================================================================

app = FastAPI(
    title="Lead Intent Scoring API",
    description="""
## Lead Buying-Intent Scoring

Scores each uploaded lead against your offer and labels it High, Medium or Low.

### Scoring:
- **Rule layer (0-50)**: role authority, industry fit, data completeness
- **AI layer (0-50)**: LLM intent classification (High 50, Medium 30, Low 10)
- **Final label**: score >= 70 High, >= 40 Medium, else Low

### Quick Start:
1. `POST /offer` with your product details
2. `POST /leads/upload` with a CSV (name, role, company, industry, location, linkedin_bio)
3. `POST /score`, then `GET /results` or `GET /results/csv`
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Session & Engine Initialization
# =============================================================================

# One in-memory session per process (replace with a real store in production)
session = ScoringSession()
engine = LeadScoringEngine()


# =============================================================================
# Health & Info Endpoints
# =============================================================================

@app.get("/", tags=["Info"])
async def root():
    """API information and available endpoints"""
    return {
        "service": "Lead Intent Scoring API",
        "version": "1.0.0",
        "status": "healthy",
        "docs": "/docs",
        "endpoints": {
            "offer": "POST /offer - Store product/offer details",
            "upload": "POST /leads/upload - Upload CSV file with leads",
            "score": "POST /score - Run scoring pipeline",
            "results": "GET /results - Get scored leads as JSON",
            "export": "GET /results/csv - Export results as CSV",
        },
    }


@app.get("/api/health", tags=["Info"])
async def health_check():
    """Health check endpoint for monitoring"""
    return {
        "status": "healthy",
        "service": "Lead Intent Scoring API",
        "version": "1.0.0",
        "timestamp": datetime.utcnow().isoformat(),
        "llm_configured": engine.classifier.is_configured,
    }


# =============================================================================
# Offer & Lead Endpoints
# =============================================================================

@app.post("/offer", status_code=201, tags=["Setup"])
async def set_offer(offer: Offer):
    """Store the offer; replaces any previous one"""
    session.set_offer(offer)
    logger.info("Offer stored: %s", offer.name)
    return {"message": "Offer stored successfully", "offer": offer.model_dump()}


@app.get("/offer", tags=["Setup"])
async def get_offer():
    """Get the stored offer"""
    offer = session.get_offer()
    if offer is None:
        raise HTTPException(status_code=404, detail="No offer found. Please POST to /offer first.")
    return offer.model_dump()


@app.post("/leads/upload", status_code=201, tags=["Setup"])
async def upload_leads(file: UploadFile = File(...)):
    """Upload a CSV of leads; replaces the current batch"""
    if not file.filename or not file.filename.lower().endswith(".csv"):
        raise HTTPException(status_code=400, detail="Only CSV files are allowed")

    contents = await file.read()
    try:
        leads = parse_leads_csv(contents)
    except PreconditionError as e:
        raise HTTPException(status_code=400, detail=str(e))

    session.set_leads(leads)
    return {
        "message": "Leads uploaded successfully",
        "count": len(leads),
        "preview": [lead.model_dump() for lead in leads[:SCORING_CONFIG["upload_preview_size"]]],
    }


# =============================================================================
# Scoring Endpoints
# =============================================================================

@app.post("/score", tags=["Scoring"])
def score_leads():
    """
    Run the scoring pipeline over the uploaded leads

    Runs synchronously in FastAPI's threadpool since each lead waits on
    the LLM.
    """
    try:
        batch = engine.score_session(session)
    except PreconditionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return batch_to_dict(batch)


@app.get("/results", tags=["Scoring"])
async def get_results():
    """All scored leads"""
    results = session.get_results()
    if not results:
        raise HTTPException(status_code=404, detail="No results found. Please POST to /score first.")
    return [scored_lead_to_dict(r) for r in results]


@app.get("/results/csv", tags=["Scoring"])
async def export_results_csv():
    """Scored leads as a CSV download"""
    results = session.get_results()
    if not results:
        raise HTTPException(status_code=404, detail="No results found. Please POST to /score first.")
    return Response(
        content=results_to_csv(results),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=scored_leads.csv"},
    )


# =============================================================================
# Statistics
# =============================================================================

@app.get("/api/stats", tags=["Info"])
async def get_stats():
    """Get engine statistics"""
    return {"engine": engine.get_stats(), "session_id": session.session_id}


# =============================================================================
# Error Handlers
# =============================================================================

@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc),
            "type": type(exc).__name__,
        }
    )
