import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from pollution_catalog.constants import AVERAGE_WEIGHTS_KG, MAX_REASONABLE_COUNTS, PollutionCategory
from pollution_catalog.mapping import dominant_category, is_people_dominated, map_detections
from pollution_catalog.models import ClientSubmission, DetectionInput, FraudRequest, ScoreRequest, counts_to_dict
from report_scoring.fraud import detect_fraud
from report_scoring.pipeline import score_report
from report_scoring.verification import verify_submission
from utils import cors_allow_origins, log_level, server_host, server_port

logging.basicConfig(
    level=log_level(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = FastAPI(title="Pollution Report Scoring API", version="1.0.0")

logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allow_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)


# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------

@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/categories")
def categories() -> Any:
    return {
        "categories": [
            {
                "category": category.value,
                "label": category.display_label,
                "average_weight_kg": AVERAGE_WEIGHTS_KG[category],
                "max_reasonable_count": MAX_REASONABLE_COUNTS[category],
            }
            for category in PollutionCategory
        ]
    }


@app.post("/map")
def map_labels(req: DetectionInput) -> Any:
    if not req.raw_label_counts:
        raise HTTPException(status_code=400, detail="raw_label_counts must not be empty")
    counts = map_detections(req.raw_label_counts)
    likely = dominant_category(counts)
    return {
        "category_counts": counts_to_dict(counts),
        "likely_category": likely.value if likely else None,
        "people_dominated": is_people_dominated(req),
    }


@app.post("/score")
def score(req: ScoreRequest) -> Any:
    result = score_report(req)
    return {"stage": "report_scoring", "result": result.to_dict()}


@app.post("/fraud")
def fraud(req: FraudRequest) -> Any:
    analysis = detect_fraud(req.user_counts, req.ai_baseline, req.severity)
    return {"stage": "fraud_detection", "fraud_analysis": analysis.to_dict()}


@app.post("/verify")
def verify(req: ClientSubmission) -> Any:
    result = verify_submission(req)
    if not (result.xp_matches and result.weight_matches):
        logger.warning(
            "Client score diverges from server recomputation",
            extra={
                "client_xp": result.client_xp,
                "server_xp": result.server_xp,
                "weight_matches": result.weight_matches,
            },
        )
    return {"stage": "server_verification", "result": result.to_dict()}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "server:app",
        host=server_host(),
        port=server_port(),
        reload=False,
    )
