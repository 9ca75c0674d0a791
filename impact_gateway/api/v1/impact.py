"""POST /v1/impact - derogatory-impact analysis endpoint"""

import time
import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Request

from impact_gateway.api.v1.schemas import CategorySchema, ImpactResponse, ReportRequest
from impact_gateway.api.dependencies import get_request_id, get_today
from impact_gateway.config import settings
from impact_gateway.domain.impact import ImpactAnalyzer
from impact_gateway.domain.report_parser import parse_credit_report
from impact_gateway.infrastructure.observability.logging import log_analysis
from impact_gateway.infrastructure.observability.metrics import record_analysis

router = APIRouter()


@router.post("/impact", response_model=ImpactResponse)
def analyze_impact(
    request_body: ReportRequest,
    request: Request,
    today: date = Depends(get_today),
):
    """
    Estimate the score impact of the negative items on a credit report.

    Flow:
    1. Normalize the bureau document
    2. Run the impact analyzer
    3. Record metrics and logs
    4. Return ranked categories and total potential gain
    """
    start_time = time.time()
    request_id = get_request_id(request)

    # ReportFormatError is answered with 422 by the app-level handler
    report = parse_credit_report(request_body.credit_report, settings.default_report_date)

    try:
        analysis = ImpactAnalyzer(today=request_body.as_of or today).analyze(report)
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_analysis(analysis)
    log_analysis(
        request_id,
        analysis.status,
        len(analysis.categories),
        analysis.total_potential_gain,
        duration_ms,
    )

    return ImpactResponse(
        status=analysis.status,
        total_potential_gain=analysis.total_potential_gain,
        categories=[
            CategorySchema(
                category=c.category,
                count=c.count,
                impacts=c.impacts,
                avg_impact=c.avg_impact,
                total_impact=c.total_impact,
                impact_level=c.impact_level,
            )
            for c in analysis.categories
        ],
    )
