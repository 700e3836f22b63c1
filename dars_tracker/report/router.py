# report/router.py

import logging

from fastapi import APIRouter, Depends, Form
from fastapi.responses import HTMLResponse

from ..config import AppSettings, settings
from .extractor import parse_report
from .models import ParseRequest, ReportSummary
from .render import render_page

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Report"])


def get_settings() -> AppSettings:
    return settings


@router.get("/", response_class=HTMLResponse, summary="Paste form for a DARS report")
async def report_form(app_settings: AppSettings = Depends(get_settings)):
    return render_page(app_settings.app_title)


@router.post("/", response_class=HTMLResponse, summary="Summarize a pasted DARS report")
def report_summary_page(
    report_text: str = Form("", alias="DARSreport"),
    app_settings: AppSettings = Depends(get_settings),
):
    summary = parse_report(report_text)
    logger.info(
        "Summarized report: %s earned, %s needed, %d requirements",
        summary.credits.total_earned,
        summary.credits.total_needed,
        len(summary.general_requirements),
    )
    return render_page(
        app_settings.app_title,
        report_text=report_text,
        summary=summary,
        minimum_gpa=app_settings.minimum_gpa,
    )


@router.post(
    "/api/report",
    response_model=ReportSummary,
    summary="Extract structured data from a DARS report",
)
def parse_report_json(payload: ParseRequest):
    """
    Same extraction as the form page, returned as JSON. Missing fields in
    the report come back as 0.00 or empty lists, never as errors.
    """
    return parse_report(payload.report_text)
