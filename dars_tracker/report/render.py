"""
report/render.py - Turns an extracted ReportSummary into HTML.

Nothing here parses report text; it only maps typed statuses and values
to markup and CSS classes.
"""

import re
import html
from decimal import Decimal
from typing import List, Optional, Tuple

from .models import GpaSummary, ReportSummary, RequirementItem, RequirementStatus, VerboseSection
from .templates import (
    CREDIT_SUMMARY_TEMPLATE,
    EMPTY_LIST_TEMPLATE,
    FORM_TEMPLATE,
    GPA_SUMMARY_TEMPLATE,
    PAGE_TEMPLATE,
    REQUIREMENT_ITEM_TEMPLATE,
    REQUIREMENT_LIST_TEMPLATE,
    VERBOSE_SECTION_TEMPLATE,
)

STATUS_CLASSES = {
    RequirementStatus.COMPLETED: ("panel-success", "glyphicon glyphicon-ok"),
    RequirementStatus.IN_PROGRESS: ("panel-warning", "glyphicon glyphicon-time"),
    RequirementStatus.NOT_COMPLETED: ("panel-danger", "glyphicon glyphicon-remove"),
}

PASSING_GPA = ("color: green", "glyphicon glyphicon-ok")
FAILING_GPA = ("color: red", "glyphicon glyphicon-remove")


def status_classes(status: RequirementStatus) -> Tuple[str, str]:
    """Return (panel_class, icon_class) for a requirement status."""
    return STATUS_CLASSES[status]


def gpa_status(gpa: Decimal, minimum: Decimal) -> Tuple[str, str]:
    """Return (inline_style, icon_class): green when the GPA meets the minimum, red otherwise."""
    return PASSING_GPA if gpa >= minimum else FAILING_GPA


def unique_anchors(sections: List[VerboseSection]) -> List[str]:
    """
    Build one HTML id per section from its identifier. Identifiers can
    collide, so repeats get a -2, -3, ... suffix.
    """
    anchors = []
    seen = {}
    for section in sections:
        base = "section-" + re.sub(r"[^A-Za-z0-9_-]", "", section.identifier)
        count = seen.get(base, 0) + 1
        seen[base] = count
        anchors.append(base if count == 1 else f"{base}-{count}")
    return anchors


def render_requirements(heading: str, items: List[RequirementItem]) -> str:
    rows = []
    for item in items:
        panel_class, icon_class = status_classes(item.status)
        rows.append(
            REQUIREMENT_ITEM_TEMPLATE.format(
                panel_class=panel_class,
                icon_class=icon_class,
                text=html.escape(item.text),
            )
        )
    return REQUIREMENT_LIST_TEMPLATE.format(
        heading=heading,
        items="\n".join(rows) if rows else EMPTY_LIST_TEMPLATE,
    )


def render_gpa(gpa: GpaSummary, minimum: Decimal) -> str:
    cumulative_style, cumulative_icon = gpa_status(gpa.cumulative_gpa, minimum)
    major_style, major_icon = gpa_status(gpa.major_gpa, minimum)
    return GPA_SUMMARY_TEMPLATE.format(
        cumulative_style=cumulative_style,
        cumulative_icon=cumulative_icon,
        cumulative_gpa=gpa.cumulative_gpa,
        major_style=major_style,
        major_icon=major_icon,
        major_gpa=gpa.major_gpa,
    )


def render_sections(sections: List[VerboseSection]) -> str:
    blocks = []
    for section, anchor in zip(sections, unique_anchors(sections)):
        panel_class, icon_class = status_classes(section.status)
        heading = section.body.strip().splitlines()[0] if section.body.strip() else section.status.value
        blocks.append(
            VERBOSE_SECTION_TEMPLATE.format(
                panel_class=panel_class,
                icon_class=icon_class,
                anchor=anchor,
                heading=html.escape(heading.strip()),
                body=html.escape(section.body),
            )
        )
    return "\n".join(blocks)


def render_report(summary: ReportSummary, minimum_gpa: Decimal) -> str:
    """Render every part of the summary as one HTML fragment."""
    credits = summary.credits
    parts = [
        CREDIT_SUMMARY_TEMPLATE.format(
            total_earned=credits.total_earned,
            total_in_progress=credits.total_in_progress,
            total_needed=credits.total_needed,
            upper_div_earned=credits.upper_div_earned,
            upper_div_in_progress=credits.upper_div_in_progress,
            upper_div_needed=credits.upper_div_needed,
        ),
        render_gpa(summary.gpa, minimum_gpa),
        render_requirements("Requirements", summary.general_requirements),
        render_requirements("Sub-Requirements", summary.sub_requirements),
    ]
    if summary.verbose_sections:
        parts.append("  <h2>Details</h2>")
        parts.append(render_sections(summary.verbose_sections))
    return "\n".join(parts)


def render_page(
    title: str,
    report_text: str = "",
    summary: Optional[ReportSummary] = None,
    minimum_gpa: Decimal = Decimal("2.00"),
) -> str:
    """Full HTML document: the paste form, followed by the summary when there is one."""
    return PAGE_TEMPLATE.format(
        title=html.escape(title),
        form=FORM_TEMPLATE.format(report_text=html.escape(report_text)),
        report=render_report(summary, minimum_gpa) if summary is not None else "",
    )
