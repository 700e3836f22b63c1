import re
import logging
from decimal import Decimal
from typing import List, Optional

from .models import (
    ZERO,
    CreditSummary,
    GpaSummary,
    ReportSummary,
    RequirementItem,
    RequirementStatus,
    VerboseSection,
)

logger = logging.getLogger(__name__)

# -------------------------------------
# 1. Define Patterns
# -------------------------------------

# A credit amount as DARS prints it: 1-3 integer digits and exactly 2 decimals
_NUMBER = r"\d{1,3}\.\d{2}"

TOTAL_EARNED_RE = re.compile(rf"EARNED:? {{0,2}}?({_NUMBER}) CREDITS")
TOTAL_IN_PROGRESS_RE = re.compile(rf"IN-PROGRESS:? {{0,2}}?({_NUMBER}) CREDITS")
NEEDED_RE = re.compile(rf"NEEDS:? *({_NUMBER})? CREDITS")
UPPER_DIV_EARNED_RE = re.compile(rf"\( *({_NUMBER}) HOURS TAKEN *\)")  # The first one
UPPER_DIV_IN_PROGRESS_RE = re.compile(rf"In-Prog-> *({_NUMBER}) CREDITS")  # The first one

GPA_RE = re.compile(r"(\d\.\d{2}) GPA")

# Requirement markers are two letters followed by exactly two spaces at the start of a line
GENERAL_REQUIREMENT_RE = re.compile(r"^[ \t]*(NO|OK|IP)  (.*)$", re.MULTILINE)
SUB_REQUIREMENT_RE = re.compile(r"^[ \t]*([+-]) ?(\d{1,2})\)(.*)$", re.MULTILINE)

SECTION_DELIMITER = "=" * 66
VERBOSE_SECTION_RE = re.compile(
    r"^[ \t]*(NO|OK|IP)  (.*?)(?=" + SECTION_DELIMITER + r"|^[ \t]*(?:NO|OK|IP)  |\Z)",
    re.MULTILINE | re.DOTALL,
)

MARKER_STATUS = {
    "OK": RequirementStatus.COMPLETED,
    "IP": RequirementStatus.IN_PROGRESS,
    "NO": RequirementStatus.NOT_COMPLETED,
}

IDENTIFIER_LENGTH = 30

# -------------------------------------
# 2. Helper Functions
# -------------------------------------

def to_amount(raw: Optional[str]) -> Decimal:
    """Convert captured decimal text to a Decimal. Two places are kept, leading zeros are not. None becomes 0.00."""
    if not raw:
        return ZERO
    return Decimal(raw)

def first_amount(pattern: re.Pattern, report_text: str) -> Decimal:
    """Return the amount captured by the first match of `pattern`, or 0.00."""
    match = pattern.search(report_text)
    if match is None:
        return ZERO
    return to_amount(match.group(1))

def needed_credit_values(report_text: str) -> List[Optional[str]]:
    """
    Scan every NEEDS ... CREDITS line. A well-formed report has two: total
    needed followed by upper-division needed. Always returns exactly two slots.
    """
    needed = [match.group(1) for match in NEEDED_RE.finditer(report_text)]

    if not needed:
        needed = ["0.00", "0.00"]
    elif needed[0] is None:
        needed[0] = "0.00"
    elif len(needed) == 1:
        needed.append("0.00")

    # A lone NEEDS line with no amount still leaves the second slot empty
    if len(needed) < 2:
        needed.append(None)
    return needed[:2]

def section_status(marker: str) -> RequirementStatus:
    if "NO" in marker:
        return RequirementStatus.NOT_COMPLETED
    if "OK" in marker:
        return RequirementStatus.COMPLETED
    return RequirementStatus.IN_PROGRESS

def section_identifier(body: str) -> str:
    """Compact anchor token: the first 30 characters of the body with all whitespace removed."""
    return re.sub(r"\s+", "", body[:IDENTIFIER_LENGTH])

# -------------------------------------
# 3. Extraction Functions
# -------------------------------------

def extract_credits(report_text: str) -> CreditSummary:
    """Pull total and upper-division credit figures out of the report."""
    needed = needed_credit_values(report_text)

    return CreditSummary(
        total_earned=first_amount(TOTAL_EARNED_RE, report_text),
        total_in_progress=first_amount(TOTAL_IN_PROGRESS_RE, report_text),
        total_needed=to_amount(needed[0]),
        upper_div_earned=first_amount(UPPER_DIV_EARNED_RE, report_text),
        upper_div_in_progress=first_amount(UPPER_DIV_IN_PROGRESS_RE, report_text),
        upper_div_needed=to_amount(needed[1]),
    )

def extract_gpa(report_text: str) -> GpaSummary:
    """
    DARS prints the cumulative GPA first and the major GPA second.
    Any further GPA figures are ignored.
    """
    gpas = GPA_RE.findall(report_text)
    if not gpas:
        gpas = ["0.00", "0.00"]
    elif len(gpas) == 1:
        gpas.append("0.00")

    return GpaSummary(cumulative_gpa=to_amount(gpas[0]), major_gpa=to_amount(gpas[1]))

def extract_general_requirements(report_text: str) -> List[RequirementItem]:
    return [
        RequirementItem(status=MARKER_STATUS[match.group(1)], text=match.group(2).strip())
        for match in GENERAL_REQUIREMENT_RE.finditer(report_text)
    ]

def extract_sub_requirements(report_text: str) -> List[RequirementItem]:
    """Numbered sub-requirement lines: '+' is complete, '-' is not. There is no in-progress state here."""
    items = []
    for match in SUB_REQUIREMENT_RE.finditer(report_text):
        status = (
            RequirementStatus.COMPLETED
            if match.group(1) == "+"
            else RequirementStatus.NOT_COMPLETED
        )
        items.append(RequirementItem(status=status, text=match.group(3).strip()))
    return items

def extract_verbose_sections(report_text: str) -> List[VerboseSection]:
    """
    Split the report into requirement sections. Each body runs from its marker
    to the next '=' * 66 delimiter, the next marker, or the end of the text,
    and is kept verbatim.
    """
    sections = []
    for match in VERBOSE_SECTION_RE.finditer(report_text):
        body = match.group(2)
        sections.append(
            VerboseSection(
                status=section_status(match.group(1)),
                identifier=section_identifier(body),
                body=body,
            )
        )
    return sections

# -------------------------------------
# 4. Full Report
# -------------------------------------

def parse_report(report_text: str) -> ReportSummary:
    """Run every extractor over the report and bundle the results."""
    summary = ReportSummary(
        credits=extract_credits(report_text),
        gpa=extract_gpa(report_text),
        general_requirements=extract_general_requirements(report_text),
        sub_requirements=extract_sub_requirements(report_text),
        verbose_sections=extract_verbose_sections(report_text),
    )
    logger.debug(
        "Parsed report (%d chars): %d requirements, %d sub-requirements, %d sections",
        len(report_text),
        len(summary.general_requirements),
        len(summary.sub_requirements),
        len(summary.verbose_sections),
    )
    return summary
