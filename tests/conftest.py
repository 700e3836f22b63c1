import pytest
from fastapi.testclient import TestClient

from dars_tracker.main import app

DELIMITER = "=" * 66

SAMPLE_REPORT = f"""\
{DELIMITER}
 AT LEAST ONE REQUIREMENT HAS NOT BEEN SATISFIED
{DELIMITER}
OK  TOTAL CREDITS
         EARNED: 98.00 CREDITS
    IN-PROGRESS 15.00 CREDITS
     -->  NEEDS:  7.00 CREDITS
{DELIMITER}
NO  UPPER DIVISION CREDITS
    ( 30.00 HOURS TAKEN )
    In-Prog-> 6.00 CREDITS
     -->  NEEDS:  6.00 CREDITS
{DELIMITER}
IP  GPA REQUIREMENTS
     3.12 GPA
     3.40 GPA
{DELIMITER}
NO  MAJOR ELECTIVES
    + 1) Introductory programming
    - 2) Software engineering elective
{DELIMITER}
"""


@pytest.fixture
def sample_report():
    return SAMPLE_REPORT


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
