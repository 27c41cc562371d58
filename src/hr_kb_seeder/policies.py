"""
HR Policy Dataset

The static set of HR policies used to seed the knowledge base. The table is
compiled into the package and never mutated; order is significant because
records are upserted in table order.
"""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class PolicyRecord(BaseModel):
    """A single HR policy as authored: a short title and a paragraph of text."""

    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)

    model_config = ConfigDict(extra="forbid", frozen=True)


HR_POLICIES: Tuple[PolicyRecord, ...] = (
    PolicyRecord(
        title="Vacation Policy",
        content=(
            "Employees are entitled to 20 days of paid vacation per year. "
            "Vacation days must be requested at least 2 weeks in advance through "
            "the HRMS system. Unused vacation days can be carried over to the next "
            "year, up to a maximum of 5 days. Employees must take at least 10 "
            "vacation days per year for wellbeing purposes."
        ),
    ),
    PolicyRecord(
        title="Sick Leave",
        content=(
            "Employees can take up to 10 paid sick days per year. For absences "
            "longer than 3 consecutive days, a doctor's note is required. Sick "
            "leave does not carry over to the next year. Employees should notify "
            "their manager as soon as possible when taking sick leave."
        ),
    ),
    PolicyRecord(
        title="Remote Work",
        content=(
            "Employees can work remotely up to 2 days per week with manager "
            "approval. Remote work requests must be submitted through the HRMS "
            "system at least 24 hours in advance. Employees are expected to be "
            "available during regular working hours and maintain the same level "
            "of productivity when working remotely."
        ),
    ),
    PolicyRecord(
        title="Parental Leave",
        content=(
            "New parents are entitled to 12 weeks of paid leave. This applies to "
            "birth, adoption, or foster care placement. Employees must notify HR "
            "at least 30 days in advance when possible. The leave can be taken "
            "continuously or intermittently within the first year after the "
            "child's arrival."
        ),
    ),
    PolicyRecord(
        title="Healthcare Benefits",
        content=(
            "The company provides comprehensive health insurance to all full-time "
            "employees. Coverage includes medical, dental, and vision plans. "
            "Employees can add dependents to their plan. The open enrollment "
            "period is in November each year, with coverage beginning January 1."
        ),
    ),
    PolicyRecord(
        title="Professional Development",
        content=(
            "Employees are eligible for up to $2,000 per year for professional "
            "development activities. This includes conferences, workshops, "
            "courses, and certifications relevant to their role. Requests must be "
            "approved by the manager and HR department."
        ),
    ),
    PolicyRecord(
        title="Performance Reviews",
        content=(
            "Performance reviews are conducted twice a year, in June and December. "
            "Reviews include self-assessment, manager assessment, and peer "
            "feedback. Goals are set during each review cycle and progress is "
            "tracked through the HRMS system."
        ),
    ),
    PolicyRecord(
        title="Overtime Policy",
        content=(
            "Non-exempt employees are eligible for overtime pay at 1.5 times their "
            "regular hourly rate for hours worked over 40 in a workweek. All "
            "overtime must be approved in advance by the manager. Exempt employees "
            "are not eligible for overtime pay."
        ),
    ),
    PolicyRecord(
        title="Travel Policy",
        content=(
            "Business travel expenses are reimbursed when submitted with receipts "
            "through the expense management system within 30 days of travel. "
            "Eligible expenses include transportation, lodging, meals, and other "
            "necessary business expenses."
        ),
    ),
    PolicyRecord(
        title="Code of Conduct",
        content=(
            "Employees are expected to maintain high ethical standards, treat "
            "others with respect, and comply with all company policies. "
            "Harassment, discrimination, and retaliation are not tolerated. "
            "Violations should be reported to HR immediately."
        ),
    ),
)
