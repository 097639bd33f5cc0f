"""Demo tenant discharge convention.

Summaries carry Admitting Diagnosis, Discharge Diagnosis, Hospital Course,
Pertinent Results and Condition at Discharge; instructions carry Discharge
Medications (New/Continued/Stopped), Follow-Up Appointments, Diet and
Lifestyle Instructions, Patient Instructions and Return Precautions. Every
demo-tenant document follows this layout regardless of condition.
"""

from __future__ import annotations

from discharge_quality.parsers.base import (
    ConventionParser,
    DocumentConvention,
    SectionKind,
    SectionRule,
    TenantConvention,
)

DEMO_CONVENTION = TenantConvention(
    detection_anchors=(
        "Admitting Diagnosis",
        "Discharge Diagnosis",
        "Hospital Course",
    ),
    summary=DocumentConvention(
        sections=(
            SectionRule("admitting_diagnosis", "Admitting Diagnosis"),
            SectionRule("discharge_diagnosis", "Discharge Diagnosis"),
            SectionRule("hospital_course", "Hospital Course"),
            SectionRule("pertinent_results", "Pertinent Results"),
            SectionRule("condition_at_discharge", "Condition at Discharge"),
        ),
        # Summaries exported together with instructions
        stop_anchors=("Discharge Medications",),
    ),
    instructions=DocumentConvention(
        sections=(
            SectionRule("discharge_medications", "Discharge Medications", SectionKind.DISPOSITIONS),
            SectionRule("follow_up_appointments", "Follow-?Up Appointments"),
            SectionRule("diet_and_lifestyle", r"Diet and Lifestyle(?:\s+Instructions)?"),
            SectionRule("patient_instructions", "Patient Instructions", SectionKind.PARAGRAPH),
            SectionRule("return_precautions", "Return Precautions", SectionKind.INTRO_BULLETS),
        ),
    ),
)


class DemoParser(ConventionParser):
    parser_type = "demo"
    convention = DEMO_CONVENTION
