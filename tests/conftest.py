"""Shared fixtures for discharge-quality tests."""

from __future__ import annotations

import logging

import pytest
import structlog

from discharge_quality.parsers.registry import ParserRegistry, build_registry
from discharge_quality.persistence.memory_backend import MemoryPersistenceBackend

DEMO_SUMMARY = """DISCHARGE SUMMARY
Patient: [Redacted]

Admitting Diagnosis:
● Chest pain
● Shortness of breath

Discharge Diagnosis:
● Acute inferior STEMI
● Hypertension

Hospital Course:
● Underwent PCI with stent to the right coronary artery
● Started on dual antiplatelet therapy
  and high-intensity statin

Pertinent Results:
● Troponin peak 45 ng/mL
● LVEF 50% on echocardiogram

Condition at Discharge:
● Stable, ambulating independently
"""

DEMO_INSTRUCTIONS = """Discharge Medications:
New:
● Aspirin 81 mg daily
● Ticagrelor 90 mg twice daily
Continued:
● Metformin 500 mg twice daily
Stopped:
● Ibuprofen

Follow-Up Appointments:
● Cardiology clinic in 1 week
● Primary care in 2 weeks

Diet and Lifestyle Instructions:
● Low-sodium, heart-healthy diet
● No heavy lifting for 2 weeks

Patient Instructions:
Take your medicines every day. Call the clinic if you have questions.

Return Precautions:
Go to the emergency room right away if you have:
● Chest pain
● Trouble breathing
"""


@pytest.fixture(autouse=True)
def _restore_logging():
    """Keep CLI logging setup from leaking into other tests."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
    logging.getLogger("discharge_quality").setLevel(logging.NOTSET)
    structlog.reset_defaults()


@pytest.fixture
def demo_summary() -> str:
    return DEMO_SUMMARY


@pytest.fixture
def demo_instructions() -> str:
    return DEMO_INSTRUCTIONS


@pytest.fixture
def registry() -> ParserRegistry:
    """Fresh registry with discovered parser types and the default demo tenant."""
    return build_registry()


@pytest.fixture
def memory_backend() -> MemoryPersistenceBackend:
    return MemoryPersistenceBackend()
