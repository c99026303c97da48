"""
Pytest configuration and shared fixtures.
"""

import time
from types import SimpleNamespace
from typing import Dict, Iterable, Optional

import pytest

from lead_scoring.config.settings import INTENT_POINTS, UNKNOWN_INTENT_POINTS
from lead_scoring.models.schemas import ClassificationResult, Lead, Offer
from lead_scoring.stages.intent_classifier import IntentClassifierStage


class FakeClassifier(IntentClassifierStage):
    """Deterministic classifier keyed by lead name; no network."""

    def __init__(
        self,
        intents: Optional[Dict[str, str]] = None,
        fail_for: Iterable[str] = (),
        delays: Optional[Dict[str, float]] = None,
    ):
        super().__init__(api_key="test-key", client=object())
        self.intents = intents or {}
        self.fail_for = set(fail_for)
        self.delays = delays or {}

    def classify(self, lead, offer):
        if lead.name in self.delays:
            time.sleep(self.delays[lead.name])
        if lead.name in self.fail_for:
            raise RuntimeError("upstream payload exploded")
        intent = self.intents.get(lead.name, "Medium")
        return ClassificationResult(
            intent=intent,
            reasoning=f"{intent} fit for the offer",
            points=INTENT_POINTS.get(intent, UNKNOWN_INTENT_POINTS),
        )


class FakeChatClient:
    """Stands in for an OpenAI client: client.chat.completions.create(...)."""

    def __init__(self, content: Optional[str] = None, error: Optional[Exception] = None):
        self.content = content
        self.error = error
        self.calls = []
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def offer() -> Offer:
    """Offer targeting B2B SaaS."""
    return Offer(
        name="AI Outreach Automation",
        value_props=["24/7 outreach", "6x more meetings"],
        ideal_use_cases=["B2B SaaS"],
    )


@pytest.fixture
def alice() -> Lead:
    """Decision maker in a matching industry with a complete profile (rule 50)."""
    return Lead(
        name="Alice",
        role="VP of Sales",
        company="Acme",
        industry="SaaS",
        location="New York",
        linkedin_bio="Scaling outbound at a B2B SaaS company",
    )


@pytest.fixture
def bob() -> Lead:
    """Influencer, non-matching industry, no bio (rule 10)."""
    return Lead(
        name="Bob",
        role="Manager",
        company="CareCo",
        industry="Healthcare",
        location="Boston",
        linkedin_bio="",
    )


@pytest.fixture
def carol() -> Lead:
    """Decision maker, non-matching industry, complete profile (rule 30)."""
    return Lead(
        name="Carol",
        role="CEO",
        company="MedStart",
        industry="Healthcare",
        location="Austin",
        linkedin_bio="Building clinics",
    )


@pytest.fixture
def leads(alice, bob, carol):
    return [alice, bob, carol]


@pytest.fixture
def classifier() -> FakeClassifier:
    """Alice High, Bob Low, Carol Medium."""
    return FakeClassifier(intents={"Alice": "High", "Bob": "Low", "Carol": "Medium"})


@pytest.fixture
def leads_csv() -> bytes:
    return (
        b"name,role,company,industry,location,linkedin_bio\n"
        b"Alice,VP of Sales,Acme,SaaS,New York,\"Scaling outbound, fast\"\n"
        b"Bob,Manager,CareCo,Healthcare,Boston,\n"
    )


@pytest.fixture
def fake_classifier():
    """FakeClassifier class, for tests that need custom intents or failures."""
    return FakeClassifier


@pytest.fixture
def make_stage():
    """Build an IntentClassifierStage around a FakeChatClient."""
    def _make(content=None, error=None):
        client = FakeChatClient(content=content, error=error)
        return IntentClassifierStage(api_key="test-key", client=client), client
    return _make
