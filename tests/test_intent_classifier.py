"""
Tests for the LLM intent classification stage.
"""

import pytest

from lead_scoring.config import settings
from lead_scoring.stages.intent_classifier import IntentClassifierStage, normalize_intent


class TestClassify:
    """Successful classifications."""

    def test_high_intent(self, alice, offer, make_stage):
        stage, _ = make_stage('{"intent": "High", "reasoning": "Decision maker in SaaS."}')
        result = stage.classify(alice, offer)

        assert result.intent == "High"
        assert result.points == 50
        assert result.reasoning == "Decision maker in SaaS."
        assert result.is_fallback is False

    @pytest.mark.parametrize("raw,intent,points", [
        ("HIGH", "High", 50),
        ("medium", "Medium", 30),
        ("low", "Low", 10),
        (" Low ", "Low", 10),
    ])
    def test_intent_casing_is_normalized(self, alice, offer, raw, intent, points, make_stage):
        stage, _ = make_stage(f'{{"intent": "{raw}", "reasoning": "ok"}}')
        result = stage.classify(alice, offer)

        assert result.intent == intent
        assert result.points == points

    def test_unrecognized_intent_keeps_label_with_10_points(self, alice, offer, make_stage):
        stage, _ = make_stage('{"intent": "maybe", "reasoning": "Unclear."}')
        result = stage.classify(alice, offer)

        assert result.intent == "Maybe"
        assert result.points == 10
        assert result.is_fallback is False

    def test_code_fenced_json_is_accepted(self, alice, offer, make_stage):
        stage, _ = make_stage('```json\n{"intent": "Low", "reasoning": "No fit."}\n```')
        result = stage.classify(alice, offer)

        assert result.intent == "Low"
        assert result.points == 10


class TestFallback:
    """Every failure mode returns the Medium fallback."""

    @pytest.mark.parametrize("content", [
        "not json at all",
        '["High"]',
        '{"intent": "High"}',
        '{"reasoning": "missing intent"}',
        '{"intent": 3, "reasoning": "wrong type"}',
        "",
    ])
    def test_malformed_response(self, alice, offer, content, make_stage):
        stage, _ = make_stage(content)
        result = stage.classify(alice, offer)

        assert result.is_fallback is True
        assert result.intent == "Medium"
        assert result.points == 30
        assert result.reasoning == settings.FALLBACK_CLASSIFICATION["reasoning"]

    def test_transport_error(self, alice, offer, make_stage):
        stage, _ = make_stage(error=ConnectionError("network down"))
        result = stage.classify(alice, offer)

        assert result.is_fallback is True
        assert result.points == 30

    def test_missing_api_key(self, alice, offer, monkeypatch):
        monkeypatch.setitem(settings.LLM_CONFIG, "api_key", "")
        stage = IntentClassifierStage()

        assert stage.is_configured is False
        assert stage.classify(alice, offer).is_fallback is True


class TestRequest:
    """What is sent to the LLM."""

    def test_request_options(self, alice, offer, make_stage):
        stage, client = make_stage('{"intent": "High", "reasoning": "ok"}')
        stage.classify(alice, offer)

        call = client.calls[0]
        assert call["temperature"] == 0.3
        assert call["max_tokens"] == 200
        assert call["response_format"] == {"type": "json_object"}
        assert call["messages"][0]["role"] == "system"

    def test_prompt_contents(self, bob, offer, make_stage):
        stage, client = make_stage('{"intent": "Low", "reasoning": "ok"}')
        stage.classify(bob, offer)

        prompt = client.calls[0]["messages"][1]["content"]
        assert "AI Outreach Automation" in prompt
        assert "24/7 outreach, 6x more meetings" in prompt
        assert "B2B SaaS" in prompt
        assert "- Role: Manager" in prompt
        assert "- LinkedIn Bio: Not provided" in prompt


def test_normalize_intent():
    assert normalize_intent("hIGH") == "High"
    assert normalize_intent("") == ""
