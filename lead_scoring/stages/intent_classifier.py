"""
Intent Classification Stage
===========================
LLM-powered buying-intent classification (10-50 points).

The LLM reads the offer and the prospect profile and answers with a JSON
object {"intent": "High|Medium|Low", "reasoning": "..."}. Any failure
(no API key, network error, malformed answer) yields the fallback
classification instead of an exception.
"""

import json
import logging
from typing import Any, Dict, Optional

from openai import OpenAI

from ..models.schemas import Lead, Offer, ClassificationResult
from ..exceptions import ClassificationFailure
from ..config.settings import LLM_CONFIG, INTENT_POINTS, UNKNOWN_INTENT_POINTS

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a B2B sales qualification expert. Analyze prospects and classify "
    "their buying intent accurately and concisely. Always respond with valid JSON."
)


class IntentClassifierStage:
    """
    Classify a lead's buying intent for the active offer with an LLM.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        client: Optional[Any] = None,
    ):
        """
        Initialize LLM client.

        Args:
            api_key: API key for LLM provider
            provider: LLM provider ("groq", "openai" or "openrouter")
            model: Chat model name
            client: Pre-built OpenAI-compatible client (skips construction)
        """
        self.api_key = api_key or LLM_CONFIG.get("api_key")
        self.provider = provider or LLM_CONFIG.get("provider", "groq")
        self.model = model or LLM_CONFIG.get("model")
        self.base_url = LLM_CONFIG.get("base_url")
        self.temperature = LLM_CONFIG.get("temperature", 0.3)
        self.max_tokens = LLM_CONFIG.get("max_tokens", 200)
        self.client = client

        if self.client is None:
            self._initialize_client()

    @property
    def is_configured(self) -> bool:
        return self.client is not None

    def _initialize_client(self):
        """Initialize the OpenAI-compatible client for the provider"""
        if not self.api_key:
            logger.warning("No LLM API key configured; intent classification disabled")
            return

        kwargs: Dict[str, Any] = {
            "api_key": self.api_key,
            "base_url": self.base_url,
            "timeout": LLM_CONFIG.get("timeout", 30),
            "max_retries": LLM_CONFIG.get("max_retries", 2),
        }
        if self.provider == "openrouter":
            kwargs["default_headers"] = {
                "HTTP-Referer": LLM_CONFIG.get("site_url"),
                "X-Title": LLM_CONFIG.get("app_name"),
            }

        self.client = OpenAI(**kwargs)

    def classify(self, lead: Lead, offer: Offer) -> ClassificationResult:
        """
        Classify buying intent.

        Args:
            lead: Lead to classify
            offer: Active offer

        Returns:
            ClassificationResult; the fallback result when the LLM is
            unavailable or its answer is unusable
        """
        if not self.client:
            return ClassificationResult.fallback()

        try:
            prompt = self._generate_prompt(lead, offer)
            response = self._call_llm(prompt)
            return self._parse_response(response)
        except Exception as e:
            logger.warning("Intent classification failed for %r: %s", lead.name, e)
            return ClassificationResult.fallback()

    def _generate_prompt(self, lead: Lead, offer: Offer) -> str:
        """Generate the LLM prompt with offer and prospect context"""
        return f"""You are a B2B sales qualification expert. Analyze this prospect's fit for our product.

PRODUCT INFORMATION:
- Name: {offer.name}
- Value Propositions: {', '.join(offer.value_props)}
- Ideal Use Cases: {', '.join(offer.ideal_use_cases)}

PROSPECT INFORMATION:
- Name: {lead.name}
- Role: {lead.role}
- Company: {lead.company}
- Industry: {lead.industry}
- Location: {lead.location}
- LinkedIn Bio: {lead.linkedin_bio or 'Not provided'}

TASK:
Classify this prospect's buying intent as High, Medium, or Low based on their fit with the product's value propositions and ideal customer profile.

Consider:
1. Does their role suggest they have buying authority or influence?
2. Does their industry align with our ideal use cases?
3. Does their background/bio show relevant pain points or interests?

Respond in JSON format:
{{
  "intent": "High|Medium|Low",
  "reasoning": "Brief 1-2 sentence explanation"
}}"""

    def _call_llm(self, prompt: str) -> str:
        """Call the chat completions API"""
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            response_format={"type": "json_object"},
        )
        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            raise ClassificationFailure(f"Unexpected completion shape: {e}") from e
        if not content:
            raise ClassificationFailure("Empty completion")
        return content

    def _parse_response(self, response: str) -> ClassificationResult:
        """Parse LLM response into a ClassificationResult"""
        # Remove markdown code blocks if present
        clean = response.strip()
        if clean.startswith("```"):
            clean = clean.split("```")[1]
            if clean.startswith("json"):
                clean = clean[4:]
        clean = clean.strip()

        try:
            data = json.loads(clean)
        except json.JSONDecodeError as e:
            raise ClassificationFailure(f"Response is not JSON: {e}") from e

        if not isinstance(data, dict):
            raise ClassificationFailure("Response is not a JSON object")

        intent = data.get("intent")
        reasoning = data.get("reasoning")
        if not isinstance(intent, str) or not isinstance(reasoning, str):
            raise ClassificationFailure("Response is missing intent or reasoning")

        intent = normalize_intent(intent)
        points = INTENT_POINTS.get(intent)
        if points is None:
            logger.info("Unrecognized intent %r; scoring as %d points", intent, UNKNOWN_INTENT_POINTS)
            points = UNKNOWN_INTENT_POINTS

        return ClassificationResult(intent=intent, reasoning=reasoning, points=points)


def normalize_intent(intent: str) -> str:
    """'HIGH' / 'high' / ' High ' -> 'High'"""
    intent = intent.strip()
    return intent[:1].upper() + intent[1:].lower()
