"""
Configuration settings for the Lead Intent Scoring Engine
"""

import os

# =============================================================================
# LLM CONFIGURATION
# =============================================================================

PROVIDER_DEFAULTS = {
    "groq": {
        "base_url": "https://api.groq.com/openai/v1",
        "api_key_env": "GROQ_API_KEY",
    },
    "openai": {
        "base_url": "https://api.openai.com/v1",
        "api_key_env": "OPENAI_API_KEY",
    },
    "openrouter": {
        "base_url": "https://openrouter.ai/api/v1",
        "api_key_env": "OPENROUTER_API_KEY",
    },
}

_provider = os.getenv("LLM_PROVIDER", "groq").lower()
_provider_defaults = PROVIDER_DEFAULTS.get(_provider, PROVIDER_DEFAULTS["groq"])

LLM_CONFIG = {
    "provider": _provider,  # groq, openai, openrouter
    "model": os.getenv("LLM_MODEL", "llama-3.1-70b-versatile"),
    "api_key": os.getenv("LLM_API_KEY") or os.getenv(_provider_defaults["api_key_env"], ""),
    "base_url": os.getenv("LLM_BASE_URL", _provider_defaults["base_url"]),
    "max_tokens": 200,
    "temperature": 0.3,
    "timeout": float(os.getenv("LLM_TIMEOUT", "30")),
    "max_retries": int(os.getenv("LLM_MAX_RETRIES", "2")),
    # OpenRouter specific headers
    "site_url": os.getenv("OPENROUTER_SITE_URL", "http://localhost:8000"),
    "app_name": os.getenv("OPENROUTER_APP_NAME", "Lead Intent Scoring Engine"),
}

# =============================================================================
# ORCHESTRATION
# =============================================================================

SCORING_CONFIG = {
    "max_workers": int(os.getenv("SCORING_MAX_WORKERS", "1")),
    "preview_size": 5,
    "upload_preview_size": 3,
}

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# =============================================================================
# RULE SCORING
# =============================================================================

# Checked in order, substring containment
DECISION_MAKER_ROLES = [
    "ceo", "cto", "cfo", "coo", "cmo",
    "founder", "co-founder", "owner",
    "president", "vp", "vice president",
    "director", "head of", "chief",
]

INFLUENCER_ROLES = [
    "manager", "lead", "senior", "sr",
    "principal", "architect", "specialist",
]

ROLE_POINTS = {
    "decision_maker": 20,
    "influencer": 10,
    "none": 0,
}

INDUSTRY_POINTS = {
    "match": 20,
    "adjacent": 10,
    "none": 0,
}

DATA_QUALITY_POINTS = 10

REQUIRED_LEAD_FIELDS = [
    "name", "role", "company", "industry", "location", "linkedin_bio",
]

# Lead industry keyword -> ICP terms considered adjacent
ADJACENT_INDUSTRIES = {
    "saas": ["software", "tech", "technology", "b2b", "cloud"],
    "software": ["saas", "tech", "technology", "it"],
    "tech": ["software", "saas", "technology", "it", "digital"],
    "technology": ["tech", "software", "saas", "it"],
    "finance": ["fintech", "banking", "financial", "investment"],
    "fintech": ["finance", "banking", "financial"],
    "healthcare": ["health", "medical", "pharma", "hospital"],
    "ecommerce": ["retail", "commerce", "shopping", "marketplace"],
    "b2b": ["saas", "enterprise", "business"],
    "enterprise": ["b2b", "corporate", "business"],
}

# =============================================================================
# AI INTENT SCORING
# =============================================================================

INTENT_POINTS = {
    "High": 50,
    "Medium": 30,
    "Low": 10,
}

UNKNOWN_INTENT_POINTS = 10

FALLBACK_CLASSIFICATION = {
    "intent": "Medium",
    "reasoning": "AI analysis unavailable - using default classification",
    "points": 30,
}

# =============================================================================
# FINAL INTENT THRESHOLDS
# =============================================================================

# (minimum score, label), checked top-down
INTENT_THRESHOLDS = [
    (70, "High"),
    (40, "Medium"),
    (0, "Low"),
]
