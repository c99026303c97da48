"""
Lead Intent Scoring Engine
==========================
Scores sales leads against a product offer:
  Rule Scoring: role, industry fit, data quality (0-50)
  Intent Classification: LLM buying-intent label (0-50)
Final label: High (>=70), Medium (>=40), Low
"""

__version__ = "1.0.0"
__author__ = "Lead Scoring Team"
