"""
Lead Intent Scoring Engine - Usage Examples
===========================================
This file demonstrates how to use the engine both programmatically
and via the API.
"""

# =============================================================================
# EXAMPLE 1: Rule Scoring Only (no API key needed)
# =============================================================================

def example_rule_scoring():
    """Score leads with the deterministic rule layer"""
    from lead_scoring.models.schemas import Lead, Offer
    from lead_scoring.stages.rule_scoring import calculate_rule_score

    offer = Offer(
        name="AI Outreach Automation",
        value_props=["24/7 outreach", "6x more meetings"],
        ideal_use_cases=["B2B SaaS mid-market"],
    )

    leads = [
        Lead(name="Ava Patel", role="Head of Growth", company="FlowMetrics",
             industry="SaaS", location="San Francisco", linkedin_bio="Scaling outbound"),
        Lead(name="Noah Kim", role="Senior Engineer", company="DataWorks",
             industry="Software", location="Seattle", linkedin_bio=""),
        Lead(name="Liam Chen", role="Intern", company="ShopLocal",
             industry="Retail", location="Austin", linkedin_bio="Student"),
    ]

    for lead in leads:
        breakdown = calculate_rule_score(lead, offer)
        print(f"{lead.name:<12} role={breakdown.role:>2} industry={breakdown.industry:>2} "
              f"quality={breakdown.data_quality:>2} total={breakdown.total}")


# =============================================================================
# EXAMPLE 2: Full Batch Scoring (requires an LLM API key)
# =============================================================================

def example_batch_scoring():
    """Run rule + LLM scoring over a CSV file"""
    from pathlib import Path

    from lead_scoring.engine import LeadScoringEngine
    from lead_scoring.export import results_to_csv
    from lead_scoring.ingest import parse_leads_csv
    from lead_scoring.logger import setup_logging
    from lead_scoring.models.schemas import Offer
    from lead_scoring.session import ScoringSession

    setup_logging("INFO")

    session = ScoringSession()
    session.set_offer(Offer(
        name="AI Outreach Automation",
        value_props=["24/7 outreach", "6x more meetings"],
        ideal_use_cases=["B2B SaaS mid-market"],
    ))
    session.set_leads(parse_leads_csv(Path("leads.csv").read_bytes()))

    engine = LeadScoringEngine()
    batch = engine.score_session(session)

    print(batch.summary.model_dump(by_alias=True))
    Path("scored_leads.csv").write_text(results_to_csv(batch.results))


# =============================================================================
# EXAMPLE 3: API Usage
# =============================================================================

API_USAGE = """
# Start the server
python main.py --port 8000

# 1. Store the offer
curl -X POST http://localhost:8000/offer \\
  -H "Content-Type: application/json" \\
  -d '{"name": "AI Outreach Automation",
       "value_props": ["24/7 outreach", "6x more meetings"],
       "ideal_use_cases": ["B2B SaaS mid-market"]}'

# 2. Upload leads (name,role,company,industry,location,linkedin_bio)
curl -X POST http://localhost:8000/leads/upload -F "file=@leads.csv"

# 3. Score and fetch results
curl -X POST http://localhost:8000/score
curl http://localhost:8000/results
curl -OJ http://localhost:8000/results/csv
"""


if __name__ == "__main__":
    print("=" * 60)
    print("Rule scoring")
    print("=" * 60)
    example_rule_scoring()
    print()
    print("API usage:")
    print(API_USAGE)
