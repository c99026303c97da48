"""
Tests for the rule scoring stage.
"""

import pytest

from lead_scoring.models.schemas import Lead, Offer
from lead_scoring.stages.rule_scoring import (
    RuleScoringStage,
    calculate_rule_score,
    score_data_quality,
    score_industry,
    score_role,
)

ICP = ["B2B SaaS", "mid-market"]


class TestScoreRole:
    """Role relevance scoring."""

    @pytest.mark.parametrize("role", [
        "CEO",
        "Chief Technology Officer",
        "VP of Sales",
        "Head of Marketing",
        "Founder",
        "co-founder & president",
        "  Director of Engineering  ",
    ])
    def test_decision_makers_score_20(self, role):
        assert score_role(role) == 20

    def test_decision_maker_wins_over_influencer_keyword(self):
        """'Senior' is an influencer keyword but 'director' takes precedence."""
        assert score_role("Senior Director") == 20
        assert score_role("Lead Architect and Owner") == 20

    @pytest.mark.parametrize("role", [
        "Engineering Manager",
        "Senior Developer",
        "Product Lead",
        "Principal Engineer",
        "Solutions Architect",
    ])
    def test_influencers_score_10(self, role):
        assert score_role(role) == 10

    @pytest.mark.parametrize("role", ["Junior Developer", "Intern", "Associate", "", "   ", None])
    def test_other_or_missing_roles_score_0(self, role):
        assert score_role(role) == 0


class TestScoreIndustry:
    """Industry fit scoring."""

    def test_literal_overlap_scores_20(self):
        assert score_industry("SaaS", ICP) == 20
        assert score_industry("B2B", ICP) == 20

    def test_industry_containing_icp_scores_20(self):
        assert score_industry("B2B SaaS mid-market platforms", ICP) == 20

    def test_adjacent_industry_scores_10(self):
        assert score_industry("Software", ICP) == 10
        assert score_industry("Technology", ICP) == 10
        assert score_industry("Finance", ["Fintech startups"]) == 10

    def test_unrelated_industry_scores_0(self):
        assert score_industry("Healthcare", ICP) == 0
        assert score_industry("Retail", ICP) == 0

    def test_empty_inputs_score_0(self):
        assert score_industry("SaaS", []) == 0
        assert score_industry("", ICP) == 0
        assert score_industry("   ", ICP) == 0
        assert score_industry(None, ICP) == 0

    def test_case_insensitive(self):
        assert score_industry("saas", ["B2B SAAS"]) == 20


class TestScoreDataQuality:
    """Data completeness scoring."""

    def test_complete_lead_scores_10(self, alice):
        assert score_data_quality(alice) == 10

    def test_single_empty_field_scores_0(self, alice):
        incomplete = alice.model_copy(update={"role": ""})
        assert score_data_quality(incomplete) == 0

    def test_whitespace_only_counts_as_empty(self, alice):
        blank_bio = alice.model_copy(update={"linkedin_bio": "   "})
        assert score_data_quality(blank_bio) == 0

    def test_none_fields_are_coerced_to_empty(self):
        lead = Lead(name="Dana", role=None, company="X", industry="SaaS",
                    location="LA", linkedin_bio="bio")
        assert lead.role == ""
        assert score_data_quality(lead) == 0


class TestCalculateRuleScore:
    """Combined rule score."""

    def test_maximum_score(self, alice, offer):
        breakdown = calculate_rule_score(alice, offer)

        assert breakdown.role == 20
        assert breakdown.industry == 20
        assert breakdown.data_quality == 10
        assert breakdown.total == 50

    def test_total_is_sum_of_components(self, bob, carol, offer):
        for lead in (bob, carol):
            b = calculate_rule_score(lead, offer)
            assert b.total == b.role + b.industry + b.data_quality

        assert calculate_rule_score(bob, offer).total == 10
        assert calculate_rule_score(carol, offer).total == 30

    def test_stage_is_deterministic(self, alice, offer):
        stage = RuleScoringStage()
        assert stage.process(alice, offer) == stage.process(alice, offer)

    def test_breakdown_serializes_with_camel_case(self, alice, offer):
        dumped = calculate_rule_score(alice, offer).model_dump(by_alias=True)
        assert dumped == {"role": 20, "industry": 20, "dataQuality": 10}


class TestOfferValidation:
    """Offer lists must be non-empty."""

    def test_empty_use_cases_rejected(self):
        with pytest.raises(ValueError):
            Offer(name="X", value_props=["a"], ideal_use_cases=[])

    def test_empty_value_props_rejected(self):
        with pytest.raises(ValueError):
            Offer(name="X", value_props=[], ideal_use_cases=["SaaS"])
