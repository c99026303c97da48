"""
Lead Intent Scoring Engine - Main Orchestrator
==============================================
Scores every lead of a batch in two steps:
  Rule Scoring (0-50) + LLM Intent Classification (0-50)

The final intent label is derived from the combined score only.
A failure on one lead produces a degraded record for that lead and
never stops the batch.
"""

import logging
import math
import time
from typing import Optional, List, Dict, Any
from concurrent.futures import ThreadPoolExecutor

from .models.schemas import (
    Lead,
    Offer,
    IntentLabel,
    ScoredLead,
    ScoreBreakdown,
    ScoreDetails,
    BatchSummary,
    BatchResult,
)
from .exceptions import PreconditionError, AggregationError
from .session import ScoringSession
from .stages.rule_scoring import RuleScoringStage
from .stages.intent_classifier import IntentClassifierStage
from .config.settings import INTENT_THRESHOLDS, SCORING_CONFIG

logger = logging.getLogger(__name__)


class LeadScoringEngine:
    """
    Main engine that runs rule scoring and intent classification per lead.
    """

    def __init__(
        self,
        classifier: Optional[IntentClassifierStage] = None,
        rule_stage: Optional[RuleScoringStage] = None,
        max_workers: Optional[int] = None,
    ):
        """
        Initialize the scoring engine.

        Args:
            classifier: Intent classifier (built from LLM_CONFIG if not provided)
            rule_stage: Rule scorer
            max_workers: Leads scored concurrently; 1 means strictly sequential
        """
        self.rule_stage = rule_stage or RuleScoringStage()
        self.classifier = classifier or IntentClassifierStage()
        self.max_workers = max(1, max_workers or SCORING_CONFIG["max_workers"])

        # Track statistics
        self.stats = {
            "batches": 0,
            "total_processed": 0,
            "failed": 0,
            "fallback_classifications": 0,
            "total_processing_time_ms": 0,
        }

    def score_lead(self, lead: Lead, offer: Offer) -> ScoredLead:
        """
        Score a single lead. Exceptions propagate to the caller.
        """
        rules = self.rule_stage.process(lead, offer)
        ai_result = self.classifier.classify(lead, offer)

        if ai_result.is_fallback:
            self.stats["fallback_classifications"] += 1

        total_score = rules.total + ai_result.points

        return ScoredLead(
            **lead.model_dump(),
            intent=determine_intent(total_score),
            score=total_score,
            reasoning=ai_result.reasoning,
            score_breakdown=ScoreBreakdown(
                rule_score=rules.total,
                ai_score=ai_result.points,
                details=ScoreDetails(
                    role_points=rules.role,
                    industry_points=rules.industry,
                    data_quality_points=rules.data_quality,
                    ai_intent=ai_result.intent,
                ),
            ),
        )

    def run_batch(self, leads: List[Lead], offer: Optional[Offer]) -> BatchResult:
        """
        Score a batch of leads.

        Args:
            leads: Leads in upload order
            offer: Active offer

        Returns:
            BatchResult with one ScoredLead per input lead, in input order

        Raises:
            PreconditionError: offer or leads missing, or LLM not configured
        """
        self._check_preconditions(leads, offer)

        start_time = time.time()
        logger.info("Scoring %d leads against offer %r", len(leads), offer.name)

        if self.max_workers > 1 and len(leads) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                # map() yields in submission order, so results stay in input order
                results = list(executor.map(
                    lambda item: self._score_safely(item[0], item[1], offer, len(leads)),
                    enumerate(leads),
                ))
        else:
            results = [
                self._score_safely(index, lead, offer, len(leads))
                for index, lead in enumerate(leads)
            ]

        summary = summarize(results)

        total_time = (time.time() - start_time) * 1000
        self.stats["batches"] += 1
        self.stats["total_processed"] += len(results)
        self.stats["failed"] += sum(1 for r in results if r.error)
        self.stats["total_processing_time_ms"] += total_time

        logger.info(
            "Scoring complete: %d high, %d medium, %d low, average %d",
            summary.high, summary.medium, summary.low, summary.average_score,
        )

        return BatchResult(
            results=results,
            summary=summary,
            processing_time_ms=round(total_time, 2),
        )

    def score_session(self, session: ScoringSession) -> BatchResult:
        """Score the session's leads and store the results back on it"""
        result = self.run_batch(session.get_leads(), session.get_offer())
        session.set_results(result.results)
        return result

    def get_stats(self) -> Dict[str, Any]:
        """Get engine statistics"""
        stats = self.stats.copy()
        if stats["total_processed"] > 0:
            stats["failure_rate"] = round(
                stats["failed"] / stats["total_processed"] * 100, 1
            )
            stats["avg_processing_time_ms"] = round(
                stats["total_processing_time_ms"] / stats["total_processed"], 2
            )
        return stats

    def reset_stats(self):
        """Reset engine statistics"""
        for key in self.stats:
            self.stats[key] = 0

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def _check_preconditions(self, leads: List[Lead], offer: Optional[Offer]):
        if offer is None:
            raise PreconditionError("No offer data found. Please POST to /offer first.")
        if not leads:
            raise PreconditionError("No leads found. Please POST to /leads/upload first.")
        if not self.classifier.is_configured:
            raise PreconditionError("LLM API key not configured")

    def _score_safely(self, index: int, lead: Lead, offer: Offer, total: int) -> ScoredLead:
        """Score one lead, turning any exception into a degraded record"""
        logger.debug("Processing lead %d/%d: %s", index + 1, total, lead.name)
        try:
            return self.score_lead(lead, offer)
        except Exception as e:
            logger.error("Error scoring lead %d (%s): %s", index + 1, lead.name, e)
            return self._create_error_result(lead, str(e))

    def _create_error_result(self, lead: Lead, error: str) -> ScoredLead:
        """Create a result for a processing error"""
        return ScoredLead(
            **lead.model_dump(),
            intent=IntentLabel.LOW,
            score=0,
            reasoning=f"Error during scoring: {error}",
            score_breakdown=None,
            error=True,
        )


# =============================================================================
# Scoring Functions
# =============================================================================

def determine_intent(score: int) -> IntentLabel:
    """Map a 0-100 score to its intent label (>=70 High, >=40 Medium)"""
    for minimum, label in INTENT_THRESHOLDS:
        if score >= minimum:
            return IntentLabel(label)
    return IntentLabel.LOW


def summarize(results: List[ScoredLead]) -> BatchSummary:
    """
    Summarize a scored batch.

    Degraded records count as Low with score 0. The average is rounded
    half up.
    """
    total = len(results)
    high = sum(1 for r in results if r.intent == IntentLabel.HIGH)
    medium = sum(1 for r in results if r.intent == IntentLabel.MEDIUM)
    low = sum(1 for r in results if r.intent == IntentLabel.LOW)

    if high + medium + low != total:
        raise AggregationError(
            f"Intent counts ({high}+{medium}+{low}) do not match {total} results"
        )

    average = 0
    if total:
        average = int(math.floor(sum(r.score for r in results) / total + 0.5))

    return BatchSummary(
        total=total,
        high=high,
        medium=medium,
        low=low,
        average_score=average,
    )
