"""
Exceptions raised by the Lead Intent Scoring Engine
"""


class LeadScoringError(Exception):
    """Base class for scoring errors"""


class PreconditionError(LeadScoringError):
    """Batch cannot start: offer, leads or LLM configuration missing"""


class InvalidLeadFileError(PreconditionError):
    """Uploaded lead file could not be turned into leads"""


class ClassificationFailure(LeadScoringError):
    """LLM call failed or returned an unusable payload"""


class AggregationError(LeadScoringError):
    """Batch summary does not add up to the scored results"""
