# Scoring stages module
from .rule_scoring import RuleScoringStage
from .intent_classifier import IntentClassifierStage
