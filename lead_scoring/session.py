"""
In-memory scoring session: the active offer, the current lead batch and
the last scored results. Every setter replaces what was there before.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from .models.schemas import Lead, Offer, ScoredLead


class ScoringSession:
    """Holds one offer, one lead batch and one result set"""

    def __init__(self, session_id: Optional[str] = None):
        self.session_id = session_id or str(uuid.uuid4())
        self.created_at = datetime.utcnow()
        self._offer: Optional[Offer] = None
        self._leads: List[Lead] = []
        self._results: List[ScoredLead] = []

    def set_offer(self, offer: Offer):
        self._offer = offer

    def get_offer(self) -> Optional[Offer]:
        return self._offer

    def set_leads(self, leads: List[Lead]):
        self._leads = list(leads)

    def get_leads(self) -> List[Lead]:
        return list(self._leads)

    def set_results(self, results: List[ScoredLead]):
        self._results = list(results)

    def get_results(self) -> List[ScoredLead]:
        return list(self._results)

    def clear(self):
        """Drop offer, leads and results"""
        self._offer = None
        self._leads = []
        self._results = []
