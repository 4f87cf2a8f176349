"""
Detail Agent
Builds the single-area detail view.
"""

from typing import Optional

from .base import BaseAgent
from pharmgap.schemas.area import AreaRecord
from pharmgap.schemas.results import AreaDetail
from pharmgap.domain.metrics import ScoringPolicy
from pharmgap.domain.presentation import PresentationEngine


class DetailAgent(BaseAgent[AreaRecord, AreaDetail]):
    """
    Detail Agent

    Uses the same derive_metrics call as the ranking pass, so the popup
    and the recommendations table never disagree on ideal count or deficit.
    """

    name = "DetailAgent"

    def __init__(self, policy: Optional[ScoringPolicy] = None):
        super().__init__()
        self.engine = PresentationEngine(policy=policy)

    def _process(self, area: AreaRecord) -> AreaDetail:
        return self.engine.detail(area)
