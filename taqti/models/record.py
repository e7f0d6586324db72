# taqti/models/record.py

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Dict, Any

from taqti.models.report import PoemReport


@dataclass
class EnrichmentResult:
    """Alternative meter suggestion returned by an external matching service"""

    meter_name: str
    meter_description: Optional[str] = None
    source: str = ""
    raw: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "meterName": self.meter_name,
            "meterDescription": self.meter_description,
            "source": self.source
        }


@dataclass
class AnalysisRecord:
    """One analysis request and its result, as appended to the store"""

    text: str
    analyzer_used: str
    result: PoemReport
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    enrichment: Optional[EnrichmentResult] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "text": self.text,
            "analyzerUsed": self.analyzer_used,
            "result": self.result.to_dict(),
            "timestamp": self.timestamp.isoformat(),
            "enrichment": self.enrichment.to_dict() if self.enrichment else None
        }
