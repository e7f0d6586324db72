# taqti/core/service.py

import logging
from typing import Dict, Any, Optional

from taqti.core.poem_analyzer import PoemAnalyzer, MIXED_INVALID_ANALYZER
from taqti.enrichment.meter_enrichment import BaseMeterEnrichmentProvider, EnrichmentProviderFactory
from taqti.models.record import AnalysisRecord
from taqti.models.report import EMPTY_INPUT_MESSAGE
from taqti.storage.analysis_store import AnalysisStore, StorageError, DEFAULT_LIMIT

logger = logging.getLogger(__name__)

# Language hint sent to the enrichment service per analyzer
ENRICHMENT_LANGUAGES = {
    "HindiAnalyzer": "hindi",
    "HinglishAnalyzer": "urdu",
}


class AnalysisService:
    """
    Entry point for checking a poem's bahr.

    Analyzes the text, optionally asks an external service for its meter
    suggestion, and appends the request and result to the store. Enrichment
    and storage are best effort: their failures are logged and never change
    the analysis result.
    """

    def __init__(self,
                 analyzer: Optional[PoemAnalyzer] = None,
                 store: Optional[AnalysisStore] = None,
                 enrichment_provider: Optional[BaseMeterEnrichmentProvider] = None):
        self.analyzer = analyzer or PoemAnalyzer()
        self.store = store
        self.enrichment_provider = enrichment_provider

    @classmethod
    def from_config(cls, config_manager, persist: bool = True) -> "AnalysisService":
        """
        Build a service from a ConfigManager.

        Args:
            config_manager: Loaded configuration
            persist: Set to False to skip the store even when enabled in config

        Returns:
            Configured AnalysisService
        """
        analysis_config = config_manager.get_analysis_config()
        storage_config = config_manager.get_storage_config()
        enrichment_config = config_manager.get_enrichment_config()

        store = None
        if persist and storage_config.enabled:
            store = AnalysisStore(storage_config.path)

        provider = None
        if enrichment_config.enabled:
            provider = EnrichmentProviderFactory.create_provider(
                enrichment_config.provider, enrichment_config.to_provider_config()
            )

        return cls(
            analyzer=PoemAnalyzer(max_alternatives=analysis_config.max_alternatives),
            store=store,
            enrichment_provider=provider
        )

    def check_bahr(self, text: str) -> AnalysisRecord:
        """
        Analyze a poem, enrich and persist the result.

        Args:
            text: Poem text

        Returns:
            AnalysisRecord holding the report
        """
        report = self.analyzer.analyze(text)
        record = AnalysisRecord(
            text=(text or "").strip(),
            analyzer_used=report.analyzer_used,
            result=report
        )

        if report.message == EMPTY_INPUT_MESSAGE:
            return record

        if self.enrichment_provider is not None and report.analyzer_used != MIXED_INVALID_ANALYZER:
            language = ENRICHMENT_LANGUAGES.get(report.analyzer_used)
            record.enrichment = self.enrichment_provider.enrich(record.text, language)
            if record.enrichment:
                logger.info(f"Enrichment suggests {record.enrichment.meter_name}")

        if self.store is not None:
            try:
                self.store.append(record)
            except StorageError as e:
                logger.error(f"Failed to store analysis: {e}")

        return record

    def list_analyses(self, limit: int = DEFAULT_LIMIT, page: int = 1) -> Dict[str, Any]:
        """
        List stored analyses, newest first.

        Returns:
            Paginated listing; an error status when storage is disabled or unreadable
        """
        if self.store is None:
            return {"status": "error", "message": "Analysis storage is disabled"}
        try:
            return self.store.list_analyses(limit=limit, page=page)
        except StorageError as e:
            logger.error(f"Failed to list analyses: {e}")
            return {"status": "error", "message": "Failed to fetch analyses"}
