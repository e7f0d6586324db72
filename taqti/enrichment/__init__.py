from .meter_enrichment import (
    BaseMeterEnrichmentProvider,
    TaqtiApiProvider,
    MockEnrichmentProvider,
    EnrichmentProviderFactory,
    EnrichmentError
)

__all__ = ['BaseMeterEnrichmentProvider', 'TaqtiApiProvider', 'MockEnrichmentProvider',
           'EnrichmentProviderFactory', 'EnrichmentError']
