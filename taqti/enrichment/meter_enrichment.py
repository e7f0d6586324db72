# taqti/enrichment/meter_enrichment.py

import logging
import time
from abc import ABC, abstractmethod
from typing import List, Dict, Any, Optional

import requests

from taqti.models.record import EnrichmentResult

DEFAULT_ENDPOINT = "https://taqti-api.rekhta.org/api/taqti/v2/metermatch"
DEFAULT_TIMEOUT = 5
DEFAULT_MAX_RETRIES = 2
DEFAULT_LANGUAGE = "urdu"


class EnrichmentError(Exception):
    """Raised when an enrichment service returns an unusable response"""
    pass


class BaseMeterEnrichmentProvider(ABC):
    """
    Abstract base class for external meter-matching services.

    Enrichment is best effort: `enrich` never raises and returns None when
    the service is unavailable or has nothing to say.
    """

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize the provider.

        Args:
            config: Provider-specific configuration
        """
        self.config = config
        self.logger = logging.getLogger(__name__)

    @abstractmethod
    def _make_request(self, text: str, language: str) -> Optional[Dict[str, Any]]:
        """
        Make the provider-specific request.

        Args:
            text: Poem text
            language: Language hint for the service

        Returns:
            Raw response data or None if the request failed
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        pass

    def enrich(self, text: str, language: Optional[str] = None) -> Optional[EnrichmentResult]:
        """
        Ask the service for its meter suggestion.

        Args:
            text: Poem text
            language: Language hint; the configured default when omitted

        Returns:
            EnrichmentResult or None
        """
        language = language or self.config.get('language', DEFAULT_LANGUAGE)
        try:
            response_data = self._make_request(text, language)
            if not response_data:
                return None
            return self._parse_response(response_data)
        except EnrichmentError as e:
            self.logger.warning(f"Enrichment skipped: {e}")
            return None
        except Exception as e:
            self.logger.error(f"Enrichment failed: {e}")
            return None

    def _parse_response(self, response_data: Dict[str, Any]) -> Optional[EnrichmentResult]:
        """
        Parse the service response.

        The service reports its verdict in `top_msg`; a message flagged with
        `top_msg_is_error` carries no meter.
        """
        if not isinstance(response_data, dict):
            raise EnrichmentError(f"Unexpected response type: {type(response_data).__name__}")

        message = response_data.get('top_msg')
        if not message or response_data.get('top_msg_is_error'):
            return None

        return EnrichmentResult(
            meter_name=message,
            meter_description=response_data.get('meter_description'),
            source=self.__class__.__name__,
            raw=response_data
        )


class TaqtiApiProvider(BaseMeterEnrichmentProvider):
    """
    Client for the Rekhta taqti meter-match API.

    Posts the poem as JSON and retries connection failures with a growing
    delay; timeouts are not retried.
    """

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize the API client.

        Args:
            config: Configuration dictionary with:
                - endpoint: Meter-match URL
                - timeout: Request timeout in seconds
                - max_retries: Retries after a connection failure
                - language: Default language hint
        """
        super().__init__(config)
        self.endpoint = config.get('endpoint') or DEFAULT_ENDPOINT
        self.timeout = config.get('timeout', DEFAULT_TIMEOUT)
        self.max_retries = config.get('max_retries', DEFAULT_MAX_RETRIES)
        self.retry_delay = config.get('retry_delay', 1.0)

    def is_available(self) -> bool:
        return bool(self.endpoint)

    def _make_request(self, text: str, language: str) -> Optional[Dict[str, Any]]:
        payload = {
            'text-input': text,
            'language': language
        }
        headers = {
            'Content-Type': 'application/json',
            'User-Agent': 'TaqtiAnalyzer/1.0'
        }

        for attempt in range(self.max_retries + 1):
            try:
                response = requests.post(self.endpoint, json=payload, headers=headers, timeout=self.timeout)
                response.raise_for_status()
                return response.json()
            except requests.exceptions.Timeout as e:
                self.logger.warning(f"Meter-match API timed out: {e}")
                return None
            except requests.exceptions.ConnectionError as e:
                self.logger.warning(f"Meter-match API connection failed (attempt {attempt + 1}): {e}")
                if attempt < self.max_retries:
                    time.sleep(self.retry_delay * (attempt + 1))
            except requests.exceptions.RequestException as e:
                self.logger.error(f"Meter-match API request failed: {e}")
                return None
            except ValueError as e:
                self.logger.error(f"Failed to parse meter-match API response: {e}")
                return None

        return None


class MockEnrichmentProvider(BaseMeterEnrichmentProvider):
    """Mock enrichment provider for testing"""

    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config or {})
        self.responses: List[Optional[Dict[str, Any]]] = []
        self.call_count = 0
        self.requests: List[Dict[str, str]] = []

    def add_response(self, response_data: Optional[Dict[str, Any]]):
        """Add a raw response to be returned on the next call"""
        self.responses.append(response_data)

    def reset(self):
        self.responses = []
        self.requests = []
        self.call_count = 0

    def is_available(self) -> bool:
        return True

    def _make_request(self, text: str, language: str) -> Optional[Dict[str, Any]]:
        self.call_count += 1
        self.requests.append({'text': text, 'language': language})
        self.logger.info(f"Mock enrichment called ({self.call_count})")
        if self.responses:
            return self.responses.pop(0)
        return None


class EnrichmentProviderFactory:
    """
    Factory class for creating enrichment provider instances.
    """

    @staticmethod
    def create_provider(provider_type: str, config: Dict[str, Any]) -> BaseMeterEnrichmentProvider:
        """
        Create an enrichment provider instance.

        Args:
            provider_type: Type of provider ('taqti_api' or 'mock')
            config: Provider-specific configuration

        Returns:
            Configured provider instance

        Raises:
            ValueError: If provider type is not supported
        """
        if provider_type.lower() == 'taqti_api':
            return TaqtiApiProvider(config)
        elif provider_type.lower() == 'mock':
            return MockEnrichmentProvider(config)
        else:
            raise ValueError(f"Unsupported enrichment provider type: {provider_type}")
