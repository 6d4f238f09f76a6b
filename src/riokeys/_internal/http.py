"""HTTP client for the raider.io API."""

import logging
from typing import Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from riokeys.errors import DecodeError, TransportError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class RemoteClient:
    """Single-attempt GET + JSON decode into a pydantic model.

    No retries and no timeout. The body is always decoded against the
    requested model, even on a non-2xx status: the decode result, not the
    status code, decides success. Non-2xx bodies are logged first so the
    API's own error message is visible.
    """

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self._session = session if session is not None else requests.Session()

    def fetch(self, url: str, model: Type[ModelT]) -> ModelT:
        logger.debug("GET %s", url)
        try:
            response = self._session.get(url)
            text = response.text
        except requests.RequestException as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

        if not response.ok:
            logger.warning("GET %s returned HTTP %s: %s", url, response.status_code, text)

        try:
            return model.model_validate_json(text)
        except ValidationError as e:
            raise DecodeError(
                f"Response from {url} is not a valid {model.__name__} "
                f"(HTTP {response.status_code}): {e}"
            ) from e

    def close(self) -> None:
        self._session.close()
