"""HTTP client for the ThreatMetrix session query and update APIs."""

import logging
import threading
from typing import Any, Dict, List, Optional

import requests

from tmx_nodes.client.schemas import FormBody, RiskQueryRequest, UpdateReviewRequest
from tmx_nodes.common.config.settings import get_settings
from tmx_nodes.common.constants import ServiceConstants
from tmx_nodes.common.exceptions import RemoteServiceError

logger = logging.getLogger(__name__)


class RiskServiceClient:
    """Sends form-encoded POSTs to the risk service and parses JSON replies.

    One request per call, no retries and no redirects. Failures surface
    immediately as RemoteServiceError. The HTTP response is closed on every
    path.

    When no session is injected, each calling thread gets its own
    requests.Session, so background updates never share a session with
    foreground queries.
    """

    # Truncate response bodies carried in error details
    MAX_BODY_DIAGNOSTIC = 2000

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize the client.

        Args:
            session: HTTP session to use for every call. If not given, the
                client creates one private session per thread.
            timeout: Per-request timeout in seconds. Defaults to settings.
        """
        self._injected_session = session
        self._local = threading.local()
        self._owned_sessions: List[requests.Session] = []
        self._sessions_lock = threading.Lock()
        self.timeout = timeout if timeout is not None else get_settings().request_timeout

    @property
    def session(self) -> requests.Session:
        """Session for the calling thread."""
        if self._injected_session is not None:
            return self._injected_session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
            with self._sessions_lock:
                self._owned_sessions.append(session)
        return session

    def query(self, request: RiskQueryRequest, url: str) -> Dict[str, Any]:
        """Run a session query.

        Args:
            request: The session query request
            url: Session query endpoint

        Returns:
            Parsed JSON response

        Raises:
            RemoteServiceError: On transport failure, non-2xx status or bad body
        """
        logger.debug(f"Session query for session {request.session_id} to {url}")
        return self._post(url, request.to_form())

    def update(self, request: UpdateReviewRequest, url: str) -> Dict[str, Any]:
        """Send a review status update for a prior request."""
        logger.debug(f"Review update for request {request.request_id} to {url}")
        return self._post(url, request.to_form())

    def _post(self, url: str, form: FormBody) -> Dict[str, Any]:
        try:
            response = self.session.post(
                url,
                params={ServiceConstants.OUTPUT_FORMAT_PARAM: ServiceConstants.OUTPUT_FORMAT},
                data=form,
                headers={"Content-Type": ServiceConstants.FORM_CONTENT_TYPE},
                timeout=self.timeout,
                allow_redirects=False,
            )
        except requests.exceptions.RequestException as e:
            raise RemoteServiceError(f"Unable to reach {url}: {e}") from e

        try:
            return self._parse(url, response)
        finally:
            response.close()

    def _parse(self, url: str, response: requests.Response) -> Dict[str, Any]:
        status = response.status_code
        if not 200 <= status < 300:
            body = self._body_text(response)
            raise RemoteServiceError(
                f"Unable to process request. {url} returned HTTP {status}",
                status_code=status,
                body=body,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise RemoteServiceError(
                f"Unable to process request. {url} returned a non-JSON body",
                status_code=status,
                body=self._body_text(response),
            ) from e

        if not isinstance(payload, dict):
            raise RemoteServiceError(
                f"Unable to process request. {url} returned {type(payload).__name__}, "
                "expected a JSON object",
                status_code=status,
                body=self._body_text(response),
            )
        return payload

    def _body_text(self, response: requests.Response) -> str:
        try:
            text = response.text
        except (requests.exceptions.RequestException, UnicodeDecodeError):
            return ""
        return (text or "")[:self.MAX_BODY_DIAGNOSTIC]

    def close(self) -> None:
        """Close the HTTP sessions this client created. Injected sessions are left open."""
        with self._sessions_lock:
            sessions, self._owned_sessions = self._owned_sessions, []
        for session in sessions:
            session.close()
        self._local = threading.local()

    def __enter__(self) -> "RiskServiceClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
