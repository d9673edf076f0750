"""
ClientLogin authentication for the Cloud Print service.

Exchanges an account email/password for an opaque Auth token. The token is
cached on the authenticator for the life of the instance and never refreshed.
"""

import logging
import threading
from typing import Dict, Optional

import requests

from cloudprint_client.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

DEFAULT_LOGIN_URL = "https://www.google.com/accounts/ClientLogin"
SERVICE_NAME = "cloudprint"
ACCOUNT_TYPE = "HOSTED_OR_GOOGLE"


def parse_login_response(body: str) -> Dict[str, str]:
    """
    Parse a ClientLogin response body.

    The body is newline-separated ``key=value`` lines (SID, LSID, Auth).
    Lines without a '=' are ignored.
    """
    values = {}
    for line in body.splitlines():
        key, sep, value = line.partition('=')
        if sep and key.strip():
            values[key.strip()] = value.strip()
    return values


class ClientLoginAuthenticator:
    """Fetch-or-return-cached holder for the ClientLogin Auth token."""

    def __init__(
        self,
        username: str,
        password: str,
        source: str,
        login_url: str = DEFAULT_LOGIN_URL,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the authenticator.

        Args:
            username: Account email
            password: Account password
            source: Application identifier sent to the login endpoint
            login_url: ClientLogin endpoint
            session: HTTP session to use (a new one if not given)
        """
        self.username = username
        self.password = password
        self.source = source
        self.login_url = login_url or DEFAULT_LOGIN_URL
        self.session = session or requests.Session()

        self._token: Optional[str] = None
        self._lock = threading.Lock()

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def has_token(self) -> bool:
        return bool(self._token)

    def ensure_token(self) -> str:
        """
        Return the cached token, logging in first if there is none.

        Returns:
            Auth token

        Raises:
            AuthenticationError: If the login request fails or has no Auth key
        """
        if self._token:
            return self._token

        with self._lock:
            if not self._token:
                self._token = self._login()
            return self._token

    def _login(self) -> str:
        params = {
            'accountType': ACCOUNT_TYPE,
            'Email': self.username,
            'Passwd': self.password,
            'service': SERVICE_NAME,
            'source': self.source,
        }

        try:
            logger.info(f"Logging in to {self.login_url} as {self.username}")
            response = self.session.get(self.login_url, params=params)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"Login request failed: {e}")
            raise AuthenticationError(f"Login request failed: {e}", self.username) from e

        token = parse_login_response(response.text).get('Auth')
        if not token:
            logger.error(f"Login response for {self.username} contained no Auth token")
            raise AuthenticationError("Login response contained no Auth token", self.username)

        logger.info("Successfully obtained auth token")
        logger.debug(f"Token starts with: {token[:10]}...")
        return token
