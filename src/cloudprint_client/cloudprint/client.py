"""
Cloud Print service client.

Every public operation returns a typed response. Authentication and transport
failures come back as success=False with a message; only malformed submit or
print_document requests raise (InvalidRequestError).
"""
import asyncio
import base64
import logging
from typing import List, Optional

import requests

from cloudprint_client.auth.client_login import ClientLoginAuthenticator, DEFAULT_LOGIN_URL
from cloudprint_client.cloudprint.models import (
    ConnectionStatus,
    GenericResponse,
    JobsResponse,
    Printer,
    PrinterDetailsResponse,
    SearchPrintersResponse,
    SubmitRequest,
)
from cloudprint_client.cloudprint.multipart import PostData
from cloudprint_client.config.manager import ConfigManager
from cloudprint_client.exceptions import AuthenticationError, InvalidRequestError
from cloudprint_client.logging import setup_logging_from_config

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.google.com/cloudprint/"
DEFAULT_SOURCE = "Google-JS"
DEFAULT_CAPABILITIES = '{"capabilities":[{}]}'
DATA_URL_CONTENT_TYPE = "dataUrl"
SHARE_ROLE = "APPENDER"
EMPTY_BODY_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _present(value) -> bool:
    """False for None and blank/whitespace-only strings."""
    return value is not None and not (isinstance(value, str) and not value.strip())


def _require(value, name: str):
    if not _present(value):
        raise ValueError(f"{name} is required")
    return value


def _flag(value: bool) -> str:
    return 'true' if value else 'false'


class PrinterClient:
    """Client for the Cloud Print submit/share/jobs/printer/search operations."""

    def __init__(
        self,
        username: str,
        password: str,
        source: Optional[str] = None,
        base_url: Optional[str] = None,
        login_url: Optional[str] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the client.

        Args:
            username: Account email
            password: Account password
            source: Application identifier sent with every request
            base_url: Service address operations are appended to
            login_url: ClientLogin endpoint
            session: HTTP session shared by login and operation requests
        """
        self.source = source if source and source.strip() else DEFAULT_SOURCE
        self.base_url = base_url if base_url and base_url.strip() else DEFAULT_BASE_URL
        self.session = session or requests.Session()
        self.authenticator = ClientLoginAuthenticator(
            username=username,
            password=password,
            source=self.source,
            login_url=login_url or DEFAULT_LOGIN_URL,
            session=self.session,
        )
        self.printers: List[Printer] = []

    @classmethod
    def from_config(
        cls,
        config: ConfigManager,
        session: Optional[requests.Session] = None,
        configure_logging: bool = True
    ) -> 'PrinterClient':
        """
        Build a client from the [cloudprint] section of a config file.

        When the file has a [logging] section and `configure_logging` is set,
        logging is configured from it as well.
        """
        settings = config.cloudprint_settings()

        if configure_logging and config.get('logging'):
            setup_logging_from_config(config)

        return cls(
            username=settings.username,
            password=settings.password,
            source=settings.source,
            base_url=settings.base_url,
            login_url=settings.login_url,
            session=session,
        )

    @property
    def username(self) -> str:
        return self.authenticator.username

    def operation_url(self, operation: str) -> str:
        return f"{self.base_url.rstrip('/')}/{operation}"

    def _dispatch(self, response_type, operation: str, post_data: Optional[PostData] = None):
        """
        POST an authenticated request for `operation` and decode the JSON reply.

        Never raises: any failure is returned as response_type.failure(message).
        """
        try:
            token = self.authenticator.ensure_token()
        except AuthenticationError as e:
            logger.warning(f"Skipping '{operation}': {e}")
            return response_type.failure(str(e))
        except Exception as e:
            logger.error(f"Login for '{operation}' failed unexpectedly: {e}", exc_info=True)
            return response_type.failure(str(e) or type(e).__name__)

        url = self.operation_url(operation)
        headers = {
            'X-CloudPrint-Proxy': self.source,
            'Authorization': f'GoogleLogin auth={token}',
        }

        if post_data is not None:
            body = post_data.encode()
            headers['Content-Type'] = post_data.content_type
        else:
            body = b''
            headers['Content-Type'] = EMPTY_BODY_CONTENT_TYPE

        try:
            logger.debug(f"POST {url} ({len(body)} bytes) {post_data!r}")
            response = self.session.post(url, data=body, headers=headers)
            response.raise_for_status()
            result = response_type.from_json(response.json())
        except Exception as e:
            logger.error(f"Cloud Print '{operation}' request failed: {e}")
            return response_type.failure(str(e) or type(e).__name__)

        if not result.success:
            logger.warning(f"Cloud Print '{operation}' returned an error: {result.message}")
        return result

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def submit(self, request: SubmitRequest) -> GenericResponse:
        """
        Submit a print job.

        Raises:
            InvalidRequestError: If the request, its content, or its content type is missing
        """
        if request is None or not (request.content_type or '').strip() or request.content is None:
            raise InvalidRequestError(
                "Invalid parameters, make sure that the request parameters and content type have been specified."
            )

        try:
            p = PostData()
            p.add_field('printerid', _require(request.printerid, 'printerid'))
            p.add_field('contentType', request.content_type)

            b64 = base64.b64encode(request.content).decode('ascii')
            if b64:
                p.add_field('content', f"data:{request.content_type};base64,{b64}")

            for name in ('title', 'capabilities', 'tag'):
                value = getattr(request, name)
                if _present(value):
                    p.add_field(name, value)
        except Exception as e:
            return GenericResponse.failure(str(e))

        logger.info(f"Submitting '{request.title}' ({len(request.content)} bytes) to printer {request.printerid}")
        return self._dispatch(GenericResponse, 'submit', p)

    def print_document(self, printerid: str, title: str, document: bytes, mime_type: str) -> GenericResponse:
        """
        Submit raw document bytes as a data URL (contentType=dataUrl) with default capabilities.

        Raises:
            InvalidRequestError: If the document or its MIME type is missing
        """
        if document is None or not _present(mime_type):
            raise InvalidRequestError("A document and its MIME type are required.")

        try:
            b64 = base64.b64encode(document).decode('ascii')
            p = PostData()
            p.add_field('printerid', _require(printerid, 'printerid'))
            p.add_field('capabilities', DEFAULT_CAPABILITIES)
            p.add_field('contentType', DATA_URL_CONTENT_TYPE)
            p.add_field('title', title or '')
            p.add_field('content', f"data:{mime_type};base64,{b64}")
        except Exception as e:
            return GenericResponse.failure(str(e))

        logger.info(f"Printing '{title}' ({len(document)} bytes) on printer {printerid}")
        return self._dispatch(GenericResponse, 'submit', p)

    def share_printer(self, printerid: str, email: str, notify: bool = True) -> GenericResponse:
        """Give `email` APPENDER access to a printer."""
        try:
            p = PostData()
            p.add_field('printerid', _require(printerid, 'printerid'))
            p.add_field('email', _require(email, 'email'))
            p.add_field('role', SHARE_ROLE)
            p.add_field('skip_notification', _flag(not notify))
        except Exception as e:
            return GenericResponse.failure(str(e))

        return self._dispatch(GenericResponse, 'share', p)

    def unshare_printer(self, printerid: str, email: str) -> GenericResponse:
        try:
            p = PostData()
            p.add_field('printerid', _require(printerid, 'printerid'))
            p.add_field('email', _require(email, 'email'))
        except Exception as e:
            return GenericResponse.failure(str(e))

        return self._dispatch(GenericResponse, 'unshare', p)

    def get_jobs(self, printerid: Optional[str] = None) -> JobsResponse:
        """List jobs, optionally only those of one printer."""
        try:
            p = PostData()
            if printerid and printerid.strip():
                p.add_field('printerid', printerid)
        except Exception as e:
            return JobsResponse.failure(str(e))

        return self._dispatch(JobsResponse, 'jobs', p if len(p) else None)

    def delete_job(self, jobid: str) -> GenericResponse:
        try:
            p = PostData()
            p.add_field('jobid', _require(jobid, 'jobid'))
        except Exception as e:
            return GenericResponse.failure(str(e))

        return self._dispatch(GenericResponse, 'deletejob', p)

    def get_printer_details(self, printerid: str, connection_status: bool = False) -> PrinterDetailsResponse:
        try:
            p = PostData()
            p.add_field('printerid', _require(printerid, 'printerid'))
            if connection_status:
                p.add_field('printer_connection_status', _flag(True))
        except Exception as e:
            return PrinterDetailsResponse.failure(str(e))

        return self._dispatch(PrinterDetailsResponse, 'printer', p)

    def search(self, query: str = '', connection_status: ConnectionStatus = ConnectionStatus.NONE) -> SearchPrintersResponse:
        """
        Search the printers registered to the account.

        An empty query and ConnectionStatus.NONE send no body at all.
        """
        try:
            p = PostData()
            if query and query.strip():
                p.add_field('q', query)
            status = ConnectionStatus(connection_status or ConnectionStatus.NONE)
            if status is not ConnectionStatus.NONE:
                p.add_field('connection_status', status.value)
        except Exception as e:
            return SearchPrintersResponse.failure(str(e))

        result = self._dispatch(SearchPrintersResponse, 'search', p if len(p) else None)
        if result.success:
            self.printers = result.printers
        return result

    # ------------------------------------------------------------------
    # Async wrappers: run the blocking call in the loop's default executor
    # ------------------------------------------------------------------

    async def _run_in_executor(self, func, *args):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, func, *args)

    async def submit_async(self, request: SubmitRequest) -> GenericResponse:
        return await self._run_in_executor(self.submit, request)

    async def print_document_async(self, printerid: str, title: str, document: bytes, mime_type: str) -> GenericResponse:
        return await self._run_in_executor(self.print_document, printerid, title, document, mime_type)

    async def share_printer_async(self, printerid: str, email: str, notify: bool = True) -> GenericResponse:
        return await self._run_in_executor(self.share_printer, printerid, email, notify)

    async def unshare_printer_async(self, printerid: str, email: str) -> GenericResponse:
        return await self._run_in_executor(self.unshare_printer, printerid, email)

    async def get_jobs_async(self, printerid: Optional[str] = None) -> JobsResponse:
        return await self._run_in_executor(self.get_jobs, printerid)

    async def delete_job_async(self, jobid: str) -> GenericResponse:
        return await self._run_in_executor(self.delete_job, jobid)

    async def get_printer_details_async(self, printerid: str, connection_status: bool = False) -> PrinterDetailsResponse:
        return await self._run_in_executor(self.get_printer_details, printerid, connection_status)

    async def search_async(self, query: str = '', connection_status: ConnectionStatus = ConnectionStatus.NONE) -> SearchPrintersResponse:
        return await self._run_in_executor(self.search, query, connection_status)
