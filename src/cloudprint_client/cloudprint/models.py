"""
Cloud Print records, decoded from the JSON bodies returned by the service.
No behaviour beyond decoding. Every typed response embeds a GenericResponse.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

GENERIC_FIELDS = ('success', 'error_code', 'message', 'request', 'xsrf_token')


def _str(val) -> str:
    return '' if val is None else str(val)


def _int(val, default=0) -> int:
    try:
        return int(val) if val not in (None, '') else default
    except (TypeError, ValueError):
        logger.warning(f"Could not parse integer field: {val!r}")
        return default


def _bool(val) -> bool:
    if isinstance(val, str):
        return val.strip().lower() == 'true'
    return bool(val)


def _list(data: dict, key: str) -> list:
    return data.get(key) or []


class ConnectionStatus(Enum):
    NONE = 'NONE'       # no filter
    ONLINE = 'ONLINE'
    UNKNOWN = 'UNKNOWN'
    OFFLINE = 'OFFLINE'
    DORMANT = 'DORMANT'
    ALL = 'ALL'


@dataclass
class RequestDetails:
    time: str = ''
    users: List[str] = field(default_factory=list)
    params: Dict[str, Any] = field(default_factory=dict)
    user: str = ''

    @classmethod
    def from_json(cls, data: dict) -> 'RequestDetails':
        return cls(
            time=_str(data.get('time')),
            users=[_str(u) for u in _list(data, 'users')],
            params=dict(data.get('params') or {}),
            user=_str(data.get('user')),
        )


@dataclass
class GenericResponse:
    success: bool = False
    error_code: str = ''
    message: str = ''
    request: Optional[RequestDetails] = None
    xsrf_token: str = ''

    @classmethod
    def from_json(cls, data: dict) -> 'GenericResponse':
        request = data.get('request')
        return cls(
            success=_bool(data.get('success', False)),
            error_code=_str(data.get('errorCode')),
            message=_str(data.get('message')),
            request=RequestDetails.from_json(request) if isinstance(request, dict) else None,
            xsrf_token=_str(data.get('xsrf_token')),
        )

    @classmethod
    def failure(cls, message: str) -> 'GenericResponse':
        return cls(success=False, message=message)


def _generic_attr(self, name):
    """Expose the embedded GenericResponse fields on a typed response."""
    if name in GENERIC_FIELDS:
        return getattr(self.generic, name)
    raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")


def _set_generic_attr(self, name, value):
    """Write GenericResponse fields through to the embedded record."""
    if name in GENERIC_FIELDS:
        setattr(self.generic, name, value)
    else:
        object.__setattr__(self, name, value)


@dataclass
class Printer:
    """Entry of a search result."""
    id: str = ''
    name: str = ''
    description: str = ''
    proxy: str = ''
    status: str = ''
    caps_hash: str = ''
    create_time: str = ''
    update_time: str = ''
    access_time: str = ''
    confirmed: bool = False
    number_of_documents: int = 0
    number_of_pages: int = 0

    @classmethod
    def from_json(cls, data: dict) -> 'Printer':
        return cls(
            id=_str(data.get('id')),
            name=_str(data.get('name')),
            description=_str(data.get('description')),
            proxy=_str(data.get('proxy')),
            status=_str(data.get('status')),
            caps_hash=_str(data.get('capsHash')),
            create_time=_str(data.get('createTime')),
            update_time=_str(data.get('updateTime')),
            access_time=_str(data.get('accessTime')),
            confirmed=_bool(data.get('confirmed', False)),
            number_of_documents=_int(data.get('numberOfDocuments')),
            number_of_pages=_int(data.get('numberOfPages')),
        )


@dataclass
class PrintJob:
    id: str = ''
    printerid: str = ''
    printer_name: str = ''
    printer_type: str = ''
    message: str = ''
    number_of_pages: int = 0
    owner_id: str = ''
    title: str = ''
    content_type: str = ''
    file_url: str = ''
    ticket_url: str = ''
    create_time: str = ''
    update_time: str = ''
    status: str = ''
    tags: List[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict) -> 'PrintJob':
        return cls(
            id=_str(data.get('id')),
            printerid=_str(data.get('printerid')),
            printer_name=_str(data.get('printerName')),
            printer_type=_str(data.get('printerType')),
            message=_str(data.get('message')),
            number_of_pages=_int(data.get('numberOfPages')),
            owner_id=_str(data.get('ownerId')),
            title=_str(data.get('title')),
            content_type=_str(data.get('contentType')),
            file_url=_str(data.get('fileUrl')),
            ticket_url=_str(data.get('ticketUrl')),
            create_time=_str(data.get('createTime')),
            update_time=_str(data.get('updateTime')),
            status=_str(data.get('status')),
            tags=[_str(t) for t in _list(data, 'tags')],
        )

    def __str__(self):
        return (
            f"PrintJob(id={self.id} printer={self.printerid} "
            f"title={self.title!r} status={self.status})"
        )


@dataclass
class CapabilityOption:
    name: str = ''
    display_name: str = ''
    default: str = ''
    resolution_x: str = ''
    resolution_y: str = ''
    media_size_width: str = ''
    media_size_height: str = ''

    @classmethod
    def from_json(cls, data: dict) -> 'CapabilityOption':
        return cls(
            name=_str(data.get('name')),
            display_name=_str(data.get('psk:DisplayName')),
            default=_str(data.get('default')),
            resolution_x=_str(data.get('psk:ResolutionX')),
            resolution_y=_str(data.get('psk:ResolutionY')),
            media_size_width=_str(data.get('psk:MediaSizeWidth')),
            media_size_height=_str(data.get('psk:MediaSizeHeight')),
        )


@dataclass
class PrinterCapability:
    name: str = ''
    selection_type: str = ''
    display_name: str = ''
    data_type: str = ''
    unit_type: str = ''
    default_value: str = ''
    min_value: str = ''
    max_value: str = ''
    type: str = ''
    options: List[CapabilityOption] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict) -> 'PrinterCapability':
        return cls(
            name=_str(data.get('name')),
            selection_type=_str(data.get('psf:SelectionType')),
            display_name=_str(data.get('psk:DisplayName')),
            data_type=_str(data.get('psf:DataType')),
            unit_type=_str(data.get('psf:UnitType')),
            default_value=_str(data.get('psf:DefaultValue')),
            min_value=_str(data.get('psf:MinValue')),
            max_value=_str(data.get('psf:MaxValue')),
            type=_str(data.get('type')),
            options=[CapabilityOption.from_json(o) for o in _list(data, 'options')],
        )


@dataclass
class PrinterAccess:
    membership: str = ''
    email: str = ''
    name: str = ''
    role: str = ''
    type: str = ''
    is_pending: bool = False

    @classmethod
    def from_json(cls, data: dict) -> 'PrinterAccess':
        return cls(
            membership=_str(data.get('membership')),
            email=_str(data.get('email')),
            name=_str(data.get('name')),
            role=_str(data.get('role')),
            type=_str(data.get('type')),
            is_pending=_bool(data.get('is_pending', False)),
        )


@dataclass
class PrinterDetail:
    """Full printer record returned by the printer operation."""
    id: str = ''
    name: str = ''
    display_name: str = ''
    default_display_name: str = ''
    description: str = ''
    proxy: str = ''
    model: str = ''
    manufacturer: str = ''
    uuid: str = ''
    type: str = ''
    status: str = ''
    connection_status: str = ''
    owner_id: str = ''
    gcp_version: str = ''
    is_tos_accepted: bool = False
    caps_format: str = ''
    caps_hash: str = ''
    supported_content_types: str = ''
    update_url: str = ''
    create_time: str = ''
    update_time: str = ''
    access_time: str = ''
    tags: List[str] = field(default_factory=list)
    access: List[PrinterAccess] = field(default_factory=list)
    capabilities: List[PrinterCapability] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict) -> 'PrinterDetail':
        return cls(
            id=_str(data.get('id')),
            name=_str(data.get('name')),
            display_name=_str(data.get('displayName')),
            default_display_name=_str(data.get('defaultDisplayName')),
            description=_str(data.get('description')),
            proxy=_str(data.get('proxy')),
            model=_str(data.get('model')),
            manufacturer=_str(data.get('manufacturer')),
            uuid=_str(data.get('uuid')),
            type=_str(data.get('type')),
            status=_str(data.get('status')),
            connection_status=_str(data.get('connectionStatus')),
            owner_id=_str(data.get('ownerId')),
            gcp_version=_str(data.get('gcpVersion')),
            is_tos_accepted=_bool(data.get('isTosAccepted', False)),
            caps_format=_str(data.get('capsFormat')),
            caps_hash=_str(data.get('capsHash')),
            supported_content_types=_str(data.get('supportedContentTypes')),
            update_url=_str(data.get('updateUrl')),
            create_time=_str(data.get('createTime')),
            update_time=_str(data.get('updateTime')),
            access_time=_str(data.get('accessTime')),
            tags=[_str(t) for t in _list(data, 'tags')],
            access=[PrinterAccess.from_json(a) for a in _list(data, 'access')],
            capabilities=[PrinterCapability.from_json(c) for c in _list(data, 'capabilities')],
        )


@dataclass
class SearchPrintersResponse:
    generic: GenericResponse = field(default_factory=GenericResponse)
    printers: List[Printer] = field(default_factory=list)

    __getattr__ = _generic_attr
    __setattr__ = _set_generic_attr

    @classmethod
    def from_json(cls, data: dict) -> 'SearchPrintersResponse':
        return cls(
            generic=GenericResponse.from_json(data),
            printers=[Printer.from_json(p) for p in _list(data, 'printers')],
        )

    @classmethod
    def failure(cls, message: str) -> 'SearchPrintersResponse':
        return cls(generic=GenericResponse.failure(message))


@dataclass
class JobsResponse:
    generic: GenericResponse = field(default_factory=GenericResponse)
    jobs: List[PrintJob] = field(default_factory=list)

    __getattr__ = _generic_attr
    __setattr__ = _set_generic_attr

    @classmethod
    def from_json(cls, data: dict) -> 'JobsResponse':
        return cls(
            generic=GenericResponse.from_json(data),
            jobs=[PrintJob.from_json(j) for j in _list(data, 'jobs')],
        )

    @classmethod
    def failure(cls, message: str) -> 'JobsResponse':
        return cls(generic=GenericResponse.failure(message))


@dataclass
class PrinterDetailsResponse:
    generic: GenericResponse = field(default_factory=GenericResponse)
    printers: List[PrinterDetail] = field(default_factory=list)

    __getattr__ = _generic_attr
    __setattr__ = _set_generic_attr

    @classmethod
    def from_json(cls, data: dict) -> 'PrinterDetailsResponse':
        return cls(
            generic=GenericResponse.from_json(data),
            printers=[PrinterDetail.from_json(p) for p in _list(data, 'printers')],
        )

    @classmethod
    def failure(cls, message: str) -> 'PrinterDetailsResponse':
        return cls(generic=GenericResponse.failure(message))


@dataclass
class SubmitRequest:
    printerid: str
    content: Optional[bytes]
    content_type: str
    title: str = ''
    capabilities: str = ''      # opaque capability descriptor, sent as-is
    tag: str = ''
