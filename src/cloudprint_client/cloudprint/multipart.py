"""
multipart/form-data body builder for Cloud Print operation requests.

Parameters are written in insertion order. File parameters carry their own
Content-Type and are marked base64; the caller supplies the value already
encoded.
"""
import time
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

CRLF = '\r\n'
BOUNDARY_PREFIX = '----CloudPrintFormBoundary'


class ParamType(Enum):
    FIELD = 'field'
    FILE = 'file'


@dataclass
class PostDataParam:
    name: str
    value: str = ''
    type: ParamType = ParamType.FIELD
    file_name: str = ''
    file_mime_type: str = 'text/plain'


def make_boundary() -> str:
    """Boundary token unique per request (prefix + epoch milliseconds)."""
    return f"{BOUNDARY_PREFIX}{int(time.time() * 1000)}"


class PostData:
    """Ordered collection of form parameters plus the boundary used to encode them."""

    def __init__(self, boundary: Optional[str] = None):
        self.boundary = boundary or make_boundary()
        self.params: List[PostDataParam] = []

    def __len__(self):
        return len(self.params)

    def add_field(self, name: str, value) -> 'PostData':
        self.params.append(PostDataParam(name=name, value=str(value)))
        return self

    def add_file(self, name: str, file_name: str, value: str, mime_type: str = 'text/plain') -> 'PostData':
        self.params.append(PostDataParam(
            name=name,
            value=value,
            type=ParamType.FILE,
            file_name=file_name,
            file_mime_type=mime_type,
        ))
        return self

    @property
    def content_type(self) -> str:
        return f"multipart/form-data; boundary={self.boundary}"

    def get_post_data(self) -> str:
        """Render the body as text, one boundary-delimited section per parameter."""
        parts = []
        for p in self.params:
            parts.append(f"--{self.boundary}{CRLF}")
            if p.type is ParamType.FILE:
                parts.append(
                    f'Content-Disposition: form-data; name="{p.name}"; filename="{p.file_name}"{CRLF}'
                )
                parts.append(f"Content-Type: {p.file_mime_type}{CRLF}")
                parts.append(f"Content-Transfer-Encoding: base64{CRLF}")
            else:
                parts.append(f'Content-Disposition: form-data; name="{p.name}"{CRLF}')
            parts.append(CRLF)
            parts.append(f"{p.value}{CRLF}")

        parts.append(f"--{self.boundary}--{CRLF}")
        return ''.join(parts)

    def encode(self) -> bytes:
        return self.get_post_data().encode('utf-8')

    def __repr__(self):
        names = ', '.join(p.name for p in self.params)
        return f"PostData(boundary={self.boundary!r}, params=[{names}])"
