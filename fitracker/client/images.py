"""
Image attachment encoding.

Local image files are embedded into records as data URLs. The bytes are
never decoded or transcoded; only the MIME type tag is derived, from the
file name.
"""

import asyncio
import base64
import mimetypes
from pathlib import Path
from typing import Tuple, Union

DEFAULT_MIME_TYPE = "application/octet-stream"


def encode_data_url(content: bytes, mime_type: str = DEFAULT_MIME_TYPE) -> str:
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def guess_mime_type(filename: str) -> str:
    mime_type, _ = mimetypes.guess_type(filename)
    return mime_type or DEFAULT_MIME_TYPE


async def read_data_url(path: Union[str, Path]) -> Tuple[str, str]:
    """
    Read a local file and encode it as a data URL.

    The read runs in a worker thread so the event loop stays responsive.

    Args:
        path: Path to the image file

    Returns:
        (data_url, file_name)
    """
    path = Path(path)
    content = await asyncio.to_thread(path.read_bytes)
    return encode_data_url(content, guess_mime_type(path.name)), path.name
