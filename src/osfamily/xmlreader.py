"""
XML charset detection error.

Raised by an XML reader when no character encoding can be determined from
the byte order mark, the first bytes, the XML prolog and the HTTP
content-type, following XML 1.0 and RFC 3023. The reader has already
consumed part of the original stream, so the unread remainder travels with
the error for the caller to retry with a fallback encoding.
"""

from typing import BinaryIO, Optional


class XmlEncodingError(OSError):
    """Charset of an XML stream could not be determined."""

    def __init__(
        self,
        message: str,
        stream: Optional[BinaryIO],
        bom_encoding: Optional[str] = None,
        xml_guess_encoding: Optional[str] = None,
        xml_encoding: Optional[str] = None,
        content_type_mime: Optional[str] = None,
        content_type_encoding: Optional[str] = None,
    ):
        super().__init__(message)
        self._message = message
        self._stream = stream
        self._bom_encoding = bom_encoding
        self._xml_guess_encoding = xml_guess_encoding
        self._xml_encoding = xml_encoding
        self._content_type_mime = content_type_mime
        self._content_type_encoding = content_type_encoding

    @property
    def message(self) -> str:
        return self._message

    @property
    def stream(self) -> Optional[BinaryIO]:
        """The unconsumed remainder of the input stream."""
        return self._stream

    @property
    def bom_encoding(self) -> Optional[str]:
        """Encoding indicated by the byte order mark, None if there was none."""
        return self._bom_encoding

    @property
    def xml_guess_encoding(self) -> Optional[str]:
        """Encoding guessed from the first bytes, None if no guess was made."""
        return self._xml_guess_encoding

    @property
    def xml_encoding(self) -> Optional[str]:
        """Encoding declared in the XML prolog, None if not declared."""
        return self._xml_encoding

    @property
    def content_type_mime(self) -> Optional[str]:
        """MIME type of the content-type, None if detection did not involve HTTP."""
        return self._content_type_mime

    @property
    def content_type_encoding(self) -> Optional[str]:
        """Charset parameter of the content-type, None if absent."""
        return self._content_type_encoding

    @property
    def has_content_type(self) -> bool:
        return self._content_type_mime is not None
