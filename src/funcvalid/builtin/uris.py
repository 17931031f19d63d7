"""
Contains the validators for URLs, URIs, URNs and file paths which are not expressible by a single regular expression.
"""
import logging
import os
import re
import stat
from dataclasses import dataclass
from typing import Callable, Optional
from urllib.parse import SplitResult, urlsplit

from funcvalid.errors import FailureKind, ValidationError
from funcvalid.validator import Validator

_logger = logging.getLogger(__name__)

_CONTROL_CHARACTER = re.compile(r"[\x00-\x1f\x7f]")
_INVALID_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_USERINFO = re.compile(r"^[A-Za-z0-9\-._:~!$&'()*+,;=%@]*$")
_HOST = re.compile(r"^(?:\[[^\[\]/]*\]|[A-Za-z0-9\-._~!$&'()*+,;=<>\"%\u0080-\U0010ffff]*)(?::[0-9]*)?$")
_URN = re.compile(
    r"^[uU][rR][nN]:(?![uU][rR][nN]:)[A-Za-z0-9][A-Za-z0-9-]{0,31}:(?:[A-Za-z0-9()+,\-.:=@;$_!*'/]|%[0-9A-Fa-f]{2})+\Z"
)


def _split_url(raw_url: str, via_request: bool = False) -> Optional[SplitResult]:
    """
    Splits the URL with `urlsplit` and applies the checks `urlsplit` leaves out: no control characters, valid percent
    escapes in path and fragment, a valid authority and a valid port. The query is not checked. Returns None if the URL
    is malformed.
    With `via_request` the URL has to be a request URI, i.e. "*", an absolute URL or an absolute path.
    """
    if _CONTROL_CHARACTER.search(raw_url) or raw_url.startswith(" "):
        return None
    if via_request and raw_url == "*":
        return urlsplit(raw_url)
    try:
        parts = urlsplit(raw_url, allow_fragments=not via_request)
        _ = parts.port
    except ValueError as error:
        _logger.debug("Could not split URL %r: %s", raw_url, error)
        return None
    if _INVALID_ESCAPE.search(parts.fragment):
        return None
    if _opaque(parts):
        return parts
    if not parts.scheme and not raw_url.startswith("/"):
        if via_request or ":" in parts.path.partition("/")[0]:
            return None
    if parts.netloc and (parts.scheme or not via_request):
        userinfo, _, host = parts.netloc.rpartition("@")
        if not _USERINFO.match(userinfo) or not _HOST.match(host):
            return None
    if _INVALID_ESCAPE.search(parts.path):
        return None
    return parts


def _opaque(parts: SplitResult) -> str:
    if parts.scheme and not parts.netloc and not parts.path.startswith("/"):
        return parts.path
    return ""


def _has_location(parts: SplitResult) -> bool:
    host = parts.netloc.rpartition("@")[2]
    return bool(host or parts.fragment or _opaque(parts))


@dataclass(frozen=True)
class UrlValidator(Validator[str]):
    """
    Valid iff the input is a URL with a scheme and at least a host, a fragment or an opaque part.
    """

    input_type = str

    @property
    def name(self) -> str:
        return "Url"

    def check(self, inp: str) -> Optional[ValidationError]:
        if inp:
            parts = _split_url(inp)
            if parts is not None and parts.scheme and _has_location(parts):
                return None
        return self.fail(FailureKind.FORMAT)


@dataclass(frozen=True)
class HttpUrlValidator(Validator[str]):
    """
    Valid iff the input is a URL with the scheme http or https (case-insensitive).
    """

    input_type = str

    @property
    def name(self) -> str:
        return "HttpUrl"

    def check(self, inp: str) -> Optional[ValidationError]:
        if inp:
            parts = _split_url(inp)
            if parts is not None and parts.scheme in ("http", "https") and _has_location(parts):
                return None
        return self.fail(FailureKind.FORMAT)


@dataclass(frozen=True)
class URIValidator(Validator[str]):
    """
    Valid iff the input is a request URI. Like browsers do, everything from the first '#' on is ignored.
    """

    input_type = str

    @property
    def name(self) -> str:
        return "URI"

    def check(self, inp: str) -> Optional[ValidationError]:
        inp = inp.partition("#")[0]
        if inp and _split_url(inp, via_request=True) is not None:
            return None
        return self.fail(FailureKind.FORMAT)


@dataclass(frozen=True)
class UrnRFC2141Validator(Validator[str]):
    """
    Valid iff the input is a URN as defined in RFC 2141.
    """

    input_type = str

    @property
    def name(self) -> str:
        return "UrnRFC2141"

    def check(self, inp: str) -> Optional[ValidationError]:
        if _URN.match(inp) is not None:
            return None
        return self.fail(FailureKind.FORMAT)


def is_existing_file(path: str) -> bool:
    """
    Returns True if the path exists and is not a directory. Symbolic links are followed.
    """
    try:
        return not stat.S_ISDIR(os.stat(path).st_mode)
    except (OSError, ValueError) as error:
        _logger.debug("Could not stat %r: %s", path, error)
        return False


@dataclass(frozen=True)
class FileValidator(Validator[str]):
    """
    Valid iff `is_file` returns True for the input. By default this checks the file system, i.e. the result depends on
    the environment. Inject another check if you need deterministic validation.
    """

    input_type = str
    is_file: Callable[[str], bool] = is_existing_file

    @property
    def name(self) -> str:
        return "File"

    def check(self, inp: str) -> Optional[ValidationError]:
        if self.is_file(inp):
            return None
        return self.fail(FailureKind.FILE)


Url = UrlValidator()
HttpUrl = HttpUrlValidator()
URI = URIValidator()
UrnRFC2141 = UrnRFC2141Validator()
File = FileValidator()
