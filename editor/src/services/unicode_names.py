"""Unicode character names for the inspector.

Names come from the Unicode Character Database (UnicodeData.txt). The file is
downloaded once in the background and the parsed table is cached as JSON in
the user config directory, so later sessions never touch the network.

The service never blocks: the host calls poll() every frame and shows
status_message() until the names are READY.
"""

import json
import logging
import os
from enum import Enum

from PyQt5.QtCore import QUrl
from PyQt5.QtNetwork import QNetworkAccessManager, QNetworkRequest, QNetworkReply

from constants import UNICODE_DATA_URL, UNKNOWN_CHARACTER_NAME

logger = logging.getLogger(__name__)


class NameLookupStatus(Enum):
    NOT_STARTED = 'not_started'
    LOADING = 'loading'
    ERROR = 'error'
    READY = 'ready'


class NameLookupUnavailable(RuntimeError):
    """Raised by name_for() before the name table is READY."""


class UnicodeDataParseError(ValueError):
    """UnicodeData.txt content could not be parsed."""


def parse_unicode_data(text):
    """Parse UnicodeData.txt into a code point -> name table.

    Each line is ``code;name;...`` with a hex code. Large blocks are given as
    a ``<Block, First>`` line followed by a ``<Block, Last>`` line; every code
    in between gets the name ``<Block>``.

    Args:
        text: File content

    Returns:
        dict mapping int code points to names

    Raises:
        UnicodeDataParseError: On a malformed line or an unterminated range
    """
    lines = text.split('\n')
    names = {}
    i = 0
    while i < len(lines):
        line = lines[i].strip()
        i += 1
        if not line:
            continue
        code, name = _parse_line(line, i)
        if name.endswith(', First>'):
            if i >= len(lines):
                raise UnicodeDataParseError(f"Missing end of range, line {i}")
            end_code, end_name = _parse_line(lines[i].strip(), i + 1)
            i += 1
            if not end_name.endswith(', Last>'):
                raise UnicodeDataParseError(f"Expected end-of-range indicator, line {i}")
            name = name.replace(', First', '')
            for code_in_range in range(code, end_code + 1):
                names[code_in_range] = name
        else:
            names[code] = name
    return names


def _parse_line(line, line_number):
    fields = line.split(';')
    if len(fields) < 2:
        raise UnicodeDataParseError(f"Parse error line {line_number}")
    try:
        code = int(fields[0], 16)
    except ValueError:
        raise UnicodeDataParseError(f"Invalid code point {fields[0]!r}, line {line_number}")
    return code, fields[1]


class QtDownloader:
    """Fetches one URL with QNetworkAccessManager on the Qt event loop."""

    def __init__(self, manager=None):
        self._manager = manager if manager is not None else QNetworkAccessManager()
        self._reply = None
        self._finished = False
        self._error = None
        self._data = b""
        self.progress = 0.0

    def start(self, url):
        request = QNetworkRequest(QUrl(url))
        request.setAttribute(QNetworkRequest.FollowRedirectsAttribute, True)
        self._reply = self._manager.get(request)
        self._reply.downloadProgress.connect(self._on_progress)
        self._reply.finished.connect(self._on_finished)

    def is_finished(self) -> bool:
        return self._finished

    def error(self):
        """Error string, or None if the download succeeded (or is running)."""
        return self._error

    def text(self) -> str:
        return self._data.decode('utf-8', errors='replace')

    def _on_progress(self, received, total):
        if total > 0:
            self.progress = received / total

    def _on_finished(self):
        if self._reply.error() != QNetworkReply.NoError:
            self._error = self._reply.errorString()
        else:
            self._data = bytes(self._reply.readAll())
            self.progress = 1.0
        self._finished = True
        self._reply.deleteLater()
        self._reply = None


class UnicodeNameService:
    """Polled Unicode name lookup.

    Usage:
        names = UnicodeNameService(cache_path)
        ...
        names.poll()                      # every frame
        label = names.display_name(0x41)  # "LATIN CAPITAL LETTER A" once ready
    """

    def __init__(self, cache_path=None, url=UNICODE_DATA_URL, downloader_factory=QtDownloader):
        """
        Args:
            cache_path: JSON file the parsed table is cached in (None = no cache)
            url: UnicodeData.txt location
            downloader_factory: Callable returning a downloader with start(url),
                is_finished(), error(), text() and a progress attribute
        """
        self.cache_path = cache_path
        self.url = url
        self._downloader_factory = downloader_factory
        self._download = None
        self._names = None
        self._error = None
        self._cache_checked = False

    def status(self) -> NameLookupStatus:
        if self._names is not None:
            return NameLookupStatus.READY
        if self._error is not None:
            return NameLookupStatus.ERROR
        if self._download is None:
            return NameLookupStatus.NOT_STARTED
        return NameLookupStatus.LOADING

    def status_message(self) -> str:
        status = self.status()
        if status == NameLookupStatus.READY:
            return "Done."
        if status == NameLookupStatus.NOT_STARTED:
            return "Not started"
        if status == NameLookupStatus.ERROR:
            return self._error
        return f"Downloading: {round(self._download.progress * 100)}"

    def poll(self):
        """Advance loading: cache, then download, then parse. Safe to call often."""
        if self._names is not None or self._error is not None:
            return

        if not self._cache_checked:
            self._cache_checked = True
            if self._load_cache():
                return

        if self._download is None:
            logger.info(f"Downloading Unicode names from {self.url}")
            self._download = self._downloader_factory()
            self._download.start(self.url)
            return

        if not self._download.is_finished():
            return

        error = self._download.error()
        if error:
            logger.warning(f"Unicode name download failed: {error}")
            self._error = error
            return

        try:
            self._names = parse_unicode_data(self._download.text())
        except UnicodeDataParseError as e:
            logger.error(f"Could not parse Unicode data: {e}")
            self._error = str(e)
            return
        logger.info(f"Loaded {len(self._names)} Unicode names")
        self._save_cache()

    def name_for(self, code_point):
        """Name of a character, or None if it has none.

        Raises:
            NameLookupUnavailable: If the names are not READY
        """
        if self._names is None:
            raise NameLookupUnavailable(self.status_message())
        return self._names.get(code_point)

    def display_name(self, code_point) -> str:
        """Name for display: the status message until READY."""
        if self._names is None:
            return self.status_message()
        return self._names.get(code_point) or UNKNOWN_CHARACTER_NAME

    # ========================================
    # Cache
    # ========================================

    def _load_cache(self) -> bool:
        if not self.cache_path or not os.path.exists(self.cache_path):
            return False
        try:
            with open(self.cache_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            self._names = {int(code): name for code, name in data.items()}
        except (OSError, ValueError, AttributeError) as e:
            logger.warning(f"Ignoring unreadable Unicode name cache {self.cache_path}: {e}")
            return False
        logger.debug(f"Loaded {len(self._names)} Unicode names from cache")
        return True

    def _save_cache(self):
        if not self.cache_path:
            return
        try:
            os.makedirs(os.path.dirname(self.cache_path) or '.', exist_ok=True)
            with open(self.cache_path, 'w', encoding='utf-8') as f:
                json.dump({str(code): name for code, name in self._names.items()}, f)
        except OSError as e:
            logger.warning(f"Could not write Unicode name cache {self.cache_path}: {e}")
