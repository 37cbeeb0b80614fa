"""
Tests for the Unicode name service: parsing, polling states, caching.
"""
import json
import pytest

from services.unicode_names import (
    UnicodeNameService, NameLookupStatus, NameLookupUnavailable,
    UnicodeDataParseError, parse_unicode_data,
)
from constants import UNKNOWN_CHARACTER_NAME


SAMPLE_DATA = """\
0041;LATIN CAPITAL LETTER A;Lu;0;L;;;;;N;;;;0061;
0042;LATIN CAPITAL LETTER B;Lu;0;L;;;;;N;;;;0062;
4E00;<CJK Ideograph, First>;Lo;0;L;;;;;N;;;;;
4E05;<CJK Ideograph, Last>;Lo;0;L;;;;;N;;;;;

1F600;GRINNING FACE;So;0;ON;;;;;N;;;;;
"""


class FakeDownloader:
    """Downloader double finished by the test"""

    instances = []

    def __init__(self):
        self.url = None
        self.finished = False
        self.failure = None
        self.data = ""
        self.progress = 0.0
        FakeDownloader.instances.append(self)

    def start(self, url):
        self.url = url

    def is_finished(self):
        return self.finished

    def error(self):
        return self.failure

    def text(self):
        return self.data


@pytest.fixture(autouse=True)
def reset_downloads():
    FakeDownloader.instances = []


# ══════════════════════════════════════════════════════════════════════════
# Parsing
# ══════════════════════════════════════════════════════════════════════════

class TestParseUnicodeData:

    def test_names(self):
        names = parse_unicode_data(SAMPLE_DATA)
        assert names[0x41] == "LATIN CAPITAL LETTER A"
        assert names[0x1F600] == "GRINNING FACE"

    def test_ranges(self):
        names = parse_unicode_data(SAMPLE_DATA)
        for code in range(0x4E00, 0x4E06):
            assert names[code] == "<CJK Ideograph>"
        assert 0x4E06 not in names

    def test_too_few_fields(self):
        with pytest.raises(UnicodeDataParseError):
            parse_unicode_data("0041\n")

    def test_bad_code(self):
        with pytest.raises(UnicodeDataParseError):
            parse_unicode_data("XYZ;NAME;Lu\n")

    def test_range_without_end(self):
        with pytest.raises(UnicodeDataParseError):
            parse_unicode_data("4E00;<CJK Ideograph, First>;Lo\n0041;LATIN CAPITAL LETTER A;Lu\n")

    def test_range_at_end_of_file(self):
        with pytest.raises(UnicodeDataParseError):
            parse_unicode_data("4E00;<CJK Ideograph, First>;Lo")


# ══════════════════════════════════════════════════════════════════════════
# Service states
# ══════════════════════════════════════════════════════════════════════════

class TestUnicodeNameService:

    @pytest.fixture
    def service(self, tmp_path):
        return UnicodeNameService(tmp_path / "names.json", url="http://example.invalid/UnicodeData.txt",
                                  downloader_factory=FakeDownloader)

    def test_not_started(self, service):
        assert service.status() == NameLookupStatus.NOT_STARTED
        assert service.status_message() == "Not started"
        with pytest.raises(NameLookupUnavailable):
            service.name_for(0x41)

    def test_download_flow(self, service, tmp_path):
        service.poll()
        assert service.status() == NameLookupStatus.LOADING
        download = FakeDownloader.instances[0]
        assert download.url == "http://example.invalid/UnicodeData.txt"

        download.progress = 0.42
        service.poll()
        assert service.status_message() == "Downloading: 42"
        assert service.display_name(0x41) == "Downloading: 42"

        download.data = SAMPLE_DATA
        download.finished = True
        service.poll()
        assert service.status() == NameLookupStatus.READY
        assert service.status_message() == "Done."
        assert service.name_for(0x41) == "LATIN CAPITAL LETTER A"
        assert service.name_for(0x43) is None
        assert service.display_name(0x43) == UNKNOWN_CHARACTER_NAME

        cached = json.loads((tmp_path / "names.json").read_text())
        assert cached["65"] == "LATIN CAPITAL LETTER A"

    def test_download_started_once(self, service):
        for _ in range(5):
            service.poll()
        assert len(FakeDownloader.instances) == 1

    def test_download_error(self, service):
        service.poll()
        download = FakeDownloader.instances[0]
        download.failure = "Host not found"
        download.finished = True
        service.poll()
        assert service.status() == NameLookupStatus.ERROR
        assert service.status_message() == "Host not found"
        service.poll()
        assert len(FakeDownloader.instances) == 1

    def test_parse_error(self, service):
        service.poll()
        download = FakeDownloader.instances[0]
        download.data = "garbage\n"
        download.finished = True
        service.poll()
        assert service.status() == NameLookupStatus.ERROR
        assert "line 1" in service.status_message()

    def test_cache_skips_download(self, tmp_path):
        cache = tmp_path / "names.json"
        cache.write_text(json.dumps({"65": "LATIN CAPITAL LETTER A"}))
        service = UnicodeNameService(cache, downloader_factory=FakeDownloader)
        service.poll()
        assert service.status() == NameLookupStatus.READY
        assert service.display_name(65) == "LATIN CAPITAL LETTER A"
        assert not FakeDownloader.instances

    def test_corrupt_cache_falls_back_to_download(self, tmp_path):
        cache = tmp_path / "names.json"
        cache.write_text("{not json")
        service = UnicodeNameService(cache, downloader_factory=FakeDownloader)
        service.poll()
        assert service.status() == NameLookupStatus.LOADING
        assert len(FakeDownloader.instances) == 1
