"""归一化单元测试。"""

from src.modules.listings.application.normalizer import (
    align_play_groups,
    normalize_listing,
    normalize_record,
)
from src.modules.listings.infrastructure.parsers import (
    parse_json_listing,
    parse_xml_listing,
)
from src.modules.listings.infrastructure.parsers.base import IntermediateListing


class TestNormalizeListing:
    """列表归一化测试。"""

    def test_stamps_source_identity(self, sample_source):
        intermediate = parse_json_listing(
            {"list": [{"vod_id": "1", "vod_name": "A"}], "pagecount": 3}
        )
        page = normalize_listing(intermediate, sample_source)

        assert page.count == 1
        record = page.records[0]
        assert record.vod_id == "1"
        assert record.name == "A"
        assert record.source_id == "s1"
        assert record.source_name == "Src"
        assert record.source_url == "http://x"
        assert page.page == 1
        assert page.page_count == 3

    def test_upstream_source_fields_overwritten(self, sample_source):
        raw = {
            "vod_id": "1",
            "vod_name": "A",
            "source_id": "upstream",
            "source_name": "Upstream",
            "source_url": "http://elsewhere",
        }
        record = normalize_record(raw, sample_source)
        assert record is not None
        assert record.source_id == "s1"
        assert record.source_name == "Src"
        assert record.source_url == "http://x"

    def test_order_preserved(self, sample_source):
        intermediate = IntermediateListing(
            records=[{"vod_id": str(i), "vod_name": f"V{i}"} for i in range(5)]
        )
        page = normalize_listing(intermediate, sample_source)
        assert [r.vod_id for r in page.records] == ["0", "1", "2", "3", "4"]

    def test_records_without_id_dropped(self, sample_source):
        intermediate = IntermediateListing(
            records=[
                {"vod_id": "1"},
                {"vod_name": "no id"},
                {"vod_id": "   "},
                "not-a-record",
                {"vod_id": None},
                {"vod_id": "2"},
            ]
        )
        page = normalize_listing(intermediate, sample_source)
        assert [r.vod_id for r in page.records] == ["1", "2"]

    def test_pagination_clamped(self, sample_source):
        intermediate = IntermediateListing(records=[], page=0, pagecount=-5)
        page = normalize_listing(intermediate, sample_source)
        assert page.page == 1
        assert page.page_count == 1

    def test_xml_records(self, sample_xml_source):
        text = (
            '<list page="1" pagecount="4"><video><id>9</id><name>X</name>'
            '<dl><dd flag="m3u8">第1集$http://a/1.m3u8</dd></dl></video></list>'
        )
        page = normalize_listing(parse_xml_listing(text), sample_xml_source)
        record = page.records[0]
        assert record.vod_id == "9"
        assert record.source_id == "x1"
        assert record.play_urls == ("第1集$http://a/1.m3u8",)
        assert record.play_sources == ("m3u8",)
        assert page.page_count == 4


class TestNormalizeRecord:
    """单条记录归一化测试。"""

    def test_full_record(self, sample_source, sample_video_data):
        record = normalize_record(sample_video_data, sample_source)
        assert record is not None
        assert record.vod_id == "42"
        assert record.name == "Example Movie"
        assert record.picture_url == "https://img.example.com/42.jpg"
        assert record.year == "2023"
        assert record.area == "大陆"
        assert record.type_name == "动作片"
        assert record.director == "Someone"
        assert record.actor == "A,B"
        assert record.remarks == "HD"
        assert record.content == "<p>A <b>good</b> movie</p>"
        assert record.plain_content == "A good movie"

    def test_json_play_groups_split(self, sample_source, sample_video_data):
        record = normalize_record(sample_video_data, sample_source)
        assert record.play_urls == ("第1集$http://a/1.m3u8", "第1集$http://a/1.mp4")
        assert record.play_sources == ("m3u8", "mp4")

    def test_missing_optional_fields(self, sample_source):
        record = normalize_record({"vod_id": 7}, sample_source)
        assert record is not None
        assert record.vod_id == "7"
        assert record.name == ""
        assert record.picture_url is None
        assert record.content is None
        assert record.plain_content is None
        assert record.play_urls == ()
        assert record.play_sources == ()


class TestAlignPlayGroups:
    """播放分组对齐测试。"""

    def test_parallel_lists(self):
        assert align_play_groups(["u1", "u2"], ["a", "b"]) == (("u1", "u2"), ("a", "b"))

    def test_blank_group_dropped_pairwise(self):
        urls, sources = align_play_groups("a$$$$$$b", "x$$$y$$$z")
        assert urls == ("a", "b")
        assert sources == ("x", "z")

    def test_missing_labels_default(self):
        urls, sources = align_play_groups("a$$$b", "x")
        assert urls == ("a", "b")
        assert sources == ("x", "default")

    def test_extra_labels_ignored(self):
        urls, sources = align_play_groups("a", "x$$$y")
        assert urls == ("a",)
        assert sources == ("x",)

    def test_none_values(self):
        assert align_play_groups(None, None) == ((), ())
        assert align_play_groups("", "m3u8") == ((), ())

    def test_always_equal_length(self):
        urls, sources = align_play_groups(["a", "", "  ", "b", "c"], ["1", "2"])
        assert len(urls) == len(sources)
        assert urls == ("a", "b", "c")
        assert sources == ("1", "default", "default")
