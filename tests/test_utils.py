import uuid

import pytest
from fastapi import HTTPException

from lms_api.services.progress import average_score
from lms_api.storage.media import build_blob_name
from lms_api.utils import (
    PageParams,
    merge_pdf_materials,
    optional_uuid,
    parse_keep_list,
    to_uuid,
)


class TestKeepList:
    def test_absent_field(self):
        assert parse_keep_list(None) is None

    def test_json_list(self):
        assert parse_keep_list('["a.pdf", "", "b.pdf"]') == ["a.pdf", "b.pdf"]

    @pytest.mark.parametrize("raw", ["", "not json", '{"a": 1}', '"a.pdf"'])
    def test_anything_else_is_empty(self, raw):
        assert parse_keep_list(raw) == []


class TestMergePdfMaterials:
    def test_without_keep_list_appends(self):
        assert merge_pdf_materials(["a"], None, ["b"]) == ["a", "b"]

    def test_keep_list_replaces_existing(self):
        assert merge_pdf_materials(["a", "b"], ["b"], ["c"]) == ["b", "c"]

    def test_keep_list_is_deduplicated_in_order(self):
        assert merge_pdf_materials([], ["a", "b", "a"], ["b", "c"]) == ["a", "b", "c"]

    def test_empty_keep_list_drops_everything_old(self):
        assert merge_pdf_materials(["a"], [], []) == []


class TestBlobName:
    def test_layout(self):
        name = build_blob_name("python/lectures/", "intro.mp4")
        folder, _, rest = name.rpartition("/")
        assert folder == "python/lectures"
        assert rest.endswith("_intro.mp4")

    def test_force_pdf_rewrites_extension(self):
        assert build_blob_name("m", "notes.txt", force_pdf=True).endswith("_notes.pdf")
        assert build_blob_name("m", "Slides.PDF", force_pdf=True).endswith("_Slides.PDF")
        assert build_blob_name("m", "README", force_pdf=True).endswith("_README.pdf")

    def test_path_components_are_stripped(self):
        assert build_blob_name("m", "../../etc/passwd").endswith("_passwd")


class TestIds:
    def test_valid(self):
        value = uuid.uuid4()
        assert to_uuid(str(value)) == value

    def test_malformed(self):
        with pytest.raises(HTTPException) as exc:
            to_uuid("nope", "teacherGuideId")
        assert exc.value.status_code == 400
        assert exc.value.detail == "Invalid teacherGuideId"

    def test_optional(self):
        assert optional_uuid(None, "x") is None
        assert optional_uuid("", "x") is None


def test_page_params():
    params = PageParams(page=3, limit=10)
    assert params.offset == 20
    assert params.pages(0) == 0
    assert params.pages(21) == 3


def test_average_score():
    assert average_score(80, 0) == 0
    assert average_score(80, 4) == 20
    assert average_score(None, 2) == 0
