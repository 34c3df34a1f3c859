from collections.abc import Callable
from unittest.mock import MagicMock, patch

import pymupdf
import pytest

from docmeta.pdf.base import BasePdfSlicer
from docmeta.pdf.exceptions import SliceError
from docmeta.pdf.pymupdf_adapter import PyMuPdfAdapter
from docmeta.pdf.pypdf_adapter import PyPdfAdapter
from docmeta.pdf.slicer import DEFAULT_MAX_PAGES, PageSlicer

ADAPTERS = [PyMuPdfAdapter, PyPdfAdapter]


def _page_texts(pdf_bytes: bytes) -> list[str]:
    with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:
        return [page.get_text().strip() for page in doc]


@pytest.mark.parametrize("adapter_cls", ADAPTERS)
class TestAdapters:
    def test_counts_pages(
        self,
        adapter_cls: type[BasePdfSlicer],
        make_pdf_bytes: Callable[[int], bytes],
    ) -> None:
        assert adapter_cls().page_count(make_pdf_bytes(4)) == 4

    def test_first_pages_keeps_order(
        self,
        adapter_cls: type[BasePdfSlicer],
        make_pdf_bytes: Callable[[int], bytes],
    ) -> None:
        result = adapter_cls().first_pages(make_pdf_bytes(5), 2)
        assert _page_texts(result) == ["Page 1 content", "Page 2 content"]

    def test_unreadable_document_raises_slice_error(
        self, adapter_cls: type[BasePdfSlicer]
    ) -> None:
        with pytest.raises(SliceError):
            adapter_cls().first_pages(b"not a pdf at all", 1)


@pytest.mark.parametrize("adapter_cls", ADAPTERS)
class TestWithinLimit:
    def test_returns_input_unchanged_below_limit(
        self,
        adapter_cls: type[BasePdfSlicer],
        make_pdf_bytes: Callable[[int], bytes],
    ) -> None:
        pdf = make_pdf_bytes(3)
        assert PageSlicer(adapter_cls(), max_pages=10).slice(pdf) is pdf

    def test_returns_input_unchanged_at_limit(
        self,
        adapter_cls: type[BasePdfSlicer],
        make_pdf_bytes: Callable[[int], bytes],
    ) -> None:
        pdf = make_pdf_bytes(10)
        assert PageSlicer(adapter_cls(), max_pages=10).slice(pdf) is pdf


@pytest.mark.parametrize("adapter_cls", ADAPTERS)
class TestOverLimit:
    def test_keeps_exactly_first_pages_in_order(
        self,
        adapter_cls: type[BasePdfSlicer],
        long_pdf_bytes: bytes,
    ) -> None:
        result = PageSlicer(adapter_cls(), max_pages=10).slice(long_pdf_bytes)
        assert _page_texts(result) == [f"Page {n} content" for n in range(1, 11)]

    def test_per_call_limit_overrides_default(
        self,
        adapter_cls: type[BasePdfSlicer],
        long_pdf_bytes: bytes,
    ) -> None:
        result = PageSlicer(adapter_cls(), max_pages=10).slice(long_pdf_bytes, max_pages=3)
        assert _page_texts(result) == ["Page 1 content", "Page 2 content", "Page 3 content"]


class TestFailSoft:
    def test_returns_original_when_page_count_fails(self) -> None:
        adapter = MagicMock(spec=BasePdfSlicer)
        adapter.page_count.side_effect = SliceError("corrupt")
        data = b"%PDF-1.7 broken"
        assert PageSlicer(adapter).slice(data) is data
        adapter.first_pages.assert_not_called()

    def test_returns_original_when_copy_fails(self) -> None:
        adapter = MagicMock(spec=BasePdfSlicer)
        adapter.page_count.return_value = 50
        adapter.first_pages.side_effect = SliceError("write failed")
        data = b"%PDF-1.7 large"
        assert PageSlicer(adapter).slice(data) is data

    def test_logs_warning_on_fallback(self) -> None:
        adapter = MagicMock(spec=BasePdfSlicer)
        adapter.page_count.side_effect = SliceError("corrupt")
        with patch("docmeta.pdf.slicer.Log") as mock_log:
            PageSlicer(adapter).slice(b"%PDF-1.7 broken")
        assert "returning original" in mock_log.warning.call_args.args[0]

    @pytest.mark.parametrize("adapter_cls", ADAPTERS)
    def test_corrupt_pdf_with_real_adapter_returns_original(
        self, adapter_cls: type[BasePdfSlicer]
    ) -> None:
        data = b"%PDF-1.4\nthis is not really a pdf"
        assert PageSlicer(adapter_cls()).slice(data) == data


class TestLimits:
    def test_default_limit_is_ten(self) -> None:
        assert DEFAULT_MAX_PAGES == 10
        assert PageSlicer(MagicMock(spec=BasePdfSlicer)).max_pages == 10

    def test_rejects_non_positive_limit(self) -> None:
        with pytest.raises(ValueError, match="max_pages"):
            PageSlicer(MagicMock(spec=BasePdfSlicer), max_pages=0)

    def test_rejects_non_positive_per_call_limit(self) -> None:
        with pytest.raises(ValueError, match="max_pages"):
            PageSlicer(MagicMock(spec=BasePdfSlicer)).slice(b"%PDF", max_pages=-1)
