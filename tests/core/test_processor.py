"""Tests for the per-file processing pipeline."""

import hashlib
from unittest.mock import patch

import pytest

from desktop_entry_filter.core.loader import parse_document
from desktop_entry_filter.core.processor import (
    DesktopFileProcessor,
    FileResult,
    process_file,
    transform_document,
)
from desktop_entry_filter.exceptions import (
    FileAccessError,
    MalformedMediaTypeError,
    MissingAttributeError,
    ParseError,
    StructureError,
)

EXPECTED_SAMPLE_OUTPUT = (
    "[Desktop Entry]\n"
    "Version=1.0\n"
    "Type=Application\n"
    "Name=Text Editor\n"
    "GenericName=Editor\n"
    "Comment=Edit text files\n"
    "TryExec=editor\n"
    "Exec=editor %U\n"
    "Icon=editor\n"
    "Categories=Utility;TextEditor;\n"
    "X-GNOME-UsesNotifications=true\n"
    "MimeType=image/png\n"
)


def _digest(path) -> str:
    return hashlib.sha256(path.read_bytes()).hexdigest()


class TestTransformDocument:
    """Test transform_document."""

    def test_sample(self, sample_content):
        output = transform_document(parse_document(sample_content))
        assert output.decode() == EXPECTED_SAMPLE_OUTPUT

    def test_two_sections(self):
        document = parse_document(
            "[Desktop Entry]\nName=A\nMimeType=image/png;\n"
            "[Desktop Action foo]\nName=Foo\n"
        )
        with pytest.raises(StructureError):
            transform_document(document)

    def test_leading_byte_order_mark_is_ignored(self, sample_content):
        output = transform_document(parse_document("\ufeff" + sample_content))
        assert output.decode() == EXPECTED_SAMPLE_OUTPUT


class TestProcessFile:
    """Test process_file."""

    def test_apply_rewrites_file(self, write_desktop_file, sample_content):
        path = write_desktop_file(sample_content)
        output = process_file(path)
        assert path.read_text() == EXPECTED_SAMPLE_OUTPUT
        assert output == path.read_bytes()

    def test_apply_is_idempotent(self, write_desktop_file, sample_content):
        path = write_desktop_file(sample_content)
        first = process_file(path)
        second = process_file(path)
        assert first == second
        assert path.read_bytes() == second

    def test_dry_run_does_not_touch_file(
        self, write_desktop_file, sample_content
    ):
        path = write_desktop_file(sample_content)
        before = _digest(path)
        mtime = path.stat().st_mtime_ns
        output = process_file(path, dry_run=True)
        assert output.decode() == EXPECTED_SAMPLE_OUTPUT
        assert _digest(path) == before
        assert path.stat().st_mtime_ns == mtime

    @pytest.mark.parametrize(
        ("content", "error_class"),
        [
            ("[Other]\nName=A\nMimeType=image/png;\n", StructureError),
            (
                "[Desktop Entry]\nName=A\nMimeType=image/png;\n"
                "[Desktop Action foo]\nName=Foo\n",
                StructureError,
            ),
            ("[Desktop Entry]\nName=A\n", MissingAttributeError),
            (
                "[Desktop Entry]\nName=A\nMimeType=notamimetype;\n",
                MalformedMediaTypeError,
            ),
            ("Name=A\n", ParseError),
            (
                "[Desktop Entry]\nName=Foo\n  Exec=evil\n"
                "MimeType=image/png;\n",
                ParseError,
            ),
        ],
        ids=[
            "no-entry",
            "two-sections",
            "no-mime",
            "bad-mime",
            "no-header",
            "indented-line",
        ],
    )
    def test_failures_leave_file_untouched(
        self, write_desktop_file, content, error_class
    ):
        path = write_desktop_file(content, name="broken.desktop")
        before = _digest(path)
        with pytest.raises(error_class) as exc_info:
            process_file(path)
        assert exc_info.value.target == str(path)
        assert str(path) in str(exc_info.value)
        assert _digest(path) == before
        assert list(path.parent.iterdir()) == [path]

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.desktop"
        with pytest.raises(FileAccessError) as exc_info:
            process_file(path)
        assert exc_info.value.target == str(path)

    def test_write_failure_is_file_access_error(
        self, write_desktop_file, sample_content
    ):
        path = write_desktop_file(sample_content)
        with (
            patch(
                "desktop_entry_filter.infrastructure.file_ops.os.fsync",
                side_effect=OSError(5, "Input/output error"),
            ),
            pytest.raises(FileAccessError, match="Input/output error"),
        ):
            process_file(path)
        assert "NoDisplay=false" in path.read_text()
        assert list(path.parent.iterdir()) == [path]


class TestDesktopFileProcessor:
    """Test batch processing."""

    def test_continues_after_failure(self, write_desktop_file, sample_content):
        good_a = write_desktop_file(sample_content, name="a.desktop")
        bad = write_desktop_file("[Other]\nName=B\n", name="b.desktop")
        good_c = write_desktop_file(sample_content, name="c.desktop")

        results = DesktopFileProcessor().process_all([good_a, bad, good_c])

        assert [result.path for result in results] == [good_a, bad, good_c]
        assert [result.ok for result in results] == [True, False, True]
        assert isinstance(results[1].error, StructureError)
        assert results[1].content is None
        assert good_a.read_text() == EXPECTED_SAMPLE_OUTPUT
        assert good_c.read_text() == EXPECTED_SAMPLE_OUTPUT

    def test_changed_flag(self, write_desktop_file, sample_content):
        path = write_desktop_file(sample_content)
        processor = DesktopFileProcessor()
        assert processor.process(path).changed is True
        assert processor.process(path).changed is False

    def test_dry_run_batch_never_writes(
        self, write_desktop_file, sample_content
    ):
        good = write_desktop_file(sample_content, name="good.desktop")
        bad = write_desktop_file(
            "[Desktop Entry]\nMimeType=bad;\n", name="bad.desktop"
        )
        before = {good: _digest(good), bad: _digest(bad)}

        results = DesktopFileProcessor(dry_run=True).process_all([good, bad])

        assert results[0].ok
        assert results[0].content.decode() == EXPECTED_SAMPLE_OUTPUT
        assert not results[1].ok
        assert {p: _digest(p) for p in before} == before

    def test_result_ok_property(self, tmp_path):
        assert FileResult(path=tmp_path).ok
        assert not FileResult(
            path=tmp_path, error=ParseError("bad")
        ).ok
