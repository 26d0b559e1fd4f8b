"""
Unit tests for image utilities
Run with: pytest tests/test_utils/test_images.py -v
"""
import asyncio
import re
from pathlib import Path

import pytest

from shelfkit.core.exceptions import InvalidInputError
from shelfkit.utils import images
from shelfkit.utils.images import (
    get_file_extension,
    generate_unique_image_name,
    is_valid_image_file,
    is_valid_image_size,
    is_valid_for_ai_processing,
    get_file_size,
    read_all_bytes,
)


class TestFileExtension:
    """Test extension extraction"""

    def test_lowercases_extension(self):
        assert get_file_extension("shelf.JPG") == "jpg"

    def test_uses_last_dot(self):
        assert get_file_extension("backup.tar.gz") == "gz"

    def test_ignores_dots_in_directories(self):
        """Test that only the file name is inspected"""
        assert get_file_extension(Path("photos.v2") / "label.png") == "png"

        with pytest.raises(InvalidInputError):
            get_file_extension("photos.v2/label")

    def test_no_extension_raises(self):
        with pytest.raises(InvalidInputError) as exc_info:
            get_file_extension("README")

        assert "README" in str(exc_info.value)

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            get_file_extension("/tmp/noext")


class TestImageFile:
    """Test image extension validation"""

    @pytest.mark.parametrize("name", ["a.jpg", "a.jpeg", "a.png", "a.gif", "a.bmp", "A.PNG"])
    def test_valid_image_extensions(self, name):
        assert is_valid_image_file(name) is True

    @pytest.mark.parametrize("name", ["a.txt", "a.webp", "a.pdf", "jpg", "archive"])
    def test_invalid_image_extensions(self, name):
        assert is_valid_image_file(name) is False


class TestImageSize:
    """Test size limit checks"""

    def test_default_limit_is_five_megabytes(self):
        assert is_valid_image_size(5 * 1024 * 1024) is True
        assert is_valid_image_size(5 * 1024 * 1024 + 1) is False

    def test_custom_limit(self):
        assert is_valid_image_size(100, max_bytes=100) is True
        assert is_valid_image_size(101, max_bytes=100) is False

    def test_empty_file_passes(self):
        assert is_valid_image_size(0) is True


class TestAIProcessing:
    """Test AI pipeline eligibility"""

    @pytest.mark.parametrize("name", ["a.jpg", "a.jpeg", "a.PNG"])
    def test_accepted_formats(self, name):
        assert is_valid_for_ai_processing(name, 1024) is True

    def test_gif_rejected_regardless_of_size(self):
        assert is_valid_for_ai_processing("a.gif", 0) is False
        assert is_valid_for_ai_processing("a.gif", 1024) is False

    def test_bmp_rejected(self):
        assert is_valid_for_ai_processing("a.bmp", 1024) is False

    def test_too_large_rejected(self):
        assert is_valid_for_ai_processing("a.jpg", 5 * 1024 * 1024 + 1) is False

    def test_custom_limit(self):
        assert is_valid_for_ai_processing("a.png", 2048, max_bytes=1024) is False

    def test_no_extension_rejected(self):
        assert is_valid_for_ai_processing("photo", 10) is False


class TestUniqueImageName:
    """Test generated image names"""

    def test_format(self):
        name = generate_unique_image_name("product")

        assert re.fullmatch(r"product_\d{13}\.jpg", name)

    def test_uses_current_time_in_millis(self, monkeypatch):
        monkeypatch.setattr(images.time, "time_ns", lambda: 1_700_000_000_123_456_789)

        assert generate_unique_image_name("item") == "item_1700000000123.jpg"


class TestFileAccess:
    """Test file size lookup and byte reads"""

    def test_get_file_size(self, tmp_path):
        path = tmp_path / "label.png"
        path.write_bytes(b"\x89PNG" + b"\x00" * 96)

        assert get_file_size(path) == 100

    def test_get_file_size_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            get_file_size(tmp_path / "missing.png")

    def test_read_all_bytes(self, tmp_path):
        path = tmp_path / "label.jpg"
        content = bytes(range(256)) * 4
        path.write_bytes(content)

        assert asyncio.run(read_all_bytes(path)) == content

    def test_read_all_bytes_accepts_str_path(self, tmp_path):
        path = tmp_path / "empty.jpg"
        path.write_bytes(b"")

        assert asyncio.run(read_all_bytes(str(path))) == b""

    def test_read_all_bytes_missing_file(self, tmp_path):
        """Test that I/O errors propagate unchanged"""
        with pytest.raises(FileNotFoundError):
            asyncio.run(read_all_bytes(tmp_path / "missing.jpg"))

    def test_read_all_bytes_directory(self, tmp_path):
        with pytest.raises(OSError):
            asyncio.run(read_all_bytes(tmp_path))
