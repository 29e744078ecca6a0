import base64

import pytest

from streeteats.core.exceptions import AttachmentTooLargeError, ValidationError
from streeteats.services import attachments as codec
from streeteats.services.attachments import UploadStage


class TestEncode:

    def test_encode_keeps_name_and_type(self, tmp_path):
        with UploadStage(tmp_path) as stage:
            staged = stage.add(b"\x89PNG fake image", "receipt.png", "image/png")
            encoded = codec.encode(staged)

        assert encoded.filename == "receipt.png"
        assert encoded.mimetype == "image/png"
        assert base64.b64decode(encoded.content) == b"\x89PNG fake image"

    def test_missing_mimetype_defaults_to_octet_stream(self, tmp_path):
        with UploadStage(tmp_path) as stage:
            staged = stage.add(b"data", "blob", None)
        assert staged.mimetype == "application/octet-stream"

    def test_no_cap_by_default(self, tmp_path):
        payload = b"x" * (3 * 1024 * 1024)
        with UploadStage(tmp_path) as stage:
            encoded = codec.encode(stage.add(payload, "big.bin", "application/octet-stream"))
        assert len(codec.decode(encoded.content)) == len(payload)

    def test_configured_cap_is_enforced(self, tmp_path):
        with UploadStage(tmp_path) as stage:
            staged = stage.add(b"x" * 2048, "big.bin", "application/octet-stream")
            with pytest.raises(AttachmentTooLargeError):
                codec.encode(staged, max_bytes=1024)


class TestDecode:

    def test_invalid_base64_raises(self):
        with pytest.raises(ValidationError):
            codec.decode("not base64 !!")


class TestUploadStage:

    def test_files_removed_on_exit(self, tmp_path):
        with UploadStage(tmp_path) as stage:
            a = stage.add(b"one", "a.txt", "text/plain")
            b = stage.add(b"two", "b.txt", "text/plain")
            assert a.path.exists() and b.path.exists()

        assert not a.path.exists()
        assert not b.path.exists()
        assert list(tmp_path.iterdir()) == []

    def test_files_removed_when_body_raises(self, tmp_path):
        with pytest.raises(RuntimeError):
            with UploadStage(tmp_path) as stage:
                staged = stage.add(b"one", "a.txt", "text/plain")
                raise RuntimeError("ledger write failed")

        assert not staged.path.exists()

    def test_staged_name_is_unique_but_filename_is_original(self, tmp_path):
        with UploadStage(tmp_path) as stage:
            first = stage.add(b"1", "photo.jpg", "image/jpeg")
            second = stage.add(b"2", "photo.jpg", "image/jpeg")
            assert first.path != second.path
            assert first.path.name.endswith("-photo.jpg")
            assert first.filename == second.filename == "photo.jpg"

    def test_creates_missing_upload_dir(self, tmp_path):
        target = tmp_path / "nested" / "uploads"
        with UploadStage(target) as stage:
            stage.add(b"1", "a.txt", "text/plain")
            assert target.is_dir()

    def test_cleanup_tolerates_already_removed_file(self, tmp_path):
        with UploadStage(tmp_path) as stage:
            staged = stage.add(b"1", "a.txt", "text/plain")
            staged.path.unlink()
        codec.cleanup(staged)
