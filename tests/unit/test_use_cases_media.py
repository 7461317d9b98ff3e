"""
Unit tests for media use cases (Register, GetStatus).
"""
from datetime import datetime, timezone

import pytest
from dashcam_backend.application.dto.media_dto import MediaRegisterRequest
from dashcam_backend.application.use_cases.media.get_media_status import GetMediaStatusUseCase
from dashcam_backend.application.use_cases.media.register_media import RegisterMediaUseCase, public_url
from dashcam_backend.domain.exceptions import NotFoundError, ValidationError


def valid_request(**overrides) -> MediaRegisterRequest:
    fields = {
        "file_name": "clip.mp4",
        "storage_url": "media/cam-1/clip.mp4",
        "file_size": 5 * 1024 * 1024,
        "mime_type": "video/mp4",
    }
    fields.update(overrides)
    return MediaRegisterRequest(**fields)


@pytest.fixture
def register_use_case(media_file_repository):
    return RegisterMediaUseCase(media_file_repository, server_base_url="http://testserver/")


class TestPublicUrl:

    def test_relative_path_joined_to_base(self):
        assert public_url("/media/a.jpg", "http://host/") == "http://host/media/a.jpg"

    def test_absolute_url_kept(self):
        assert public_url("https://blob/a.jpg", "http://host") == "https://blob/a.jpg"

    def test_blob_store_url_kept(self):
        assert public_url("s3://bucket/clip.mp4", "http://testserver") == "s3://bucket/clip.mp4"


class TestRegisterMediaUseCase:

    @pytest.mark.asyncio
    async def test_register_video(self, register_use_case, media_file_repository):
        response = await register_use_case.execute("cam-1", valid_request())

        assert response.upload_url == "http://testserver/media/cam-1/clip.mp4"
        assert response.processing_status == "queued"
        stored = await media_file_repository.find_by_id(response.file_id)
        assert stored.file_type == "video"
        assert stored.media_type == "continuous"
        assert stored.device_id == "cam-1"

    @pytest.mark.asyncio
    async def test_image_type_derived_from_mime(self, register_use_case, media_file_repository):
        response = await register_use_case.execute("cam-1", valid_request(mime_type="image/jpeg"))
        assert (await media_file_repository.find_by_id(response.file_id)).file_type == "image"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [
            {"file_name": None},
            {"storage_url": ""},
            {"file_size": None},
            {"file_size": -1},
            {"file_size": 200 * 1024 * 1024},
            {"mime_type": "application/pdf"},
            {"mime_type": None},
            {"file_type": "audio"},
        ],
    )
    async def test_rejected_uploads(self, register_use_case, overrides):
        with pytest.raises(ValidationError):
            await register_use_case.execute("cam-1", valid_request(**overrides))

    @pytest.mark.asyncio
    async def test_naive_timestamp_stored_as_utc(self, register_use_case, media_file_repository):
        response = await register_use_case.execute(
            "cam-1", valid_request(timestamp=datetime(2025, 6, 1, 11, 59, 0))
        )
        stored = await media_file_repository.find_by_id(response.file_id)
        assert stored.timestamp == datetime(2025, 6, 1, 11, 59, 0, tzinfo=timezone.utc)

    @pytest.mark.asyncio
    async def test_blob_store_url_returned_unchanged(self, register_use_case, media_file_repository):
        response = await register_use_case.execute(
            "cam-1", valid_request(storage_url="s3://bucket/clip.mp4")
        )
        assert response.upload_url == "s3://bucket/clip.mp4"
        status = await GetMediaStatusUseCase(media_file_repository, "http://testserver").execute(response.file_id)
        assert status.download_url == "s3://bucket/clip.mp4"


class TestGetMediaStatusUseCase:

    @pytest.mark.asyncio
    async def test_status_of_registered_file(self, register_use_case, media_file_repository):
        registered = await register_use_case.execute("cam-1", valid_request())
        status = await GetMediaStatusUseCase(media_file_repository, "http://testserver").execute(registered.file_id)

        assert status.file_id == registered.file_id
        assert status.upload_status == "completed"
        assert status.processing_status == "queued"
        assert status.status == "received"

    @pytest.mark.asyncio
    async def test_unknown_file(self, media_file_repository):
        with pytest.raises(NotFoundError):
            await GetMediaStatusUseCase(media_file_repository, "http://testserver").execute("missing")
