import pytest

from transcription_gateway.config import DEFAULT_ALLOWED_AUDIO_TYPES
from transcription_gateway.domain import AudioUpload, UploadValidator
from transcription_gateway.exceptions import InvalidAudioTypeError, MissingAudioFileError


def _upload(content_type):
    return AudioUpload(filename="clip", content_type=content_type, data=b"\x00\x01")


@pytest.mark.parametrize("content_type", DEFAULT_ALLOWED_AUDIO_TYPES)
def test_accepts_every_default_type(content_type: str) -> None:
    validator = UploadValidator(DEFAULT_ALLOWED_AUDIO_TYPES)
    upload = _upload(content_type)

    assert validator.validate(upload) is upload


@pytest.mark.parametrize(
    "content_type", ["image/png", "video/mp4", "text/plain", "application/octet-stream"]
)
def test_rejects_types_outside_allow_list(content_type: str) -> None:
    validator = UploadValidator(DEFAULT_ALLOWED_AUDIO_TYPES)

    with pytest.raises(InvalidAudioTypeError) as exc_info:
        validator.validate(_upload(content_type))

    assert exc_info.value.content_type == content_type
    assert content_type in str(exc_info.value)


def test_missing_upload_is_rejected() -> None:
    validator = UploadValidator(DEFAULT_ALLOWED_AUDIO_TYPES)

    with pytest.raises(MissingAudioFileError):
        validator.validate(None)


def test_missing_content_type_is_rejected() -> None:
    validator = UploadValidator(DEFAULT_ALLOWED_AUDIO_TYPES)

    with pytest.raises(InvalidAudioTypeError):
        validator.validate(_upload(None))


def test_matching_ignores_case_and_parameter_spacing() -> None:
    validator = UploadValidator(["audio/webm;codecs=opus"])

    assert validator.is_allowed("audio/webm; codecs=opus")
    assert validator.is_allowed("AUDIO/WEBM;CODECS=OPUS")
    assert not validator.is_allowed("audio/webm")


def test_allow_list_is_configurable() -> None:
    validator = UploadValidator(["audio/flac"])

    assert validator.allowed_types == ("audio/flac",)
    assert validator.is_allowed("audio/flac")
    assert not validator.is_allowed("audio/wav")
