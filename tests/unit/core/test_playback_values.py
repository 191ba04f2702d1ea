"""
Tests pour les objets valeur de lecture.
"""

import dataclasses

import pytest

from chakram.core.exceptions import ChakramError, NotAuthorizedError, ResumeInfoError
from chakram.core.value_objects import ManifestInfo, PlaybackInfo, ResourceType, ResumeInfo


class TestPlaybackInfo:
    """Tests pour PlaybackInfo et ManifestInfo."""

    def test_no_manifest_by_default(self):
        assert PlaybackInfo(license_url="https://license").manifests == ()

    def test_manifest_is_immutable(self):
        manifest = ManifestInfo(cdn="akamai", url="https://akamai/manifest.mpd")
        with pytest.raises(dataclasses.FrozenInstanceError):
            manifest.cdn = "level3"


class TestResumeInfo:

    def test_starts_at_zero_by_default(self):
        assert ResumeInfo(id="B00EP102").start_time_millis == 0


def test_resource_type_values():
    assert ResourceType.WIDEVINE2_LICENSE.value == "Widevine2License"
    assert ResourceType.PLAYBACK_URLS.value == "AudioVideoUrls,SubtitleUrls"


class TestExceptions:
    """Messages par defaut des exceptions du domaine."""

    def test_not_authorized_default_message(self):
        error = NotAuthorizedError()
        assert isinstance(error, ChakramError)
        assert str(error) == "Not authorized"

    def test_resume_default_message(self):
        assert "resume" in str(ResumeInfoError())
