# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


import asyncio
import os
import sys
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
sys.path.insert(0, os.path.dirname(__file__))

import io
import wave

from common.error_handling import GenerationError
from models.gemini_tts import PCM_SAMPLE_RATE, pcm_to_wav, synthesize_speech

PCM_SAMPLES = b"\x01\x00\xff\xff" * 240


def _audio_response(data):
    part = SimpleNamespace(inline_data=SimpleNamespace(data=data, mime_type="audio/L16"))
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=[part]))])


def _client_returning(response):
    client = SimpleNamespace(
        aio=SimpleNamespace(
            models=SimpleNamespace(generate_content=AsyncMock(return_value=response))
        )
    )
    return client


def test_pcm_to_wav_writes_a_playable_header():
    wav_bytes = pcm_to_wav(PCM_SAMPLES)

    assert wav_bytes[:4] == b"RIFF"
    assert wav_bytes[8:12] == b"WAVE"
    with wave.open(io.BytesIO(wav_bytes), "rb") as wf:
        assert wf.getframerate() == PCM_SAMPLE_RATE
        assert wf.getnchannels() == 1
        assert wf.getsampwidth() == 2
        assert wf.readframes(wf.getnframes()) == PCM_SAMPLES


def test_synthesize_speech_returns_wav():
    client = _client_returning(_audio_response(PCM_SAMPLES))

    with patch("models.gemini.get_client", return_value=client):
        wav_bytes = asyncio.run(synthesize_speech("Welcome home.", voice_name="Puck"))

    assert wav_bytes == pcm_to_wav(PCM_SAMPLES)
    kwargs = client.aio.models.generate_content.call_args.kwargs
    assert "Welcome home." in kwargs["contents"]
    assert kwargs["config"].response_modalities == ["AUDIO"]
    voice = kwargs["config"].speech_config.voice_config.prebuilt_voice_config
    assert voice.voice_name == "Puck"


@pytest.mark.parametrize(
    "response",
    [
        _audio_response(b""),
        SimpleNamespace(candidates=[]),
        SimpleNamespace(candidates=None),
    ],
)
def test_synthesize_speech_without_audio_fails(response):
    with patch("models.gemini.get_client", return_value=_client_returning(response)):
        with pytest.raises(GenerationError, match="no audio"):
            asyncio.run(synthesize_speech("Welcome home."))


def test_synthesize_speech_wraps_provider_errors():
    client = _client_returning(None)
    client.aio.models.generate_content.side_effect = RuntimeError("quota exceeded")

    with patch("models.gemini.get_client", return_value=client):
        with pytest.raises(GenerationError, match="Speech synthesis failed: quota exceeded"):
            asyncio.run(synthesize_speech("Welcome home."))
