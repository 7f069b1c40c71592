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


"""Narrates the walkthrough script with Gemini text-to-speech."""

import io
import wave

from google.genai import types

import models.gemini as gemini
from common.analytics import get_logger, track_model_call_async
from common.error_handling import GenerationError
from config.default import Default
from models.prompts import NARRATION_PROMPT

logger = get_logger(__name__)

# Gemini TTS returns raw 16-bit mono PCM at 24kHz.
PCM_SAMPLE_RATE = 24000
PCM_SAMPLE_WIDTH = 2
PCM_CHANNELS = 1


def pcm_to_wav(pcm_data: bytes) -> bytes:
    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as wf:
        wf.setnchannels(PCM_CHANNELS)
        wf.setsampwidth(PCM_SAMPLE_WIDTH)
        wf.setframerate(PCM_SAMPLE_RATE)
        wf.writeframes(pcm_data)
    return buffer.getvalue()


async def synthesize_speech(script: str, voice_name: str | None = None) -> bytes:
    """Returns the script read aloud as WAV bytes."""
    config = Default()
    model_name = config.TTS_MODEL_ID
    voice = voice_name or config.TTS_VOICE
    async with track_model_call_async(model_name, voice=voice, text_length=len(script)):
        try:
            response = await gemini.get_client().aio.models.generate_content(
                model=model_name,
                contents=NARRATION_PROMPT.format(script=script),
                config=types.GenerateContentConfig(
                    response_modalities=["AUDIO"],
                    speech_config=types.SpeechConfig(
                        voice_config=types.VoiceConfig(
                            prebuilt_voice_config=types.PrebuiltVoiceConfig(
                                voice_name=voice
                            )
                        )
                    ),
                ),
            )
        except Exception as e:
            raise GenerationError(f"Speech synthesis failed: {e}") from e

        try:
            pcm_data = response.candidates[0].content.parts[0].inline_data.data
        except (AttributeError, IndexError, TypeError):
            pcm_data = None
        if not pcm_data:
            raise GenerationError("Speech synthesis returned no audio.")
    logger.info(f"Synthesized {len(pcm_data)} bytes of narration audio.")
    return pcm_to_wav(pcm_data)
