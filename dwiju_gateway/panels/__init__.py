"""Panel controllers: per-feature UI state bound to the gateway."""

from dwiju_gateway.panels.base import Panel, VoiceInputMixin
from dwiju_gateway.panels.brain import BrainPanel
from dwiju_gateway.panels.client import GatewayCallError, GatewayClient
from dwiju_gateway.panels.devices import AudioPlayer, Camera, Recognizer, Synthesizer
from dwiju_gateway.panels.education import EducationPanel
from dwiju_gateway.panels.live import ChatTurn, LiveChatPanel
from dwiju_gateway.panels.music import MusicPanel, Song
from dwiju_gateway.panels.notifier import LoggingNotifier, Notifier
from dwiju_gateway.panels.search import SearchPanel, VideoSearchPanel
from dwiju_gateway.panels.vision import VisionPanel
from dwiju_gateway.panels.voice import AudioItem, VoicePanel

__all__ = [
    "AudioItem",
    "AudioPlayer",
    "BrainPanel",
    "Camera",
    "ChatTurn",
    "EducationPanel",
    "GatewayCallError",
    "GatewayClient",
    "LiveChatPanel",
    "LoggingNotifier",
    "MusicPanel",
    "Notifier",
    "Panel",
    "Recognizer",
    "SearchPanel",
    "Song",
    "Synthesizer",
    "VideoSearchPanel",
    "VisionPanel",
    "VoiceInputMixin",
    "VoicePanel",
]
