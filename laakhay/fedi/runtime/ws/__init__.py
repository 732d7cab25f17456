"""WebSocket runtime abstractions."""

from .streaming import EventReader, StreamConfig, parse_event, streaming_url

__all__ = ["EventReader", "StreamConfig", "parse_event", "streaming_url"]
