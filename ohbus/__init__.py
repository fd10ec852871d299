"""openHAB event models, event-stream parsing and a publish/subscribe event bus."""

__version__ = "0.1.0"

__all__ = ["api", "bus", "event_type", "events", "items", "parser", "things", "topic"]