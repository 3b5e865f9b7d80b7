"""Core framework components for Endless Runner."""

from .state import GameState, StateMachine
from .events import EventBus, Event, EventType
from .driver import TickDriver

__all__ = ["GameState", "StateMachine", "EventBus", "Event", "EventType", "TickDriver"]
