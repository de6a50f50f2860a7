"""
Protocols for the collaborators the core consumes
"""

from brick_breaker.core.interfaces.input import InputSource
from brick_breaker.core.interfaces.input import intent_from_input
from brick_breaker.core.interfaces.renderer import RendererProtocol

__all__ = ["InputSource", "RendererProtocol", "intent_from_input"]
