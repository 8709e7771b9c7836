from __future__ import annotations


class LLMRequestError(RuntimeError):
    """The generative-text service did not return a usable candidate."""


class PlanParseError(ValueError):
    """A model response could not be read as a move plan."""


class InvalidDestinationError(ValueError):
    """A category label that cannot be used as a single subfolder name."""
