"""Session runtime: the shared input/paint loop."""

from .loop import END_OF_INPUT, EndOfInput, KeyController, run_session

__all__ = ["END_OF_INPUT", "EndOfInput", "KeyController", "run_session"]
