"""Menu model, range parsing, and the selection state machine."""

from .options import (
    Option,
    Quit,
    Selected,
    coerce_option,
    coerce_options,
    retry_cancel_options,
    with_back,
    with_cancel,
    yes_no_options,
)
from .ranges import parse_range_expression
from .state import DEFAULT_VIEWPORT_HEIGHT, GroupState, Mode, SelectionState

__all__ = [
    "Option",
    "Selected",
    "Quit",
    "coerce_option",
    "coerce_options",
    "with_cancel",
    "with_back",
    "yes_no_options",
    "retry_cancel_options",
    "parse_range_expression",
    "DEFAULT_VIEWPORT_HEIGHT",
    "GroupState",
    "Mode",
    "SelectionState",
]
