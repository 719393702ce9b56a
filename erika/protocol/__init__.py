"""Protocol layer for serial communication with Erika typewriters."""

from .control_codes import ControlCode, PARAMETERIZED_CODES, lookup, takes_parameter
from .interface import TypewriterInterface

__all__ = [
    "ControlCode",
    "PARAMETERIZED_CODES",
    "lookup",
    "takes_parameter",
    "TypewriterInterface",
]
