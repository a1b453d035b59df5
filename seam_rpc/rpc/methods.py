"""
Built-in RPC methods

Each handler validates the shape of its own params and raises HandlerError
on mismatch instead of trusting the caller.
"""

from enum import Enum
from numbers import Number
from typing import Any

from seam_rpc.rpc.errors import HandlerError
from seam_rpc.rpc.registry import MethodRegistry


class BuiltinMethod(str, Enum):
    """Closed set of methods served by default"""
    ECHO = "echo"
    ADD = "add"


def echo(params: Any) -> str:
    """Return params["text"] unchanged

    Args:
        params: Object of the form {"text": string}
    """
    if not isinstance(params, dict) or "text" not in params:
        raise HandlerError('echo expects params of the form {"text": string}')
    text = params["text"]
    if not isinstance(text, str):
        raise HandlerError(f"echo expects text to be a string, got {type(text).__name__}")
    return text


def add(params: Any):
    """Return the sum of a two-element numeric array"""
    if not isinstance(params, (list, tuple)) or len(params) != 2:
        raise HandlerError("add expects params to be an array of two numbers")
    for value in params:
        if isinstance(value, bool) or not isinstance(value, Number):
            raise HandlerError(f"add expects numbers, got {value!r}")
    return params[0] + params[1]


def default_registry() -> MethodRegistry:
    return MethodRegistry({
        BuiltinMethod.ECHO: echo,
        BuiltinMethod.ADD: add,
    })
