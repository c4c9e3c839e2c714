"""Call sync or async handlers uniformly.

Route handlers can be ``def`` or ``async def``. Anything that calls a
user-provided handler goes through ``invoke`` so the check lives in
one place::

    result = await invoke(handler, *args, **kwargs)
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *handler* and await the result if it is awaitable."""
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
