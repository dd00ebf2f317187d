import asyncio
from collections.abc import Callable
from concurrent.futures import Executor
from contextvars import copy_context
from functools import partial
from typing import ParamSpec, TypeVar

P = ParamSpec("P")
T = TypeVar("T")


async def run_in_executor(
    executor: Executor | None,
    func: Callable[P, T],
    *args: P.args,
    **kwargs: P.kwargs,
) -> T:
    """
    Run a blocking function in an executor without blocking the event loop.

    The function runs with a copy of the caller's context, so context
    variables (such as those used for logging) are visible to it.

    Parameters
    ----------
    executor :
        The executor to run in. If `None`, the loop's default executor is used.
    func :
        The function.
    *args :
        The positional arguments to the function.
    kwargs :
        The keyword arguments to the function.

    Returns
    -------
    :
        The output of the function.
    """
    call = partial(copy_context().run, partial(func, *args, **kwargs))
    return await asyncio.get_running_loop().run_in_executor(executor, call)
