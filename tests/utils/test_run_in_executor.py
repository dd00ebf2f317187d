import contextvars
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest
from array_joiner.utils.run_in_executor import run_in_executor

request_id: contextvars.ContextVar[str] = contextvars.ContextVar("request_id")


def describe(prefix: str, *, suffix: str = "") -> str:
    return f"{prefix}{request_id.get('none')}{suffix}"


async def test_passes_arguments():
    assert await run_in_executor(None, describe, "id=", suffix="!") == "id=none!"


async def test_propagates_context():
    request_id.set("r1")
    assert await run_in_executor(None, describe, "") == "r1"


async def test_uses_executor():
    with ThreadPoolExecutor(thread_name_prefix="joiner") as executor:
        name = await run_in_executor(executor, lambda: threading.current_thread().name)
    assert name.startswith("joiner")


async def test_propagates_errors():
    def fail() -> None:
        raise KeyError("missing")

    with pytest.raises(KeyError, match="missing"):
        await run_in_executor(None, fail)
