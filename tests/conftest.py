import pytest

pytest.register_assert_rewrite("array_joiner.testing")

from tests.testing.graphs import (  # noqa: E402
    cycle,
    isolated,
    path,
    star,
    two_components,
)
from tests.testing.invoker import sync_or_async  # noqa: E402

# Mark these imports as used so they don't get removed.
# They need to be imported in `conftest.py` so the fixtures are registered.
_ = (
    cycle,
    isolated,
    path,
    star,
    two_components,
    sync_or_async,
)
