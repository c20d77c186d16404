from __future__ import annotations

from collections.abc import Iterator

import pytest

from action_template_py.adapters.commands.default import reset_process_writer


@pytest.fixture(autouse=True)
def fresh_process_writer() -> Iterator[None]:
    """Give every test its own process exit status."""

    reset_process_writer()
    yield
    reset_process_writer()
