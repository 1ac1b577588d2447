"""Test fixtures: stub AI clients, registries, sample markup.

All tests should use these fixtures for consistency.
"""

import asyncio

import pytest

from tailwind_mcp.adapters import AngularAdapter, ReactAdapter, SvelteAdapter, VueAdapter
from tailwind_mcp.exceptions import AuthenticationError, UpstreamUnavailableError
from tailwind_mcp.registry import default_adapter_registry, default_build_tool_registry
from tailwind_mcp.tools.handlers import ToolHandlers

ADAPTER_CLASSES = [ReactAdapter, VueAdapter, SvelteAdapter, AngularAdapter]

CARD = '<div class="bg-blue-500 text-white p-4 rounded">Test Component</div>'
CARD_TOKENS = ["bg-blue-500", "text-white", "p-4", "rounded"]

FORM = """
<form class="space-y-4 rounded-lg bg-white p-6 shadow">
  <label for="email" class="block text-sm font-medium text-gray-700">Email</label>
  <input id="email" type="email" placeholder="you@example.com" class="mt-1 w-full rounded-md border-gray-300">
  <!-- actions -->
  <button type="submit" class="w-full rounded-md bg-indigo-600 px-4 py-2 text-white hover:bg-indigo-700">Sign in</button>
</form>
"""


# ── Stub AI clients ───────────────────────────────────────────────────────────

class StubAIClient:
    """Deterministic AITextService; records every prompt."""

    def __init__(self, reply: str = "Consider extracting the button into its own component."):
        self.reply = reply
        self.prompts: list[str] = []

    async def generate_content(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.reply


class FailingAIClient:
    """AITextService that always raises the given exception."""

    def __init__(self, exc: Exception):
        self.exc = exc
        self.calls = 0

    async def generate_content(self, prompt: str) -> str:
        self.calls += 1
        raise self.exc


class SlowAIClient:
    """AITextService that never answers within a test timeout."""

    async def generate_content(self, prompt: str) -> str:
        await asyncio.sleep(10)
        return "too late"


@pytest.fixture
def stub_ai():
    return StubAIClient()


@pytest.fixture(params=["upstream", "auth"])
def failing_ai(request):
    """Both AI failure modes an adapter must recover from."""
    if request.param == "upstream":
        return FailingAIClient(UpstreamUnavailableError("backend down", model="mock/test-model"))
    return FailingAIClient(AuthenticationError("no key", model="mock/test-model"))


@pytest.fixture
def slow_ai():
    return SlowAIClient()


# ── Registries & handlers ─────────────────────────────────────────────────────

@pytest.fixture
def adapter_registry():
    return default_adapter_registry()


@pytest.fixture
def build_tool_registry():
    return default_build_tool_registry()


@pytest.fixture
def handlers(stub_ai):
    return ToolHandlers(
        adapters=default_adapter_registry(ai_client=stub_ai, ai_timeout=1.0),
        build_tools=default_build_tool_registry(),
    )
