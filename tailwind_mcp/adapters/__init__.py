"""Framework adapters: styled markup → React / Vue / Svelte / Angular source."""

from tailwind_mcp.adapters.base import FrameworkAdapter
from tailwind_mcp.adapters.react import ReactAdapter
from tailwind_mcp.adapters.vue import VueAdapter
from tailwind_mcp.adapters.svelte import SvelteAdapter
from tailwind_mcp.adapters.angular import AngularAdapter

__all__ = ["FrameworkAdapter", "ReactAdapter", "VueAdapter", "SvelteAdapter", "AngularAdapter"]
