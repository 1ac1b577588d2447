from tailwind_mcp.llm.client import AITextService, LLMClient, is_local_model

__all__ = ["AITextService", "LLMClient", "is_local_model"]
