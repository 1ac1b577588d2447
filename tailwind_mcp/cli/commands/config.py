"""tailwind-mcp config: Show resolved configuration."""

from pydantic import AliasChoices
from rich.console import Console
from rich.table import Table

console = Console()

SECTIONS = {
    "App": ("debug", "log_level"),
    "LLM": ("default_llm_model", "llm_api_key", "llm_max_tokens", "llm_temperature", "ollama_base_url"),
    "Enrichment": ("ai_timeout_seconds",),
}
SECRETS = frozenset({"llm_api_key"})


def env_names(settings_cls, field: str) -> str:
    """Environment variables that set a field, aliases first."""
    alias = settings_cls.model_fields[field].validation_alias
    if isinstance(alias, AliasChoices):
        return " / ".join(str(choice) for choice in alias.choices)
    return f"{settings_cls.model_config['env_prefix']}{field.upper()}"


def display_value(field: str, value) -> str:
    if value is None:
        return "[dim](not set)[/dim]"
    if field in SECRETS:
        return "set (****)"
    return str(value)


def config_show():
    """Show the resolved tailwind-mcp configuration.

    The API key is never printed, only whether it is set.

    Example:
        tailwind-mcp config
    """
    from tailwind_mcp.config import TailwindMCPConfig
    cfg = TailwindMCPConfig()

    table = Table(title="[bold]tailwind-mcp Configuration[/bold]", header_style="bold dim")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_column("Env Var", style="dim")

    for section, fields in SECTIONS.items():
        table.add_section()
        table.add_row(f"[bold]{section}[/bold]", "", "")
        for field in fields:
            table.add_row(f"  {field}", display_value(field, getattr(cfg, field)), env_names(TailwindMCPConfig, field))

    console.print(table)
    console.print(f"[dim]prefix: {TailwindMCPConfig.model_config['env_prefix']}[/dim]")
