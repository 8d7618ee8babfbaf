"""CLI commands for global configuration management."""

import typer

from gemmit import global_config
from gemmit.config import API_KEY_ENV_VARS, AVAILABLE_MODELS

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global gemmit configuration in ~/.gemmit/",
    add_completion=False,
)


def _mask(api_key: str) -> str:
    return api_key[:8] + "..." + api_key[-4:] if len(api_key) > 12 else "***"


@config_app.command("init")
def config_init() -> None:
    """Create ~/.gemmit/config.yaml with default values."""
    try:
        if global_config.is_configured():
            typer.echo(f"Configuration already exists at {global_config.get_config_file_path()}")
            return
        global_config.initialize_default_config()
        typer.echo(f"✓ Created {global_config.get_config_file_path()}")
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@config_app.command("show")
def config_show() -> None:
    """Show current global configuration."""
    try:
        if not global_config.is_configured():
            typer.echo("No configuration found. Run 'gemmit config init' to set up.")
            return

        config = global_config.load_global_config()

        typer.echo("Current gemmit configuration (~/.gemmit/config.yaml):")
        typer.echo()
        typer.echo(f"  Model: {config.get('model', 'not set')}")
        typer.echo(f"  Max Tokens: {config.get('max_tokens', 'not set')}")
        typer.echo(f"  Temperature: {config.get('temperature', 'not set')}")

        commit_errors = config.get("commit_errors") or {}
        for section in ("nothing_to_commit", "signing_failed"):
            phrases = commit_errors.get(section) or []
            if phrases:
                typer.echo()
                typer.echo(f"  Extra '{section}' phrases:")
                for phrase in phrases:
                    typer.echo(f"    - {phrase}")

        typer.echo()
        credentials = global_config.load_credentials()
        for env_var in API_KEY_ENV_VARS:
            api_key = credentials.get(env_var)
            if api_key:
                typer.echo(f"  API Key ({env_var}): {_mask(api_key)}")
                break
        else:
            typer.echo(f"  API Key ({API_KEY_ENV_VARS[0]}): not set")

    except global_config.GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)


@config_app.command("set-key")
def config_set_key() -> None:
    """Set or update the Gemini API key."""
    env_var = API_KEY_ENV_VARS[0]
    api_key = typer.prompt("Enter your Gemini API key", hide_input=True)
    if not api_key.strip():
        typer.echo("API key cannot be empty.", err=True)
        raise typer.Exit(1)

    try:
        global_config.save_credential(env_var, api_key.strip())
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ API key saved as {env_var}")


@config_app.command("set-model")
def config_set_model(
    model: str = typer.Argument(None, help="Gemini model name (will prompt if not provided)"),
) -> None:
    """Set the Gemini model used for suggestions."""
    if not model:
        typer.echo("Available models:")
        for i, m in enumerate(AVAILABLE_MODELS, 1):
            typer.echo(f"  {i}. {m}")

        model_choice = typer.prompt(f"Select a model (1-{len(AVAILABLE_MODELS)})", type=int, default=1)
        if model_choice < 1 or model_choice > len(AVAILABLE_MODELS):
            typer.echo("Invalid choice. Aborting.", err=True)
            raise typer.Exit(1)
        model = AVAILABLE_MODELS[model_choice - 1]
    elif model not in AVAILABLE_MODELS:
        typer.echo(f"Warning: {model} is not in the list of known models")
        proceed = typer.confirm("Continue anyway?", default=False)
        if not proceed:
            raise typer.Exit(0)

    try:
        global_config.set_active_model(model)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Model set to: {model}")


@config_app.command("list-models")
def config_list_models() -> None:
    """List known Gemini models."""
    typer.echo("Available Gemini models:")
    typer.echo()
    for model in AVAILABLE_MODELS:
        typer.echo(f"  • {model}")
    typer.echo()
