import asyncio
import logging
from typing import Any, Dict, List

import typer
import uvicorn
from rich.console import Console
from rich.live import Live
from rich.prompt import Prompt
from rich.spinner import Spinner
from typing_extensions import Annotated

from agent_relay.client.agent_relay import AgentRelay

# --- Basic Logging Configuration ---
logging.basicConfig(level=logging.WARNING, format="%(levelname)s:%(name)s:%(message)s")
# --- End Logging Configuration ---

app = typer.Typer()
console = Console()


def _load_client(config: str) -> AgentRelay:
    try:
        with console.status("[bold green]Initializing agent...", spinner="dots"):
            return AgentRelay(config_path=config)
    except FileNotFoundError:
        console.print(
            f"[bold red]Error:[/bold red] Configuration file not found at '{config}'"
        )
        raise typer.Exit(code=1)
    except ValueError as e:
        console.print(f"[bold red]Error loading configuration:[/bold red] {e}")
        raise typer.Exit(code=1)


async def run_turn(agent: AgentRelay, history: List[Dict[str, Any]]) -> str:
    """Run one conversation turn and display the agent's reply."""
    with Live(console=console, refresh_per_second=10, transient=True) as live:
        live.update(Spinner("dots", "Thinking..."))
        result = await agent.process(list(history))

    for tool_result in result.tool_results:
        style = "red" if tool_result.is_error else "dim"
        console.print(f"[{style}]tool {tool_result.tool_name}[/{style}]")

    if result.text:
        console.print(f"[bright_blue]Agent:[/bright_blue] {result.text}")
    else:
        console.print("[yellow]Agent did not produce a response.[/yellow]")
    return result.text


async def chat_loop(agent: AgentRelay) -> None:
    history: List[Dict[str, Any]] = []
    while True:
        user_message = Prompt.ask("[bold green]You[/bold green]")

        if user_message.lower() in ["exit", "quit"]:
            console.print("[yellow]Exiting chat session.[/yellow]")
            break

        if not user_message.strip():
            continue

        history.append({"role": "user", "content": user_message})
        try:
            reply = await run_turn(agent, history)
        except Exception as e:
            history.pop()
            console.print(f"[bold red]Error during processing:[/bold red] {e}")
            continue
        history.append({"role": "assistant", "content": reply})


@app.command()
def chat(
    config: Annotated[
        str, typer.Option(help="Path to the configuration JSON file.")
    ] = "config.json",
):
    """
    Start an interactive chat session with the main agent.
    Type 'exit' or 'quit' to end the session.
    """
    agent = _load_client(config)
    console.print("[green]Agent initialized. Start chatting![/green]")
    console.print("[dim]Type 'exit' or 'quit' to end.[/dim]")

    try:
        asyncio.run(chat_loop(agent))
    except KeyboardInterrupt:
        console.print("\n[yellow]Exiting chat session (KeyboardInterrupt).[/yellow]")


@app.command()
def serve(
    config: Annotated[
        str, typer.Option(help="Path to the configuration JSON file.")
    ] = "config.json",
    host: Annotated[str, typer.Option(help="Interface to bind.")] = "127.0.0.1",
    port: Annotated[int, typer.Option(help="Port to listen on.")] = 8000,
    log_level: Annotated[str, typer.Option(help="Logging level.")] = "info",
):
    """
    Serve the agent over HTTP (POST /api/agent).
    """
    from agent_relay.api.app import create_app

    logging.getLogger().setLevel(log_level.upper())
    agent = _load_client(config)
    uvicorn.run(create_app(client=agent), host=host, port=port, log_level=log_level)


if __name__ == "__main__":
    app()
