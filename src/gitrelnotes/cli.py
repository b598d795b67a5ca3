"""Command-line interface for gitrelnotes."""

import asyncio
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from gitrelnotes import __version__
from gitrelnotes.errors import EmptyHistoryError
from gitrelnotes.extraction import GitRepository
from gitrelnotes.generator import ReleaseNotesGenerator
from gitrelnotes.llm import OpenAIProvider
from gitrelnotes.log_config import configure_logging
from gitrelnotes.models import (
    CommitRange,
    CommitRecord,
    GenerationConfig,
    LLMConfig,
    SelectionCriteria,
    Settings,
    criteria_from_options,
)

app = typer.Typer(
    name="gitrelnotes",
    help="Generate release notes from Git history using Azure OpenAI",
    add_completion=False,
)
console = Console()

# Commits offered by the interactive range picker
WIZARD_COMMIT_LIMIT = 50


def _commit_table(commits: List[CommitRecord], numbered: bool = False) -> Table:
    table = Table(show_header=True, header_style="bold magenta")
    if numbered:
        table.add_column("#", justify="right", style="yellow")
    table.add_column("Hash", style="cyan", width=10)
    table.add_column("Date", style="blue")
    table.add_column("Author", style="green")
    table.add_column("Message", style="white")

    for index, commit in enumerate(commits, start=1):
        subject = commit.subject
        if len(subject) > 60:
            subject = subject[:60] + "..."
        row = [
            commit.short_hash,
            commit.authored_at.strftime("%Y-%m-%d %H:%M"),
            commit.author_name[:20],
            subject,
        ]
        if numbered:
            row.insert(0, str(index))
        table.add_row(*row)

    return table


def _prompt_index(message: str, upper: int) -> int:
    while True:
        value = typer.prompt(message, type=int)
        if 1 <= value <= upper:
            return value
        console.print(f"[red]Enter a number between 1 and {upper}[/red]")


def _choose_range(repository: GitRepository) -> CommitRange:
    """Let the user pick the older and newer endpoints from recent commits."""
    with console.status("Fetching recent commits..."):
        commits = repository.list_recent(WIZARD_COMMIT_LIMIT)

    if not commits:
        raise EmptyHistoryError("Unable to fetch commits. Is this a valid git repository?")

    console.print("\n[bold blue]Select commit range for release notes generation[/bold blue]")
    console.print("[dim]• First select the OLDER commit (start of range)[/dim]")
    console.print("[dim]• Then select the NEWER commit (end of range)[/dim]\n")
    console.print(_commit_table(commits, numbered=True))

    start = _prompt_index("Select the START (older) commit #", len(commits))
    # Newer commits are listed above the start commit.
    end = _prompt_index("Select the END (newer) commit #", start)

    return CommitRange(
        from_commit=commits[start - 1].hash,
        to_commit=commits[end - 1].hash,
    )


def _print_summary(
    repo_path: Path,
    criteria: SelectionCriteria,
    llm_config: LLMConfig,
    output_file: Optional[Path],
) -> None:
    console.print("\n[bold]Configuration Summary[/bold]")
    console.print(f"[cyan]Repository:[/cyan] {repo_path}")
    console.print(f"[cyan]Deployment:[/cyan] {llm_config.deployment}")
    console.print(f"[cyan]Backend:[/cyan] {llm_config.endpoint or 'OpenAI API'}")

    if isinstance(criteria, CommitRange):
        console.print("[cyan]Commit range:[/cyan]")
        console.print(f"  └─ From: {criteria.from_commit[:8]} (older)")
        console.print(f"  └─ To:   {criteria.to_commit[:8]} (newer)")
    else:
        console.print(f"[cyan]Commits:[/cyan] Last {criteria.count}")

    console.print(f"[cyan]Output:[/cyan] {output_file or 'Console'}\n")


@app.command()
def generate(
    repo_path: Path = typer.Option(Path("."), "--repo-path", "-r", help="Path to Git repository"),
    count: Optional[int] = typer.Option(None, "--count", "-n", min=1, help="Number of recent commits to analyze (default: 5)"),
    from_commit: Optional[str] = typer.Option(None, "--from-commit", help="Starting commit hash (older)"),
    to_commit: Optional[str] = typer.Option(None, "--to-commit", help="Ending commit hash (newer)"),
    interactive: bool = typer.Option(False, "--interactive", "-i", help="Pick the commit range from a list and confirm before generating"),
    api_key: Optional[str] = typer.Option(None, "--api-key", help="Azure OpenAI (or OpenAI) API key"),
    endpoint: Optional[str] = typer.Option(None, "--endpoint", help="Azure OpenAI endpoint URL"),
    deployment: Optional[str] = typer.Option(None, "--deployment", "-m", help="Deployment or model name"),
    api_version: Optional[str] = typer.Option(None, "--api-version", help="Azure OpenAI API version"),
    max_tokens: Optional[int] = typer.Option(None, "--max-tokens", min=1, help="Maximum tokens for the completion"),
    output_file: Optional[Path] = typer.Option(None, "--output-file", "-o", help="Write the release notes to this file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Generate release notes from recent commits or a commit range."""
    settings = Settings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    try:
        criteria = criteria_from_options(count, from_commit, to_commit)
        llm_config = settings.to_llm_config(
            api_key=api_key,
            endpoint=endpoint,
            deployment=deployment,
            api_version=api_version,
        )
        repository = GitRepository(repo_path)

        if interactive and not isinstance(criteria, CommitRange):
            criteria = _choose_range(repository)

        _print_summary(repo_path, criteria, llm_config, output_file)

        if interactive and not typer.confirm("Proceed with release notes generation?", default=True):
            console.print("[yellow]Operation cancelled.[/yellow]")
            return

        generation_config = GenerationConfig()
        if max_tokens:
            generation_config = GenerationConfig(max_tokens=max_tokens)

        provider = OpenAIProvider.from_config(llm_config)
        generator = ReleaseNotesGenerator(repository, provider, generation_config)

        with console.status("Fetching commits..."):
            selection = generator.select(criteria)

        if selection.swapped:
            console.print("[yellow]⚠ Commits were given in reverse order. Swapping them...[/yellow]")
        console.print(
            f"[bold blue]Processing {len(selection)} commits {selection.describe()}...[/bold blue]\n"
        )

        status = console.status("Analyzing commits...")
        status.start()
        started = False

        def on_progress(index: int, total: int, commit: CommitRecord) -> None:
            status.update(f"Analyzing commit {index}/{total}: {commit.subject[:50]}...")

        def on_fragment(fragment: str) -> None:
            nonlocal started
            if not started:
                status.stop()
                console.print("[bold blue]Generated Release Notes:[/bold blue]\n")
                started = True
            console.print(fragment, end="", markup=False, highlight=False, emoji=False, soft_wrap=True)

        async def run() -> str:
            try:
                return await generator.generate_from_selection(
                    selection,
                    on_fragment=on_fragment,
                    on_progress=on_progress,
                )
            finally:
                await provider.close()

        try:
            notes = asyncio.run(run())
        finally:
            status.stop()
        console.print()

        if output_file:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_text(notes, encoding="utf-8")
            console.print(f"[bold green]✓[/bold green] Release notes written to: [cyan]{output_file}[/cyan]")

        console.print("\n[bold green]✓[/bold green] Release notes generation completed successfully!")

    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        if verbose:
            import traceback
            console.print(f"[dim]{traceback.format_exc()}[/dim]")
        raise typer.Exit(1)


@app.command()
def list_commits(
    repo_path: Path = typer.Argument(Path("."), help="Path to Git repository"),
    max_count: int = typer.Option(20, "--max", "-n", min=1, help="Maximum commits to show"),
) -> None:
    """List recent commits, e.g. to pick range endpoints."""
    try:
        repository = GitRepository(repo_path)
        commits = repository.list_recent(max_count)

        if not commits:
            console.print("[yellow]No commits found[/yellow]")
            return

        console.print(_commit_table(commits))

    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"gitrelnotes version {__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
