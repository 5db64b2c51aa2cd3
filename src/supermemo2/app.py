"""Interactive console for reviewing an item with SM-2."""
import logging
import os

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from supermemo2.history import parse_grades, replay
from supermemo2.models import (
    QUALITY_LABELS, Item, ReviewStep, new_item, restore_item,
)
from supermemo2.sm2 import MIN_EASE_FACTOR

LOG_LEVEL = os.environ.get("SUPERMEMO2_LOG_LEVEL", "WARNING").upper()

EXIT_WORDS = ("q", "menu")
GRADE_CHOICES = [str(q) for q in QUALITY_LABELS]

console = Console()
log = logging.getLogger(__name__)


class SessionExitRequested(Exception):
    """The user asked to leave the current command."""


def session_prompt(prompt: str, **kwargs) -> str:
    answer = Prompt.ask(prompt, **kwargs)
    if answer.strip().lower() in EXIT_WORDS:
        raise SessionExitRequested()
    return answer


def session_int_prompt(prompt: str, choices: list = None, **kwargs) -> int:
    if choices is not None:
        choices = list(choices) + list(EXIT_WORDS)
        kwargs["show_choices"] = False
    answer = session_prompt(prompt, choices=choices, **kwargs)
    return int(answer)


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def show_welcome():
    console.print(Panel(
        "[bold]SuperMemo 2[/bold]\n[dim]Spaced repetition scheduler[/dim]",
        title="Welcome", border_style="blue",
    ))


def show_menu():
    console.print("\n[bold]Commands:[/bold]")
    commands = [
        ("review", "Grade the current item"),
        ("simulate", "Replay a list of grades"),
        ("restore", "Load saved repetitions and ease factor"),
        ("reset", "Start over with a new item"),
        ("show", "Show the current item"),
        ("quit", "Exit"),
    ]
    for cmd, desc in commands:
        console.print(f"  [cyan]{cmd:<14}[/cyan] {desc}")


def show_grades():
    for value, label in QUALITY_LABELS.items():
        color = "green" if value >= 3 else "red"
        console.print(f"  [{color}]{value}[/{color}] {label}")


def show_item(item: Item):
    lines = (
        f"Repetitions:  [bold]{item.repetitions}[/bold]\n"
        f"Ease factor:  [bold]{item.ease_factor:.2f}[/bold]\n"
        f"Next review:  [bold]{item.interval()}[/bold] day(s)"
    )
    if item.ease_factor < MIN_EASE_FACTOR:
        lines += f"\n[yellow]Ease factor is below {MIN_EASE_FACTOR}; the next review reads it as {MIN_EASE_FACTOR}.[/yellow]"
    console.print(Panel(lines, title="Item", border_style="cyan"))


def history_table(steps: list[ReviewStep]) -> Table:
    table = Table(title="Review History")
    table.add_column("#", justify="right")
    table.add_column("Grade", justify="right")
    table.add_column("Repetitions", justify="right")
    table.add_column("Ease factor", justify="right")
    table.add_column("Interval", justify="right")
    for step in steps:
        color = "green" if step.quality.is_success else "red"
        table.add_row(
            str(step.number),
            f"[{color}]{step.quality.value}[/{color}]",
            str(step.item.repetitions),
            f"{step.item.ease_factor:.2f}",
            f"{step.item.interval()} d",
        )
    return table


def cmd_review(item: Item) -> Item:
    console.print("\n[bold]Review[/bold]")
    show_grades()
    grade = session_int_prompt("Rate yourself", choices=GRADE_CHOICES)
    reviewed = item.review(grade)
    console.print(f"[green]Due again in {reviewed.interval()} day(s).[/green]")
    return reviewed


def cmd_simulate(item: Item) -> None:
    console.print("\n[bold]Simulate[/bold] [dim](the current item is not changed)[/dim]")
    text = session_prompt("Grades, oldest first (e.g. 4, 3, 5)")
    steps = replay(parse_grades(text), item)
    if not steps:
        console.print("[yellow]No grades given.[/yellow]")
        return
    console.print(history_table(steps))


def cmd_restore() -> Item:
    console.print("\n[bold]Restore[/bold]")
    repetitions = session_int_prompt("Repetitions", default="0")
    if repetitions < 0:
        raise ValueError("Repetitions cannot be negative")
    ease_factor = float(session_prompt("Ease factor", default="2.5"))
    item = restore_item(repetitions, ease_factor)
    show_item(item)
    return item


def main():
    configure_logging()
    item = new_item()
    show_welcome()

    while True:
        show_menu()
        choice = Prompt.ask("\n[bold]>[/bold]", default="review").strip().lower()
        try:
            if choice == "review":
                item = cmd_review(item)
            elif choice == "simulate":
                cmd_simulate(item)
            elif choice == "restore":
                item = cmd_restore()
            elif choice == "reset":
                item = new_item()
                show_item(item)
            elif choice == "show":
                show_item(item)
            elif choice in ("quit", "exit", "q"):
                console.print("[dim]Happy reviewing![/dim]")
                break
            else:
                console.print("[red]Unknown command. Try again.[/red]")
        except SessionExitRequested:
            console.print("[dim]Back to menu.[/dim]")
        except KeyboardInterrupt:
            console.print("\n[dim]Use 'quit' to exit.[/dim]")
        except Exception as e:
            log.debug("Command %r failed", choice, exc_info=True)
            console.print(f"[red]Error: {e}[/red]")


if __name__ == "__main__":
    main()
