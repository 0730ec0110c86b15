"""Unified Rich theme and reusable UI helper functions for the CLI."""

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.theme import Theme
from rich.tree import Tree

OUTLINER_THEME = Theme({
    "app.title": "bold",
    "success": "green",
    "warning": "yellow",
    "error": "red",
    "info": "blue",
    "muted": "dim",
    "accent": "cyan",
    "stat.label": "dim",
    "stat.value": "bold",
    "order": "blue",
    "part.title": "bold cyan",
    "beat.type": "magenta",
})


def get_console() -> Console:
    """Return a Console instance with the outliner theme applied."""
    return Console(theme=OUTLINER_THEME)


def app_header(title: str = "outliner") -> Rule:
    """Return a Rule element for the application header banner."""
    return Rule(title=f"[bold]{escape(title)}[/]", style="dim")


def _shorten(text: str | None, limit: int) -> str:
    text = text or ""
    return (text[:limit] + "...") if len(text) > limit else text


def _cell(value) -> str:
    return "" if value is None else escape(_shorten(str(value), 40))


def record_panel(title: str, record) -> Panel:
    """Return a green-bordered Panel listing every field of a record.

    Args:
        title: Panel title (e.g. "Chapter created").
        record: Any model with a ``to_dict()`` method.
    """
    lines = []
    for label, value in record.to_dict().items():
        shown = "-" if value is None else escape(str(value))
        lines.append(f"  [stat.label]{label}:[/] [stat.value]{shown}[/]")
    return Panel("\n".join(lines), title=f"[success]{title}[/]", box=box.ROUNDED, border_style="green", padding=(0, 2))


def records_table(title: str, records: list, columns: list[str]) -> Table:
    """Build a Rich Table of records, one row each.

    Args:
        title: Table title.
        records: Model objects.
        columns: camelCase keys from ``to_dict()`` to show, in order.
    """
    table = Table(title=title, box=box.ROUNDED, border_style="dim", show_header=True, padding=(0, 1))
    for column in columns:
        table.add_column(column, style="order" if column == "orderIndex" else None)

    for record in records:
        values = record.to_dict()
        table.add_row(*(_cell(values.get(c)) for c in columns))
    return table


def _by_order(items: list) -> list:
    return sorted(items, key=lambda item: item.order_index)


def _beat_label(beat) -> str:
    kind = f"[beat.type]{escape(beat.beat_type)}[/] " if beat.beat_type else ""
    return f"[order]{beat.order_index}.[/] {kind}{escape(_shorten(beat.description, 60))}"


def _chapter_branch(parent: Tree, chapter, beats: list) -> None:
    title = escape(chapter.title) if chapter.title else "[muted](untitled)[/]"
    pov = f" [muted]POV: {escape(chapter.pov_character)}[/]" if chapter.pov_character else ""
    branch = parent.add(f"[order]Ch {chapter.order_index}[/] {title}{pov}")
    for beat in _by_order([b for b in beats if b.chapter_id == chapter.id]):
        branch.add(_beat_label(beat))


def outline_tree(novel, parts: list, chapters: list, beats: list) -> Tree:
    """Build a Rich Tree of the whole Novel -> Part -> Chapter -> Beat outline.

    Chapters whose part is missing (never set, or the part was deleted) are
    listed under "Unfiled chapters"; beats without a chapter under
    "Loose beats". Siblings are sorted by order index.
    """
    tree = Tree(f"[app.title]{escape(novel.title)}[/]" + (f" [muted]{escape(novel.subtitle)}[/]" if novel.subtitle else ""))

    part_ids = {p.id for p in parts}
    for part in _by_order(parts):
        branch = tree.add(f"[part.title]Part {part.order_index}[/] {escape(part.title or '')}")
        for chapter in _by_order([c for c in chapters if c.part_id == part.id]):
            _chapter_branch(branch, chapter, beats)

    unfiled = [c for c in chapters if c.part_id not in part_ids]
    if unfiled:
        branch = tree.add("[muted]Unfiled chapters[/]")
        for chapter in _by_order(unfiled):
            _chapter_branch(branch, chapter, beats)

    loose = [b for b in beats if b.chapter_id is None]
    if loose:
        branch = tree.add("[muted]Loose beats[/]")
        for beat in _by_order(loose):
            branch.add(_beat_label(beat))

    return tree
