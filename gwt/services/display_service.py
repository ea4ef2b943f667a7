"""Display service for worktree listings and cleanup reports"""
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

console = Console(emoji=False)
err_console = Console(stderr=True, emoji=False)


def format_worktree_rows(rows: Sequence[tuple[str, str]]) -> list[str]:
    """Format (name, branch) pairs with the name column padded to the longest name."""
    if not rows:
        return []
    width = max(len(name) for name, _ in rows)
    return [f"{name:<{width}}  {branch}" for name, branch in rows]


class DisplayService:
    """Writes command output.

    Plain data (listings) goes to stdout without markup so it can be piped;
    progress and status messages go to stderr.
    """

    def __init__(self, out: Optional[Console] = None, err: Optional[Console] = None):
        self.out = out or console
        self.err = err or err_console

    def _print_plain(self, text: str) -> None:
        self.out.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def show_worktrees(self, rows: Sequence[tuple[str, str]]) -> None:
        for line in format_worktree_rows(rows):
            self._print_plain(line)

    def show_message(self, text: str) -> None:
        self._print_plain(text)

    def show_progress(self, text: str) -> None:
        self.err.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def show_dangling_branches(self, prefix: str, branches: Sequence[str]) -> None:
        self._print_plain(f"The following dangling {prefix}* branches will be deleted:")
        for branch in branches:
            self._print_plain(f"  {branch}")

    def show_usage(self, text: str, to_stderr: bool = True) -> None:
        target = self.err if to_stderr else self.out
        target.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def show_error(self, message: str) -> None:
        self.err.print(
            f"[red]Error: {escape(message)}[/red]", highlight=False, emoji=False, soft_wrap=True
        )

    def show_warning(self, message: str) -> None:
        self.err.print(
            f"[yellow]Warning: {escape(message)}[/yellow]", highlight=False, emoji=False, soft_wrap=True
        )
