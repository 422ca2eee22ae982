"""
Interactive terminal editor for gridcell documents.
Shows the grid around the cursor and edits it with keyboard commands.
"""

from __future__ import annotations

import logging
from typing import Callable

import click
import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from grid_cell import Cell
from grid_config import DEFAULT_CELL_WIDTH, MIN_CELL_WIDTH, EditorConfig, configure_logging
from grid_document import Document
from grid_prompt import Prompt, PromptState, StepFn
from grid_render import Viewport, column_label, render_grid, scroll_to, visible_columns
from grid_types import FORMULA_MARKER, DocumentIOError, GridError, Position, SearchDirection

logger = logging.getLogger(__name__)

# Ctrl+Alt+S arrives as ESC followed by Ctrl+S
SAVE_AS_KEY = readchar.key.ESC + readchar.key.CTRL_S

# Panel border (2), status, edit line, blank, column header, help line
CHROME_LINES = 7
PANEL_MARGIN = 4

HELP_TEXT = (
    "^Q quit | ^S save | ^Alt+S save as | ^F find | ^X/^C/^V cut/copy/paste"
    " | ^N add col | ^D drop empty col"
)

PromptDone = Callable[[Prompt], None]


def load_document(config: EditorConfig) -> Document:
    """Open the configured file, or start an empty grid bound to that name."""
    if config.file_path is None:
        return Document()
    try:
        return Document.open(config.file_path)
    except DocumentIOError as e:
        logger.warning("Starting with an empty document: %s", e)
        return Document(file_path=config.file_path)


class Editor:
    """Keyboard driven editor around a single Document."""

    def __init__(
        self,
        document: Document,
        config: EditorConfig | None = None,
        console: Console | None = None,
    ) -> None:
        self.document = document
        self.config = config or EditorConfig()
        self.console = console if console is not None else Console()
        self.cursor = Position()
        self.offset = Position()
        self.clipboard: Cell | None = None
        self.status_message = ""
        self.prompt: Prompt | None = None
        self._prompt_done: PromptDone | None = None
        self.quit = False

        self.key_bindings: dict[str, Callable[[], None]] = {
            readchar.key.UP: lambda: self.move(0, -1),
            readchar.key.DOWN: lambda: self.move(0, 1),
            readchar.key.LEFT: lambda: self.move(-1, 0),
            readchar.key.RIGHT: lambda: self.move(1, 0),
            readchar.key.CR: lambda: self.move(0, 1),
            readchar.key.LF: lambda: self.move(0, 1),
            readchar.key.TAB: lambda: self.move(1, 0),
            readchar.key.BACKSPACE: lambda: self.document.delete(self.cursor),
            readchar.key.DELETE: lambda: self.document.reset(self.cursor),
            readchar.key.CTRL_Q: self.request_quit,
            readchar.key.CTRL_S: self.save,
            SAVE_AS_KEY: self.save_as,
            readchar.key.CTRL_F: self.search,
            readchar.key.CTRL_X: self.cut,
            readchar.key.CTRL_C: self.copy,
            readchar.key.CTRL_V: self.paste,
            readchar.key.CTRL_N: self.add_column,
            readchar.key.CTRL_D: self.delete_column,
        }

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def handle_key(self, key: str) -> None:
        """Apply one key press, routing it to the open prompt if there is one."""
        if self.prompt is not None:
            self._feed_prompt(key)
            return

        action = self.key_bindings.get(key)
        if action is not None:
            action()
        elif len(key) == 1 and key.isprintable():
            self.type_char(key)
        else:
            logger.debug("Ignoring key %r", key)

    def open_prompt(
        self, message: str, on_done: PromptDone, on_key: StepFn | None = None
    ) -> None:
        self.prompt = Prompt(message, on_key)
        self._prompt_done = on_done

    def _feed_prompt(self, key: str) -> None:
        if self.prompt is None:
            return
        if self.prompt.handle_key(key) == PromptState.ACTIVE:
            return
        prompt, on_done = self.prompt, self._prompt_done
        self.prompt = None
        self._prompt_done = None
        if on_done is not None:
            on_done(prompt)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def viewport(self) -> Viewport:
        width, height = self.console.size
        cols = visible_columns(width - PANEL_MARGIN, self.config.cell_width)
        return Viewport(self.offset, cols, max(height - CHROME_LINES, 1))

    def scroll(self) -> None:
        self.offset = scroll_to(self.viewport(), self.cursor).offset

    def move(self, dx: int, dy: int) -> None:
        self.cursor = Position(max(self.cursor.x + dx, 0), max(self.cursor.y + dy, 0))
        self.scroll()

    def teleport(self, to: Position) -> None:
        self.cursor = to
        self.scroll()

    # -------------------------------------------------------------------------
    # Editing
    # -------------------------------------------------------------------------

    def type_char(self, char: str) -> None:
        """
        Type into the current cell.

        The formula marker on a blank cell opens a prompt so the whole literal
        is inserted at once and coerced as a unit. Blank covers cells that
        hold empty text, such as loaded empty fields.
        """
        cell = self.document.get_cell(self.cursor)
        if char == FORMULA_MARKER and (cell is None or cell.length == 0):
            target = self.cursor

            def finish(prompt: Prompt) -> None:
                if prompt.state == PromptState.SUBMITTED:
                    self.document.reset(target)
                    self.document.insert(target, FORMULA_MARKER + prompt.buffer)
                else:
                    self.status_message = "Canceled."

            self.open_prompt(f"Formula: {FORMULA_MARKER}", finish)
            return
        self.document.insert(self.cursor, char)

    def cut(self) -> None:
        cell = self.document.get_cell(self.cursor)
        if cell is None:
            return
        self.clipboard = cell.copy()
        self.document.reset(self.cursor)
        self.status_message = "Cell Cut"

    def copy(self) -> None:
        cell = self.document.get_cell(self.cursor)
        if cell is None:
            return
        self.clipboard = cell.copy()
        self.status_message = "Cell Copied"

    def paste(self) -> None:
        if self.clipboard is None:
            return
        self.document.insert_cell(self.cursor, self.clipboard)
        self.status_message = "Cell Pasted"

    def add_column(self) -> None:
        if self.document.length == 0:
            self.status_message = "Nothing to extend"
            return
        label = column_label(self.document.column_count())
        self.document.add_column()
        self.status_message = f"Column {label} added"

    def delete_column(self) -> None:
        label = column_label(self.cursor.x)
        if self.cursor.x >= self.document.column_count():
            self.status_message = f"Column {label} does not exist"
            return
        if not self.document.is_column_empty(self.cursor.x):
            self.status_message = f"Column {label} is not empty"
            return
        self.document.delete_column(self.cursor.x)
        self.status_message = f"Column {label} deleted"

    # -------------------------------------------------------------------------
    # Files
    # -------------------------------------------------------------------------

    def _write(self) -> None:
        try:
            self.document.save()
        except GridError as e:
            logger.warning("Save failed: %s", e)
            self.status_message = "Error saving file."
            return
        self.status_message = "File saved successfully."

    def _finish_save_as(self, prompt: Prompt) -> None:
        if prompt.result is None:
            self.status_message = "Canceled."
            return
        self.document.file_path = prompt.result
        self._write()

    def save(self) -> None:
        if self.document.file_path is None:
            self.save_as()
            return
        self._write()

    def save_as(self) -> None:
        self.open_prompt("Save as: ", self._finish_save_as)

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def search(self) -> None:
        """
        Incremental search from the cursor.

        Right/Down jump to the next match, Left/Up to the previous one, and
        any other key re-runs the query from the current cell. ESC returns
        to where the search started.
        """
        origin = self.cursor

        def step(key: str, query: str) -> None:
            moved = False
            if key in (readchar.key.RIGHT, readchar.key.DOWN):
                direction = SearchDirection.FORWARD
                self.cursor = Position(self.cursor.x + 1, self.cursor.y)
                moved = True
            elif key in (readchar.key.LEFT, readchar.key.UP):
                direction = SearchDirection.BACKWARD
            else:
                direction = SearchDirection.FORWARD

            found = self.document.find(query, self.cursor, direction)
            if found is not None:
                self.teleport(found)
            elif moved:
                self.cursor = Position(self.cursor.x - 1, self.cursor.y)

        def finish(prompt: Prompt) -> None:
            if prompt.result is None:
                self.teleport(origin)
            self.status_message = ""

        self.open_prompt("Search (ESC to cancel, Arrows to navigate): ", finish, step)

    def request_quit(self) -> None:
        self.quit = True

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    def status_line(self) -> str:
        if self.prompt is not None:
            return self.prompt.render()
        if self.status_message:
            return self.status_message
        return f"Editing: {self.document.file_path or '[No Name]'}"

    def generate_display(self) -> Panel:
        """Build the full screen: status, edit line, grid and key help."""
        display = Text()
        display.append(self.status_line() + "\n", style="bold")

        cell = self.document.get_cell(self.cursor)
        display.append(f"{column_label(self.cursor.x)}{self.cursor.y}: ", style="bold cyan")
        display.append((cell.render(0) if cell is not None else "") + "\n\n")

        grid_text = render_grid(
            self.document,
            self.viewport(),
            self.cursor,
            self.config.cell_width,
            use_first_row=self.config.header,
        )
        display.append(Text.from_ansi(grid_text))
        display.append("\n")
        display.append(HELP_TEXT, style="dim")

        return Panel(display, title="gridcell", border_style="green")

    def run(self) -> None:
        """Run the editor until the user quits."""
        with Live(self.generate_display(), console=self.console, screen=True, auto_refresh=False) as live:
            while not self.quit:
                live.update(self.generate_display(), refresh=True)
                try:
                    key = readchar.readkey()
                except KeyboardInterrupt:
                    # readchar raises on Ctrl+C, which is bound to copy
                    key = readchar.key.CTRL_C
                self.handle_key(key)


# ---------------------------------------------------------------------------
# Command line
# ---------------------------------------------------------------------------


@click.command(name="gridcell")
@click.argument("file_path", metavar="FILE", required=False, type=click.Path(dir_okay=False))
@click.option("--header", is_flag=True, default=False, help="Use the first row's texts as column titles")
@click.option(
    "--width",
    "cell_width",
    type=click.IntRange(min=MIN_CELL_WIDTH),
    default=DEFAULT_CELL_WIDTH,
    show_default=True,
    help="Characters per cell",
)
@click.option("--log", "log_file", type=click.Path(dir_okay=False), default=None, help="Write log records to this file")
@click.option("--debug", is_flag=True, default=False, help="Log at debug level")
def main(file_path: str | None, header: bool, cell_width: int, log_file: str | None, debug: bool) -> None:
    """Edit a ';'-delimited grid in the terminal.

    FILE is opened if it exists, otherwise it is created on the first save.
    """
    config = EditorConfig(file_path, header, cell_width, log_file, debug)
    configure_logging(config)
    document = load_document(config)
    Editor(document, config).run()


if __name__ == "__main__":
    main()
