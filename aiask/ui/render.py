from __future__ import annotations
from typing import Protocol, TextIO
import logging, re, sys

from rich.console import Console
from rich.emoji import Emoji
from rich.markdown import Markdown

from ..errors import RenderError
from ..util.ansi import ERASE_LINE, isatty

logger = logging.getLogger(__name__)

WRAP_WIDTH = 100
CODE_THEME = "monokai"
WAITING = "Thinking..."

# fenced blocks (to the closing fence or end of text) and inline code spans
CODE_RE = re.compile(r"^ {0,3}(`{3,}|~{3,}).*?(?:^ {0,3}\1[ \t]*$|\Z)|`[^`\n]+`", re.M | re.S)

def emojize(text: str) -> str:
    """Replace :emoji: codes everywhere except inside code."""
    out, pos = [], 0
    for m in CODE_RE.finditer(text):
        out.append(Emoji.replace(text[pos:m.start()]))
        out.append(m.group(0))
        pos = m.end()
    out.append(Emoji.replace(text[pos:]))
    return "".join(out)

class Renderer(Protocol):
    def render(self, text: str) -> str: ...

class MarkdownRenderer:
    """Markdown -> ANSI text via rich: fixed wrap width, dark code theme, :emoji: codes."""

    def __init__(self, width: int = WRAP_WIDTH, code_theme: str = CODE_THEME, emoji: bool = True):
        self.code_theme = code_theme
        self.emoji = emoji
        try:
            self.console = Console(width=width, force_terminal=True, color_system="256",
                                   emoji=emoji, highlight=False)
        except Exception as e:
            raise RenderError(f"cannot build renderer: {e}") from e

    def render(self, text: str) -> str:
        try:
            source = emojize(text) if self.emoji else text
            with self.console.capture() as cap:
                self.console.print(Markdown(source, code_theme=self.code_theme))
            return cap.get()
        except Exception as e:
            raise RenderError(str(e)) from e

class TerminalOutput:
    """Where the answer goes, plus the transient 'Thinking...' line on a tty."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout
        self.is_terminal = isatty(self.stream)
        self._waiting = False

    def write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def announce_waiting(self) -> None:
        if self.is_terminal and not self._waiting:
            self.write(WAITING)
            self._waiting = True

    def clear_waiting(self) -> None:
        if self._waiting:
            self.write(ERASE_LINE)
            self._waiting = False

def present(content: str, output: TerminalOutput, renderer: Renderer | None = None) -> None:
    if not output.is_terminal:
        output.write(content + "\n")
        return
    try:
        renderer = renderer or MarkdownRenderer()
        styled = renderer.render(content)
    except RenderError as e:
        logger.debug("render failed, printing raw text: %s", e)
        output.write(content + "\n")
        return
    output.write(styled if styled.endswith("\n") else styled + "\n")
