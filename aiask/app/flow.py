# aiask/app/flow.py
from __future__ import annotations
from enum import Enum
from typing import BinaryIO, Optional, Sequence
import logging, sys

from ..errors import ChatError, UsageError
from ..llm.chat import ChatClient
from ..ui.render import Renderer, TerminalOutput, present
from ..util.ansi import is_char_device

logger = logging.getLogger(__name__)

NO_RESPONSE = "No response"

# ───────── input ─────────
class Mode(Enum):
    ARGS_WITH_PIPE = "args+pipe"
    PIPE_ONLY = "pipe"
    ARGS_ONLY = "args"
    NONE = "none"

def has_pipe(stream) -> bool:
    """stdin carries data unless it is a character device (tty, /dev/null) or has no fd."""
    if stream is None:
        return False
    return not is_char_device(stream)

def invocation_mode(piped: bool, args: Sequence[str]) -> Mode:
    if piped and args:
        return Mode.ARGS_WITH_PIPE
    if piped:
        return Mode.PIPE_ONLY
    if args:
        return Mode.ARGS_ONLY
    return Mode.NONE

def _read_all(stdin: Optional[BinaryIO]) -> str:
    if stdin is None:
        return ""
    return stdin.read().decode("utf-8", errors="replace")

def compose_question(piped: bool, args: Sequence[str], stdin: Optional[BinaryIO] = None) -> str:
    mode = invocation_mode(piped, args)
    logger.debug("invocation mode: %s", mode.value)
    if mode is Mode.ARGS_WITH_PIPE:
        header = " ".join(args)
        return f"{header}\n\n```\n{_read_all(stdin)}```"
    if mode is Mode.PIPE_ONLY:
        return _read_all(stdin)
    if mode is Mode.ARGS_ONLY:
        return " ".join(args)
    raise UsageError()

# ───────── request / answer ─────────
def answer(client: ChatClient, system_prompt: str, question: str,
           output: TerminalOutput, renderer: Renderer | None = None) -> int:
    """One request, one printed answer. Returns the process exit code."""
    output.announce_waiting()
    try:
        try:
            content = client.send(system_prompt, question)
        finally:
            output.clear_waiting()   # before anything else reaches the screen
    except ChatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if content is None:
        output.write(NO_RESPONSE + "\n")
        return 0
    present(content, output, renderer)
    return 0
