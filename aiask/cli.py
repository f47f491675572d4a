# aiask/cli.py
from __future__ import annotations
import logging, os, sys
from typing import List

from .config import load_settings
from .errors import ConfigError, UsageError
from .app.flow import answer, compose_question, has_pipe
from .context.system import probe
from .llm.chat import ChatClient, Transport
from .llm.prompt import build_system_prompt
from .ui.render import Renderer, TerminalOutput
from .util.log import setup_logging

logger = logging.getLogger(__name__)

def _clean(text: str) -> str:
    # undecodable argv/env bytes arrive as surrogate escapes; json can't encode those
    return os.fsencode(text).decode("utf-8", errors="replace")

def main(argv: List[str] | None = None, transport: Transport | None = None,
         renderer: Renderer | None = None) -> int:
    """ask [question words...]  -- words are taken verbatim, no option parsing."""
    args = [_clean(a) for a in (sys.argv[1:] if argv is None else argv)]

    try:
        cfg = load_settings()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    setup_logging(cfg.log_level)
    logger.debug("settings: %r", cfg)

    piped = has_pipe(sys.stdin)   # decided once, before anything reads stdin
    try:
        question = compose_question(piped, args, sys.stdin.buffer if piped else None)
    except UsageError as e:
        print(e, file=sys.stderr)
        return 1

    system_prompt = build_system_prompt(probe(_clean(cfg.shell)))
    client = ChatClient(cfg.base_url, cfg.api_key, cfg.model, transport=transport)
    try:
        return answer(client, system_prompt, question, TerminalOutput(sys.stdout), renderer)
    except KeyboardInterrupt:
        return 130

if __name__ == "__main__":
    raise SystemExit(main())
