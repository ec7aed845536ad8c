# ============================================================
# promptgen command line
# ------------------------------------------------------------
#   1) Loads configuration (env / .env / optional YAML)
#   2) Reads the optional input file and attaches it to the prompt
#   3) Sends one generation request (GeminiClient, or EchoDevClient with --dry-run)
#   4) Persists the prompt to SQLite when --file is given
#   5) Cleans the result and prints it or writes it to --output
#
# Any failure is terminal: exit status 1, nothing written.
# ============================================================

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .errors import PromptgenError
from .generate import CodeGenerator, EchoDevClient, GeminiClient, Modes
from .settings import Settings, load_settings
from .storage import PromptRecord, PromptRepository

logger = logging.getLogger("promptgen")


def setup_logging(level: str) -> None:
    if not logger.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("%(asctime)s %(levelname)s: %(message)s"))
        logger.addHandler(h)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))


# -------------------------
# File helpers
# -------------------------

def read_input(path: str | Path) -> str:
    """Read the attachment; undecodable bytes become U+FFFD instead of failing."""
    return Path(path).read_text(encoding="utf-8", errors="replace")


def write_output(path: str | Path, content: str) -> None:
    """Write content to path, replacing any existing file."""
    Path(path).write_text(content, encoding="utf-8")


def ensure_db_file(path: str | Path) -> None:
    p = Path(path)
    if not p.exists():
        p.touch()
        logger.info("Database file created: %s", p)


# -------------------------
# Argument parsing
# -------------------------

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="promptgen",
        description="Compose a code-generation prompt from an actor and a task, send it to the "
                    "Gemini API and print (or save) the cleaned result.",
    )
    p.add_argument("-a", "--actor", default="", help="Required prompt actor name to define prompt persona")
    p.add_argument("-p", "--prompt", default="", help="Required prompt content")
    p.add_argument("-i", "--input", default="", help="Optional input file to load data and attach it to the prompt")
    p.add_argument("-o", "--output", default="",
                   help="Optional output file, if provided, prompt result will be saved to given path")
    p.add_argument("-f", "--file", default="",
                   help="Optional database path; prompts are persisted there (created locally if missing, sqlite)")
    p.add_argument("-d", "--documentation", action="store_true",
                   help="Request generated documentation in the prompt")
    p.add_argument("-e", "--explanations", action="store_true",
                   help="Request code explanations in the prompt")
    p.add_argument("-c", "--comments", action="store_true",
                   help="Request extensive in-code comments in the prompt")
    p.add_argument("--history", action="store_true", help="List prompts stored in --file and exit")
    p.add_argument("--config", default=None, help="Optional YAML file with settings (overrides environment)")
    p.add_argument("--dry-run", action="store_true", help="Use the offline echo client instead of the API")
    p.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL setting or WARNING)")
    return p


def _format_record(r: PromptRecord) -> str:
    flags = "".join(f for f, on in (("c", r.comments), ("d", r.documentation), ("e", r.explanations)) if on)
    first_line = r.prompt.split("\n", 1)[0]
    return f"{r.id:>4}  [{flags:<3}]  {r.actor}: {first_line}"


def _make_client(settings: Settings) -> GeminiClient:
    return GeminiClient(
        settings.endpoint_base,
        settings.GEMINI_API_KEY,
        temperature=settings.AI_TEMPERATURE,
        top_p=settings.AI_TOP_P,
        max_output_tokens=settings.AI_MAX_TOKENS,
        top_k=settings.AI_NUM_RESULTS,
        timeout=settings.AI_TIMEOUT,
    )


# -------------------------
# Commands
# -------------------------

def show_history(db_path: str) -> int:
    if not Path(db_path).exists():
        logger.error("Database not found: %s", db_path)
        return 1
    with PromptRepository(db_path) as repo:
        records = repo.list_all()
    for r in records:
        print(_format_record(r))
    return 0


def run(args: argparse.Namespace) -> int:
    modes = Modes(
        comments=args.comments,
        documentation=args.documentation,
        explanations=args.explanations,
    )

    if args.dry_run:
        client = EchoDevClient()
    else:
        settings = load_settings(args.config)
        if args.log_level is None:
            setup_logging(settings.LOG_LEVEL)
        client = _make_client(settings)

    if args.file:
        ensure_db_file(args.file)

    content = read_input(args.input) if args.input else ""

    result = CodeGenerator(client).generate(args.actor, args.prompt, modes, content)

    if args.file:
        with PromptRepository(args.file) as repo:
            saved = repo.create(
                PromptRecord(
                    prompt=result.prompt,
                    content=result.content,
                    actor=result.actor,
                    comments=modes.comments,
                    documentation=modes.documentation,
                    explanations=modes.explanations,
                )
            )
        logger.info("Prompt stored with id %s in %s", saved.id, args.file)

    if args.output:
        write_output(args.output, result.text)
    else:
        print(result.text)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level or "WARNING")

    try:
        if args.history:
            if not args.file:
                print("Error: --history needs a database path (--file).", file=sys.stderr)
                return 1
            return show_history(args.file)

        if not args.actor or not args.prompt:
            print("Error: Both --actor and --prompt parameters are required.", file=sys.stderr)
            parser.print_help(sys.stderr)
            return 1

        return run(args)
    except PromptgenError as e:
        logger.error("%s", e)
        return 1
    except OSError as e:
        logger.error("File error: %s", e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
