from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, Sequence, TextIO

from text_metrics.config import load_app_config
from text_metrics.document_parsing import DocumentParseError, read_for_metrics
from text_metrics.logging_config import setup_logging
from text_metrics.metrics import analyze


logger = logging.getLogger(__name__)


def iter_sources(paths: Sequence[str], text: Optional[str], stdin: TextIO) -> Iterable[tuple[str, str]]:
    if text is not None:
        yield "<text>", text
    for raw in paths:
        path = Path(raw).expanduser()
        try:
            content, kind = read_for_metrics(path)
        except DocumentParseError as exc:
            raise SystemExit(f"{exc}") from exc
        logger.info("document_read path=%s kind=%s", path, kind)
        yield path.as_posix(), content
    if text is None and not paths:
        yield "<stdin>", stdin.read()


def cmd_analyze(args: argparse.Namespace, *, stdin: TextIO, stdout: TextIO) -> int:
    for source, content in iter_sources(args.paths, args.text, stdin):
        result = analyze(content)
        stdout.write(json.dumps({"source": source, **result.as_dict()}, ensure_ascii=False))
        stdout.write("\n")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    cfg = load_app_config(args.config)
    host = args.host or cfg.server.host
    port = args.port if args.port is not None else cfg.server.port

    from text_metrics.api.main import create_app

    app = create_app(cfg)
    logger.info("serve_start host=%s port=%d", host, port)
    uvicorn.run(app, host=host, port=port, log_config=None)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="text-metrics",
        description="Count words and characters and estimate reading time.",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: $LOG_LEVEL or INFO).")
    sub = parser.add_subparsers(dest="command", required=True)

    analyze_p = sub.add_parser("analyze", help="Measure files, inline text or stdin.")
    analyze_p.add_argument(
        "paths",
        nargs="*",
        help="Text, markdown or html files. Reads stdin when neither paths nor --text are given.",
    )
    analyze_p.add_argument("--text", default=None, help="Measure this literal text.")

    serve_p = sub.add_parser("serve", help="Run the HTTP API.")
    serve_p.add_argument("--config", default=None, help="Path to config.yaml (default: $TEXT_METRICS_CONFIG).")
    serve_p.add_argument("--host", default=None, help="Bind address (default from config: 0.0.0.0).")
    serve_p.add_argument("--port", type=int, default=None, help="Bind port (default from config: 80).")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    if args.command == "analyze":
        return cmd_analyze(args, stdin=sys.stdin, stdout=sys.stdout)
    return cmd_serve(args)


if __name__ == "__main__":
    raise SystemExit(main())
