"""
Command line entry point

    polydash serve            # run the dashboard and metrics endpoint
    polydash analyze URL      # analyze one market and write dashboard.html
"""

import argparse
import logging
import sys
from pathlib import Path

from .app import create_app
from .config import Config
from .ui.dashboard import write_html_dashboard
from .ui.transport import HttpTransport
from .ui.view import DashboardView
from .utils.logging import get_logger, log_error, log_success, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="polydash", description="Polymarket market dashboard")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the web dashboard")
    serve.add_argument("--host", default=Config.HOST)
    serve.add_argument("--port", type=int, default=Config.PORT)
    serve.add_argument("--debug", action="store_true")

    analyze = sub.add_parser("analyze", help="Analyze a market and write an HTML dashboard")
    analyze.add_argument("url", help="Polymarket market URL")
    analyze.add_argument("--endpoint", default=Config.API_BASE_URL, help="Base URL of the metrics endpoint")
    analyze.add_argument("--output", type=Path, default=Config.DASHBOARD_OUTPUT, help="Where to write the dashboard")

    return parser


def cmd_serve(args) -> int:
    app = create_app()
    logger.info(f"Dashboard listening on http://{args.host}:{args.port}")
    app.run(host=args.host, port=args.port, debug=args.debug)
    return 0


def cmd_analyze(args) -> int:
    with HttpTransport(args.endpoint) as transport:
        state = DashboardView(transport, url=args.url).analyze()

    path = write_html_dashboard(state, args.output)
    if state.error:
        log_error(f"Analysis failed: {state.error}")
        return 1

    log_success(f"Analyzed {args.url} -> {path}")
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else Config.log_level(), log_file=Config.log_path())
    logger.debug(f"Config: {Config.as_dict()}")

    commands = {
        "serve": cmd_serve,
        "analyze": cmd_analyze,
    }
    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
