from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from bias_radar.app.core.config import Settings, get_settings
from bias_radar.app.core.logging import configure_logging
from bias_radar.app.services.analysis_service import AnalysisSimulator
from bias_radar.app.services.comparison_service import (
    COMPLEMENTARY_POINTS,
    KEY_CONTRADICTIONS,
    ComparisonError,
    ComparisonService,
    ComparisonSession,
)
from bias_radar.app.web.presenters import bias_color


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare two articles for bias, tone and framing.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    compare = subparsers.add_parser("compare", help="Analyze two article text files")
    compare.add_argument("article1", type=Path, help="Path to the first article")
    compare.add_argument("article2", type=Path, help="Path to the second article")
    compare.add_argument("--json", action="store_true", help="Print the comparison as JSON")
    compare.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Override the artificial analysis delay in seconds",
    )

    serve = subparsers.add_parser("serve", help="Run the web application")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    return parser.parse_args(argv)


def _build_settings(delay: float | None) -> Settings:
    settings = get_settings()
    if delay is None:
        return settings
    return settings.model_copy(update={"analysis_delay_seconds": delay})


def _print_session(session: ComparisonSession) -> None:
    for index, analysis in enumerate((session.analysis1, session.analysis2), start=1):
        print(f"Article {index}: bias {analysis.bias_score}/10 [{bias_color(analysis.bias_score)}]")
        print(f"  {analysis.bias_explanation}")
        print(f"  Tone: {analysis.tone} | Sentiment: {analysis.sentiment}")
        print(f"  Emotional language: {', '.join(analysis.emotional_language) or '-'}")
        print(f"  Key themes: {', '.join(analysis.key_themes)}")
        print(f"  Framing emphasis: {', '.join(analysis.framing_emphasis)}")
    print()
    print(f"Neutral summary: {session.neutral_summary}")
    print(f"Comparative insight: {session.comparative_insight}")
    print("How articles complement each other:")
    for point in COMPLEMENTARY_POINTS:
        print(f"  - {point}")
    print("Key contradictions:")
    for point in KEY_CONTRADICTIONS:
        print(f"  - {point}")


def run_compare(args: argparse.Namespace) -> int:
    settings = _build_settings(args.delay)
    configure_logging(log_level="WARNING", json_format=settings.log_json)
    service = ComparisonService(simulator=AnalysisSimulator(settings=settings))
    session = ComparisonSession()

    text1 = args.article1.read_text(encoding="utf-8")
    text2 = args.article2.read_text(encoding="utf-8")
    try:
        asyncio.run(service.run_analysis(session, text1, text2))
    except ComparisonError as exc:
        print(f"{exc.notification.title}: {exc}", file=sys.stderr)
        return 2

    if args.json:
        payload = {
            "article1": session.analysis1.model_dump(),
            "article2": session.analysis2.model_dump(),
            "neutral_summary": session.neutral_summary,
            "comparative_insight": session.comparative_insight,
        }
        print(json.dumps(payload, indent=2))
    else:
        _print_session(session)
    return 0


def run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("bias_radar.app.main:app", host=args.host, port=args.port, reload=False)
    return 0


def main() -> int:
    args = parse_args(sys.argv[1:])
    if args.command == "compare":
        return run_compare(args)
    return run_serve(args)


if __name__ == "__main__":
    sys.exit(main())
