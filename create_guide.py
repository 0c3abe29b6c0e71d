"""Convert a saved style-guide HTML page into a Markdown guide."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from config_loader import (
    MISSING_CODE_POLICIES,
    ConfigError,
    resolve_runtime_options,
)
from styleguide import (
    GuideError,
    GuideInputError,
    GuideOutputError,
    convert_guide,
)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Return CLI arguments for the guide conversion tool."""

    parser = argparse.ArgumentParser(
        description="Convert a saved style-guide HTML page into Markdown.",
    )
    parser.add_argument("--config", help="Path to config JSON file.")
    parser.add_argument("--input-html", help="Override input HTML path.")
    parser.add_argument("--output", help="Override Markdown output path.")
    parser.add_argument(
        "--language",
        help="Language tag for code fences (defaults to ruby).",
    )
    parser.add_argument(
        "--on-missing-code",
        choices=MISSING_CODE_POLICIES,
        help="Fail or skip when a code example has no code block.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Entry point for the ``create-guide`` CLI."""

    args = parse_args(argv)
    try:
        runtime = resolve_runtime_options(
            config_path=args.config,
            input_html=args.input_html,
            output_path=args.output,
            code_language=args.language,
            on_missing_code=args.on_missing_code,
        )
    except ConfigError as exc:
        raise SystemExit(f"Config error: {exc}") from exc

    try:
        summary = convert_guide(
            runtime["input_html"],
            runtime["output_path"],
            options=runtime["options"],
        )
    except GuideInputError as exc:
        raise SystemExit(f"Input error: {exc}") from exc
    except GuideOutputError as exc:
        raise SystemExit(f"Output error: {exc}") from exc
    except GuideError as exc:
        raise SystemExit(f"Structure error: {exc}") from exc

    print(
        f"Converted {summary.article_count} articles "
        f"into {summary.line_count} lines."
    )


if __name__ == "__main__":
    main()
