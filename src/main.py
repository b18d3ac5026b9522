"""Command-line entry point for one-shot SEO content generation."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from src.chains.seo_generator import (
    SEOContentGenerator,
    ToolMode,
    build_messages,
    parse_generation_request,
)
from src.errors import ConfigurationError
from src.ui.controller import InteractionController
from src.ui.state import GenerationStatus

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a Rank Math SEO article or keyword cluster with Gemini"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the generated HTML to this file instead of stdout",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the messages that would be sent and exit without calling Gemini",
    )
    subparsers = parser.add_subparsers(dest="mode", required=True)

    article = subparsers.add_parser(ToolMode.ARTICLE.value, help="Write a long-form SEO article")
    article.add_argument("--keyword", required=True, help="KEY BLOG (primary keyword)")
    article.add_argument(
        "--secondary",
        action="append",
        default=[],
        help="KEY PHỤ (secondary keyword); repeat for several",
    )
    article.add_argument("--product", default="", help="Related product name or URL")

    cluster = subparsers.add_parser(ToolMode.CLUSTER.value, help="Build a keyword cluster")
    cluster.add_argument("--keyword", required=True, help="KEY CHÍNH (seed keyword)")

    return parser


def _form_fields(args: argparse.Namespace) -> dict[str, str]:
    if args.mode == ToolMode.ARTICLE.value:
        return {
            "primary_keyword": args.keyword,
            "secondary_keywords": "\n".join(args.secondary),
            "related_product": args.product,
        }
    return {"seed_keyword": args.keyword}


def main(argv: list[str] | None = None) -> int:
    """Main function for the generation CLI.

    Returns:
        Process exit code: 0 on success, 1 on generation or input errors,
        2 on configuration errors.
    """
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    fields = _form_fields(args)

    # Dry run renders the prompt only, no Gemini client or API key needed
    if args.dry_run:
        try:
            request = parse_generation_request({"mode": args.mode, **fields})
        except ValidationError as e:
            logger.error(f"Invalid input: {e}")
            return 1
        for message in build_messages(request):
            print(f"--- {message.type} ---")
            print(message.content)
        return 0

    try:
        generator = SEOContentGenerator()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 2

    controller = InteractionController(generator)
    controller.switch_mode(args.mode)
    controller.update_form(**fields)

    if not controller.submit():
        logger.error("Keyword must not be blank")
        return 1

    state = controller.state
    if state.status != GenerationStatus.SUCCESS:
        logger.error(f"Generation failed: {state.error_message}")
        return 1

    if args.output:
        args.output.write_text(state.result, encoding="utf-8")
        logger.info(f"Wrote {len(state.result)} characters to {args.output}")
    else:
        print(state.result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
