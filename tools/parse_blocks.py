import argparse
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from wp_blocks import ParserConfig, ParseResult, parse
from modules.report import generate_block_tree, print_summary, save_report


#
# Configuration & Setup
#

@dataclass
class ToolConfig:
    """Block parser tool settings"""
    input_path: Path
    output_dir: Path
    allowed_blocks: Optional[List[str]] = None
    disallowed_blocks: Optional[List[str]] = None
    keep_invalid: bool = False
    balanced: bool = False
    verbose: bool = False
    report_formats: List[str] = field(default_factory=lambda: ["text"])


def parse_arguments() -> ToolConfig:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="Parse WordPress block content and report the block tree"
    )
    parser.add_argument(
        "input_path",
        type=Path,
        help="File containing block markup, flexible content JSON or HTML"
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path.cwd() / "block_results",
        help="Output directory for reports"
    )
    parser.add_argument(
        "--allow",
        nargs="+",
        default=None,
        help="Only keep these top-level block names"
    )
    parser.add_argument(
        "--deny",
        nargs="+",
        default=None,
        help="Remove these top-level block names"
    )
    parser.add_argument(
        "--keep-invalid",
        action="store_true",
        help="Report invalid block names as errors instead of stripping them"
    )
    parser.add_argument(
        "--balanced",
        action="store_true",
        help="Match closing markers by nesting depth"
    )
    parser.add_argument(
        "--format",
        nargs="+",
        choices=["json", "text"],
        default=["text"],
        help="Report output formats (default: text)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )

    args = parser.parse_args()
    return ToolConfig(
        input_path=args.input_path,
        output_dir=args.output,
        allowed_blocks=args.allow,
        disallowed_blocks=args.deny,
        keep_invalid=args.keep_invalid,
        balanced=args.balanced,
        verbose=args.verbose,
        report_formats=args.format
    )


def setup_logging(verbose: bool) -> logging.Logger:
    """Setup logging"""
    log_level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger("wp_blocks")
    logger.setLevel(log_level)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        logging.Formatter('%(levelname)s: %(message)s')
    )
    logger.addHandler(console_handler)

    return logger


#
# Parsing
#

def parse_file(config: ToolConfig, logger: logging.Logger) -> ParseResult:
    """Read and parse the input file"""
    try:
        content = config.input_path.read_text(encoding='utf-8')
    except UnicodeDecodeError:
        logger.debug(f"Retrying with latin1 encoding: {config.input_path}")
        content = config.input_path.read_text(encoding='latin1')

    parser_config = ParserConfig(
        allowed_blocks=config.allowed_blocks,
        disallowed_blocks=config.disallowed_blocks,
        strip_invalid_blocks=not config.keep_invalid,
        balance_nested_blocks=config.balanced
    )
    logger.info(f"Parsing {config.input_path}")
    return parse(content, parser_config)


#
# Main Program Flow
#

def main() -> int:
    """Main entry point"""
    config = parse_arguments()
    logger = setup_logging(config.verbose)
    console = Console()

    try:
        if not config.input_path.is_file():
            logger.error(f"Input file not found: {config.input_path}")
            return 1

        result = parse_file(config, logger)

        generate_block_tree(result, console)
        print_summary(result, console)
        save_report(result, config.output_dir, logger, formats=config.report_formats)

        return 0 if result.ok else 2

    except KeyboardInterrupt:
        print("\nParsing interrupted by user")
        return 1
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
