from pathlib import Path
from typing import Dict, Any, List
import json
import logging
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from wp_blocks import BlockNode, ParseResult, SourceFormat


#
# Report Output
#

def save_text_report(result: ParseResult, output_dir: Path) -> Path:
    """Save report in plain text format"""
    output_file = output_dir / "block_report.txt"
    with open(output_file, 'w') as f:
        f.write("Block Parser Report\n")
        f.write("===================\n\n")

        f.write("Summary\n-------\n")
        f.write(f"Top Level Blocks: {len(result.blocks)}\n")
        f.write(f"Total Blocks: {result.metadata.total_blocks}\n")
        f.write(f"Warnings: {len(result.warnings)}\n")
        f.write(f"Errors: {len(result.errors)}\n")

        f.write("\nBlock Types\n-----------\n")
        for name, count in sorted(result.metadata.block_types_count.items()):
            f.write(f"{name}: {count}\n")

        for title, messages in (("Warnings", result.warnings), ("Errors", result.errors)):
            if messages:
                f.write(f"\n{title}\n{'-' * len(title)}\n")
                for message in messages:
                    f.write(f"{message}\n")

    return output_file

def save_json_report(result: ParseResult, output_dir: Path) -> Path:
    """Save report in JSON format"""
    output_file = output_dir / "block_report.json"
    with open(output_file, 'w') as f:
        json.dump(result.to_dict(), f, indent=2, ensure_ascii=False)
    return output_file

def save_report(result: ParseResult, output_dir: Path, logger: logging.Logger, formats: List[str]) -> None:
    """Save report in specified formats"""
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        saved_files = []

        if "json" in formats:
            json_file = save_json_report(result, output_dir)
            saved_files.append(f"JSON: {json_file}")

        if "text" in formats:
            text_file = save_text_report(result, output_dir)
            saved_files.append(f"Text: {text_file}")

        if saved_files:
            logger.info("Reports saved to:")
            for file in saved_files:
                logger.info(f"- {file}")

    except Exception as e:
        logger.error(f"Failed to save report: {e}")
        raise


#
# Display & Visualization
#

FORMAT_STYLES: Dict[SourceFormat, str] = {
    SourceFormat.COMMENT_BLOCK: "green",
    SourceFormat.SELF_CLOSING: "cyan",
    SourceFormat.ACF_FLEXIBLE_LAYOUT: "magenta",
    SourceFormat.OPAQUE_HTML: "yellow"
}

def print_summary(result: ParseResult, console: Console) -> None:
    """Print block type counts and parse messages"""
    summary = Table(title="Block Summary")
    summary.add_column("Block Type", style="cyan")
    summary.add_column("Count", justify="right", style="green")

    for name, count in sorted(result.metadata.block_types_count.items(), key=lambda item: (-item[1], item[0])):
        summary.add_row(name, str(count))
    summary.add_row("[bold]Total", f"[bold]{result.metadata.total_blocks}")

    console.print(summary)

    for warning in result.warnings:
        console.print(f"[yellow]warning:[/yellow] {warning}")
    for error in result.errors:
        console.print(f"[red]error:[/red] {error}")

def generate_block_tree(result: ParseResult, console: Console) -> None:
    """Print the parsed blocks as a tree"""
    root = Tree("Blocks")
    for block in result.blocks:
        _add_block(root, block)
    console.print(root)

def _add_block(parent: Tree, block: BlockNode) -> None:
    style = FORMAT_STYLES.get(block.source_format, "white")
    label = f"[{style}]{block.name}[/{style}]"
    if block.attributes:
        label += f" [dim]{_describe_attributes(block.attributes)}[/dim]"
    if not block.is_valid:
        label += " [red](invalid)[/red]"

    branch = parent.add(label)
    for child in block.children:
        _add_block(branch, child)

def _describe_attributes(attributes: Dict[str, Any], limit: int = 60) -> str:
    text = json.dumps(attributes, ensure_ascii=False)
    if len(text) > limit:
        return text[:limit - 3] + "..."
    return text
