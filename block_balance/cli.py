#!/usr/bin/env python3

# Standard Library
import argparse
import json
import sys

# Local modules
import block_balance.core
import block_balance.engine
import block_balance.lines
import block_balance.matcher
import block_balance.rules


#============================================


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse command-line arguments.

	Args:
		argv: Optional argument list (defaults to sys.argv).

	Returns:
		argparse.Namespace: Parsed arguments.
	"""
	parser = argparse.ArgumentParser(
		description="Report balanced blocks and unmatched open/close markers in text files.",
	)
	parser.add_argument(
		"files",
		nargs="+",
		help="Files to check ('-' reads stdin).",
	)
	parser.add_argument(
		"-o",
		"--open",
		dest="open_marker",
		help="Open marker character (default: '(').",
	)
	parser.add_argument(
		"-c",
		"--close",
		dest="close_marker",
		help="Close marker character (default: ')').",
	)
	parser.add_argument(
		"-r",
		"--rules",
		dest="rules_file",
		help="Optional JSON file with 'open' and 'close' markers.",
	)
	parser.add_argument(
		"--show-blocks",
		dest="show_blocks",
		action="store_true",
		help="Print every matched block.",
	)
	parser.add_argument(
		"--json",
		dest="json_output",
		action="store_true",
		help="Emit blocks, issues and summaries as JSON.",
	)
	parser.set_defaults(show_blocks=False, json_output=False)
	args = parser.parse_args(argv)
	return args


#============================================


def resolve_markers(args: argparse.Namespace) -> dict[str, str]:
	"""
	Combine the rules file with command-line overrides.

	Args:
		args: Parsed arguments.

	Returns:
		dict[str, str]: Markers.
	"""
	markers = block_balance.rules.load_markers(args.rules_file)
	if args.open_marker is not None:
		markers["open"] = args.open_marker
	if args.close_marker is not None:
		markers["close"] = args.close_marker
	return block_balance.rules.validate_markers(markers)


#============================================


def format_block(file_path: str, newlines: list[int], block: block_balance.matcher.Block) -> str:
	"""
	Format a block for display.

	Args:
		file_path: Path to the file.
		newlines: Newline index of the file.
		block: Matched block.

	Returns:
		str: Formatted block line.
	"""
	line = block_balance.lines.pos_to_line(newlines, block.start)
	end_line = block_balance.lines.pos_to_line(newlines, block.end)
	return f"{file_path}:{line}: block {block.start}-{block.end} (lines {line}-{end_line})"


#============================================


def main(argv: list[str] | None = None) -> int:
	"""
	Run the block checker.

	Args:
		argv: Optional argument list.

	Returns:
		int: Exit status.
	"""
	args = parse_args(argv)
	try:
		markers = resolve_markers(args)
	except (ValueError, OSError) as error:
		print(f"error: {error}", file=sys.stderr)
		return 2

	issues: list[dict[str, object]] = []
	file_reports: list[dict[str, object]] = []

	for file_path in args.files:
		result = block_balance.engine.check_file(file_path, markers)
		file_issues = result["issues"]
		blocks = result["blocks"]
		for issue in file_issues:
			issue["file"] = file_path
		issues.extend(file_issues)
		file_reports.append({
			"file": file_path,
			"blocks": [list(block.span) for block in blocks],
			"issues": file_issues,
		})
		if args.json_output:
			continue
		if args.show_blocks:
			for block in blocks:
				print(format_block(file_path, result["newlines"], block))
		for issue in file_issues:
			print(block_balance.core.format_issue(file_path, issue))

	error_count, warn_count = block_balance.core.summarize_issues(issues)

	if args.json_output:
		summary = {
			"files_checked": len(args.files),
			"errors": error_count,
			"warnings": warn_count,
			"markers": markers,
			"files": file_reports,
		}
		print(json.dumps(summary, indent=2))
	elif issues:
		print(f"Found {error_count} errors and {warn_count} warnings.")

	if error_count > 0:
		return 1
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
