# Standard Library
import sys

# Local modules
import block_balance.core
import block_balance.events
import block_balance.lines
import block_balance.matcher


#============================================


def check_text(text: str, markers: dict[str, str]) -> dict[str, object]:
	"""
	Match markers in a text blob and collect blocks or issues.

	Args:
		text: Text to scan.
		markers: Dict with "open" and "close" characters.

	Returns:
		dict[str, object]: Result with "blocks", "issues" and "newlines".
	"""
	newlines = block_balance.lines.build_newline_index(text)
	events = block_balance.events.scan_markers(text, markers["open"], markers["close"])
	blocks: tuple[block_balance.matcher.Block, ...] = ()
	issues: list[dict[str, object]] = []
	try:
		blocks = block_balance.events.match_events(events)
	except block_balance.matcher.BlockBalanceError as error:
		issues = block_balance.core.issues_from_error(error, newlines)

	result = {
		"blocks": blocks,
		"issues": issues,
		"newlines": newlines,
	}
	return result


#============================================


def check_file(file_path: str, markers: dict[str, str]) -> dict[str, object]:
	"""
	Check a single file, or stdin when file_path is "-".

	Args:
		file_path: Path to file.
		markers: Dict with "open" and "close" characters.

	Returns:
		dict[str, object]: Result from check_text().
	"""
	try:
		if file_path == "-":
			text = sys.stdin.read()
		else:
			with open(file_path, "r", encoding="utf-8") as handle:
				text = handle.read()
	except (OSError, UnicodeDecodeError) as error:
		message = f"cannot read file: {error}"
		result = {
			"blocks": (),
			"issues": [block_balance.core.make_issue(block_balance.core.SEVERITY_ERROR, message)],
			"newlines": [],
		}
		return result
	return check_text(text, markers)
