# Standard Library

# Local modules
import block_balance.lines
import block_balance.matcher


SEVERITY_ERROR = "ERROR"
SEVERITY_WARNING = "WARNING"


#============================================


def make_issue(
	severity: str,
	message: str,
	line: int | None = None,
	position: int | None = None,
) -> dict[str, object]:
	"""
	Create an issue dict.

	Args:
		severity: Severity label.
		message: Issue message.
		line: Optional line number.
		position: Optional character offset.

	Returns:
		dict[str, object]: Issue dict.
	"""
	issue: dict[str, object] = {
		"severity": severity,
		"message": message,
	}
	if line is not None:
		issue["line"] = int(line)
	if position is not None:
		issue["position"] = int(position)
	return issue


#============================================


def issues_from_error(
	error: block_balance.matcher.BlockBalanceError,
	newlines: list[int] | None = None,
) -> list[dict[str, object]]:
	"""
	Convert a matcher error into issue dicts, one per offending position.

	Args:
		error: Error raised by the matcher.
		newlines: Optional newline index for line numbers.

	Returns:
		list[dict[str, object]]: Issue list.
	"""
	if isinstance(error, block_balance.matcher.UnmatchedCloseError):
		positions = [error.position]
		label = "close"
	elif isinstance(error, block_balance.matcher.UnmatchedOpenError):
		positions = list(error.positions)
		label = "open"
	else:
		return [make_issue(SEVERITY_ERROR, str(error))]

	issues: list[dict[str, object]] = []
	for pos in positions:
		line = None
		message = f"unmatched {label} at position {pos}"
		if newlines is not None:
			line, col = block_balance.lines.pos_to_line_col(newlines, pos)
			message = f"unmatched {label} at column {col}"
		issues.append(make_issue(SEVERITY_ERROR, message, line=line, position=pos))
	return issues


#============================================


def summarize_issues(issues: list[dict[str, object]]) -> tuple[int, int]:
	"""
	Summarize issue counts.

	Args:
		issues: Issue list.

	Returns:
		tuple[int, int]: (errors, warnings)
	"""
	errors = len([issue for issue in issues if issue.get("severity") == SEVERITY_ERROR])
	warnings = len(issues) - errors
	return errors, warnings


#============================================


def format_issue(file_path: str, issue: dict[str, object]) -> str:
	"""
	Format an issue for display.

	Args:
		file_path: Path to the file.
		issue: Issue dict.

	Returns:
		str: Formatted issue line.
	"""
	severity = str(issue.get("severity", SEVERITY_WARNING))
	message = str(issue.get("message", ""))
	line = issue.get("line")
	if isinstance(line, int):
		return f"{file_path}:{line}: {severity}: {message}"
	return f"{file_path}: {severity}: {message}"
