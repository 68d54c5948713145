import pytest

# Local modules
import block_balance.core
import block_balance.lines
import block_balance.matcher


#============================================


def test_issues_from_unmatched_close_without_lines() -> None:
	error = block_balance.matcher.UnmatchedCloseError(7)
	issues = block_balance.core.issues_from_error(error)
	assert issues == [
		{"severity": "ERROR", "message": "unmatched close at position 7", "position": 7},
	]


def test_issues_from_unmatched_open_with_lines() -> None:
	text = "(a\n  (b\n"
	newlines = block_balance.lines.build_newline_index(text)
	error = block_balance.matcher.UnmatchedOpenError((0, 5))
	issues = block_balance.core.issues_from_error(error, newlines)
	assert [issue["line"] for issue in issues] == [1, 2]
	assert issues[1]["message"] == "unmatched open at column 3"
	assert issues[1]["position"] == 5


def test_issues_from_state_error() -> None:
	error = block_balance.matcher.MatcherStateError("matcher already consumed")
	issues = block_balance.core.issues_from_error(error)
	assert issues == [{"severity": "ERROR", "message": "matcher already consumed"}]


def test_summarize_issues() -> None:
	issues = [
		block_balance.core.make_issue("ERROR", "a"),
		block_balance.core.make_issue("WARNING", "b"),
		block_balance.core.make_issue("ERROR", "c"),
	]
	assert block_balance.core.summarize_issues(issues) == (2, 1)


@pytest.mark.parametrize(
	"issue,expected",
	[
		({"severity": "ERROR", "message": "m", "line": 4}, "f.txt:4: ERROR: m"),
		({"severity": "ERROR", "message": "m"}, "f.txt: ERROR: m"),
		({"message": "m"}, "f.txt: WARNING: m"),
	],
)
def test_format_issue(issue: dict[str, object], expected: str) -> None:
	assert block_balance.core.format_issue("f.txt", issue) == expected


#============================================


def test_pos_to_line_col() -> None:
	text = "ab\ncd\n\nef"
	newlines = block_balance.lines.build_newline_index(text)
	assert newlines == [2, 5, 6]
	assert block_balance.lines.pos_to_line_col(newlines, 0) == (1, 1)
	assert block_balance.lines.pos_to_line_col(newlines, 4) == (2, 2)
	assert block_balance.lines.pos_to_line_col(newlines, 7) == (4, 1)
	assert block_balance.lines.pos_to_line(newlines, 2) == 1
