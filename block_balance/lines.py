# Standard Library
import bisect


#============================================


def build_newline_index(text: str) -> list[int]:
	"""
	Return sorted offsets of newline characters in text.

	Args:
		text: Input text.

	Returns:
		list[int]: Newline offsets.
	"""
	return [i for i, ch in enumerate(text) if ch == "\n"]


#============================================


def pos_to_line(newlines: list[int], pos: int) -> int:
	"""
	Map a character offset to a 1-based line number.
	"""
	return bisect.bisect_left(newlines, pos) + 1


#============================================


def pos_to_line_col(newlines: list[int], pos: int) -> tuple[int, int]:
	"""
	Map a character offset to a 1-based (line, column) pair.

	Args:
		newlines: Newline offsets from build_newline_index().
		pos: Character offset.

	Returns:
		tuple[int, int]: Line and column.
	"""
	line = pos_to_line(newlines, pos)
	line_start = 0 if line == 1 else newlines[line - 2] + 1
	return line, pos - line_start + 1
