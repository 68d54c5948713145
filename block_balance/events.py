# Standard Library
import enum
from collections.abc import Iterable

# Local modules
import block_balance.matcher


class EventKind(enum.Enum):
	OPEN = "open"
	CLOSE = "close"


#============================================


def match_events(events: Iterable[tuple[EventKind, int]]) -> tuple[block_balance.matcher.Block, ...]:
	"""
	Feed (kind, position) events to a new matcher and consume it.

	Args:
		events: Events in scan order.

	Returns:
		tuple[Block, ...]: Matched blocks in close order.
	"""
	matcher = block_balance.matcher.BlockMatcher()
	for kind, pos in events:
		if kind is EventKind.OPEN:
			matcher.add_open(pos)
		elif kind is EventKind.CLOSE:
			matcher.add_close(pos)
		else:
			raise ValueError(f"Unknown event kind: {kind!r}")
	blocks = matcher.consume()
	return blocks


#============================================


def scan_markers(text: str, open_marker: str, close_marker: str) -> list[tuple[EventKind, int]]:
	"""
	Turn single-character markers in text into open/close events.

	Args:
		text: Input text.
		open_marker: Open character.
		close_marker: Close character.

	Returns:
		list[tuple[EventKind, int]]: Events by character offset.
	"""
	events: list[tuple[EventKind, int]] = []
	for i, ch in enumerate(text):
		if ch == open_marker:
			events.append((EventKind.OPEN, i))
		elif ch == close_marker:
			events.append((EventKind.CLOSE, i))
	return events
