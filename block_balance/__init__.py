"""Balanced block matching over open/close position events."""

from block_balance.events import EventKind, match_events, scan_markers
from block_balance.matcher import (
	Block,
	BlockBalanceError,
	BlockMatcher,
	MatcherPhase,
	MatcherStateError,
	PositionOrderError,
	UnmatchedCloseError,
	UnmatchedOpenError,
)

__all__ = [
	"Block",
	"BlockBalanceError",
	"BlockMatcher",
	"EventKind",
	"MatcherPhase",
	"MatcherStateError",
	"PositionOrderError",
	"UnmatchedCloseError",
	"UnmatchedOpenError",
	"match_events",
	"scan_markers",
]
