# Standard Library
import dataclasses
import enum


#============================================


class BlockBalanceError(Exception):
	"""Base class for block balance errors."""


class UnmatchedCloseError(BlockBalanceError):
	"""A close event arrived with no pending open."""

	def __init__(self, position: int) -> None:
		self.position = position
		super().__init__(f"unmatched close at position {position}")


class UnmatchedOpenError(BlockBalanceError):
	"""One or more opens were still pending at consume time."""

	def __init__(self, positions: tuple[int, ...]) -> None:
		self.positions = tuple(positions)
		joined = ", ".join(str(pos) for pos in self.positions)
		super().__init__(f"unmatched open(s) at position(s) {joined}")


class MatcherStateError(BlockBalanceError):
	"""The matcher was used after it failed or was consumed."""


class PositionOrderError(BlockBalanceError, ValueError):
	"""A position was negative, not an int, or not strictly increasing."""


#============================================


@dataclasses.dataclass(frozen=True)
class Block:
	start: int
	end: int

	def __post_init__(self) -> None:
		if self.start >= self.end:
			raise ValueError(f"block start {self.start} must be before end {self.end}")

	@property
	def span(self) -> tuple[int, int]:
		return (self.start, self.end)

	@property
	def length(self) -> int:
		return self.end - self.start

	def contains(self, other: "Block") -> bool:
		"""
		Return True when other lies strictly inside this block.

		Args:
			other: Block to test.

		Returns:
			bool: Strict containment flag.
		"""
		return self.start < other.start and other.end < self.end


class MatcherPhase(enum.Enum):
	OPEN = "open"
	FAILED = "failed"
	CONSUMED = "consumed"


#============================================


class BlockMatcher:
	"""
	Pair open and close positions into nested blocks.

	Positions must arrive in strictly increasing order. An unmatched close is
	reported as soon as it is added; unmatched opens are only known once the
	stream ends, so they are reported by consume().
	"""

	def __init__(self) -> None:
		self._stack: list[int] = []
		self._blocks: list[Block] = []
		self._last_pos: int | None = None
		self._phase = MatcherPhase.OPEN
		self._failure: UnmatchedCloseError | None = None

	@property
	def state(self) -> MatcherPhase:
		return self._phase

	@property
	def depth(self) -> int:
		return len(self._stack)

	@property
	def matched_count(self) -> int:
		return len(self._blocks)

	def pending_positions(self) -> tuple[int, ...]:
		"""
		Return pending open positions, oldest first.

		Returns:
			tuple[int, ...]: Pending positions.
		"""
		return tuple(self._stack)

	def blocks(self) -> tuple[Block, ...]:
		"""
		Return the blocks matched so far without consuming.

		Returns:
			tuple[Block, ...]: Blocks in close order.
		"""
		return tuple(self._blocks)

	def is_balanced(self) -> bool:
		"""
		Check whether every open seen so far has been closed.

		Returns:
			bool: True when nothing is pending and no close failed.
		"""
		return self._failure is None and not self._stack

	def _check_accepting(self) -> None:
		if self._phase is MatcherPhase.CONSUMED:
			raise MatcherStateError("matcher already consumed")
		if self._phase is MatcherPhase.FAILED:
			raise MatcherStateError(f"matcher already failed: {self._failure}")

	def _check_position(self, pos: int) -> None:
		if isinstance(pos, bool) or not isinstance(pos, int):
			raise PositionOrderError(f"position must be an int, got {pos!r}")
		if pos < 0:
			raise PositionOrderError(f"position must be non-negative, got {pos}")
		if self._last_pos is not None and pos <= self._last_pos:
			raise PositionOrderError(
				f"position {pos} is not after previous position {self._last_pos}"
			)

	def add_open(self, pos: int) -> None:
		"""
		Record an open event.

		Args:
			pos: Position of the open marker.
		"""
		self._check_accepting()
		self._check_position(pos)
		self._stack.append(pos)
		self._last_pos = pos

	def add_close(self, pos: int) -> Block:
		"""
		Match a close event against the most recent pending open.

		Args:
			pos: Position of the close marker.

		Returns:
			Block: The block closed by this event.

		Raises:
			UnmatchedCloseError: No open is pending.
		"""
		self._check_accepting()
		self._check_position(pos)
		if not self._stack:
			# stack and blocks stay as they were
			self._failure = UnmatchedCloseError(pos)
			self._phase = MatcherPhase.FAILED
			raise self._failure
		start = self._stack.pop()
		block = Block(start, pos)
		self._blocks.append(block)
		self._last_pos = pos
		return block

	def consume(self) -> tuple[Block, ...]:
		"""
		Finish the stream and return all matched blocks.

		The matcher is consumed whether or not this call succeeds.

		Returns:
			tuple[Block, ...]: Blocks in the order their closes were added.

		Raises:
			UnmatchedOpenError: Opens were never closed.
			MatcherStateError: Already consumed, or an earlier close failed.
		"""
		phase = self._phase
		if phase is MatcherPhase.CONSUMED:
			raise MatcherStateError("matcher already consumed")
		self._phase = MatcherPhase.CONSUMED
		if phase is MatcherPhase.FAILED:
			raise MatcherStateError(f"matcher already failed: {self._failure}")
		if self._stack:
			raise UnmatchedOpenError(tuple(self._stack))
		return tuple(self._blocks)
