"""The two stacks and the eleven operations allowed on them."""

from __future__ import annotations

from collections.abc import Callable, Iterable


class Stacks:
    """Stacks a and b, each a list with the bottom at index 0 and the top last.

    Every operation that is performed is appended to ``log`` and, when an
    ``emit`` callback was given, passed to it by name.
    """

    def __init__(
        self,
        values: Iterable[int],
        emit: Callable[[str], object] | None = None,
    ) -> None:
        """Build stack a from values listed top first; stack b starts empty."""
        self.a: list[int] = list(values)[::-1]
        self.b: list[int] = []
        self.log: list[str] = []
        self._emit = emit

    def _record(self, name: str) -> None:
        self.log.append(name)
        if self._emit is not None:
            self._emit(name)

    @staticmethod
    def _swap(stack: list[int]) -> bool:
        if len(stack) > 1:
            stack[-1], stack[-2] = stack[-2], stack[-1]
            return True
        return False

    @staticmethod
    def _rotate(stack: list[int]) -> None:
        if len(stack) > 1:
            stack.insert(0, stack.pop())

    @staticmethod
    def _reverse_rotate(stack: list[int]) -> None:
        if len(stack) > 1:
            stack.append(stack.pop(0))

    def sa(self) -> None:
        """Swap the top two of a; nothing happens or is recorded with fewer."""
        if self._swap(self.a):
            self._record("sa")

    def sb(self) -> None:
        """Swap the top two of b; nothing happens or is recorded with fewer."""
        if self._swap(self.b):
            self._record("sb")

    def ss(self) -> None:
        """Perform sa then sb."""
        self.sa()
        self.sb()

    def pa(self) -> None:
        """Move the top of b onto a."""
        if self.b:
            self.a.append(self.b.pop())
        self._record("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        if self.a:
            self.b.append(self.a.pop())
        self._record("pb")

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        self._rotate(self.a)
        self._record("ra")

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        self._rotate(self.b)
        self._record("rb")

    def rr(self) -> None:
        """Perform ra then rb."""
        self.ra()
        self.rb()

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        self._reverse_rotate(self.a)
        self._record("rra")

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        self._reverse_rotate(self.b)
        self._record("rrb")

    def rrr(self) -> None:
        """Perform rra then rrb."""
        self.rra()
        self.rrb()