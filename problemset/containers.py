"""A queue built from two stacks and a stack built from two queues."""

from __future__ import annotations

from collections import deque


class MyQueue:
    """First-in first-out queue backed by two stacks."""

    def __init__(self) -> None:
        self._stack_in: list[int] = []
        self._stack_out: list[int] = []

    def _refill(self) -> None:
        # Draining the input stack into the output stack reverses it, so the
        # oldest element ends up on top; new pushes can keep going to the
        # input stack without disturbing that order.
        if not self._stack_out:
            while self._stack_in:
                self._stack_out.append(self._stack_in.pop())

    def push(self, x: int) -> None:
        """Add ``x`` at the back of the queue."""
        self._stack_in.append(x)

    def pop(self) -> int:
        """Remove and return the front element."""
        self._refill()
        if not self._stack_out:
            raise IndexError("pop from empty queue")
        return self._stack_out.pop()

    def peek(self) -> int:
        """Return the front element without removing it."""
        self._refill()
        if not self._stack_out:
            raise IndexError("peek at empty queue")
        return self._stack_out[-1]

    def empty(self) -> bool:
        """Tell whether the queue holds no elements."""
        return not self._stack_in and not self._stack_out

    def __len__(self) -> int:
        return len(self._stack_in) + len(self._stack_out)


class MyStack:
    """Last-in first-out stack backed by two queues."""

    def __init__(self) -> None:
        self._queues: tuple[deque[int], deque[int]] = (deque(), deque())
        self._active = 0

    def push(self, x: int) -> None:
        """Put ``x`` on top of the stack."""
        self._queues[self._active].append(x)

    def pop(self) -> int:
        """Remove and return the top element."""
        source = self._queues[self._active]
        target = self._queues[1 - self._active]
        if not source:
            raise IndexError("pop from empty stack")
        while len(source) > 1:
            target.append(source.popleft())
        self._active = 1 - self._active
        return source.popleft()

    def top(self) -> int:
        """Return the top element without removing it."""
        value = self.pop()
        self.push(value)
        return value

    def empty(self) -> bool:
        """Tell whether the stack holds no elements."""
        return not self._queues[0] and not self._queues[1]

    def __len__(self) -> int:
        return len(self._queues[0]) + len(self._queues[1])