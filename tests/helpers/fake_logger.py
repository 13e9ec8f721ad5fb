"""Logger double recording femtologging-style ``log`` calls."""

from __future__ import annotations


class FakeLogger:
    """Collects log calls for assertions."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, object | None, bool]] = []

    def log(
        self,
        level: str,
        message: str,
        /,
        *,
        exc_info: object | None = None,
        stack_info: bool = False,
    ) -> str:
        self.calls.append((level, message, exc_info, stack_info))
        return message

    @property
    def messages(self) -> list[str]:
        """Return the logged messages in emission order."""
        return [message for _, message, _, _ in self.calls]
