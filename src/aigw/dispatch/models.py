"""Parameter bundle for file-bearing operations."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

MAX_FILE_OPTIONS = 4
_REQUIRED_POSITIONS = 3


class FileRequest(BaseModel):
    """A readable stream, a model identifier and up to four ordered scalar options.

    The provider takes these positionally; see :meth:`positional_args`.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    file: Any
    model: str
    options: tuple[Any, ...] = ()

    @field_validator("options")
    @classmethod
    def _at_most_four(cls, value: tuple[Any, ...]) -> tuple[Any, ...]:
        if len(value) > MAX_FILE_OPTIONS:
            msg = f"at most {MAX_FILE_OPTIONS} options are accepted, got {len(value)}"
            raise ValueError(msg)
        return value

    def positional_args(self) -> tuple[Any, ...]:
        """``(stream, model, opt0, opt1, opt2[, opt3])``.

        The first three option slots are always passed (``None`` when absent);
        the fourth only when the caller supplied it.
        """
        head = list(self.options[:_REQUIRED_POSITIONS])
        head += [None] * (_REQUIRED_POSITIONS - len(head))
        args: list[Any] = [self.file, self.model, *head]
        if len(self.options) > _REQUIRED_POSITIONS and self.options[_REQUIRED_POSITIONS] is not None:
            args.append(self.options[_REQUIRED_POSITIONS])
        return tuple(args)

    def describe(self) -> dict[str, Any]:
        """Loggable form; the stream is rendered by name only."""
        return {
            "file": str(getattr(self.file, "name", "<stream>")),
            "model": self.model,
            "options": list(self.options),
        }
