"""
Call-site capture for report headers.
"""

import inspect
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class CallSite:
    """Source location a report was issued from. Display-only, never validated."""

    file: str
    function: str
    line: int

    @classmethod
    def capture(cls, stacklevel: int = 1) -> "CallSite":
        """
        Capture the location of a caller on the current stack.

        Args:
            stacklevel: 1 is the function calling ``capture``, 2 its caller,
                and so on. Walking past the outermost frame stops there.
        """
        frame = inspect.currentframe()
        try:
            for _ in range(stacklevel):
                if frame.f_back is None:
                    break
                frame = frame.f_back
            code = frame.f_code
            return cls(
                file=os.path.basename(code.co_filename),
                function=code.co_name,
                line=frame.f_lineno,
            )
        finally:
            del frame

    def __str__(self) -> str:
        return f"{self.function} ({self.file}:{self.line})"
