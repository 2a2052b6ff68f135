from typing import Any, Dict, List, Optional, TextIO
import sys


class EventLog:
    """
    Per-game event records. Recording is off unless enabled; ``trace`` lines are
    echoed to ``stream`` (stdout by default) when echo is on.
    """

    def __init__(self, enabled: bool = False, echo: bool = False, stream: Optional[TextIO] = None) -> None:
        self.enabled = enabled
        self.echo = echo
        self.stream = stream
        self.records: List[Dict[str, Any]] = []

    def emit(self, rec: Dict[str, Any]) -> None:
        if self.enabled:
            self.records.append(rec)

    def trace(self, line: str) -> None:
        if self.echo:
            print(line, file=self.stream or sys.stdout)
