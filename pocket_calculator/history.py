# history.py
# Python 3.x

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Tuple

HISTORY_SIZE = 5


@dataclass(frozen=True)
class HistoryEntry:
    expression_text: str
    result_text: str

    def __str__(self) -> str:
        return f'{self.expression_text} = {self.result_text}'


class HistoryLog:
    """최근 계산 기록. 가득 차면 가장 오래된 항목부터 밀려난다"""

    def __init__(self, capacity: int = HISTORY_SIZE) -> None:
        if capacity < 1:
            raise ValueError('capacity must be positive')
        self._entries = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._entries.maxlen

    def append(self, entry: HistoryEntry) -> None:
        self._entries.append(entry)

    def entries(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(tuple(self._entries))
