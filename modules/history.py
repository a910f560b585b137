"""
In-memory prediction history, newest first.
"""

import threading
from collections import deque, namedtuple
from datetime import datetime

HISTORY_LIMIT = 50

HistoryRecord = namedtuple('HistoryRecord', ['crop', 'pred', 'date'])


def timestamp_label(moment=None):
    moment = moment or datetime.now()
    return moment.strftime('%m/%d/%Y, %I:%M:%S %p')


class HistoryLog:
    def __init__(self, limit=HISTORY_LIMIT):
        self.limit = min(limit, HISTORY_LIMIT)
        self._records = deque(maxlen=self.limit)
        self._lock = threading.Lock()

    def add(self, crop, pred, date=None):
        record = HistoryRecord(crop=crop, pred=pred, date=date or timestamp_label())
        with self._lock:
            # deque drops from the right once full
            self._records.appendleft(record)
        return record

    def entries(self, limit=None):
        with self._lock:
            records = list(self._records)
        if limit is not None:
            records = records[:max(0, limit)]
        return records

    def latest(self):
        with self._lock:
            return self._records[0] if self._records else None

    def clear(self):
        with self._lock:
            self._records.clear()

    def __len__(self):
        return len(self._records)
