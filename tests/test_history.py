from datetime import datetime

from modules.history import HISTORY_LIMIT, HistoryLog, timestamp_label


def test_history_keeps_fifty_newest():
    log = HistoryLog()
    for i in range(60):
        log.add('Wheat', float(i), date=f'day {i}')

    assert len(log) == HISTORY_LIMIT
    assert [record.pred for record in log.entries()] == [float(i) for i in range(59, 9, -1)]
    assert log.latest().date == 'day 59'


def test_entries_limit():
    log = HistoryLog()
    for crop in ('Rice', 'Maize', 'Cotton'):
        log.add(crop, 1.0)
    assert [record.crop for record in log.entries(2)] == ['Cotton', 'Maize']
    assert log.entries(0) == []


def test_limit_cannot_exceed_cap():
    assert HistoryLog(limit=500).limit == HISTORY_LIMIT


def test_clear():
    log = HistoryLog()
    log.add('Rice', 2.4)
    log.clear()
    assert len(log) == 0
    assert log.latest() is None


def test_default_date_label():
    record = HistoryLog().add('Rice', 2.4)
    assert record.date
    assert timestamp_label(datetime(2024, 3, 5, 14, 7, 9)) == '03/05/2024, 02:07:09 PM'
