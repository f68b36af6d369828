from __future__ import annotations

from datetime import datetime

from pf_shortfall.core.schedule import project_payment_schedule


def test_schedule_shape_and_dates(config):
    schedule = project_payment_schedule(4508, config)

    assert len(schedule) == 22
    assert schedule[0].date == "31-03-2024"
    assert schedule[12].date == "31-03-2025"
    assert schedule[13].date == "30-04-2025"
    assert schedule[-1].date == "31-12-2025"
    parsed = [datetime.strptime(entry.date, "%d-%m-%Y") for entry in schedule]
    assert parsed == sorted(parsed)
    assert len(set(parsed)) == len(parsed)


def test_first_window_simple_interest(config):
    schedule = project_payment_schedule(4508, config)

    assert schedule[0].interest == 0
    assert schedule[0].totalPayable == 4508
    assert all(entry.openingBalance == 4508 for entry in schedule[:13])
    assert schedule[1].interest == 31  # 4508 * 8.25% / 12
    assert schedule[12].interest == 372  # 4508 * 8.25%
    assert schedule[12].totalPayable == 4880


def test_second_window_rebases_and_starts_at_month_one(config):
    schedule = project_payment_schedule(4508, config)
    second = schedule[13:]

    assert len(second) == 9
    assert all(entry.openingBalance == 4880 for entry in second)
    assert second[0].interest == 34  # one month on 4880
    assert second[-1].interest == 302  # nine months on 4880
    assert all(entry.totalPayable == entry.openingBalance + entry.interest for entry in schedule)


def test_zero_amount_schedule(config):
    schedule = project_payment_schedule(0, config)

    assert all(entry.totalPayable == 0 for entry in schedule)
