from flex_worktime.api_data import build_day_rows
from flex_worktime.models import DAYS, DayRecord, PayPeriod
from flex_worktime.period import summarize_period


def test_iter_days_covers_both_weeks_in_order():
    period = PayPeriod().with_day("week2", 4, DayRecord(start_time="09:00:00"))
    days = list(period.iter_days())
    assert len(days) == 14
    assert [(k, i) for k, i, _ in days[:2]] == [("week1", 0), ("week1", 1)]
    assert days[7][:2] == ("week2", 0)
    assert days[11][2].start_time == "09:00:00"


def test_day_rows_follow_iter_days():
    period = PayPeriod().with_day("week2", 5, DayRecord(gross_work_minutes=300))
    rows = build_day_rows(period, summarize_period(period))
    assert [r["week"] for r in rows] == ["week1"] * 7 + ["week2"] * 7
    assert [r["day"] for r in rows[7:]] == DAYS
    assert rows[12]["ot_minutes"] == 300
