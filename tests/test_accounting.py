from flex_worktime.accounting import (
    OT_STATUS_NOT_CLAIMABLE,
    account_day,
    is_holiday,
    ot_status_label,
    overtime_minutes,
)
from flex_worktime.models import DayRecord, VACATION_HALF, VACATION_OTHER_8H

MON, WED, SAT, SUN = 0, 2, 5, 6


def test_weekday_clocked_day():
    result = account_day(DayRecord(start_time="07:00:00", end_time="16:30:00"), MON)
    assert result.actual_work_minutes == 510
    # 30 minutes over 8h is below the claimable floor
    assert result.ot_minutes == 0


def test_saturday_all_work_is_ot():
    result = account_day(DayRecord(start_time="09:00:00", end_time="14:00:00"), SAT)
    assert result.actual_work_minutes == 300
    assert result.ot_minutes == 300


def test_holiday_override_on_weekday():
    record = DayRecord(start_time="09:00:00", end_time="14:00:00", is_holiday=True)
    assert is_holiday(record, WED)
    result = account_day(record, WED)
    assert result.actual_work_minutes == 300
    assert result.ot_minutes == 300


def test_weekday_sub_threshold_ot_is_zero():
    result = account_day(DayRecord(gross_work_minutes=500), MON)
    assert result.actual_work_minutes == 500
    assert result.ot_minutes == 0


def test_weekday_full_ot():
    result = account_day(DayRecord(gross_work_minutes=600), MON)
    assert result.ot_minutes == 120
    assert result.ot_claimable


def test_ot_quantized_to_ten_minutes():
    assert overtime_minutes(545, holiday=False) == 60
    assert overtime_minutes(539, holiday=False) == 0
    assert overtime_minutes(67, holiday=True) == 60
    assert overtime_minutes(59, holiday=True) == 0


def test_half_vacation_credit_without_clock_times():
    record = DayRecord(vacation=VACATION_HALF)
    assert account_day(record, MON).actual_work_minutes == 240
    assert not is_holiday(record, MON)


def test_other_vacation_credits_eight_hours():
    assert account_day(DayRecord(vacation=VACATION_OTHER_8H), MON).actual_work_minutes == 480


def test_deductions():
    record = DayRecord(
        start_time="08:00:00",
        end_time="19:00:00",
        non_work_minutes=30,
        breakfast_break=True,
        breakfast_break_minutes=20,
        dinner_break=False,
        dinner_break_minutes=30,
    )
    # 11h span, two breaks -> 600; minus 30 non-work, minus 20 breakfast
    result = account_day(record, MON)
    assert result.actual_work_minutes == 550
    assert result.ot_minutes == 70


def test_clock_times_win_over_gross_minutes():
    record = DayRecord(start_time="09:00:00", end_time="13:00:00", gross_work_minutes=600)
    assert account_day(record, MON).actual_work_minutes == 210


def test_one_time_missing_uses_gross_minutes():
    record = DayRecord(start_time="09:00:00", gross_work_minutes=120)
    assert account_day(record, MON).actual_work_minutes == 120


def test_never_negative():
    result = account_day(DayRecord(gross_work_minutes=10, non_work_minutes=100), MON)
    assert result.actual_work_minutes == 0
    assert result.ot_minutes == 0


def test_half_minute_rounds_up():
    assert account_day(DayRecord(start_time="08:00:00", end_time="08:00:30"), SUN).actual_work_minutes == 1
    assert account_day(DayRecord(start_time="08:00:00", end_time="08:00:29"), SUN).actual_work_minutes == 0


def test_idempotent():
    record = DayRecord(start_time="07:13:41", end_time="19:02:09", non_work_minutes=25)
    assert account_day(record, WED) == account_day(record, WED)


def test_ot_status_label():
    vacation_day = DayRecord(vacation=VACATION_HALF)
    assert ot_status_label(vacation_day, account_day(vacation_day, MON)) == OT_STATUS_NOT_CLAIMABLE
    plain = DayRecord(gross_work_minutes=480)
    assert ot_status_label(plain, account_day(plain, MON)) == ""
    long_day = DayRecord(gross_work_minutes=600)
    assert ot_status_label(long_day, account_day(long_day, MON)) == "2시간 0분 (120분)"
