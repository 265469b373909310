"""Unit tests for revlist.calendar.business_days."""

from datetime import date, datetime, timezone

from revlist.calendar.business_days import (get_holidays,
                                            get_nth_business_day,
                                            is_business_day)
from revlist.testing import TestCase


class IsBusinessDayTests(TestCase):
    """Unit tests for revlist.calendar.business_days.is_business_day."""

    def test_with_weekday(self):
        """Testing is_business_day with a weekday"""
        self.assertTrue(is_business_day(date(2026, 10, 14)))

    def test_with_weekend(self):
        """Testing is_business_day with Saturday and Sunday"""
        self.assertFalse(is_business_day(date(2026, 10, 17)))
        self.assertFalse(is_business_day(date(2026, 10, 18)))

    def test_with_holiday(self):
        """Testing is_business_day with a holiday"""
        self.assertFalse(is_business_day(date(2026, 10, 12),
                                         holidays={date(2026, 10, 12)}))


class GetNthBusinessDayTests(TestCase):
    """Unit tests for revlist.calendar.business_days.get_nth_business_day."""

    def setUp(self):
        super().setUp()

        # A Wednesday.
        self.timestamp = datetime(2026, 10, 14, 12, 30, tzinfo=timezone.utc)

    def test_back_one_day(self):
        """Testing get_nth_business_day moving back one weekday"""
        self.assertEqual(
            get_nth_business_day(self.timestamp, -1),
            datetime(2026, 10, 13, 12, 30, tzinfo=timezone.utc))

    def test_back_over_weekend(self):
        """Testing get_nth_business_day moving back over a weekend"""
        self.assertEqual(
            get_nth_business_day(self.timestamp, -3),
            datetime(2026, 10, 9, 12, 30, tzinfo=timezone.utc))

    def test_forward_over_weekend(self):
        """Testing get_nth_business_day moving forward over a weekend"""
        self.assertEqual(
            get_nth_business_day(
                datetime(2026, 10, 16, 8, 0, tzinfo=timezone.utc),
                1),
            datetime(2026, 10, 19, 8, 0, tzinfo=timezone.utc))

    def test_with_holiday(self):
        """Testing get_nth_business_day skips holidays"""
        self.create_holiday(date(2026, 10, 12))

        self.assertEqual(
            get_nth_business_day(self.timestamp, -3),
            datetime(2026, 10, 8, 12, 30, tzinfo=timezone.utc))

    def test_with_zero(self):
        """Testing get_nth_business_day with n=0"""
        self.assertEqual(get_nth_business_day(self.timestamp, 0),
                         self.timestamp)

    def test_with_naive_datetime(self):
        """Testing get_nth_business_day with a naive datetime"""
        self.assertEqual(
            get_nth_business_day(datetime(2026, 10, 19, 9, 0), -1),
            datetime(2026, 10, 16, 9, 0))

    def test_with_preloaded_holidays(self):
        """Testing get_nth_business_day with preloaded holidays"""
        self.create_holiday(date(2026, 10, 13))

        with self.assertNumQueries(0):
            result = get_nth_business_day(self.timestamp, -1,
                                          holidays={date(2026, 10, 12)})

        self.assertEqual(result,
                         datetime(2026, 10, 13, 12, 30, tzinfo=timezone.utc))


class GetHolidaysTests(TestCase):
    """Unit tests for revlist.calendar.business_days.get_holidays."""

    def test_get_holidays(self):
        """Testing get_holidays"""
        self.create_holiday(date(2026, 12, 25), name='Christmas Day')
        self.create_holiday(date(2027, 1, 1), name="New Year's Day")

        with self.assertNumQueries(1):
            holidays = get_holidays()

        self.assertEqual(holidays, {date(2026, 12, 25), date(2027, 1, 1)})
