"""Tests for dashboard aggregations, the activity feed and calendar helpers."""

import unittest
from datetime import UTC, datetime, timedelta

from api_case import ApiTestCase, DatabaseTestCase

from app.core.clock import add_months, month_start
from app.models import Activity, Order
from app.services import dashboard

NOW = datetime(2026, 3, 10, 12, 0, tzinfo=UTC)


def order(user_id: int, number: str, delivered: int, placed: datetime, status: str = "In Progress", total: int = 20):
    return Order(
        user_id=user_id,
        order_number=number,
        package_name=f"Package {number}",
        package_type="link-building",
        links_total=total,
        links_delivered=delivered,
        amount=500,
        status=status,
        order_date=placed,
    )


class TestHelpers(unittest.TestCase):
    def test_round_half_up_matches_display_rounding(self) -> None:
        self.assertEqual(dashboard.round_half_up(2.5), 3)
        self.assertEqual(dashboard.round_half_up(3.5), 4)
        self.assertEqual(dashboard.round_half_up(2.49), 2)
        self.assertEqual(dashboard.round_half_up(0), 0)

    def test_time_ago_picks_largest_unit(self) -> None:
        self.assertEqual(dashboard.time_ago(NOW - timedelta(seconds=30), NOW), "30 seconds ago")
        self.assertEqual(dashboard.time_ago(NOW - timedelta(seconds=61), NOW), "1 minute ago")
        self.assertEqual(dashboard.time_ago(NOW - timedelta(hours=2, minutes=5), NOW), "2 hours ago")
        self.assertEqual(dashboard.time_ago(NOW - timedelta(days=3), NOW), "3 days ago")

    def test_time_ago_accepts_naive_utc(self) -> None:
        naive = (NOW - timedelta(minutes=5)).replace(tzinfo=None)
        self.assertEqual(dashboard.time_ago(naive, NOW), "5 minutes ago")

    def test_time_ago_never_goes_negative(self) -> None:
        self.assertEqual(dashboard.time_ago(NOW + timedelta(minutes=5), NOW), "0 seconds ago")

    def test_add_months_clamps_day(self) -> None:
        self.assertEqual(add_months(datetime(2026, 1, 31, tzinfo=UTC), 1), datetime(2026, 2, 28, tzinfo=UTC))
        self.assertEqual(add_months(datetime(2026, 11, 15, tzinfo=UTC), 3), datetime(2027, 2, 15, tzinfo=UTC))
        self.assertEqual(add_months(datetime(2026, 1, 15, tzinfo=UTC), -1), datetime(2025, 12, 15, tzinfo=UTC))
        self.assertEqual(month_start(NOW), datetime(2026, 3, 1, tzinfo=UTC))


class TestAggregations(DatabaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.user = self.make_user()
        self.other = self.make_user(email="other@example.com")

    def test_stats_compare_this_month_with_last(self) -> None:
        self.db.add_all(
            [
                order(self.user.id, "ORD-2026-001", 3, datetime(2026, 1, 20, tzinfo=UTC), status="Completed"),
                order(self.user.id, "ORD-2026-002", 5, datetime(2026, 2, 28, 23, 0, tzinfo=UTC)),
                order(self.user.id, "ORD-2026-003", 8, datetime(2026, 3, 1, tzinfo=UTC), status="Pending"),
                order(self.other.id, "ORD-2026-004", 40, datetime(2026, 3, 2, tzinfo=UTC)),
            ]
        )
        self.db.commit()
        stats = dashboard.dashboard_stats(self.db, self.user.id, NOW)
        self.assertEqual(stats.total_backlinks, 16)
        self.assertEqual(stats.active_campaigns, 2)
        self.assertEqual(stats.avg_domain_rating, 54)
        self.assertEqual(stats.est_traffic_value, "$8.0K")
        self.assertEqual(stats.backlinks_change, "+3 this month")

    def test_stats_without_last_month_report_this_month_total(self) -> None:
        self.db.add(order(self.user.id, "ORD-2026-010", 4, datetime(2026, 3, 5, tzinfo=UTC)))
        self.db.commit()
        stats = dashboard.dashboard_stats(self.db, self.user.id, NOW)
        self.assertEqual(stats.backlinks_change, "+4 this month")

    def test_empty_account(self) -> None:
        stats = dashboard.dashboard_stats(self.db, self.user.id, NOW)
        self.assertEqual((stats.total_backlinks, stats.active_campaigns), (0, 0))
        self.assertEqual(stats.est_traffic_value, "$0.0K")
        self.assertIsNone(dashboard.campaign_progress(self.db, self.user.id, NOW))

    def test_campaign_progress_uses_latest_active_order(self) -> None:
        self.db.add_all(
            [
                order(self.user.id, "ORD-2026-020", 10, datetime(2026, 2, 1, tzinfo=UTC)),
                order(self.user.id, "ORD-2026-021", 5, datetime(2026, 3, 1, tzinfo=UTC), total=8),
                order(self.user.id, "ORD-2026-022", 9, datetime(2026, 3, 9, tzinfo=UTC), status="Completed"),
            ]
        )
        self.db.commit()
        progress = dashboard.campaign_progress(self.db, self.user.id, NOW)
        self.assertEqual(progress.package_name, "Package ORD-2026-021")
        self.assertEqual(progress.progress, 63)
        self.assertEqual(progress.remaining, 3)
        self.assertEqual(progress.next_report_date.day, 15)

    def test_recent_activity_newest_first_and_limited(self) -> None:
        for minutes in range(12):
            self.db.add(
                Activity(
                    user_id=self.user.id,
                    action=f"Step {minutes}",
                    site="example.com",
                    domain_rating=0,
                    created_at=NOW - timedelta(minutes=minutes),
                )
            )
        self.db.commit()
        items = dashboard.recent_activity(self.db, self.user.id, NOW)
        self.assertEqual(len(items), dashboard.RECENT_ACTIVITY_LIMIT)
        self.assertEqual(items[0].action, "Step 0")
        self.assertEqual(items[1].time, "1 minute ago")
        self.assertIsNone(items[0].dr)


class TestDashboardRoutes(ApiTestCase):
    def test_endpoints_require_authentication(self) -> None:
        for path in ("/stats", "/activity", "/campaign-progress"):
            self.assertEqual(self.client.get(f"/api/v1/dashboard{path}").status_code, 401)

    def test_stats_are_flattened_into_data(self) -> None:
        headers = self.login_as("user")
        self.client.post(
            "/api/v1/orders",
            json={"packageName": "Starter", "packageType": "guest-posting", "linksTotal": 10, "amount": 299},
            headers=headers,
        )
        data = self.client.get("/api/v1/dashboard/stats", headers=headers).json()["data"]
        self.assertEqual(data["activeCampaigns"], 1)
        self.assertEqual(data["totalBacklinks"], 0)
        self.assertEqual(data["backlinksChange"], "+0 this month")

        campaign = self.client.get("/api/v1/dashboard/campaign-progress", headers=headers).json()["data"]["campaign"]
        self.assertEqual(campaign["packageName"], "Starter")
        self.assertEqual(campaign["remaining"], 10)
        self.assertTrue(campaign["nextReportDate"].startswith("2026-03-15"))

        activities = self.client.get("/api/v1/dashboard/activity", headers=headers).json()["data"]["activities"]
        self.assertEqual([a["action"] for a in activities], ["New order placed"])

    def test_activity_is_timed_by_the_request_clock(self) -> None:
        headers = self.login_as("user")
        self.client.post(
            "/api/v1/projects", json={"name": "Main", "domain": "example.com", "targetLinks": 10}, headers=headers
        )
        activities = self.client.get("/api/v1/dashboard/activity", headers=headers).json()["data"]["activities"]
        self.assertEqual(
            [(a["action"], a["site"], a["time"]) for a in activities],
            [("New project created", "example.com", "0 seconds ago")],
        )

        self.now = NOW + timedelta(hours=2)
        activities = self.client.get("/api/v1/dashboard/activity", headers=headers).json()["data"]["activities"]
        self.assertEqual(activities[0]["time"], "2 hours ago")

    def test_no_active_campaign(self) -> None:
        body = self.client.get("/api/v1/dashboard/campaign-progress", headers=self.login_as("user")).json()
        self.assertEqual(body["message"], "No active campaign")
        self.assertEqual(body["data"], {"campaign": None})
