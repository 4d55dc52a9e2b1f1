"""API tests for the owner-scoped client records: projects, orders, reports, tickets, team, payments, subscriptions."""

import re
from datetime import UTC, datetime

from api_case import ApiTestCase

from app.models import Activity, Order


class OwnerTestCase(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.owner = self.make_user(email="owner@example.com", name="Jane Owner")
        self.headers = self.auth_headers(self.owner)
        self.other_headers = self.login_as("user", email="other@example.com")


class TestProjects(OwnerTestCase):
    def create(self, **overrides):
        body = {"name": "Main site", "domain": " Example.COM ", "targetLinks": 40, **overrides}
        return self.client.post("/api/v1/projects", json=body, headers=self.headers)

    def test_create_project_and_record_activity(self) -> None:
        response = self.create()
        self.assertEqual(response.status_code, 201)
        project = response.json()["data"]["project"]
        self.assertEqual(project["domain"], "example.com")
        self.assertEqual(project["status"], "Active")
        self.assertEqual(project["linksBuilt"], 0)
        actions = [a.action for a in self.db.query(Activity).all()]
        self.assertEqual(actions, ["New project created"])

    def test_list_includes_stats(self) -> None:
        first = self.create().json()["data"]["project"]
        self.create(name="Second", domain="second.io", targetLinks=10)
        self.client.patch(f"/api/v1/projects/{first['id']}", json={"status": "Paused"}, headers=self.headers)
        data = self.client.get("/api/v1/projects", headers=self.headers).json()["data"]
        self.assertEqual(len(data["projects"]), 2)
        self.assertEqual(
            data["stats"],
            {"totalProjects": 2, "activeProjects": 1, "totalLinksBuilt": 0, "avgProgress": 0},
        )

    def test_other_owners_records_are_not_found(self) -> None:
        project = self.create().json()["data"]["project"]
        for method in ("get", "delete"):
            response = getattr(self.client, method)(f"/api/v1/projects/{project['id']}", headers=self.other_headers)
            self.assertEqual(response.status_code, 404)
            self.assertEqual(response.json()["message"], "Project not found")
        listed = self.client.get("/api/v1/projects", headers=self.other_headers).json()["data"]["projects"]
        self.assertEqual(listed, [])

    def test_invalid_status_is_rejected(self) -> None:
        project = self.create().json()["data"]["project"]
        response = self.client.patch(
            f"/api/v1/projects/{project['id']}", json={"status": "Archived"}, headers=self.headers
        )
        self.assertEqual(response.status_code, 400)

    def test_delete_project(self) -> None:
        project = self.create().json()["data"]["project"]
        response = self.client.delete(f"/api/v1/projects/{project['id']}", headers=self.headers)
        self.assertEqual(response.json()["message"], "Project deleted successfully")
        self.assertEqual(self.client.get(f"/api/v1/projects/{project['id']}", headers=self.headers).status_code, 404)


class TestOrders(OwnerTestCase):
    def place(self, **overrides):
        body = {
            "packageName": "Growth",
            "packageType": "link-building",
            "linksTotal": 20,
            "amount": 3500,
            **overrides,
        }
        return self.client.post("/api/v1/orders", json=body, headers=self.headers)

    def test_order_number_format_and_defaults(self) -> None:
        response = self.place(currency="eur")
        self.assertEqual(response.status_code, 201)
        order = response.json()["data"]["order"]
        self.assertRegex(order["orderNumber"], r"^ORD-2026-\d{3}$")
        self.assertEqual(order["status"], "Pending")
        self.assertEqual(order["currency"], "EUR")
        self.assertEqual(order["linksDelivered"], 0)

    def test_order_numbers_are_unique(self) -> None:
        numbers = {self.place().json()["data"]["order"]["orderNumber"] for _ in range(5)}
        self.assertEqual(len(numbers), 5)

    def test_completing_stamps_completed_date(self) -> None:
        order = self.place().json()["data"]["order"]
        response = self.client.patch(
            f"/api/v1/orders/{order['id']}",
            json={"status": "Completed", "linksDelivered": 20},
            headers=self.headers,
        )
        updated = response.json()["data"]["order"]
        self.assertEqual(updated["status"], "Completed")
        self.assertTrue(updated["completedDate"].startswith("2026-03-10"))
        actions = sorted(a.action for a in self.db.query(Activity).all())
        self.assertEqual(actions, ["New order placed", "Order updated"])

    def test_orders_have_no_delete_route(self) -> None:
        order = self.place().json()["data"]["order"]
        response = self.client.delete(f"/api/v1/orders/{order['id']}", headers=self.headers)
        self.assertEqual(response.status_code, 405)

    def test_invalid_package_type(self) -> None:
        self.assertEqual(self.place(packageType="press-release").status_code, 400)


class TestReports(OwnerTestCase):
    def add_order(self, delivered: int, placed: datetime) -> None:
        self.db.add(
            Order(
                user_id=self.owner.id,
                order_number=f"ORD-{placed.year}-{delivered:03d}",
                package_name="Growth",
                package_type="link-building",
                links_total=50,
                links_delivered=delivered,
                amount=1000,
                order_date=placed,
            )
        )
        self.db.commit()

    def test_links_count_defaults_to_links_delivered_in_period(self) -> None:
        self.add_order(7, datetime(2026, 2, 3, tzinfo=UTC))
        self.add_order(5, datetime(2026, 2, 27, tzinfo=UTC))
        self.add_order(11, datetime(2026, 3, 2, tzinfo=UTC))
        body = {"name": "February", "type": "Monthly", "reportDate": "2026-02-01T00:00:00Z"}
        report = self.client.post("/api/v1/reports", json=body, headers=self.headers).json()["data"]["report"]
        self.assertEqual(report["linksCount"], 12)
        self.assertEqual(report["status"], "In Progress")

        body = {"name": "Q1", "type": "Quarterly", "reportDate": "2026-01-01T00:00:00Z"}
        report = self.client.post("/api/v1/reports", json=body, headers=self.headers).json()["data"]["report"]
        self.assertEqual(report["linksCount"], 23)

    def test_explicit_links_count_and_stats(self) -> None:
        for name, count in (("A", 10), ("B", 15)):
            self.client.post(
                "/api/v1/reports",
                json={"name": name, "type": "Custom", "reportDate": "2026-01-15T00:00:00Z", "linksCount": count},
                headers=self.headers,
            )
        stats = self.client.get("/api/v1/reports", headers=self.headers).json()["data"]["stats"]
        self.assertEqual(stats, {"totalReports": 2, "linksThisYear": 25, "avgMonthlyLinks": 13})

    def test_mark_ready(self) -> None:
        report = self.client.post(
            "/api/v1/reports",
            json={"name": "Jan", "type": "Monthly", "reportDate": "2026-01-01T00:00:00Z"},
            headers=self.headers,
        ).json()["data"]["report"]
        response = self.client.patch(
            f"/api/v1/reports/{report['id']}",
            json={"status": "Ready", "fileUrl": "https://files.example/jan.pdf"},
            headers=self.headers,
        )
        self.assertEqual(response.json()["data"]["report"]["status"], "Ready")


class TestSupport(OwnerTestCase):
    def test_ticket_lifecycle(self) -> None:
        created = self.client.post(
            "/api/v1/support",
            json={"subject": "Invoice", "category": "billing", "message": "Wrong VAT"},
            headers=self.headers,
        )
        self.assertEqual(created.status_code, 201)
        ticket = created.json()["data"]["ticket"]
        self.assertTrue(re.fullmatch(r"TKT-\d{4}", ticket["ticketNumber"]))
        self.assertEqual((ticket["status"], ticket["priority"]), ("Open", "Medium"))
        updated = self.client.patch(
            f"/api/v1/support/{ticket['id']}", json={"status": "Resolved"}, headers=self.headers
        ).json()["data"]["ticket"]
        self.assertEqual(updated["status"], "Resolved")
        other = self.client.get(f"/api/v1/support/{ticket['id']}", headers=self.other_headers)
        self.assertEqual(other.status_code, 404)

    def test_unknown_category_is_rejected(self) -> None:
        response = self.client.post(
            "/api/v1/support",
            json={"subject": "Hi", "category": "sales", "message": "?"},
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 400)


class TestTeam(OwnerTestCase):
    def test_owner_listed_first_then_invites(self) -> None:
        invited = self.client.post(
            "/api/v1/team/invite", json={"email": "Mark.Smith@Example.com", "role": "Editor"}, headers=self.headers
        )
        self.assertEqual(invited.status_code, 201)
        self.assertEqual(invited.json()["data"]["teamMember"]["status"], "Pending")
        members = self.client.get("/api/v1/team", headers=self.headers).json()["data"]["members"]
        self.assertEqual(members[0], {"name": "Jane Owner", "email": "owner@example.com", "role": "Owner", "initials": "JO"})
        self.assertEqual(members[1]["name"], "mark.smith")
        self.assertEqual(members[1]["initials"], "MS")

    def test_cannot_invite_self_or_twice(self) -> None:
        response = self.client.post(
            "/api/v1/team/invite", json={"email": "owner@example.com", "role": "Viewer"}, headers=self.headers
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "You cannot invite yourself")
        body = {"email": "friend@example.com", "role": "Viewer"}
        self.client.post("/api/v1/team/invite", json=body, headers=self.headers)
        again = self.client.post("/api/v1/team/invite", json=body, headers=self.headers)
        self.assertEqual(again.status_code, 409)

    def test_owner_role_cannot_be_invited(self) -> None:
        response = self.client.post(
            "/api/v1/team/invite", json={"email": "x@example.com", "role": "Owner"}, headers=self.headers
        )
        self.assertEqual(response.status_code, 400)


class TestPayments(OwnerTestCase):
    def add(self, last4: str, is_default: bool = False):
        body = {"type": "Visa", "last4": last4, "expiryMonth": 4, "expiryYear": 2029, "isDefault": is_default}
        return self.client.post("/api/v1/payment", json=body, headers=self.headers).json()["data"]["paymentMethod"]

    def test_single_default_and_default_first(self) -> None:
        first = self.add("1111", is_default=True)
        second = self.add("2222", is_default=True)
        methods = self.client.get("/api/v1/payment", headers=self.headers).json()["data"]["paymentMethods"]
        self.assertEqual([m["id"] for m in methods], [second["id"], first["id"]])
        self.assertEqual([m["isDefault"] for m in methods], [True, False])

        self.client.patch(f"/api/v1/payment/{first['id']}/set-default", headers=self.headers)
        methods = self.client.get("/api/v1/payment", headers=self.headers).json()["data"]["paymentMethods"]
        self.assertEqual([(m["id"], m["isDefault"]) for m in methods], [(first["id"], True), (second["id"], False)])

    def test_card_digits_validated(self) -> None:
        body = {"type": "Visa", "last4": "12a4", "expiryMonth": 4, "expiryYear": 2029}
        self.assertEqual(self.client.post("/api/v1/payment", json=body, headers=self.headers).status_code, 400)


class TestSubscriptions(OwnerTestCase):
    def subscribe(self, plan: str, cycle: str = "Monthly"):
        body = {"planName": plan, "price": 1500, "billingCycle": cycle}
        return self.client.post("/api/v1/subscriptions", json=body, headers=self.headers)

    def test_new_subscription_cancels_the_active_one(self) -> None:
        first = self.subscribe("Startup").json()["data"]["subscription"]
        second = self.subscribe("Pro", cycle="Quarterly").json()["data"]["subscription"]
        self.assertTrue(second["nextBillingDate"].startswith("2026-06-10"))
        current = self.client.get("/api/v1/subscriptions/current", headers=self.headers).json()["data"]
        self.assertEqual(current["subscription"]["id"], second["id"])
        listed = self.client.get("/api/v1/subscriptions", headers=self.headers).json()["data"]["subscriptions"]
        statuses = {s["id"]: s["status"] for s in listed}
        self.assertEqual(statuses, {first["id"]: "Cancelled", second["id"]: "Active"})

    def test_cancel_and_no_current(self) -> None:
        sub = self.subscribe("Startup").json()["data"]["subscription"]
        response = self.client.patch(f"/api/v1/subscriptions/{sub['id']}/cancel", headers=self.headers)
        self.assertEqual(response.json()["data"]["subscription"]["status"], "Cancelled")
        again = self.client.patch(f"/api/v1/subscriptions/{sub['id']}/cancel", headers=self.headers)
        self.assertEqual(again.status_code, 404)
        self.assertEqual(again.json()["message"], "Active subscription not found")
        current = self.client.get("/api/v1/subscriptions/current", headers=self.headers).json()
        self.assertEqual(current["data"], {"subscription": None})

    def test_admin_listing_includes_subscriber(self) -> None:
        self.subscribe("Startup")
        self.assertEqual(self.client.get("/api/v1/subscriptions/admin/all", headers=self.headers).status_code, 403)
        listed = self.client.get("/api/v1/subscriptions/admin/all", headers=self.login_as("admin")).json()
        subscription = listed["data"]["subscriptions"][0]
        self.assertEqual(subscription["user"]["email"], "owner@example.com")
