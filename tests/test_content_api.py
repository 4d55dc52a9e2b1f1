"""API tests for public site content, staff management and singleton configuration."""

from api_case import ApiTestCase

from app.services import seed_data

NEW_POST = {
    "slug": "anchor-text-101",
    "title": "Anchor Text 101",
    "excerpt": "Choosing anchors that look natural.",
    "category": "Guides",
    "author": {"name": "Sam Writer", "role": "Editor"},
    "readTime": "4 min read",
    "status": "published",
}


class TestPublicContent(ApiTestCase):
    def test_blog_lists_only_published_posts_after_seeding(self) -> None:
        response = self.client.get("/api/v1/blog")
        self.assertEqual(response.status_code, 200)
        posts = response.json()["data"]["posts"]
        published = [p for p in seed_data.BLOG_POSTS if p["status"] == "published"]
        self.assertEqual(len(posts), len(published))
        self.assertTrue(all(p["status"] == "published" for p in posts))
        self.assertIn("readTime", posts[0])

    def test_public_lists_need_no_token(self) -> None:
        for path in (
            "/api/v1/case-studies",
            "/api/v1/faqs",
            "/api/v1/testimonials",
            "/api/v1/pricing",
            "/api/v1/services",
            "/api/v1/homepage",
            "/api/v1/link-building/public",
            "/api/v1/guest-posting/public",
        ):
            response = self.client.get(path)
            self.assertEqual(response.status_code, 200, path)
            self.assertTrue(response.json()["success"], path)

    def test_faqs_follow_sort_order(self) -> None:
        faqs = self.client.get("/api/v1/faqs").json()["data"]["faqs"]
        orders = [f["sortOrder"] for f in faqs]
        self.assertEqual(orders, sorted(orders))
        self.assertEqual(len(faqs), len(seed_data.FAQS))

    def test_custom_package_price_is_null(self) -> None:
        packages = self.client.get("/api/v1/link-building/public").json()["data"]["packages"]
        enterprise = next(p for p in packages if p["name"] == "Enterprise")
        self.assertIsNone(enterprise["price"])

    def test_admin_lists_require_staff(self) -> None:
        self.assertEqual(self.client.get("/api/v1/blog/admin/all").status_code, 401)
        headers = self.login_as("user")
        self.assertEqual(self.client.get("/api/v1/blog/admin/all", headers=headers).status_code, 403)
        self.assertEqual(self.client.get("/api/v1/link-building", headers=headers).status_code, 403)

    def test_staff_sees_drafts(self) -> None:
        posts = self.client.get("/api/v1/blog/admin/all", headers=self.login_as("moderator")).json()["data"]["posts"]
        self.assertEqual(len(posts), len(seed_data.BLOG_POSTS))


class TestBlogManagement(ApiTestCase):
    def test_create_fills_date_and_meta_fields(self) -> None:
        response = self.client.post("/api/v1/blog", json=NEW_POST, headers=self.login_as("moderator"))
        self.assertEqual(response.status_code, 201)
        post = response.json()["data"]["post"]
        self.assertEqual(post["date"], "2026-03-10")
        self.assertEqual(post["metaTitle"], NEW_POST["title"])
        self.assertEqual(post["metaDescription"], NEW_POST["excerpt"])
        self.assertEqual(post["author"], {"name": "Sam Writer", "role": "Editor"})

    def test_lookup_by_slug_or_id_then_update_and_delete(self) -> None:
        headers = self.login_as("admin")
        created = self.client.post("/api/v1/blog", json=NEW_POST, headers=headers).json()["data"]["post"]
        by_slug = self.client.get("/api/v1/blog/admin/anchor-text-101", headers=headers)
        by_id = self.client.get(f"/api/v1/blog/admin/{created['id']}", headers=headers)
        self.assertEqual(by_slug.json()["data"]["post"]["id"], created["id"])
        self.assertEqual(by_id.json()["data"]["post"]["slug"], "anchor-text-101")

        updated = self.client.patch(
            f"/api/v1/blog/{created['id']}", json={"title": "Anchors", "excerpt": None}, headers=headers
        )
        self.assertEqual(updated.status_code, 200)
        self.assertEqual(updated.json()["data"]["post"]["title"], "Anchors")
        self.assertEqual(updated.json()["data"]["post"]["excerpt"], NEW_POST["excerpt"])

        self.assertEqual(self.client.delete(f"/api/v1/blog/{created['id']}", headers=headers).status_code, 200)
        missing = self.client.get(f"/api/v1/blog/admin/{created['id']}", headers=headers)
        self.assertEqual(missing.status_code, 404)
        self.assertEqual(missing.json()["message"], "Blog post not found")

    def test_duplicate_slug_is_a_conflict(self) -> None:
        headers = self.login_as("admin")
        self.client.post("/api/v1/blog", json=NEW_POST, headers=headers)
        response = self.client.post("/api/v1/blog", json=NEW_POST, headers=headers)
        self.assertEqual(response.status_code, 409)
        self.assertFalse(response.json()["success"])

    def test_invalid_body_is_a_400_envelope(self) -> None:
        response = self.client.post("/api/v1/blog", json={"title": "No slug"}, headers=self.login_as("admin"))
        self.assertEqual(response.status_code, 400)
        body = response.json()
        self.assertEqual(body["message"], "Validation Error")
        self.assertIn("slug", body["error"])


class TestPackageManagement(ApiTestCase):
    def test_custom_price_can_be_set_and_cleared(self) -> None:
        headers = self.login_as("admin")
        created = self.client.post(
            "/api/v1/guest-posting",
            json={"name": "Niche Edit", "price": 450, "features": ["DR 50+"]},
            headers=headers,
        ).json()["data"]["package"]
        self.assertEqual(created["price"], 450)
        updated = self.client.patch(
            f"/api/v1/guest-posting/{created['id']}", json={"price": "Custom"}, headers=headers
        ).json()["data"]["package"]
        self.assertIsNone(updated["price"])
        self.assertEqual(updated["features"], ["DR 50+"])

    def test_disabled_package_hidden_from_public_list(self) -> None:
        headers = self.login_as("admin")
        packages = self.client.get("/api/v1/link-building", headers=headers).json()["data"]["packages"]
        target = packages[0]
        self.client.patch(f"/api/v1/link-building/{target['id']}", json={"enabled": False}, headers=headers)
        public = self.client.get("/api/v1/link-building/public").json()["data"]["packages"]
        self.assertNotIn(target["id"], [p["id"] for p in public])


class TestSingletonRoutes(ApiTestCase):
    def test_active_theme_is_seeded_on_first_read(self) -> None:
        response = self.client.get("/api/v1/theme")
        self.assertEqual(response.status_code, 200)
        theme = response.json()["data"]["theme"]
        self.assertTrue(theme["isActive"])
        self.assertEqual(theme["activeColorHue"], 155)
        self.assertEqual(len(theme["colorPresets"]), len(seed_data.THEME["color_presets"]))

    def test_navigation_buttons_keep_wire_shape(self) -> None:
        navigation = self.client.get("/api/v1/navigation").json()["data"]["navigation"]
        self.assertTrue(navigation["dashboardButton"]["showWhenLoggedIn"])
        self.assertEqual(navigation["loginButton"]["href"], "/login")

    def test_patch_active_requires_authentication(self) -> None:
        self.assertEqual(self.client.patch("/api/v1/theme", json={"darkMode": True}).status_code, 401)
        response = self.client.patch("/api/v1/theme", json={"darkMode": True}, headers=self.login_as("user"))
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["data"]["theme"]["darkMode"])

    def test_admin_activation_switches_active_record(self) -> None:
        headers = self.login_as("admin")
        original = self.client.get("/api/v1/live-chat").json()["data"]["liveChat"]
        created = self.client.post(
            "/api/v1/live-chat/admin",
            json={"enabled": True, "displayOn": "homepage", "isActive": True},
            headers=headers,
        )
        self.assertEqual(created.status_code, 201)
        new = created.json()["data"]["liveChat"]
        active = self.client.get("/api/v1/live-chat").json()["data"]["liveChat"]
        self.assertEqual(active["id"], new["id"])
        records = self.client.get("/api/v1/live-chat/admin/all", headers=headers).json()["data"]["liveChats"]
        self.assertEqual([r["isActive"] for r in records if r["id"] == original["id"]], [False])

        reactivated = self.client.patch(
            f"/api/v1/live-chat/admin/{original['id']}", json={"isActive": True}, headers=headers
        )
        self.assertTrue(reactivated.json()["data"]["liveChat"]["isActive"])
        active = self.client.get("/api/v1/live-chat").json()["data"]["liveChat"]
        self.assertEqual(active["id"], original["id"])

    def test_deleting_active_settings_restores_a_default(self) -> None:
        headers = self.login_as("admin")
        settings = self.client.get("/api/v1/settings").json()["data"]["settings"]
        deleted = self.client.delete(f"/api/v1/settings/admin/{settings['id']}", headers=headers)
        self.assertEqual(deleted.status_code, 200)
        self.assertEqual(deleted.json()["data"]["settings"]["id"], settings["id"])
        response = self.client.get("/api/v1/settings")
        self.assertEqual(response.status_code, 200)
        restored = response.json()["data"]["settings"]
        self.assertTrue(restored["isActive"])

    def test_deactivated_theme_is_followed_by_an_active_default(self) -> None:
        headers = self.login_as("admin")
        theme = self.client.get("/api/v1/theme").json()["data"]["theme"]
        response = self.client.patch(
            f"/api/v1/theme/admin/{theme['id']}", json={"isActive": False}, headers=headers
        )
        self.assertEqual(response.status_code, 200)
        active = self.client.get("/api/v1/theme")
        self.assertEqual(active.status_code, 200)
        self.assertTrue(active.json()["data"]["theme"]["isActive"])
        self.assertNotEqual(active.json()["data"]["theme"]["id"], theme["id"])

    def test_moderator_reads_but_cannot_create(self) -> None:
        headers = self.login_as("moderator")
        self.client.get("/api/v1/theme")
        self.assertEqual(self.client.get("/api/v1/theme/admin/all", headers=headers).status_code, 200)
        self.assertEqual(self.client.post("/api/v1/theme/admin", json={}, headers=headers).status_code, 403)


class TestErrorsAndHealth(ApiTestCase):
    def test_unknown_route_uses_envelope(self) -> None:
        response = self.client.get("/api/v1/nowhere")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"success": False, "message": "Route /api/v1/nowhere not found"})

    def test_health_reports_database(self) -> None:
        for path in ("/health", "/api/v1/health"):
            body = self.client.get(path).json()
            self.assertTrue(body["success"])
            self.assertEqual(body["status"], "ok")
            self.assertEqual(body["database"], "connected")

    def test_root_welcome(self) -> None:
        body = self.client.get("/").json()
        self.assertEqual(body["message"], "Welcome to the Backlinkse API")
        self.assertEqual(body["data"]["docs"], "/docs")
