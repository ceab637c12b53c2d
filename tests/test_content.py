"""Blogs with comments, courses with modules/lessons, purchases, subscribers."""

from decimal import Decimal

import pytest


@pytest.fixture
def author(make_user):
    return make_user("author@example.com")


@pytest.fixture
def reader(make_user):
    return make_user("reader@example.com", full_name="Reader")


def create_blog(client, author, slug="first-post", **extra):
    payload = {"user_id": str(author.id), "title": "First post", "slug": slug, "content": "Hello"}
    payload.update(extra)
    resp = client.post("/api/v1/blogs/", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


def create_course(client, author, **extra):
    payload = {"user_id": str(author.id), "title": "SQL 101", "description": "Joins and keys"}
    payload.update(extra)
    resp = client.post("/api/v1/courses/", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


class TestBlogs:
    def test_new_blog_is_draft(self, client, author):
        blog = create_blog(client, author, tags=["sql"])
        assert blog["status"] == "draft"
        assert blog["published_at"] is None
        assert blog["tags"] == ["sql"]

    def test_duplicate_slug_conflicts(self, client, author):
        create_blog(client, author)
        resp = client.post("/api/v1/blogs/", json={
            "user_id": str(author.id), "title": "Again", "slug": "first-post", "content": "x"
        })
        assert resp.status_code == 409

    def test_lookup_by_slug(self, client, author):
        blog = create_blog(client, author)
        assert client.get("/api/v1/blogs/slug/first-post").json()["id"] == blog["id"]
        assert client.get("/api/v1/blogs/slug/missing").status_code == 404

    def test_publish_sets_published_at_once(self, client, author):
        blog = create_blog(client, author)
        published = client.post(f"/api/v1/blogs/{blog['id']}/publish").json()
        assert published["status"] == "published"
        assert published["published_at"] is not None

        client.post(f"/api/v1/blogs/{blog['id']}/archive")
        again = client.post(f"/api/v1/blogs/{blog['id']}/publish").json()
        assert again["published_at"] == published["published_at"]

    def test_filter_by_status_and_tag(self, client, author):
        draft = create_blog(client, author, slug="draft", tags=["news"])
        live = create_blog(client, author, slug="live", status="published", tags=["news", "sql"])
        assert live["published_at"] is not None

        published = client.get("/api/v1/blogs/", params={"status": "published"}).json()
        assert [b["id"] for b in published] == [live["id"]]

        tagged = client.get("/api/v1/blogs/", params={"tag": "news"}).json()
        assert {b["id"] for b in tagged} == {draft["id"], live["id"]}

    def test_invalid_status_rejected(self, client, author):
        resp = client.post("/api/v1/blogs/", json={
            "user_id": str(author.id), "title": "x", "slug": "x", "content": "x", "status": "deleted"
        })
        assert resp.status_code == 422


class TestComments:
    def test_threaded_replies(self, client, author, reader):
        blog = create_blog(client, author)
        url = f"/api/v1/blogs/{blog['id']}/comments"
        root = client.post(url, json={"user_id": str(reader.id), "content": "Great read"}).json()
        reply = client.post(url, json={
            "user_id": str(author.id), "content": "Thank you", "parent_id": root["id"]
        })
        assert reply.status_code == 201, reply.text
        assert reply.json()["parent_id"] == root["id"]

        replies = client.get(f"/api/v1/comments/{root['id']}/replies").json()
        assert [r["content"] for r in replies] == ["Thank you"]
        assert len(client.get(url).json()) == 2

        assert client.delete(f"/api/v1/comments/{root['id']}").status_code == 204
        assert client.get(url).json() == []

    def test_reply_must_stay_on_same_blog(self, client, author, reader):
        first = create_blog(client, author, slug="one")
        second = create_blog(client, author, slug="two")
        root = client.post(
            f"/api/v1/blogs/{first['id']}/comments",
            json={"user_id": str(reader.id), "content": "On first"}
        ).json()
        resp = client.post(
            f"/api/v1/blogs/{second['id']}/comments",
            json={"user_id": str(reader.id), "content": "Wrong thread", "parent_id": root["id"]}
        )
        assert resp.status_code == 400

    def test_comment_on_missing_blog(self, client, reader):
        resp = client.post(
            "/api/v1/blogs/00000000-0000-0000-0000-000000000000/comments",
            json={"user_id": str(reader.id), "content": "Hello?"}
        )
        assert resp.status_code == 404

    def test_deleting_blog_deletes_comments(self, client, author, reader):
        blog = create_blog(client, author)
        comment = client.post(
            f"/api/v1/blogs/{blog['id']}/comments",
            json={"user_id": str(reader.id), "content": "First!"}
        ).json()
        client.delete(f"/api/v1/blogs/{blog['id']}")
        assert client.get(f"/api/v1/comments/{comment['id']}").status_code == 404


class TestCourses:
    def test_paid_course_needs_price(self, client, author):
        resp = client.post("/api/v1/courses/", json={
            "user_id": str(author.id), "title": "Paid", "description": "x", "is_paid": True
        })
        assert resp.status_code == 400

    def test_price_round_trips_as_decimal(self, client, author):
        course = create_course(client, author, is_paid=True, price="49.90")
        assert Decimal(course["price"]) == Decimal("49.90")
        assert course["media_urls"] == []

    def test_modules_and_lessons_are_ordered(self, client, author):
        course = create_course(client, author)
        modules_url = f"/api/v1/courses/{course['id']}/modules"
        for title, order in [("Third", 3), ("First", 1), ("Second", 2)]:
            client.post(modules_url, json={"title": title, "order_index": order})
        modules = client.get(modules_url).json()
        assert [m["title"] for m in modules] == ["First", "Second", "Third"]

        lessons_url = f"/api/v1/modules/{modules[0]['id']}/lessons"
        client.post(lessons_url, json={"title": "B", "order_index": 2})
        client.post(lessons_url, json={"title": "A", "order_index": 1, "is_free_preview": True, "duration_minutes": 5})
        lessons = client.get(lessons_url).json()
        assert [lesson["title"] for lesson in lessons] == ["A", "B"]
        assert lessons[0]["video_url"] is None

        previews = client.get(f"/api/v1/courses/{course['id']}/previews").json()
        assert [lesson["title"] for lesson in previews] == ["A"]

    def test_negative_duration_rejected(self, client, author):
        course = create_course(client, author)
        module = client.post(f"/api/v1/courses/{course['id']}/modules", json={"title": "M"}).json()
        resp = client.post(f"/api/v1/modules/{module['id']}/lessons", json={"title": "L", "duration_minutes": -1})
        assert resp.status_code == 422

    def test_deleting_course_cascades(self, client, author, reader):
        course = create_course(client, author, is_paid=True, price="10")
        module = client.post(f"/api/v1/courses/{course['id']}/modules", json={"title": "M"}).json()
        lesson = client.post(f"/api/v1/modules/{module['id']}/lessons", json={"title": "L"}).json()
        purchase = client.post("/api/v1/purchases/", json={
            "user_id": str(reader.id), "course_id": course["id"], "amount": "10", "payment_method": "paypal"
        }).json()

        assert client.delete(f"/api/v1/courses/{course['id']}").status_code == 204
        assert client.get(f"/api/v1/modules/{module['id']}").status_code == 404
        assert client.get(f"/api/v1/lessons/{lesson['id']}").status_code == 404
        assert client.get(f"/api/v1/purchases/{purchase['id']}").status_code == 404


class TestPurchases:
    def test_course_purchase_defaults(self, client, author, reader):
        course = create_course(client, author, is_paid=True, price="25.00")
        resp = client.post("/api/v1/purchases/", json={
            "user_id": str(reader.id), "course_id": course["id"], "amount": "25.00", "payment_method": "stripe"
        })
        assert resp.status_code == 201, resp.text
        purchase = resp.json()
        assert purchase["status"] == "pending"
        assert purchase["is_donation"] is False

        resp = client.patch(f"/api/v1/purchases/{purchase['id']}/status", json={
            "status": "completed", "payment_id": "pi_123"
        })
        assert resp.json()["status"] == "completed"
        assert resp.json()["payment_id"] == "pi_123"

        mine = client.get("/api/v1/purchases/", params={"user_id": str(reader.id)}).json()
        assert [p["id"] for p in mine] == [purchase["id"]]

    def test_purchase_without_course_is_donation(self, client, reader):
        resp = client.post("/api/v1/purchases/", json={
            "user_id": str(reader.id), "amount": "3.50", "payment_method": "mpesa", "message": "Keep going"
        })
        assert resp.status_code == 201, resp.text
        assert resp.json()["is_donation"] is True
        assert resp.json()["course_id"] is None

    def test_donation_flag_follows_course(self, client, author, reader):
        course = create_course(client, author)
        resp = client.post("/api/v1/purchases/", json={
            "user_id": str(reader.id), "course_id": course["id"], "amount": "9.99",
            "payment_method": "paypal", "is_donation": True
        })
        assert resp.status_code == 201, resp.text
        assert resp.json()["is_donation"] is False

    def test_filter_by_user_and_course(self, client, author, reader):
        sql = create_course(client, author)
        rust = create_course(client, author, title="Rust 101")
        wanted = None
        for buyer in (author, reader):
            for course in (sql, rust):
                resp = client.post("/api/v1/purchases/", json={
                    "user_id": str(buyer.id), "course_id": course["id"], "amount": "5.00", "payment_method": "stripe"
                })
                if buyer is reader and course is rust:
                    wanted = resp.json()["id"]

        resp = client.get("/api/v1/purchases/", params={"user_id": str(reader.id), "course_id": rust["id"]})
        assert [p["id"] for p in resp.json()] == [wanted]
        assert len(client.get("/api/v1/purchases/", params={"course_id": rust["id"]}).json()) == 2

    def test_unknown_payment_method_rejected(self, client, reader):
        resp = client.post("/api/v1/purchases/", json={
            "user_id": str(reader.id), "amount": "1", "payment_method": "cash"
        })
        assert resp.status_code == 422


class TestSubscribers:
    def test_subscribe_unsubscribe_resubscribe(self, client):
        resp = client.post("/api/v1/subscribers/", json={"email": "fan@example.com"})
        assert resp.status_code == 201
        first = resp.json()
        assert first["unsubscribed_at"] is None

        gone = client.post("/api/v1/subscribers/unsubscribe", json={"email": "fan@example.com"}).json()
        assert gone["unsubscribed_at"] is not None
        assert client.get("/api/v1/subscribers/", params={"active": True}).json() == []

        resp = client.post("/api/v1/subscribers/", json={"email": "fan@example.com", "name": "Fan"})
        assert resp.status_code == 200
        back = resp.json()
        assert back["id"] == first["id"]
        assert back["unsubscribed_at"] is None
        assert back["name"] == "Fan"
        assert len(client.get("/api/v1/subscribers/").json()) == 1

    def test_unsubscribe_unknown_email(self, client):
        resp = client.post("/api/v1/subscribers/unsubscribe", json={"email": "nobody@example.com"})
        assert resp.status_code == 404
