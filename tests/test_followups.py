# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import date, datetime, timedelta, timezone

from app_env import auth_headers, cleanup, fresh_client, make_tmp, register


class TestAnnotate(unittest.TestCase):
    def test_pending_days_until_and_overdue(self) -> None:
        from ayurveda.followups.storage import annotate

        today = date(2026, 3, 10)
        future = annotate({"status": "pending", "follow_up_date": "2026-03-17", "reminder_sent": 0}, today)
        self.assertEqual(future["days_until"], 7)
        self.assertFalse(future["overdue"])
        self.assertFalse(future["reminder_sent"])

        past = annotate({"status": "pending", "follow_up_date": "2026-03-08"}, today)
        self.assertTrue(past["overdue"])
        self.assertEqual(past["days_until"], -2)

        due_today = annotate({"status": "pending", "follow_up_date": "2026-03-10"}, today)
        self.assertFalse(due_today["overdue"])
        self.assertEqual(due_today["days_until"], 0)

    def test_completed_is_never_overdue(self) -> None:
        from ayurveda.followups.storage import annotate

        done = annotate({"status": "completed", "follow_up_date": "2020-01-01"}, date(2026, 1, 1))
        self.assertFalse(done["overdue"])
        self.assertIsNone(done["days_until"])


class TestFollowUpsApi(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls._tmp = make_tmp()
        cls.client = fresh_client(cls._tmp)
        cls.headers = auth_headers(register(cls.client, "follow@example.com")["token"])

    @classmethod
    def tearDownClass(cls) -> None:
        cleanup(cls.client, cls._tmp)

    def test_default_date_is_one_week_out(self) -> None:
        resp = self.client.post("/api/follow-ups", headers=self.headers)
        self.assertEqual(resp.status_code, 200, resp.text)
        body = resp.json()
        expected = (datetime.now(timezone.utc).date() + timedelta(days=7)).isoformat()
        self.assertEqual(body["follow_up_date"], expected)
        self.assertEqual(body["status"], "pending")
        self.assertEqual(body["days_until"], 7)
        self.assertFalse(body["reminder_sent"])

    def test_list_newest_date_first_and_complete(self) -> None:
        early = self.client.post("/api/follow-ups", json={"follow_up_date": "2030-01-01"}, headers=self.headers).json()
        late = self.client.post("/api/follow-ups", json={"follow_up_date": "2031-06-15"}, headers=self.headers).json()

        listing = self.client.get("/api/follow-ups", headers=self.headers).json()
        dates = [f["follow_up_date"] for f in listing["follow_ups"]]
        self.assertEqual(dates, sorted(dates, reverse=True))
        self.assertLess(dates.index(late["follow_up_date"]), dates.index(early["follow_up_date"]))

        blank = self.client.post(f"/api/follow-ups/{early['id']}/complete", json={"feedback": "   "}, headers=self.headers)
        self.assertEqual(blank.status_code, 400)

        done = self.client.post(
            f"/api/follow-ups/{early['id']}/complete",
            json={"feedback": "Sleeping better", "progress_notes": "Less bloating"},
            headers=self.headers,
        )
        self.assertEqual(done.status_code, 200, done.text)
        body = done.json()
        self.assertEqual(body["status"], "completed")
        self.assertEqual(body["feedback"], "Sleeping better")
        self.assertIsNotNone(body["completed_at"])

        again = self.client.post(
            f"/api/follow-ups/{early['id']}/complete",
            json={"feedback": "Twice"},
            headers=self.headers,
        )
        self.assertEqual(again.status_code, 409)

        listing = self.client.get("/api/follow-ups", headers=self.headers).json()
        self.assertGreaterEqual(listing["completed"], 1)

    def test_cannot_complete_someone_elses(self) -> None:
        mine = self.client.post("/api/follow-ups", headers=self.headers).json()
        other = auth_headers(register(self.client, "intruder@example.com")["token"])
        resp = self.client.post(f"/api/follow-ups/{mine['id']}/complete", json={"feedback": "hi"}, headers=other)
        self.assertEqual(resp.status_code, 404)

    def test_second_completion_keeps_first_feedback(self) -> None:
        from fastapi import HTTPException

        from ayurveda.followups.storage import complete_follow_up, create_follow_up, list_follow_ups

        user_id = self.client.get("/api/auth/me", headers=self.headers).json()["id"]
        row = create_follow_up(user_id, date(2020, 2, 1))
        first = complete_follow_up(user_id, row["id"], feedback="First")
        with self.assertRaises(HTTPException) as ctx:
            complete_follow_up(user_id, row["id"], feedback="Second", progress_notes="late")
        self.assertEqual(ctx.exception.status_code, 409)

        stored = {f["id"]: f for f in list_follow_ups(user_id)}[row["id"]]
        self.assertEqual(stored["feedback"], "First")
        self.assertIsNone(stored["progress_notes"])
        self.assertEqual(stored["completed_at"], first["completed_at"])

        with self.assertRaises(HTTPException) as missing:
            complete_follow_up(user_id, "no-such-id", feedback="x")
        self.assertEqual(missing.exception.status_code, 404)

    def test_mark_missed(self) -> None:
        from ayurveda.followups.storage import create_follow_up, list_follow_ups, mark_missed

        user_id = self.client.get("/api/auth/me", headers=self.headers).json()["id"]
        stale = create_follow_up(user_id, date(2020, 1, 1))
        recent = create_follow_up(user_id, date(2020, 1, 9))

        self.assertGreaterEqual(mark_missed(grace_days=3, today=date(2020, 1, 10)), 1)
        by_id = {f["id"]: f for f in list_follow_ups(user_id)}
        self.assertEqual(by_id[stale["id"]]["status"], "missed")
        self.assertEqual(by_id[recent["id"]]["status"], "pending")


if __name__ == "__main__":
    unittest.main()
