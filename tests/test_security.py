# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import timedelta

from fastapi import HTTPException

from ayurveda.auth.security import hash_password, issue_token, read_claims, verify_password

_USER = {"id": "u1", "email": "a@b.c", "is_admin": 0}


class TestPasswordHashing(unittest.TestCase):
    def test_roundtrip(self) -> None:
        hashed = hash_password("secret123")
        self.assertTrue(hashed.startswith("pbkdf2_sha256$"))
        self.assertTrue(verify_password("secret123", hashed))
        self.assertFalse(verify_password("secret124", hashed))

    def test_salted(self) -> None:
        self.assertNotEqual(hash_password("same"), hash_password("same"))

    def test_garbage_hash(self) -> None:
        self.assertFalse(verify_password("x", "not-a-hash"))
        self.assertFalse(verify_password("x", "pbkdf2_sha256$many$salt$hash"))


class TestTokens(unittest.TestCase):
    def test_claims_carry_identity_and_admin_flag(self) -> None:
        claims = read_claims(issue_token(_USER))
        self.assertEqual(claims.sub, "u1")
        self.assertEqual(claims.email, "a@b.c")
        self.assertFalse(claims.is_admin)
        self.assertGreater(claims.exp, claims.iat)

        admin = read_claims(issue_token({**_USER, "is_admin": 1}))
        self.assertTrue(admin.is_admin)

    def test_expired(self) -> None:
        token = issue_token(_USER, ttl=timedelta(seconds=-60))
        with self.assertRaises(HTTPException) as ctx:
            read_claims(token)
        self.assertEqual(ctx.exception.status_code, 401)
        self.assertEqual(ctx.exception.detail, "Token expired")

    def test_tampered_signature(self) -> None:
        head, payload, sig = issue_token(_USER).split(".")
        with self.assertRaises(HTTPException) as ctx:
            read_claims(f"{head}.{payload}.{'A' * len(sig)}")
        self.assertEqual(ctx.exception.detail, "Invalid token")

    def test_promoted_payload_rejected(self) -> None:
        # Swapping in an admin payload breaks the signature.
        head, _, sig = issue_token(_USER).split(".")
        _, admin_payload, _ = issue_token({**_USER, "is_admin": 1}).split(".")
        with self.assertRaises(HTTPException) as ctx:
            read_claims(f"{head}.{admin_payload}.{sig}")
        self.assertEqual(ctx.exception.status_code, 401)

    def test_malformed(self) -> None:
        with self.assertRaises(HTTPException):
            read_claims("only.two")


if __name__ == "__main__":
    unittest.main()
