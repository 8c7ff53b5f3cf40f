#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
User Model - database access for user accounts
"""

import hashlib
import hmac
import os
import sqlite3
from datetime import datetime
from typing import Optional, Tuple

PBKDF2_ITERATIONS = 200_000


class UserModel:
    """Stores user accounts and the session audit log in SQLite"""

    def __init__(self, db_path: str):
        """
        Initialize UserModel

        Args:
            db_path (str): SQLite database file path
        """
        self.db_path = db_path
        self.init_tables()

    def init_tables(self):
        """Create the user tables if they are missing."""
        with sqlite3.connect(self.db_path) as conn:
            cur = conn.cursor()

            # Users
            cur.execute("""
            CREATE TABLE IF NOT EXISTS users (
              email TEXT PRIMARY KEY,
              nickname TEXT,
              password_hash TEXT,
              created_at TEXT
            );
            """)

            # Sign-in / sign-up / sign-out log
            cur.execute("""
            CREATE TABLE IF NOT EXISTS session_logs (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                email TEXT,
                action TEXT,
                ts TEXT
            )
            """)

            conn.commit()

    @staticmethod
    def normalize_email(email: str) -> str:
        """Email addresses are keyed trimmed and lower-cased."""
        return email.strip().lower()

    def _hash_password(self, password: str, salt: Optional[bytes] = None) -> str:
        """Hash a password as "salt$digest" (hex, PBKDF2-SHA256)."""
        salt = salt or os.urandom(16)
        digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
        return f"{salt.hex()}${digest.hex()}"

    def verify_password(self, password: str, password_hash: str) -> bool:
        """
        Check a password against a stored hash.

        Args:
            password (str): plain password
            password_hash (str): value stored by _hash_password

        Returns:
            bool: whether the password matches
        """
        try:
            salt_hex, _ = password_hash.split("$", 1)
            salt = bytes.fromhex(salt_hex)
        except (AttributeError, ValueError):
            return False
        return hmac.compare_digest(self._hash_password(password, salt), password_hash)

    def get_user(self, email: str) -> Optional[Tuple]:
        """
        Look up a user.

        Args:
            email (str): user email

        Returns:
            Optional[Tuple]: (email, nickname, password_hash) or None
        """
        with sqlite3.connect(self.db_path) as conn:
            c = conn.cursor()
            c.execute("SELECT email, nickname, password_hash FROM users WHERE email=?",
                      (self.normalize_email(email),))
            return c.fetchone()

    def register_user(self, email: str, nickname: str, password: str) -> bool:
        """
        Register a new user.

        Args:
            email (str): user email
            nickname (str): display name
            password (str): plain password

        Returns:
            bool: False when the email is taken or the insert failed
        """
        try:
            pw_hash = self._hash_password(password)
            with sqlite3.connect(self.db_path) as conn:
                c = conn.cursor()
                c.execute("INSERT OR IGNORE INTO users(email, nickname, password_hash, created_at) VALUES (?, ?, ?, datetime('now'))",
                          (self.normalize_email(email), nickname, pw_hash))
                conn.commit()
                return c.rowcount > 0
        except sqlite3.Error as e:
            print(f"Error registering user: {e}")
            return False

    def authenticate(self, email: str, password: str) -> Optional[Tuple]:
        """
        Return the user row when the credentials match, otherwise None.

        Args:
            email (str): user email
            password (str): plain password
        """
        user = self.get_user(email)
        if not user or not self.verify_password(password, user[2]):
            return None
        return user

    def log_session(self, email: str, action: str):
        """
        Record a session event.

        Args:
            email (str): user email
            action (str): 'login', 'logout' or 'signup'
        """
        with sqlite3.connect(self.db_path) as conn:
            cur = conn.cursor()
            cur.execute("INSERT INTO session_logs (email, action, ts) VALUES (?, ?, ?)",
                        (self.normalize_email(email), action, datetime.now().isoformat()))
            conn.commit()

    def get_session_logs(self, email: str) -> list:
        """Return (action, ts) rows for a user, oldest first."""
        with sqlite3.connect(self.db_path) as conn:
            cur = conn.cursor()
            cur.execute("SELECT action, ts FROM session_logs WHERE email=? ORDER BY id",
                        (self.normalize_email(email),))
            return cur.fetchall()
