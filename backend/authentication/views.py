# backend/authentication/views.py
import time
import threading
from cachetools import TTLCache
from werkzeug.security import generate_password_hash, check_password_hash
from backend.logging_config import setup_logging

logger = setup_logging()


def hash_password(password):
    return generate_password_hash(str(password), method='pbkdf2:sha256')


def check_password(password_hash, password):
    if not password_hash or password is None:
        return False
    return check_password_hash(password_hash, str(password))


class OtpStore:
    """In-process one-time code cache keyed by email.

    Codes are stored hashed in a ``TTLCache``, so entries expire after
    ``validity_minutes`` whether or not anyone tries to verify them. Cache
    access goes through a single lock.
    """

    def __init__(self, validity_minutes=10, maxsize=10000, timer=time.monotonic):
        self.codes = TTLCache(maxsize=maxsize, ttl=validity_minutes * 60, timer=timer)
        self._lock = threading.Lock()

    def save(self, email, otp):
        hashed_otp = generate_password_hash(str(otp), method='pbkdf2:sha256')
        with self._lock:
            self.codes[email] = hashed_otp

    def verify(self, email, otp):
        """Check ``otp`` for ``email``; a matching code is consumed."""
        if not isinstance(email, str) or not email or otp is None:
            return False

        with self._lock:
            hashed_otp = self.codes.get(email)
            if hashed_otp is None or not check_password_hash(hashed_otp, str(otp)):
                return False

            del self.codes[email]
            return True


def init_otp_store(app):
    store = OtpStore(
        validity_minutes=app.config.get('OTP_VALIDITY_MINUTES', 10),
        maxsize=app.config.get('OTP_CACHE_SIZE', 10000)
    )
    app.extensions['otp_store'] = store
    return store


def send_otp(store, email, otp):
    # No delivery channel; the code is only logged
    store.save(email, otp)
    logger.info(f"OTP for {email}: {otp}")
