"""Unit tests for password hashing."""

from devconnect.util.password import hash_password, verify_password


class TestPassword:
    """Tests for bcrypt helpers."""

    def test_hash_and_verify(self):
        hashed = hash_password("secret123")

        assert hashed != "secret123"
        assert verify_password("secret123", hashed) is True
        assert verify_password("wrong", hashed) is False

    def test_hashes_are_salted(self):
        assert hash_password("secret123") != hash_password("secret123")

    def test_malformed_hash_never_matches(self):
        assert verify_password("secret123", "not-a-bcrypt-hash") is False

    def test_long_password_uses_first_72_bytes(self):
        long_password = "x" * 80
        hashed = hash_password(long_password)

        assert verify_password(long_password, hashed) is True
        assert verify_password("x" * 72 + "different", hashed) is True
        assert verify_password("x" * 71, hashed) is False

    def test_multibyte_password_is_cut_by_bytes(self):
        password = "é" * 50  # 100 bytes in UTF-8
        hashed = hash_password(password)

        assert verify_password(password, hashed) is True
