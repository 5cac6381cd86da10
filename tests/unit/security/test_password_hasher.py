import bcrypt

from accounts.app.errors import ErrorCode
from accounts.app.security.password_hasher import PasswordHasher


def test_hash_then_verify(password_hasher):
    hashed = password_hasher.hash("correct horse")

    assert hashed.is_ok()
    assert hashed.value.startswith("$2")
    assert len(hashed.value) == 60
    assert password_hasher.verify(hashed.value, "correct horse").is_ok()


def test_wrong_password_is_credential_mismatch(password_hasher):
    hashed = password_hasher.hash("correct horse").value

    result = password_hasher.verify(hashed, "wrong horse")

    assert result.is_err()
    assert result.error.code == ErrorCode.CREDENTIAL_MISMATCH


def test_same_password_gets_fresh_salt(password_hasher):
    first = password_hasher.hash("correct horse").value
    second = password_hasher.hash("correct horse").value

    assert first != second


def test_pepper_is_applied(password_hasher):
    hashed = password_hasher.hash("correct horse").value

    # bcrypt never sees the plain password
    assert not bcrypt.checkpw(b"correct horse", hashed.encode())
    assert not bcrypt.checkpw(b"correct horseunit-test-pepper", hashed.encode())


def test_different_pepper_does_not_verify(password_hasher):
    hashed = password_hasher.hash("correct horse").value
    other = PasswordHasher("another-pepper", rounds=4)

    result = other.verify(hashed, "correct horse")

    assert result.error.code == ErrorCode.CREDENTIAL_MISMATCH


def test_cost_factor_is_configurable():
    hasher = PasswordHasher("pepper", rounds=5)

    assert hasher.hash("correct horse").value.startswith("$2b$05$")


def test_malformed_stored_hash_is_hashing_failure(password_hasher):
    result = password_hasher.verify("not-a-bcrypt-hash", "correct horse")

    assert result.is_err()
    assert result.error.code == ErrorCode.HASHING_FAILURE


def test_verify_dummy_never_matches(password_hasher):
    assert password_hasher.verify_dummy("correct horse") is False


def test_long_password_round_trip(password_hasher):
    password = "p" * 100

    hashed = password_hasher.hash(password)

    assert hashed.is_ok()
    assert password_hasher.verify(hashed.value, password).is_ok()


def test_long_passwords_differ_past_72_bytes(password_hasher):
    prefix = "x" * 80
    hashed = password_hasher.hash(prefix + "a").value

    result = password_hasher.verify(hashed, prefix + "b")

    assert result.error.code == ErrorCode.CREDENTIAL_MISMATCH


def test_multibyte_password_round_trip(password_hasher):
    # 40 characters, 80 bytes in UTF-8
    password = "пароль" * 6 + "ключ"

    hashed = password_hasher.hash(password).value

    assert password_hasher.verify(hashed, password).is_ok()
    assert password_hasher.verify(hashed, password[:-1]).error.code == ErrorCode.CREDENTIAL_MISMATCH


def test_long_wrong_password_is_mismatch_not_failure(password_hasher):
    hashed = password_hasher.hash("correct horse").value

    result = password_hasher.verify(hashed, "w" * 200)

    assert result.error.code == ErrorCode.CREDENTIAL_MISMATCH
    assert password_hasher.verify_dummy("w" * 200) is False
