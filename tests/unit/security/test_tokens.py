import base64

from accounts.app.security.tokens import TOKEN_BYTES, generate_token


def test_token_encodes_32_random_bytes():
    token = generate_token()

    padded = token + "=" * (-len(token) % 4)
    assert len(base64.urlsafe_b64decode(padded)) == TOKEN_BYTES
    assert len(token) == 43


def test_tokens_are_url_safe():
    token = generate_token()

    assert "+" not in token
    assert "/" not in token
    assert "=" not in token


def test_tokens_do_not_repeat():
    tokens = {generate_token() for _ in range(200)}

    assert len(tokens) == 200


def test_custom_length():
    assert len(generate_token(16)) == 22
