import base64

import pytest

from rocketlane_digest.core.auth import (
    decode_basic_credentials,
    encode_basic_credentials,
    validate_basic_auth,
)


def _basic(raw: str) -> str:
    return "Basic " + base64.b64encode(raw.encode("utf-8")).decode("ascii")


class TestValidateBasicAuth:
    """Basic credential checks against the configured pair."""

    def test_matching_credentials(self) -> None:
        assert validate_basic_auth(_basic("bot:secret"), "bot", "secret") is True

    def test_encode_helper_round_trips(self) -> None:
        header = encode_basic_credentials("bot", "secret")
        assert header == _basic("bot:secret")
        assert validate_basic_auth(header, "bot", "secret") is True

    @pytest.mark.parametrize(
        "header",
        [
            None,
            "",
            "Basic",
            "Basic ",
            "Bearer " + base64.b64encode(b"bot:secret").decode(),
            "basic " + base64.b64encode(b"bot:secret").decode(),
            "Basic not-base64!!",
            _basic("botsecret"),
            "Basic " + base64.b64encode(b"\xff\xfe:\xfa").decode(),
        ],
    )
    def test_malformed_headers_fail_closed(self, header) -> None:
        assert validate_basic_auth(header, "bot", "secret") is False

    @pytest.mark.parametrize(
        "raw",
        ["Bot:secret", "bot:Secret", "bot:secret ", "bot2:secret", "bot:", ":secret"],
    )
    def test_mismatched_credentials(self, raw: str) -> None:
        assert validate_basic_auth(_basic(raw), "bot", "secret") is False

    def test_password_may_contain_colon(self) -> None:
        assert validate_basic_auth(_basic("bot:se:cret"), "bot", "se:cret") is True

    @pytest.mark.parametrize("username,password", [("", ""), ("bot", ""), ("", "secret"), (None, None)])
    def test_unconfigured_credentials_reject_everything(self, username, password) -> None:
        assert validate_basic_auth(_basic(":"), username, password) is False
        assert validate_basic_auth(_basic("bot:secret"), username, password) is False


class TestDecodeBasicCredentials:
    def test_splits_on_first_colon(self) -> None:
        assert decode_basic_credentials(_basic("user:pa:ss")) == ("user", "pa:ss")

    def test_unicode_credentials(self) -> None:
        assert decode_basic_credentials(_basic("jürgen:pässwörd")) == ("jürgen", "pässwörd")

    def test_missing_separator(self) -> None:
        assert decode_basic_credentials(_basic("nocolon")) is None
